import pytest

from algokata.graphs import GraphNode, has_route, has_route_dfs

ROUTE_FINDERS = [has_route, has_route_dfs]


@pytest.mark.parametrize("finder", ROUTE_FINDERS)
def test_direct_connection(finder):
    node1, node2 = GraphNode(1), GraphNode(2)
    node1.neighbors = [node2]
    assert finder(node1, node2) is True


@pytest.mark.parametrize("finder", ROUTE_FINDERS)
def test_indirect_connection(finder):
    node1, node2, node3 = GraphNode(1), GraphNode(2), GraphNode(3)
    node1.neighbors = [node2]
    node2.neighbors = [node3]
    assert finder(node1, node3) is True


@pytest.mark.parametrize("finder", ROUTE_FINDERS)
def test_no_connection(finder):
    node1, node2, node3 = GraphNode(1), GraphNode(2), GraphNode(3)
    node1.neighbors = [node2]
    assert finder(node1, node3) is False


@pytest.mark.parametrize("finder", ROUTE_FINDERS)
def test_circular_connection(finder):
    node1, node2, node3 = GraphNode(1), GraphNode(2), GraphNode(3)
    node1.neighbors = [node2]
    node2.neighbors = [node3]
    node3.neighbors = [node1]
    assert finder(node1, node3) is True


@pytest.mark.parametrize("finder", ROUTE_FINDERS)
def test_self_loop(finder):
    node1 = GraphNode(1)
    node1.neighbors = [node1]
    assert finder(node1, node1) is True


@pytest.mark.parametrize("finder", ROUTE_FINDERS)
def test_cycle_without_target_terminates(finder):
    node1, node2, node3 = GraphNode(1), GraphNode(2), GraphNode(3)
    node1.neighbors = [node2]
    node2.neighbors = [node1]
    assert finder(node1, node3) is False


@pytest.mark.parametrize("finder", ROUTE_FINDERS)
def test_complex_graph(finder):
    nodes = {value: GraphNode(value) for value in range(1, 7)}
    nodes[1].neighbors = [nodes[2], nodes[5]]
    nodes[2].neighbors = [nodes[3]]
    nodes[3].neighbors = [nodes[4]]
    nodes[5].neighbors = [nodes[6]]
    assert finder(nodes[1], nodes[4]) is True
    assert finder(nodes[1], nodes[6]) is True
    assert finder(nodes[6], nodes[4]) is False