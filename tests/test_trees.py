import pytest

from algokata.linked_lists import list_values
from algokata.trees import (
    TreeNode,
    bfs,
    build_tree,
    check_balanced,
    closest_nodes,
    create_minimal_bst,
    dfs,
    first_common_ancestor,
    height,
    inorder,
    is_balanced,
    is_same_tree,
    is_symmetric,
    list_of_depths,
    postorder,
    preorder,
    validate_bst,
)


def shape(node):
    if node is None:
        return None
    return (node.val, shape(node.left), shape(node.right))


def complete_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def unbalanced_tree():
    return TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3))


def complex_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5, TreeNode(6), TreeNode(7))),
        TreeNode(3, None, TreeNode(8, TreeNode(9))),
    )


def test_build_tree_level_order():
    root = build_tree([3, 2, None, 1])
    assert shape(root) == (3, (2, (1, None, None), None), None)


def test_build_tree_empty():
    assert build_tree([]) is None


@pytest.mark.parametrize(
    "tree, expected",
    [
        (None, []),
        (TreeNode(1), [1]),
        (complete_tree(), [4, 2, 5, 1, 6, 3, 7]),
        (TreeNode(1, TreeNode(2, TreeNode(4, TreeNode(8))), TreeNode(3)), [8, 4, 2, 1, 3]),
    ],
)
def test_dfs(tree, expected):
    assert dfs(tree) == expected


@pytest.mark.parametrize(
    "tree, expected",
    [
        (None, []),
        (TreeNode(1), [1]),
        (complete_tree(), [1, 2, 3, 4, 5, 6, 7]),
        (TreeNode(1, TreeNode(2, TreeNode(4, TreeNode(8))), TreeNode(3)), [1, 2, 3, 4, 8]),
    ],
)
def test_bfs(tree, expected):
    assert bfs(tree) == expected


@pytest.mark.parametrize(
    "tree, expected",
    [
        (TreeNode(1, None, TreeNode(2, TreeNode(3))), [1, 3, 2]),
        (complex_tree(), [4, 2, 6, 5, 7, 1, 3, 9, 8]),
        (None, []),
        (TreeNode(1), [1]),
    ],
)
def test_inorder(tree, expected):
    assert inorder(tree) == expected


@pytest.mark.parametrize(
    "tree, expected",
    [
        (TreeNode(1, TreeNode(2), TreeNode(3)), [1, 2, 3]),
        (complex_tree(), [1, 2, 4, 5, 6, 7, 3, 8, 9]),
        (None, []),
        (TreeNode(1), [1]),
    ],
)
def test_preorder(tree, expected):
    assert preorder(tree) == expected


@pytest.mark.parametrize(
    "tree, expected",
    [
        (TreeNode(1, TreeNode(2), TreeNode(3)), [2, 3, 1]),
        (complex_tree(), [4, 6, 7, 5, 2, 9, 8, 3, 1]),
        (None, []),
        (TreeNode(1), [1]),
    ],
)
def test_postorder(tree, expected):
    assert postorder(tree) == expected


@pytest.mark.parametrize(
    "p, q, expected",
    [
        (TreeNode(1, TreeNode(2), TreeNode(3)), TreeNode(1, TreeNode(2), TreeNode(3)), True),
        (TreeNode(1, TreeNode(2)), TreeNode(1, None, TreeNode(2)), False),
        (TreeNode(1, TreeNode(2), TreeNode(1)), TreeNode(1, TreeNode(1), TreeNode(2)), False),
        (None, None, True),
        (TreeNode(1), None, False),
        (TreeNode(1), TreeNode(2), False),
    ],
)
def test_is_same_tree(p, q, expected):
    assert is_same_tree(p, q) is expected


@pytest.mark.parametrize(
    "tree, expected",
    [
        (
            TreeNode(1, TreeNode(2, TreeNode(3), TreeNode(4)), TreeNode(2, TreeNode(4), TreeNode(3))),
            True,
        ),
        (TreeNode(1, TreeNode(2, None, TreeNode(3)), TreeNode(2, None, TreeNode(3))), False),
        (None, True),
        (TreeNode(1), True),
        (TreeNode(1, TreeNode(2), TreeNode(3)), False),
    ],
)
def test_is_symmetric(tree, expected):
    assert is_symmetric(tree) is expected


BALANCE_CASES = [
    (None, True),
    (TreeNode(1), True),
    (complete_tree(), True),
    (unbalanced_tree(), False),
    (TreeNode(1, TreeNode(2, TreeNode(3))), False),
]


@pytest.mark.parametrize("tree, expected", BALANCE_CASES)
def test_is_balanced(tree, expected):
    assert is_balanced(tree) is expected


@pytest.mark.parametrize("tree, expected", BALANCE_CASES)
def test_check_balanced(tree, expected):
    assert check_balanced(tree) is expected


def test_height():
    assert height(None) == 0
    assert height(unbalanced_tree()) == 3
    assert height(complete_tree()) == 3


def test_first_common_ancestor_empty_tree():
    assert first_common_ancestor(None, None, None) is None


def test_first_common_ancestor_single_node():
    root = TreeNode(1)
    assert first_common_ancestor(root, root, root) is root


def test_first_common_ancestor_siblings():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    assert first_common_ancestor(root, root.left, root.right) is root


def test_first_common_ancestor_different_levels():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert first_common_ancestor(root, root.left.left, root.left.right) is root.left


def test_first_common_ancestor_ancestor_relationship():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert first_common_ancestor(root, root.left, root.left.left) is root.left


@pytest.mark.parametrize(
    "values, queries, expected",
    [
        (
            [6, 2, 13, 1, 4, 9, 15, None, None, None, None, None, None, 14],
            [2, 5, 16],
            [[2, 2], [4, 6], [15, -1]],
        ),
        ([], [1, 2, 3], [[-1, -1], [-1, -1], [-1, -1]]),
        ([1], [0, 1, 2], [[-1, 1], [1, 1], [1, -1]]),
        ([3, 2, None, 1], [0, 1, 2, 3, 4], [[-1, 1], [1, 1], [2, 2], [3, 3], [3, -1]]),
        (
            [4, 2, 6, 1, 3, 5, 7],
            [0, 1, 2, 3, 4, 5, 6, 7, 8],
            [[-1, 1], [1, 1], [2, 2], [3, 3], [4, 4], [5, 5], [6, 6], [7, 7], [7, -1]],
        ),
        ([2, 2, 2], [1, 2, 3], [[-1, 2], [2, 2], [2, -1]]),
    ],
)
def test_closest_nodes(values, queries, expected):
    assert closest_nodes(build_tree(values), queries) == expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], None),
        ([1], (1, None, None)),
        (
            [1, 2, 3, 4, 5, 6, 7, 8],
            (
                4,
                (2, (1, None, None), (3, None, None)),
                (6, (5, None, None), (7, None, (8, None, None))),
            ),
        ),
        (
            [1, 2, 3, 4, 5],
            (3, (1, None, (2, None, None)), (4, None, (5, None, None))),
        ),
    ],
)
def test_create_minimal_bst(values, expected):
    assert shape(create_minimal_bst(values)) == expected


@pytest.mark.parametrize(
    "tree, expected",
    [
        (None, True),
        (TreeNode(1), True),
        (
            TreeNode(5, TreeNode(3, TreeNode(2), TreeNode(4)), TreeNode(7, TreeNode(6), TreeNode(8))),
            True,
        ),
        (TreeNode(5, TreeNode(3), TreeNode(4)), False),
        (TreeNode(5, TreeNode(6), TreeNode(7)), False),
        (TreeNode(5, TreeNode(3, TreeNode(2), TreeNode(6)), TreeNode(7)), False),
    ],
)
def test_validate_bst(tree, expected):
    assert validate_bst(tree) is expected


def test_list_of_depths_empty():
    assert list_of_depths(None) == []


def test_list_of_depths_single_node():
    result = list_of_depths(TreeNode(1))
    assert [list_values(level) for level in result] == [[1]]


def test_list_of_depths_complete_tree():
    result = list_of_depths(complete_tree())
    assert [list_values(level) for level in result] == [[1], [2, 3], [4, 5, 6, 7]]


def test_list_of_depths_unbalanced_tree():
    result = list_of_depths(unbalanced_tree())
    assert [list_values(level) for level in result] == [[1], [2, 3], [4]]