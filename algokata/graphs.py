"""Directed graph nodes and route finding between them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(eq=False)
class GraphNode:
    """A node of a directed graph; nodes compare by identity."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list, repr=False)


def has_route(start: GraphNode, end: GraphNode) -> bool:
    """Tell whether ``end`` can be reached from ``start`` (breadth first)."""
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node is end:
            return True
        for neighbor in node.neighbors:
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return False


def has_route_dfs(start: GraphNode, end: GraphNode) -> bool:
    """Tell whether ``end`` can be reached from ``start`` (depth first)."""
    seen: set[GraphNode] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node is end:
            return True
        if node in seen:
            continue
        seen.add(node)
        stack.extend(reversed(node.neighbors))
    return False