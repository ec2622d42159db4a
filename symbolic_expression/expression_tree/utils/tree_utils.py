"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. Trees may share
subtrees, so traversals that report distinct nodes track identity.
"""

from collections import Counter, deque
from typing import Dict, List, Mapping, Set

from ..core.node import Node, BinaryOp, UnaryCall, Constant, Variable


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Shared subtrees are visited once per reference.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Leaf nodes have depth 1.
    """
    max_depth = 0
    stack = [(node, 1)]
    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in current_node.children():
            stack.append((child, depth + 1))
    return max_depth


def get_constants(node: Node) -> List[Constant]:
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, Constant)]


def get_variables(node: Node) -> List[str]:
    """Distinct variable names in first-occurrence (depth-first) order"""
    seen: Set[str] = set()
    names = []
    for n in get_all_nodes(node, 'depth_first'):
        if isinstance(n, Variable) and n.name not in seen:
            seen.add(n.name)
            names.append(n.name)
    return names


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    return dict(Counter(n.name for n in get_all_nodes(node) if isinstance(n, Variable)))


def count_shared_subtrees(node: Node) -> int:
    """Number of distinct non-leaf nodes referenced from more than one parent"""
    references: Counter = Counter()
    visited: Set[int] = set()
    stack = [node]
    while stack:
        current_node = stack.pop()
        if id(current_node) in visited:
            continue
        visited.add(id(current_node))
        for child in current_node.children():
            if child.children():
                references[id(child)] += 1
            stack.append(child)
    return sum(1 for count in references.values() if count > 1)


def substitute(node: Node, replacements: Mapping[str, Node]) -> Node:
    """
    Replace variables by subtrees, returning a new tree.

    Subtrees that contain none of the replaced variables are returned
    unchanged, keeping any sharing intact.
    """
    memo: Dict[int, Node] = {}

    def _substitute(current: Node) -> Node:
        key = id(current)
        if key in memo:
            return memo[key]
        if isinstance(current, Variable):
            result = replacements.get(current.name, current)
        elif isinstance(current, UnaryCall):
            operand = _substitute(current.operand)
            result = current if operand is current.operand else UnaryCall(current.function, operand)
        elif isinstance(current, BinaryOp):
            left = _substitute(current.left)
            right = _substitute(current.right)
            if left is current.left and right is current.right:
                result = current
            else:
                result = BinaryOp(current.op, left, right)
        else:
            result = current
        memo[key] = result
        return result

    return _substitute(node)
