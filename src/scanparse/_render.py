"""Level order rendering of parse trees.

Nodes are visited with two queues, one for the level being written and one
collecting the kids for the level below, so each output line is exactly one
depth of the tree.
"""

__all__ = ["bfs_levels", "to_bfs_string"]

from collections import deque


def bfs_levels(root):
    """Collect node labels level by level.

    Args:
        root: (ParseNode | None) Tree root

    Returns:
        (list[list[str]]) Labels for each depth, left to right
    """
    levels = []
    current = deque()
    if root is not None:
        current.append(root)

    while current:
        following = deque()
        labels = []
        while current:
            node = current.popleft()
            labels.append(node.label)
            following.extend(node.kids)
        levels.append(labels)
        current = following
    return levels


def to_bfs_string(root):
    """Render a tree as one line of space separated labels per level.

    Every level line ends with a newline. An empty tree renders as "".
    """
    return "".join(" ".join(labels) + "\n" for labels in bfs_levels(root))
