"""Level-order, pre-order and post-order listings of a length tree."""

from __future__ import annotations

import os
from collections import deque
from pathlib import Path
from typing import Iterator, Optional, Union

from lengthtree.tree import Node


def format_node(node: Node, level: int) -> str:
    """Render one node: its level right-aligned in ``level * 4`` columns, then its length and words."""
    parts = [str(level).rjust(level * 4), str(node.value), *node.words]
    return " ".join(parts)


def level_order(root: Optional[Node]) -> Iterator[str]:
    """Yield node lines breadth first."""
    if root is None:
        return
    queue = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        yield format_node(node, level)
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))


def _pre(node: Optional[Node], level: int) -> Iterator[str]:
    if node is None:
        return
    yield format_node(node, level)
    yield from _pre(node.left, level + 1)
    yield from _pre(node.right, level + 1)


def _post(node: Optional[Node], level: int) -> Iterator[str]:
    if node is None:
        return
    yield from _post(node.left, level + 1)
    yield from _post(node.right, level + 1)
    yield format_node(node, level)


def pre_order(root: Optional[Node]) -> Iterator[str]:
    """Yield node lines parent first, then left and right subtrees."""
    return _pre(root, 0)


def post_order(root: Optional[Node]) -> Iterator[str]:
    """Yield node lines left and right subtrees first, then the parent."""
    return _post(root, 0)


def _write(path: Path, lines: Iterator[str]) -> None:
    with path.open("w", encoding="utf-8") as out:
        for line in lines:
            out.write(line + "\n")


def write_traversals(
    root: Optional[Node],
    base_name: str,
    directory: Union[str, os.PathLike] = os.curdir,
) -> list[Path]:
    """Write ``<base_name>.levelorder``, ``.preorder`` and ``.postorder`` files.

    No level-order file is written for an empty tree. Returns the paths written.
    """
    folder = Path(directory)
    written = []
    if root is not None:
        path = folder / f"{base_name}.levelorder"
        _write(path, level_order(root))
        written.append(path)
    for suffix, walk in (("preorder", pre_order), ("postorder", post_order)):
        path = folder / f"{base_name}.{suffix}"
        _write(path, walk(root))
        written.append(path)
    return written