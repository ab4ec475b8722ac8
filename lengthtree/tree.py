"""Binary search tree of words keyed by their length."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterable, Optional

# Letters, digits and the special characters ! " # $ % & ' ( ) * +
_ALLOWED = frozenset(
    string.ascii_letters + string.digits + "".join(chr(c) for c in range(33, 44))
)


class InvalidCharacterError(ValueError):
    """Raised when a word holds a character outside the accepted set."""

    def __init__(self, char: str, word: str) -> None:
        super().__init__(f"Invalid character: {char}")
        self.char = char
        self.word = word


@dataclass
class Node:
    """A tree node holding every word of one length, newest first."""

    value: int
    words: list[str] = field(default_factory=list)
    left: Optional[Node] = None
    right: Optional[Node] = None

    def add(self, word: str) -> None:
        """Place ``word`` in the subtree rooted at this node by its length."""
        length = len(word)
        node = self
        while True:
            if length == node.value:
                node.words.insert(0, word)
                return
            if length < node.value:
                if node.left is None:
                    node.left = Node(length, [word])
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(length, [word])
                    return
                node = node.right


def validate_word(word: str) -> int:
    """Return the length of ``word``, raising if it has a forbidden character."""
    for char in word:
        if char not in _ALLOWED:
            raise InvalidCharacterError(char, word)
    return len(word)


def build_tree(stream: Iterable[str]) -> Optional[Node]:
    """Build a tree from the whitespace-separated words of a text stream.

    Returns ``None`` when the stream holds no words.
    """
    root: Optional[Node] = None
    for line in stream:
        for word in line.split():
            length = validate_word(word)
            if root is None:
                root = Node(length, [word])
            else:
                root.add(word)
    return root