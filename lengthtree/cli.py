"""Command line entry: build a length tree from a file and write its traversals."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from lengthtree.traversals import write_traversals
from lengthtree.tree import InvalidCharacterError, build_tree

_KEYBOARD_BASE = "output"


def base_name(path: str) -> str:
    """Return the final path component with its last extension removed."""
    name = path.rpartition("/")[2]
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def _fail(message: str) -> int:
    print(f"FATAL: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; with no file argument the words are read from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        return _fail("Improper usage")

    try:
        if args:
            name = base_name(args[0])
            try:
                with open(args[0], encoding="utf-8") as stream:
                    root = build_tree(stream)
            except OSError as err:
                return _fail(f"Could not open file: {err}")
        else:
            name = _KEYBOARD_BASE
            root = build_tree(sys.stdin)
    except InvalidCharacterError as err:
        return _fail(str(err))

    if root is None:
        return _fail("Failed to build tree!")

    try:
        write_traversals(root, name)
    except OSError as err:
        return _fail(f"could not open file: {err}")

    print("Tree Built & Traversals Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())