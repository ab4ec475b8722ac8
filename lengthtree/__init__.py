"""Group words by length in a binary search tree and write its traversals."""

__version__ = "0.1.0"