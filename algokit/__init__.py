"""Classic algorithms and small programs: graphs, dynamic programming, array puzzles, an LRU cache, digit-string arithmetic, a fifteen puzzle and a reversing chat."""

__version__ = "0.1.0"