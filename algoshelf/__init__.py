"""Classic algorithms and data structures: search trees, graphs, expressions, polynomials and puzzles."""

__version__ = "0.1.0"