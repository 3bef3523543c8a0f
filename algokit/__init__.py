"""Classic algorithms: sorting, searching, matrix norms, spanning trees, patterns and a bounded stack."""

__version__ = "0.1.0"

__all__ = ["sorting", "searching", "matrix", "graph", "patterns", "stack", "cli"]