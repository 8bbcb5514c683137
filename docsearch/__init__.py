"""docsearch - type-ahead search over a documentation index."""

__version__ = "0.1.0"
