"""luhmann - hierarchical Luhmann IDs for a plain-text note vault."""

__version__ = "0.1.0"
