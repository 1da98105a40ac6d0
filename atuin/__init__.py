"""Terminal UI primitives (styles, layout, cell buffers, an input cursor) and shell-history helpers."""

__version__ = "0.1.0"

__all__ = ["buffer", "cursor", "duration", "layout", "stats", "style"]