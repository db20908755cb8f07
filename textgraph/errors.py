"""
Exception classes for the text graph package.

Missing words and unreachable targets are never errors; queries degrade to
0, empty results or a "not in the graph" message. These exceptions cover
the collaborators around the engine: reading text, writing the walk log
and invoking the external renderer.
"""

from typing import Dict, Any


class TextGraphError(Exception):
    """Base exception for all textgraph errors."""

    def __init__(self, message: str, **context):
        """
        Initialize error with message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context for debugging (paths, exit codes)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a JSON-serializable dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": {key: str(value) for key, value in self.context.items()},
        }


class PathTraversalError(TextGraphError):
    """A file path resolved outside the allowed root directory."""
    pass


class TextLoadError(TextGraphError):
    """Source text could not be read (missing file, decode or I/O failure)."""
    pass


class RenderError(TextGraphError):
    """The external layout tool is unavailable or failed."""
    pass


class WalkLogError(TextGraphError):
    """The random walk log could not be written."""
    pass
