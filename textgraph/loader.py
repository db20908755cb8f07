"""
Text source loading.

Files are resolved against an allowed root directory (the working
directory by default). A path that resolves outside the root is rejected
with PathTraversalError, which is distinct from a missing file
(TextLoadError).
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .errors import PathTraversalError, TextLoadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def resolve_within_root(path: PathLike, root: Optional[PathLike] = None) -> Path:
    """
    Resolve a path and make sure it stays inside the root directory.

    Relative paths are taken relative to the root. Symlinks are resolved
    before the containment check.

    Args:
        path: Path to resolve
        root: Allowed root directory (default: current working directory)

    Returns:
        The resolved absolute path

    Raises:
        PathTraversalError: If the resolved path lies outside the root
    """
    root_path = Path(root).resolve() if root is not None else Path.cwd().resolve()
    candidate = (root_path / Path(path)).resolve()
    try:
        candidate.relative_to(root_path)
    except ValueError:
        raise PathTraversalError(
            f"Access outside {root_path} is not allowed: {path}",
            path=path, root=root_path
        ) from None
    return candidate


def load_text_file(path: PathLike, root: Optional[PathLike] = None,
                   encoding: str = 'utf-8') -> str:
    """
    Read a text file from inside the root directory.

    Lines are joined with single spaces, so line breaks separate words like
    any other whitespace.

    Args:
        path: File to read
        root: Allowed root directory (default: current working directory)
        encoding: Text encoding

    Returns:
        File content with line breaks replaced by spaces

    Raises:
        PathTraversalError: If the path resolves outside the root
        TextLoadError: If the file is missing or cannot be read or decoded
    """
    resolved = resolve_within_root(path, root)
    try:
        with open(resolved, 'r', encoding=encoding) as f:
            content = " ".join(line.rstrip("\r\n") for line in f)
    except FileNotFoundError as e:
        raise TextLoadError(f"File not found: {path}", path=resolved) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TextLoadError(f"Cannot read {path}: {e}", path=resolved) from e

    logger.info("Loaded %d characters from %s", len(content), resolved)
    return content
