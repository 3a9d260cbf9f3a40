"""
Path utilities for absolute, slash-separated content tree paths.

Paths address nodes and properties alike: "/content/page/title" is the
"title" property (or child node) of "/content/page". The root is "/".
"""

from treepost.exceptions import InvalidPathError

SEPARATOR = "/"
ROOT = "/"


def is_absolute(path: str | None) -> bool:
    """Check whether a path is a non-empty string starting at the root."""
    return bool(path) and path.startswith(SEPARATOR)


def normalize(path: str) -> str:
    """
    Normalize an absolute path.

    Collapses "." and ".." segments, repeated separators and a trailing
    separator.

    Params:
        path: Absolute path to normalize

    Returns:
        The normalized absolute path

    Raises:
        InvalidPathError: If the path is not absolute or ".." climbs above the root

    Examples:
        "/content//page/./title" -> "/content/page/title"
        "/content/page/../other/" -> "/content/other"
    """
    if not is_absolute(path):
        raise InvalidPathError(path, "path must be absolute")

    segments: list[str] = []
    for segment in path.split(SEPARATOR):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not segments:
                raise InvalidPathError(path, "'..' leads above the root")
            segments.pop()
        else:
            segments.append(segment)

    return ROOT + SEPARATOR.join(segments)


def join(base: str, name: str) -> str:
    """Append a relative name to a base path and normalize the result."""
    return normalize(f"{base}{SEPARATOR}{name}")


def split_segments(path: str) -> list[str]:
    """
    Split a path into its names.

    Examples:
        "/content/page" -> ["content", "page"]
        "/" -> []
    """
    return [segment for segment in path.split(SEPARATOR) if segment]


def get_name(path: str) -> str:
    """Return the last name of a path, empty for the root."""
    return path.rstrip(SEPARATOR).rsplit(SEPARATOR, 1)[-1]


def get_parent(path: str) -> str | None:
    """
    Return the parent path, or None for the root.

    Examples:
        "/content/page" -> "/content"
        "/content" -> "/"
        "/" -> None
    """
    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return None
    pos = stripped.rfind(SEPARATOR)
    if pos <= 0:
        return ROOT
    return stripped[:pos]
