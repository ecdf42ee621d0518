"""Object names for uploaded images."""

from __future__ import annotations

from uuid import uuid4


def file_extension(filename: str) -> str:
    """Return the text after the last dot of *filename*, case preserved.

    ``"photo.PNG"`` gives ``"PNG"``; a name without a dot gives ``""``.
    Any directory part of the client-supplied name is ignored.
    """
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[-1]


def generate_object_name(filename: str) -> str:
    """Return a collision-resistant random object name keeping the extension."""
    ext = file_extension(filename)
    stem = uuid4().hex
    return f"{stem}.{ext}" if ext else stem
