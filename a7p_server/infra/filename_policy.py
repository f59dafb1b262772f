"""Validation of untrusted filenames.

Runs before any path is joined onto the served directory. The directory is
flat, so besides the `..` and extension rules a name may not carry a path
separator: `Path(root) / "/etc/x.a7p"` would otherwise discard `root`.
"""

from a7p_server.domain.errors import InvalidFilename

EXTENSION = ".a7p"

_FORBIDDEN = ("..", "/", "\\", "\x00")


def validate(name: str) -> str:
    if any(token in name for token in _FORBIDDEN) or not name.endswith(EXTENSION):
        raise InvalidFilename(name)
    return name
