"""MD5 checksum prefix guarding every stored .a7p file.

The digest is an integrity fence against truncated or corrupted files, not a
signature: MD5 is unkeyed and not collision resistant. The algorithm is part of
the on-disk format, so swapping it makes every existing file unreadable.
"""

import hashlib

from a7p_server.domain.errors import ChecksumMismatch, ChecksumTooShort

DIGEST_LEN = 32


def digest(content: bytes) -> str:
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


def wrap(content: bytes) -> bytes:
    return digest(content).encode("ascii") + content


def unwrap(blob: bytes) -> bytes:
    if len(blob) <= DIGEST_LEN:
        raise ChecksumTooShort(len(blob))
    prefix, content = blob[:DIGEST_LEN], blob[DIGEST_LEN:]
    expected = digest(content)
    if prefix != expected.encode("ascii"):
        raise ChecksumMismatch(expected=expected, found=prefix.decode("ascii", errors="replace"))
    return content
