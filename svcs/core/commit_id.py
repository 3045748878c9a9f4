"""Commit identifier derivation.

Two schemes exist. The legacy one concatenates a 32-bit hash of the index
file bytes with a 32-bit hash of the message, so two commits with the same
tracked path list and the same message get the same identifier whatever the
file contents are. The digest scheme hashes the actual snapshot.
"""

from __future__ import annotations

import hashlib
from typing import Iterable


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def java_bytes_hash(data: bytes) -> int:
    """Polynomial hash over signed bytes, as java.util.Arrays.hashCode(byte[])."""
    h = 1
    for b in data:
        signed = b - 256 if b > 127 else b
        h = (31 * h + signed) & 0xFFFFFFFF
    return _to_int32(h)


def java_string_hash(text: str) -> int:
    """Polynomial hash over UTF-16 code units, as java.lang.String.hashCode()."""
    encoded = text.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(encoded), 2):
        unit = (encoded[i] << 8) | encoded[i + 1]
        h = (31 * h + unit) & 0xFFFFFFFF
    return _to_int32(h)


def legacy_commit_id(index_bytes: bytes, message: str) -> str:
    return f"{java_bytes_hash(index_bytes)}{java_string_hash(message)}"


def digest_commit_id(message: str, timestamp: str, files: Iterable[tuple[str, bytes]]) -> str:
    """SHA-1 over the message, the commit time and every tracked file.

    Args:
        message: Commit message
        timestamp: Commit time, any stable string form
        files: (tracked path, file bytes) pairs in index order
    """
    h = hashlib.sha1()
    h.update(message.encode("utf-8"))
    h.update(b"\0")
    h.update(timestamp.encode("utf-8"))
    for path, data in files:
        h.update(b"\0")
        h.update(path.encode("utf-8"))
        h.update(b"\0")
        h.update(str(len(data)).encode("ascii"))
        h.update(b"\0")
        h.update(data)
    return h.hexdigest()
