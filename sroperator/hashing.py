"""Hashes of strings and of object structures."""

from __future__ import annotations

import json
from typing import Any, MutableMapping

__all__ = ["HASH_ANNOTATION", "fnv64a", "structure_hash", "annotate", "annotation_equal"]

HASH_ANNOTATION = "specialresource.openshift.io/hash"

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _fnv64a_int(data: bytes) -> int:
    value = _FNV64_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return value


def fnv64a(s: str) -> str:
    """64-bit FNV-1a hash of the UTF-8 text, as lower-case hex without padding."""
    return format(_fnv64a_int(s.encode("utf-8")), "x")


def structure_hash(obj: Any) -> int:
    """Unsigned 64-bit hash of a JSON-like structure, independent of mapping order.

    Raises TypeError for values that are not JSON-like.
    """
    canonical = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return _fnv64a_int(canonical.encode("utf-8"))


def annotate(obj: MutableMapping[str, Any]) -> None:
    """Store the hash of the object in its hash annotation."""
    digest = structure_hash(obj)
    metadata = obj.setdefault("metadata", {})
    annotations = metadata.get("annotations") or {}
    annotations[HASH_ANNOTATION] = str(digest)
    metadata["annotations"] = annotations


def annotation_equal(new: MutableMapping[str, Any], old: MutableMapping[str, Any]) -> bool:
    """True if the hash annotation of ``new`` equals the hash of ``old``."""
    digest = structure_hash(old)
    annotations = (new.get("metadata") or {}).get("annotations") or {}
    return annotations.get(HASH_ANNOTATION) == str(digest)