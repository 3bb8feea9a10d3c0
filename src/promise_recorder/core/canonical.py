# src/promise_recorder/core/canonical.py
"""
Canonical JSON serialization for deterministic promise tree hashing.

Two-phase approach:
1. Normalize: Convert bytes to JSON-safe tagged values (our code)
2. Serialize: Produce deterministic JSON per RFC 8785/JCS (rfc8785 package)

A fingerprint lets a test pin the exact tree a contract schedules without
spelling out every payload field, and compare trees across runs.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any

import rfc8785

from promise_recorder.contracts.tree import PromiseTree, promise_to_dict

# Version string identifying the hashing scheme
CANONICAL_VERSION = "sha256-rfc8785-v1"

# RFC 8785 (JCS) only accepts JavaScript-safe integers. Larger values
# (u128 balances, u64 gas) are written as decimal strings instead.
MAX_SAFE_INT = 2**53 - 1


def _normalize_for_canonical(data: Any) -> Any:
    """Recursively normalize a data structure for canonical JSON.

    Bytes become {"__bytes__": <base64>}; tuples become lists; integers
    outside the JavaScript-safe range become decimal strings.
    """
    if isinstance(data, dict):
        return {k: _normalize_for_canonical(v) for k, v in data.items()}
    if isinstance(data, list | tuple):
        return [_normalize_for_canonical(v) for v in data]
    if isinstance(data, bytes):
        return {"__bytes__": base64.b64encode(data).decode("ascii")}
    if isinstance(data, int) and not isinstance(data, bool) and abs(data) > MAX_SAFE_INT:
        return str(data)
    return data


def canonical_json(obj: Any) -> str:
    """Produce canonical JSON for hashing.

    Returns:
        Canonical JSON string (no whitespace, sorted keys)

    Raises:
        rfc8785.CanonicalizationError: If data contains values JCS cannot encode
    """
    normalized = _normalize_for_canonical(obj)
    result: bytes = rfc8785.dumps(normalized)
    return result.decode("utf-8")


def stable_hash(obj: Any, version: str = CANONICAL_VERSION) -> str:
    """Compute stable hash of object.

    Args:
        obj: Data structure to hash
        version: Hashing scheme version; only CANONICAL_VERSION is known

    Returns:
        SHA-256 hex digest of canonical JSON

    Raises:
        ValueError: If version names an unknown hashing scheme
    """
    if version != CANONICAL_VERSION:
        raise ValueError(f"Unknown canonical hash version: {version!r} (expected {CANONICAL_VERSION!r})")
    canonical = canonical_json(obj)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def promise_fingerprint(tree: PromiseTree) -> str:
    """Stable hash of a promise tree's structure and payloads."""
    return stable_hash(promise_to_dict(tree), version=CANONICAL_VERSION)
