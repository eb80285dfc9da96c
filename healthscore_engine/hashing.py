"""
Healthscore Input Fingerprints
Every result carries the sha256 of its canonicalized input, so two results
can be compared for "same panel in, same scores out".
"""

import hashlib
import json
import math
from enum import Enum
from typing import Any

from pydantic import BaseModel

HASH_PREFIX = "sha256:"
FLOAT_DIGITS = 10


def _normalize(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return _normalize(value.model_dump(mode="json"))
    if isinstance(value, dict):
        return {str(k): _normalize(v) for k, v in sorted(value.items(), key=lambda kv: str(kv[0]))}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, float):
        # JSON has no NaN/inf; 1e-10 noise must not change the digest
        return repr(value) if not math.isfinite(value) else round(value, FLOAT_DIGITS)
    return value


def canonicalize(obj: Any) -> str:
    """Compact, key-sorted JSON; the same input always yields the same string."""
    return json.dumps(_normalize(obj), sort_keys=True, separators=(',', ':'), ensure_ascii=True)


def canonicalize_and_hash(obj: Any) -> str:
    """Returns: "sha256:<64-char-hex>" """
    digest = hashlib.sha256(canonicalize(obj).encode('utf-8')).hexdigest()
    return f"{HASH_PREFIX}{digest}"


def verify_hash(obj: Any, expected_hash: str) -> bool:
    return canonicalize_and_hash(obj) == expected_hash
