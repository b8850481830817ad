"""Content digest used as a fallback identity for scraped records."""
import hashlib
from typing import Any

import orjson
from pydantic import BaseModel


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Type is not digestible: {type(value).__name__}")


def create_content_digest(value: Any) -> str:
    """Compute an MD5 hex digest of the canonical JSON form of a value.

    Keys are sorted, so structurally equal inputs give the same digest.
    """
    payload = orjson.dumps(value, default=_default, option=orjson.OPT_SORT_KEYS)
    return hashlib.md5(payload).hexdigest()
