from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def to_json_dict(obj: Any) -> dict:
    """Dataclass -> JSON friendly dict (enums become their values)."""
    data = asdict(obj) if is_dataclass(obj) else dict(obj)
    return _plain(data)
