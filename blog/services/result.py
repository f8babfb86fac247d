"""Explicit outcome of a store call.

Store backends never hand callers a ``(data, error)`` pair. Every call returns
either :class:`StoreOk` carrying the rows or :class:`StoreFailure` carrying a
structured :class:`StoreError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


CONSTRAINT = "constraint"
CONNECTIVITY = "connectivity"
STORE = "store"
VALIDATION = "validation"
INTERNAL = "internal"


@dataclass(frozen=True)
class StoreError:
    """What went wrong, in a shape the gateway can serialise directly."""

    kind: str
    message: str
    retryable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "retryable": self.retryable}


@dataclass(frozen=True)
class StoreOk:
    rows: List[Dict[str, Any]] = field(default_factory=list)

    ok = True


@dataclass(frozen=True)
class StoreFailure:
    error: StoreError

    ok = False


StoreResult = Union[StoreOk, StoreFailure]
