"""Messages carried through the publish/subscribe service."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

__all__ = ["Message"]


def _now() -> int:
    return int(time.time())


@dataclass(frozen=True)
class Message:
    """A payload stamped with the second it was created."""

    payload: str
    timestamp: int = field(default_factory=_now)