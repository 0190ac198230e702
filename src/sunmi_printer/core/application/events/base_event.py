"""
base_event.py

Defines the BaseEvent class, the abstract base for all event types in the application layer.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True, kw_only=True)
class BaseEvent(ABC):
    """
    Abstract base class for all events in the application layer.

    Attributes:
        _timestamp (datetime): The UTC timestamp when the event was created.
    """

    _timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def timestamp(self) -> datetime:
        return self._timestamp
