"""Transient notifications (toasts) raised by GUI actions.

The UI drains these after each action and shows them briefly. Every
notification is also logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from gui.utils.logging import log


@dataclass(frozen=True)
class Notification:
    kind: str  # success | error
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Notifier:
    items: List[Notification] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.items.append(Notification("success", message))
        log(message)

    def error(self, message: str) -> None:
        self.items.append(Notification("error", message))
        log(message, logging.WARNING)

    def drain(self) -> List[Notification]:
        """Return pending notifications and clear the queue."""
        pending, self.items = self.items, []
        return pending
