from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    """Receives human readable success/failure messages for the user."""

    def success(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError


class LoggingNotificationSink:
    def success(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)


@dataclass
class CollectingNotificationSink:
    """Keeps messages in memory, newest last."""

    messages: List[Tuple[str, str]] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def drain(self) -> List[Tuple[str, str]]:
        out, self.messages = self.messages, []
        return out
