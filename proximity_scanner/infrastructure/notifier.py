"""Fallback notifier used when the host does not supply one."""

import logging

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Writes deferred replies to the log instead of delivering them."""

    def send(self, actor_id: str, message: str) -> None:
        logger.info(f"Reply to {actor_id}: {message}", extra={"actor_id": actor_id})
