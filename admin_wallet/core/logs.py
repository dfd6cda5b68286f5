"""Logging setup for the gateway process."""

from __future__ import annotations

import logging
from typing import Iterable

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
REDACTED = "***"


class RedactSecretsFilter(logging.Filter):
    """Masks configured secret values in formatted log messages."""

    def __init__(self, secrets: Iterable[str]) -> None:
        super().__init__()
        self.secrets = frozenset(secret for secret in secrets if secret)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Leave bad format arguments for Handler.handleError to report.
            return True
        redacted = message
        for secret in self.secrets:
            redacted = redacted.replace(secret, REDACTED)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(level: str = "INFO", secrets: Iterable[str] = ()) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    wanted = frozenset(secret for secret in secrets if secret)
    for handler in logging.getLogger().handlers:
        attached = [f for f in handler.filters if isinstance(f, RedactSecretsFilter)]
        if any(f.secrets == wanted for f in attached):
            continue
        for stale in attached:
            handler.removeFilter(stale)
        handler.addFilter(RedactSecretsFilter(wanted))
