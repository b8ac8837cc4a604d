"""Structured logging for outbound mail."""

import logging
from typing import Any

from backend.app.mail.client import MailMessage

logger = logging.getLogger(__name__)


class StructuredMailLogger:
    """Structured logger for mail delivery."""

    def log_delivery(
        self,
        message: MailMessage,
        kind: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log mail delivery attempt with structured data."""
        log_data: dict[str, Any] = {
            "kind": kind,
            "to": message.to_address,
            "subject": message.subject,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Mail delivery: {kind} - {outcome}"

        if outcome == "sent":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
