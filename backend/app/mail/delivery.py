"""Best-effort mail delivery.

Mail is sent after the trip change has been committed, so a delivery
failure is logged and counted but never fails the request.
"""

import logging
import time

from backend.app.mail.client import MailClient, MailMessage
from backend.app.utils.logging import StructuredMailLogger
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)

_mail_logger = StructuredMailLogger()


async def deliver(client: MailClient, message: MailMessage, *, kind: str) -> bool:
    """Send a message, logging the outcome.

    Args:
        client: Mail client to send with
        message: Message to send
        kind: Message kind for logs and metrics (e.g. "trip_confirmation")

    Returns:
        True if the client accepted the message
    """
    start = time.perf_counter()

    try:
        await client.send(message)
    except Exception as e:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.error(f"[mail] {kind} to {message.to_address} failed: {e}", exc_info=True)
        _mail_logger.log_delivery(
            message, kind, "failed", elapsed_ms, error_reason=type(e).__name__
        )
        metrics.record_mail(kind, "failed")
        return False

    elapsed_ms = (time.perf_counter() - start) * 1000
    _mail_logger.log_delivery(message, kind, "sent", elapsed_ms)
    metrics.record_mail(kind, "sent")
    return True
