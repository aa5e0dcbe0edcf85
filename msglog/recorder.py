"""Record emitters: one structured log line per incoming or outgoing message."""

import logging
from datetime import datetime
from typing import Callable

from msglog.classifier import detect_incoming_type, detect_outgoing_type
from msglog.models import (
    JID,
    ClientSession,
    Message,
    MessageEvent,
    normalize_participant,
    resolve_device_id,
)
from msglog.sink import MessageLogger, default_message_logger, format_rfc3339
from msglog.text import EventText, build_event_message

logger = logging.getLogger(__name__)


def log_incoming_message(
    event: MessageEvent,
    client: ClientSession | None = None,
    *,
    message_logger: MessageLogger | None = None,
    text_extractor: Callable[[MessageEvent], EventText] = build_event_message,
) -> None:
    """Write a structured JSON log entry for an incoming message."""
    info = event.info
    fields = {
        "device_id": resolve_device_id(client),
        "message_id": info.id,
        "from": normalize_participant(info.sender),
        "to": normalize_participant(info.chat),
        "is_from_me": info.is_from_me,
        "type": detect_incoming_type(event.message, info.type),
        "timestamp": format_rfc3339(info.timestamp),
    }
    try:
        text = text_extractor(event).text
    except Exception as e:
        logger.warning("Failed to extract text for message %s: %s", info.id, e)
        text = ""
    if text:
        fields["text"] = text

    (message_logger or default_message_logger).get().info("message", extra=fields)


def log_outgoing_message(
    msg_id: str,
    sender_jid: str,
    recipient: JID | str,
    message: Message | None,
    content: str,
    ts: datetime,
    *,
    message_logger: MessageLogger | None = None,
) -> None:
    """Write a structured JSON log entry for an outgoing message."""
    fields = {
        "device_id": str(sender_jid),
        "message_id": msg_id,
        "from": str(sender_jid),
        "to": normalize_participant(recipient),
        "is_from_me": True,
        "type": detect_outgoing_type(message, content),
        "timestamp": format_rfc3339(ts),
    }
    if content:
        fields["text"] = content

    (message_logger or default_message_logger).get().info("message", extra=fields)
