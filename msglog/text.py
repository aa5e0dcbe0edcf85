"""Human-readable text extraction from message events."""

from dataclasses import dataclass

from msglog.models import MessageEvent

# (payload attribute, text attribute) in lookup order.
_TEXT_SOURCES = (
    ("extended_text_message", "text"),
    ("image_message", "caption"),
    ("video_message", "caption"),
    ("document_message", "caption"),
    ("reaction_message", "text"),
    ("poll_creation_message", "name"),
    ("location_message", "name"),
    ("contact_message", "display_name"),
)


@dataclass
class EventText:
    text: str = ""


def build_event_message(event: MessageEvent) -> EventText:
    """Return the first non-empty text carried by the event's payload."""
    msg = event.message
    if msg is None:
        return EventText()
    if msg.conversation:
        return EventText(text=msg.conversation)
    for attr, text_attr in _TEXT_SOURCES:
        part = getattr(msg, attr)
        if part is not None and getattr(part, text_attr):
            return EventText(text=getattr(part, text_attr))
    return EventText()
