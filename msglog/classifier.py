"""Content-type classification for incoming and outgoing message payloads."""

from msglog.models import ContentKind, Message

INCOMING_PRIORITY = (
    ContentKind.IMAGE,
    ContentKind.VIDEO,
    ContentKind.AUDIO,
    ContentKind.DOCUMENT,
    ContentKind.STICKER,
    ContentKind.LOCATION,
    ContentKind.CONTACT,
    ContentKind.REACTION,
    ContentKind.POLL,
)

# Reactions are not classified on the outgoing side.
OUTGOING_PRIORITY = tuple(k for k in INCOMING_PRIORITY if k is not ContentKind.REACTION)


def _first_match(message: Message, priority: tuple[ContentKind, ...]) -> str:
    present = message.kinds()
    for kind in priority:
        if kind in present:
            return kind.value
    return ContentKind.TEXT.value


def detect_incoming_type(message: Message | None, type_hint: str = "") -> str:
    """Label an incoming payload. A non-empty type hint wins verbatim."""
    if type_hint:
        return type_hint
    if message is None:
        return ContentKind.UNKNOWN.value
    return _first_match(message, INCOMING_PRIORITY)


def detect_outgoing_type(message: Message | None, content: str = "") -> str:
    """Label an outgoing payload; with no payload, fall back on the plain-text content."""
    if message is None:
        return ContentKind.TEXT.value if content else ContentKind.UNKNOWN.value
    return _first_match(message, OUTGOING_PRIORITY)
