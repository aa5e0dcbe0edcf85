"""Message event data model: participant IDs, payload variants, and the session handle."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ContentKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACT = "contact"
    REACTION = "reaction"
    POLL = "poll"
    TEXT = "text"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class JID:
    """Participant identifier: ``user[.agent][:device]@server``."""
    user: str
    server: str = ""
    agent: int = 0
    device: int = 0

    def to_non_ad(self) -> "JID":
        """Drop the agent/device qualifier."""
        return JID(user=self.user, server=self.server)

    def __str__(self) -> str:
        user = self.user
        if self.agent:
            user = f"{user}.{self.agent}"
        if self.device:
            user = f"{user}:{self.device}"
        if not self.server:
            return user
        return f"{user}@{self.server}" if user else self.server


def parse_jid(value: str) -> JID:
    """Parse ``user[.agent][:device]@server``. A string without ``@`` is a bare user."""
    user, _, server = value.strip().partition("@")
    device = 0
    agent = 0
    if ":" in user:
        user, raw_device = user.split(":", 1)
        device = int(raw_device) if raw_device.isdigit() else 0
    if "." in user:
        base, raw_agent = user.rsplit(".", 1)
        if raw_agent.isdigit():
            user, agent = base, int(raw_agent)
    return JID(user=user, server=server, agent=agent, device=device)


def normalize_participant(value: "JID | str") -> str:
    """Strip the device suffix and return the bare user part (or server if no user)."""
    jid = value if isinstance(value, JID) else parse_jid(str(value))
    jid = jid.to_non_ad()
    return jid.user or jid.server


# ── Payload variants ────────────────────────────────────────────────

@dataclass
class ExtendedTextMessage:
    text: str = ""


@dataclass
class ImageMessage:
    caption: str = ""
    mimetype: str = "image/jpeg"


@dataclass
class VideoMessage:
    caption: str = ""
    mimetype: str = "video/mp4"
    seconds: int = 0


@dataclass
class AudioMessage:
    mimetype: str = "audio/ogg"
    seconds: int = 0
    ptt: bool = False


@dataclass
class DocumentMessage:
    file_name: str = ""
    caption: str = ""
    mimetype: str = "application/octet-stream"


@dataclass
class StickerMessage:
    is_animated: bool = False


@dataclass
class LocationMessage:
    latitude: float = 0.0
    longitude: float = 0.0
    name: str = ""
    address: str = ""


@dataclass
class ContactMessage:
    display_name: str = ""
    vcard: str = ""


@dataclass
class ReactionMessage:
    text: str = ""
    target_id: str = ""


@dataclass
class PollCreationMessage:
    name: str = ""
    options: list[str] = field(default_factory=list)
    selectable_count: int = 1


# Payload attribute for each media/structured variant.
_VARIANT_FIELDS = (
    (ContentKind.IMAGE, "image_message"),
    (ContentKind.VIDEO, "video_message"),
    (ContentKind.AUDIO, "audio_message"),
    (ContentKind.DOCUMENT, "document_message"),
    (ContentKind.STICKER, "sticker_message"),
    (ContentKind.LOCATION, "location_message"),
    (ContentKind.CONTACT, "contact_message"),
    (ContentKind.REACTION, "reaction_message"),
    (ContentKind.POLL, "poll_creation_message"),
)


@dataclass
class Message:
    """Message payload. More than one variant may be set at once."""
    conversation: str = ""
    extended_text_message: ExtendedTextMessage | None = None
    image_message: ImageMessage | None = None
    video_message: VideoMessage | None = None
    audio_message: AudioMessage | None = None
    document_message: DocumentMessage | None = None
    sticker_message: StickerMessage | None = None
    location_message: LocationMessage | None = None
    contact_message: ContactMessage | None = None
    reaction_message: ReactionMessage | None = None
    poll_creation_message: PollCreationMessage | None = None

    def kinds(self) -> set[ContentKind]:
        """Return the non-text variants carried by this payload."""
        return {kind for kind, attr in _VARIANT_FIELDS if getattr(self, attr) is not None}


# ── Event and session ───────────────────────────────────────────────

@dataclass
class MessageInfo:
    id: str
    sender: JID
    chat: JID
    timestamp: datetime
    is_from_me: bool = False
    type: str = ""


@dataclass
class MessageEvent:
    info: MessageInfo
    message: Message | None = None


@dataclass
class DeviceStore:
    id: JID | None = None


@dataclass
class ClientSession:
    store: DeviceStore | None = None


def resolve_device_id(client: ClientSession | None) -> str:
    """Return the session's own ID as a bare user part, or an empty string if unknown.

    The server is dropped along with the device suffix so that ``device_id``
    uses the same form as the ``from``/``to`` fields of the same record.
    """
    if client is None or client.store is None or client.store.id is None:
        return ""
    return normalize_participant(client.store.id)
