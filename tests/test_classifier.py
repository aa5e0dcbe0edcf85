"""Tests for incoming and outgoing content-type classification."""

import pytest

from msglog.classifier import (
    INCOMING_PRIORITY,
    OUTGOING_PRIORITY,
    detect_incoming_type,
    detect_outgoing_type,
)
from msglog.models import (
    AudioMessage,
    ContactMessage,
    ContentKind,
    DocumentMessage,
    ExtendedTextMessage,
    ImageMessage,
    LocationMessage,
    Message,
    PollCreationMessage,
    ReactionMessage,
    StickerMessage,
    VideoMessage,
)

SINGLE_VARIANTS = [
    (Message(image_message=ImageMessage()), "image"),
    (Message(video_message=VideoMessage()), "video"),
    (Message(audio_message=AudioMessage()), "audio"),
    (Message(document_message=DocumentMessage()), "document"),
    (Message(sticker_message=StickerMessage()), "sticker"),
    (Message(location_message=LocationMessage()), "location"),
    (Message(contact_message=ContactMessage()), "contact"),
    (Message(poll_creation_message=PollCreationMessage()), "poll"),
]


class TestIncomingClassifier:
    @pytest.mark.parametrize("message,expected", SINGLE_VARIANTS)
    def test_single_variant(self, message, expected):
        assert detect_incoming_type(message, "") == expected

    def test_reaction(self):
        msg = Message(reaction_message=ReactionMessage(text="❤️"))
        assert detect_incoming_type(msg) == "reaction"

    def test_none_payload_is_unknown(self):
        assert detect_incoming_type(None, "") == "unknown"

    def test_hint_wins_verbatim(self):
        assert detect_incoming_type(Message(image_message=ImageMessage()), "media") == "media"
        assert detect_incoming_type(None, "text") == "text"

    def test_plain_text_falls_back_to_text(self):
        assert detect_incoming_type(Message(conversation="hello")) == "text"
        assert detect_incoming_type(Message(extended_text_message=ExtendedTextMessage(text="hi"))) == "text"

    def test_empty_payload_is_text(self):
        assert detect_incoming_type(Message()) == "text"

    def test_priority_image_over_video(self):
        msg = Message(image_message=ImageMessage(), video_message=VideoMessage())
        assert detect_incoming_type(msg) == "image"

    def test_priority_contact_over_reaction_and_poll(self):
        msg = Message(
            contact_message=ContactMessage(),
            reaction_message=ReactionMessage(),
            poll_creation_message=PollCreationMessage(),
        )
        assert detect_incoming_type(msg) == "contact"

    def test_priority_reaction_over_poll(self):
        msg = Message(reaction_message=ReactionMessage(), poll_creation_message=PollCreationMessage())
        assert detect_incoming_type(msg) == "reaction"

    def test_priority_order(self):
        assert INCOMING_PRIORITY == (
            ContentKind.IMAGE, ContentKind.VIDEO, ContentKind.AUDIO,
            ContentKind.DOCUMENT, ContentKind.STICKER, ContentKind.LOCATION,
            ContentKind.CONTACT, ContentKind.REACTION, ContentKind.POLL,
        )


class TestOutgoingClassifier:
    @pytest.mark.parametrize("message,expected", SINGLE_VARIANTS)
    def test_single_variant(self, message, expected):
        assert detect_outgoing_type(message, "") == expected

    def test_none_payload_with_content_is_text(self):
        assert detect_outgoing_type(None, "hello") == "text"

    def test_none_payload_without_content_is_unknown(self):
        assert detect_outgoing_type(None, "") == "unknown"

    def test_priority_audio_over_location(self):
        msg = Message(audio_message=AudioMessage(), location_message=LocationMessage())
        assert detect_outgoing_type(msg, "") == "audio"

    def test_plain_payload_is_text(self):
        assert detect_outgoing_type(Message(conversation="yo"), "yo") == "text"


class TestReactionAsymmetry:
    """Reactions are labelled on the incoming side only. Outgoing reactions fall through to text."""

    def test_outgoing_reaction_is_text(self):
        msg = Message(reaction_message=ReactionMessage(text="👍"))
        assert detect_outgoing_type(msg, "") == "text"

    def test_outgoing_reaction_then_poll_is_poll(self):
        msg = Message(reaction_message=ReactionMessage(), poll_creation_message=PollCreationMessage())
        assert detect_outgoing_type(msg, "") == "poll"
        assert detect_incoming_type(msg, "") == "reaction"

    def test_outgoing_priority_excludes_reaction(self):
        assert ContentKind.REACTION not in OUTGOING_PRIORITY
        assert OUTGOING_PRIORITY == tuple(k for k in INCOMING_PRIORITY if k != ContentKind.REACTION)

    @pytest.mark.parametrize("message", [m for m, _ in SINGLE_VARIANTS] + [Message(reaction_message=ReactionMessage())])
    def test_outgoing_never_returns_reaction(self, message):
        assert detect_outgoing_type(message, "x") != "reaction"
