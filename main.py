"""Message logger demo — writes sample incoming and outgoing message records."""

import logging
import sys
import uuid
from argparse import ArgumentParser
from datetime import datetime, timezone

from msglog.config import resolve_config
from msglog.models import (
    JID,
    AudioMessage,
    ClientSession,
    DeviceStore,
    ImageMessage,
    LocationMessage,
    Message,
    MessageEvent,
    MessageInfo,
    PollCreationMessage,
    ReactionMessage,
)
from msglog.recorder import log_incoming_message, log_outgoing_message
from msglog.sink import MessageLogger

logger = logging.getLogger(__name__)

OWN_JID = JID(user="99999", server="s.whatsapp.net", device=3)
PEER_JID = JID(user="12345", server="s.whatsapp.net", device=1)

SAMPLE_PAYLOADS = [
    Message(conversation="hey, are you around?"),
    Message(image_message=ImageMessage(caption="whiteboard from today")),
    Message(audio_message=AudioMessage(seconds=7, ptt=True)),
    Message(location_message=LocationMessage(latitude=52.52, longitude=13.405, name="Office")),
    Message(reaction_message=ReactionMessage(text="👍", target_id="3EB0C0FFEE")),
    Message(poll_creation_message=PollCreationMessage(name="Lunch?", options=["pizza", "sushi"])),
]


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="msglog-demo",
        description="Write sample structured message records to the message log.",
    )
    parser.add_argument("--path", help="Message log path (default: from config)")
    parser.add_argument(
        "--count",
        type=int,
        default=4,
        help="Number of sample messages to write (default: 4)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = resolve_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [msglog] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    message_logger = MessageLogger(args.path or config.log_messages_path)
    client = ClientSession(store=DeviceStore(id=OWN_JID))
    logger.info("Writing %d sample message(s) to %s", args.count, message_logger.path)

    for i in range(args.count):
        payload = SAMPLE_PAYLOADS[i % len(SAMPLE_PAYLOADS)]
        now = datetime.now(timezone.utc)
        msg_id = uuid.uuid4().hex[:16].upper()
        if i % 2 == 0:
            event = MessageEvent(
                info=MessageInfo(id=msg_id, sender=PEER_JID, chat=PEER_JID, timestamp=now),
                message=payload,
            )
            log_incoming_message(event, client, message_logger=message_logger)
        else:
            log_outgoing_message(
                msg_id, OWN_JID.user, PEER_JID, payload, payload.conversation, now,
                message_logger=message_logger,
            )

    if message_logger.uses_fallback:
        logger.warning("Message log unavailable, records were written to stdout")
    message_logger.close()
    logger.info("Done. Total messages written: %d", args.count)


if __name__ == "__main__":
    main()
