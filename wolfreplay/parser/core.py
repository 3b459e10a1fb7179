"""Single-pass log parse: split → role registry | classifier → events."""

import logging

from wolfreplay.models import Event

from .paragraphs import is_structural_noise, iter_raw_paragraphs
from .rules import RULES
from .session import ParseSession

logger = logging.getLogger(__name__)


def classify_paragraph(paragraph: str, session: ParseSession) -> list[Event] | None:
    """Run the ordered rules; None means no rule claimed the paragraph."""
    for name, rule in RULES:
        events = rule(paragraph, session)
        if events is not None:
            session.rule_hits[name] += 1
            return events
    return None


def parse_log(text: str, session: ParseSession | None = None) -> list[Event]:
    """Parse a markdown game log into an ordered list of replay events.

    Pass a fresh ParseSession to inspect the role registry and match counters
    afterwards; a session must not be reused across logs. Never raises on
    unrecognised content: paragraphs that match nothing are dropped and
    counted as unmatched.
    """
    session = session if session is not None else ParseSession()
    events: list[Event] = []

    for paragraph in iter_raw_paragraphs(text):
        if is_structural_noise(paragraph):
            session.dropped += 1
            continue
        session.paragraphs += 1
        if session.consume_table(paragraph):
            continue
        matched = classify_paragraph(paragraph, session)
        if matched is None:
            session.unmatched += 1
            logger.debug(f"Unmatched paragraph: {paragraph[:80]!r}")
            continue
        events.extend(matched)

    logger.debug(
        f"Parsed {len(events)} events from {session.paragraphs} paragraphs "
        f"({session.dropped} dropped, {session.unmatched} unmatched, "
        f"{len(session.roles)} roles)"
    )
    return events
