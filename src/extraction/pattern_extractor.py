from __future__ import annotations

import re
from typing import List, Optional, Tuple

from classification.task_classifier import TaskClassifier
from extraction.base import ExtractionStrategy
from smart_todo.models import DEFAULT_TITLE, MAX_TITLE_WORDS, ExtractionResult


CLOCK_TIME_RE = re.compile(r"\b\d{1,2}(?::\d{2})?\s*[ap]m\b", re.IGNORECASE)
RELATIVE_DAY_RE = re.compile(r"\b(?:today|tomorrow)\b", re.IGNORECASE)
TIME_RE = re.compile(
    rf"{CLOCK_TIME_RE.pattern}|{RELATIVE_DAY_RE.pattern}", re.IGNORECASE
)

# Building-and-room code such as AB1-324. Case-sensitive on purpose.
ROOM_CODE_RE = re.compile(r"(?<![A-Za-z0-9])[A-Z]{2,3}\d+-\d+")
VENUE_PREPOSITION_RE = re.compile(r"\b(?:in|at|room)\s+", re.IGNORECASE)

# Prepositions that may sit right before a stripped venue or time.
VENUE_LEAD_RE = re.compile(r"\b(?:in|at|room|on)\s*$", re.IGNORECASE)
TIME_LEAD_RE = re.compile(r"(?:\b(?:at|by|on)|@)\s*$", re.IGNORECASE)
LEAD_WINDOW = 12

MAX_VENUE_WORDS = 3
VENUE_STOP_WORDS = frozenset({
    "in", "at", "on", "for", "with", "to", "by", "about", "from", "near",
    "after", "before", "until", "and", "or", "but", "then", "today",
    "tomorrow",
})
DANGLING_WORDS = frozenset({"in", "at", "on", "by", "room", "to", "for", "@"})
PUNCTUATION = ".,;:!?\"'()[]"
WORD_RE = re.compile(r"\S+")

Span = Tuple[int, int]


def _find_time(text: str) -> Optional[re.Match]:
    return TIME_RE.search(text)


def _venue_phrase(text: str, start: int) -> Optional[Span]:
    """Span of up to MAX_VENUE_WORDS words starting at `start`."""
    end = None
    for count, word in enumerate(WORD_RE.finditer(text, start), 1):
        raw = word.group(0)
        bare = raw.strip(PUNCTUATION)
        if not bare or bare.lower() in VENUE_STOP_WORDS:
            break
        if CLOCK_TIME_RE.match(text, word.start()):
            break
        end = word.start() + len(raw.rstrip(PUNCTUATION))
        # trailing punctuation closes the phrase
        if raw != raw.rstrip(PUNCTUATION) or count == MAX_VENUE_WORDS:
            break
    if end is None:
        return None
    return start, end


def _find_venue(text: str) -> Optional[Span]:
    room = ROOM_CODE_RE.search(text)
    if room:
        return room.span()

    for prep in VENUE_PREPOSITION_RE.finditer(text):
        span = _venue_phrase(text, prep.end())
        if span:
            return span
    return None


def _extend_left(text: str, span: Span, lead: re.Pattern) -> Span:
    # only the few characters before the span can hold a lead preposition
    m = lead.search(text, max(0, span[0] - LEAD_WINDOW), span[0])
    return (m.start(), span[1]) if m else span


def _merge(spans: List[Span]) -> List[Span]:
    merged: List[Span] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def _build_title(text: str, venue: Optional[Span]) -> str:
    spans: List[Span] = []
    if venue:
        spans.append(_extend_left(text, venue, VENUE_LEAD_RE))
    for m in TIME_RE.finditer(text):
        spans.append(_extend_left(text, m.span(), TIME_LEAD_RE))

    kept = []
    cursor = 0
    for start, end in _merge(spans):
        kept.append(text[cursor:start])
        cursor = end
    kept.append(text[cursor:])

    words = [w for w in " ".join(kept).split() if w.strip(PUNCTUATION)]
    words = words[:MAX_TITLE_WORDS]
    while words and words[-1].strip(PUNCTUATION).lower() in DANGLING_WORDS:
        words.pop()
    if words:
        words[-1] = words[-1].rstrip(PUNCTUATION)
    return " ".join(words) or DEFAULT_TITLE


class PatternExtractor(ExtractionStrategy):
    """Deterministic regex/keyword extraction; the local strategy.

    Time and venue are both matched against the original sentence, so a
    time embedded in a room code cannot corrupt the venue. Never raises.
    """

    name = "local"

    def __init__(self, classifier: Optional[TaskClassifier] = None):
        self.classifier = classifier or TaskClassifier()

    def extract(self, text: str) -> ExtractionResult:
        text = text or ""

        time_match = _find_time(text)
        venue_span = _find_venue(text)

        return ExtractionResult(
            title=_build_title(text, venue_span),
            time=time_match.group(0) if time_match else None,
            venue=text[venue_span[0]:venue_span[1]] if venue_span else None,
            category=self.classifier.classify(text),
        )
