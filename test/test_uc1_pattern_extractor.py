import time

import pytest

from extraction.pattern_extractor import PatternExtractor
from smart_todo.models import CATEGORIES


@pytest.fixture
def extractor():
    return PatternExtractor()


def test_room_code_time_and_work(extractor):
    r = extractor.extract("Meeting in AB1-324 at 9pm")
    assert r.venue == "AB1-324"
    assert r.time == "9pm"
    assert r.category == "work"
    assert r.title == "Meeting"


def test_preposition_venue_for_errand(extractor):
    r = extractor.extract("Buy groceries at the store")
    assert r.category == "chores"
    assert r.time is None
    assert r.venue == "the store"
    assert r.title == "Buy groceries"


def test_trailing_punctuation_closes_venue(extractor):
    r = extractor.extract("Buy groceries at the store.")
    assert r.venue == "the store"
    assert r.title == "Buy groceries"


def test_empty_input_defaults(extractor):
    r = extractor.extract("")
    assert r.title == "New Task"
    assert r.category == "chores"
    assert r.time is None
    assert r.venue is None


def test_time_embedded_in_room_code(extractor):
    # venue and time are both read from the original sentence
    r = extractor.extract("Standup in AB1-2pm")
    assert r.venue == "AB1-2"
    assert r.time == "2pm"
    assert r.title == "Standup"
    assert r.category == "work"


def test_first_time_expression_wins(extractor):
    r = extractor.extract("Submit assignment tomorrow at 5pm in room 204")
    assert r.time == "tomorrow"
    assert r.venue == "room 204"
    assert r.category == "school"
    assert r.title == "Submit assignment"


def test_clock_time_with_minutes_and_space(extractor):
    r = extractor.extract("Call mom at 6:30 PM")
    assert r.time == "6:30 PM"
    assert r.venue is None
    assert r.title == "Call mom"
    assert r.category == "chores"


def test_venue_stops_at_relative_day(extractor):
    r = extractor.extract("Meeting at office tomorrow")
    assert r.venue == "office"
    assert r.time == "tomorrow"
    assert r.title == "Meeting"


def test_lowercase_room_code_falls_back_to_preposition(extractor):
    r = extractor.extract("Lecture in ab1-324")
    assert r.venue == "ab1-324"
    assert r.category == "school"


def test_title_keeps_at_most_six_words(extractor):
    r = extractor.extract("please remember to water all of the plants on the balcony")
    assert r.title == "please remember to water all of"
    assert r.category == "chores"


@pytest.mark.parametrize(
    "text, category",
    [
        ("Meeting about the hackathon project", "work"),
        ("Study for the exam about coding", "school"),
        ("Finish homework", "school"),
        ("Push commits to the repo", "project"),
        ("Clean the kitchen", "chores"),
        ("Classes start at 8am", "school"),
        ("Coded the login page", "project"),
        ("Committed the fix", "project"),
    ],
)
def test_category_precedence(extractor, text, category):
    assert extractor.extract(text).category == category


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "!!!",
        "at",
        "in in in",
        "tomorrow",
        "12pm",
        "a b c d e f g h i j k",
        "Café rendez-vous à 9h",
        "x" * 5000,
        "Meeting Meeting Meeting at at at 9pm 10pm 11pm",
    ],
)
def test_always_valid_and_idempotent(extractor, text):
    first = extractor.extract(text)
    second = extractor.extract(text)
    assert first == second
    assert first.category in CATEGORIES
    assert first.title
    assert len(first.title.split()) <= 6


def test_none_is_treated_as_empty(extractor):
    assert extractor.extract(None) == extractor.extract("")


@pytest.mark.parametrize("chunk", ["today ", "at 9pm ", "in AB1-2pm at ", "by 10:30 am, "])
def test_large_input_stays_linear(extractor, chunk):
    text = chunk * (100_000 // len(chunk))
    start = time.perf_counter()
    r = extractor.extract(text)
    elapsed = time.perf_counter() - start
    assert elapsed < 2.0, f"{len(text)} chars took {elapsed:.2f}s"
    assert r.time is not None
    assert r.category in CATEGORIES
