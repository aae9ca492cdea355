from datetime import date

import pytest

from quickadd.nlp.parser import parse_task_input


def test_parser_extracts_priority_date_and_labels(now):
    r = parse_task_input("p1 today @work fix bug", now=now)
    assert r.priority == 1
    assert r.due_date == date(2025, 1, 15)
    assert r.labels == ("work",)
    assert r.clean_title == "fix bug"
    assert r.detected_keywords.priority == "p1"
    assert r.detected_keywords.date == "today"
    assert r.detected_keywords.labels == ("@work",)


def test_parser_handles_priority_phrase_and_full_date(now):
    r = parse_task_input("priority 2 submit report 12/25/2024", now=now)
    assert r.priority == 2
    assert r.due_date == date(2024, 12, 25)
    assert r.clean_title == "submit report"


def test_parser_handles_minimal_text(now):
    r = parse_task_input("Buy milk", now=now)
    assert r.clean_title == "Buy milk"
    assert r.priority is None
    assert r.due_date is None
    assert r.labels == ()
    assert not r.has_attributes


def test_same_weekday_means_next_week(now):
    # now is a Wednesday
    r = parse_task_input("wednesday meeting", now=now)
    assert r.due_date == date(2025, 1, 22)
    assert r.clean_title == "meeting"


def test_out_of_range_month_day_is_not_a_date(now):
    r = parse_task_input("task due 13/40", now=now)
    assert r.due_date is None
    assert r.detected_keywords.date is None
    assert r.clean_title == "task due 13/40"


def test_repeated_label_is_reported_once_and_fully_stripped(now):
    r = parse_task_input("@work @work finish this", now=now)
    assert r.labels == ("work",)
    assert r.clean_title == "finish this"


def test_only_first_priority_counts(now):
    r = parse_task_input("p1 fix p1 later high", now=now)
    assert r.priority == 1
    assert r.clean_title == "fix p1 later high"


def test_date_keyword_table_order_beats_text_order(now):
    r = parse_task_input("friday or tomorrow", now=now)
    assert r.due_date == date(2025, 1, 16)
    assert r.detected_keywords.date == "tomorrow"
    assert r.clean_title == "friday or"


def test_everything_consumed_gives_empty_title(now):
    r = parse_task_input("  p3   tomorrow @x ", now=now)
    assert r.clean_title == ""
    assert r.priority == 3


def test_defaults_to_system_clock():
    r = parse_task_input("today")
    assert r.due_date is not None


CASES = [
    "p1 today @work fix bug",
    "priority 2 submit report 12/25/2024",
    "@work @work finish this",
    "wednesday meeting",
    "task due 13/40",
    "call mom   tomorrow p3 @family",
    "ship 2025-03-01 high @release @Release",
    "   lots    of   space   ",
    "plan next  week",
    "next p1 week plan",
    "priority\t 2 file taxes",
    "",
]


@pytest.mark.parametrize("text", CASES)
def test_clean_title_is_normalized(text, now):
    title = parse_task_input(text, now=now).clean_title
    assert title == title.strip()
    assert "  " not in title
    assert len(title) <= len(text)


@pytest.mark.parametrize("text", CASES)
def test_reparsing_clean_title_finds_nothing(text, now):
    again = parse_task_input(parse_task_input(text, now=now).clean_title, now=now)
    assert again.priority is None
    assert again.due_date is None
    assert again.labels == ()


def test_multiword_keywords_tolerate_extra_whitespace(now):
    r = parse_task_input("plan next  week", now=now)
    assert r.due_date == date(2025, 1, 22)
    assert r.clean_title == "plan"

    # removing p1 leaves two spaces between "next" and "week"
    r = parse_task_input("next p1 week plan", now=now)
    assert r.priority == 1
    assert r.due_date == date(2025, 1, 22)
    assert r.detected_keywords.date == "next  week"
    assert r.clean_title == "plan"
