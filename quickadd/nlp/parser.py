from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from ..utils.clock import system_clock
from ..utils.text import collapse_whitespace
from .extractors import extract_due_date, extract_labels, extract_priority
from .rules import DEFAULT_RULES, RuleRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectedKeywords:
    priority: str | None = None
    date: str | None = None
    labels: tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedInput:
    clean_title: str
    priority: int | None = None
    due_date: date | None = None
    labels: tuple[str, ...] = ()
    detected_keywords: DetectedKeywords = field(default_factory=DetectedKeywords)

    @property
    def has_attributes(self) -> bool:
        return self.priority is not None or self.due_date is not None or bool(self.labels)


def parse_task_input(text: str, *, rules: RuleRegistry = DEFAULT_RULES, now: datetime | None = None) -> ParsedInput:
    """
    Quick-add parser for a single line of task text:
    - one priority keyword (p1..p4, 'priority 2', high/medium/low/urgent)
    - one due date ('today', 'fri', '12/25', '2025-03-01', ...)
    - any number of @labels
    Matched text is stripped and the rest becomes the title.
    """
    now = now or system_clock()
    today = now.date()

    pr = extract_priority(text, rules.priority)
    dt = extract_due_date(pr.residual, rules, today)
    lb = extract_labels(dt.residual, rules.labels)

    parsed = ParsedInput(
        clean_title=collapse_whitespace(lb.residual),
        priority=pr.priority,
        due_date=dt.due_date,
        labels=lb.labels,
        detected_keywords=DetectedKeywords(priority=pr.keyword, date=dt.keyword, labels=lb.keywords),
    )
    if parsed.has_attributes:
        logger.debug(
            "parsed priority=%s due=%s (rule %s) labels=%s",
            parsed.priority,
            parsed.due_date,
            dt.rule,
            list(parsed.labels),
        )
    return parsed
