"""Rule tables for the quick-add parser.

A ``RuleRegistry`` is built once (``DEFAULT_RULES``) and shared by every parse
call. It is frozen: adding vocabulary means building a new registry with
``RuleRegistry.extended`` or ``build_registry`` and passing that to
``parse_task_input``. Extractors only iterate these tables, so new keywords and
date patterns never need extractor changes.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from functools import partial
from types import MappingProxyType

from . import dates

PRIORITY_LEVELS = (1, 2, 3, 4)

DateResolver = Callable[[date], date]
DateTransform = Callable[[re.Match[str], date], date | None]


def normalize_keyword(text: str) -> str:
    return " ".join(text.lower().split())


def _word_pattern(alternatives: Iterable[str]) -> re.Pattern[str]:
    # longest first so "priority 1" wins over any shorter key at the same spot
    alts = sorted(alternatives, key=len, reverse=True)
    # words inside a phrase may be separated by any run of whitespace
    body = "|".join(r"\s+".join(re.escape(w) for w in a.split()) for a in alts)
    return re.compile(r"\b(?:" + body + r")\b", re.IGNORECASE)


@dataclass(frozen=True)
class PriorityRule:
    keywords: Mapping[str, int]
    pattern: re.Pattern[str]

    @classmethod
    def from_keywords(cls, keywords: Mapping[str, int]) -> PriorityRule:
        table = {normalize_keyword(k): v for k, v in keywords.items()}
        bad = {k: v for k, v in table.items() if v not in PRIORITY_LEVELS}
        if bad:
            raise ValueError(f"Priority values must be one of {PRIORITY_LEVELS}: {bad}")
        if not table:
            raise ValueError("Priority table must not be empty")
        return cls(keywords=MappingProxyType(table), pattern=_word_pattern(table))

    def lookup(self, keyword: str) -> int | None:
        return self.keywords.get(normalize_keyword(keyword))


@dataclass(frozen=True)
class DateKeywordRule:
    keyword: str
    resolve: DateResolver
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "keyword", normalize_keyword(self.keyword))
        object.__setattr__(self, "pattern", _word_pattern([self.keyword]))


@dataclass(frozen=True)
class DatePatternRule:
    name: str
    pattern: re.Pattern[str]
    transform: DateTransform


@dataclass(frozen=True)
class LabelRule:
    pattern: re.Pattern[str] = re.compile(r"@(\w+)")
    default_color: str = "#6366f1"


@dataclass(frozen=True)
class RuleRegistry:
    priority: PriorityRule
    date_keywords: tuple[DateKeywordRule, ...]
    date_patterns: tuple[DatePatternRule, ...]
    labels: LabelRule

    def extended(
        self,
        *,
        priority_keywords: Mapping[str, int] | None = None,
        date_keywords: Iterable[DateKeywordRule] = (),
        date_patterns: Iterable[DatePatternRule] = (),
    ) -> RuleRegistry:
        """New registry with extra rules appended after the existing ones."""
        priority = self.priority
        if priority_keywords:
            priority = PriorityRule.from_keywords({**self.priority.keywords, **priority_keywords})
        return replace(
            self,
            priority=priority,
            date_keywords=self.date_keywords + tuple(date_keywords),
            date_patterns=self.date_patterns + tuple(date_patterns),
        )


DEFAULT_PRIORITY_KEYWORDS: Mapping[str, int] = MappingProxyType({
    "p1": 1,
    "p2": 2,
    "p3": 3,
    "p4": 4,
    "priority 1": 1,
    "priority 2": 2,
    "priority 3": 3,
    "priority 4": 4,
    "high": 1,
    "medium": 2,
    "low": 3,
    "urgent": 1,
})


def _default_date_keywords() -> tuple[DateKeywordRule, ...]:
    rules = [
        DateKeywordRule("today", partial(dates.days_from, days=0)),
        DateKeywordRule("tomorrow", partial(dates.days_from, days=1)),
        DateKeywordRule("next week", partial(dates.days_from, days=7)),
    ]
    # full names first, then three-letter abbreviations
    for name in dates.WEEKDAYS[1:] + dates.WEEKDAYS[:1]:
        rules.append(DateKeywordRule(name, partial(dates.next_weekday, weekday=dates.WEEKDAYS.index(name))))
    for name in dates.WEEKDAYS[1:] + dates.WEEKDAYS[:1]:
        rules.append(DateKeywordRule(name[:3], partial(dates.next_weekday, weekday=dates.WEEKDAYS.index(name))))
    return tuple(rules)


# Most specific numeric format first; a transform returning None falls through.
DEFAULT_DATE_PATTERNS: tuple[DatePatternRule, ...] = (
    DatePatternRule("mm/dd/yyyy", re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{4})\b"), dates.parse_us_date),
    DatePatternRule("mm/dd/yy", re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{2})\b"), dates.parse_us_short_year),
    DatePatternRule("mm/dd", re.compile(r"\b(\d{1,2})/(\d{1,2})\b"), dates.parse_month_day),
    DatePatternRule("yyyy-mm-dd", re.compile(r"\b(\d{4})-(\d{1,2})-(\d{1,2})\b"), dates.parse_iso_date),
)


def build_registry(
    priority_keywords: Mapping[str, int] = DEFAULT_PRIORITY_KEYWORDS,
    date_keywords: Iterable[DateKeywordRule] | None = None,
    date_patterns: Iterable[DatePatternRule] = DEFAULT_DATE_PATTERNS,
    labels: LabelRule | None = None,
) -> RuleRegistry:
    return RuleRegistry(
        priority=PriorityRule.from_keywords(priority_keywords),
        date_keywords=tuple(date_keywords) if date_keywords is not None else _default_date_keywords(),
        date_patterns=tuple(date_patterns),
        labels=labels or LabelRule(),
    )


DEFAULT_RULES = build_registry()
