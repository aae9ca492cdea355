from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..utils.text import cut_spans
from .rules import LabelRule, PriorityRule, RuleRegistry


@dataclass(frozen=True)
class PriorityMatch:
    residual: str
    priority: int | None = None
    keyword: str | None = None


@dataclass(frozen=True)
class DateMatch:
    residual: str
    due_date: date | None = None
    keyword: str | None = None
    rule: str | None = None


@dataclass(frozen=True)
class LabelMatch:
    residual: str
    labels: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()


def extract_priority(text: str, rule: PriorityRule) -> PriorityMatch:
    """Take the leftmost priority keyword out of ``text``.

    Only that one occurrence is removed; a repeated keyword later in the line
    stays where it is.
    """
    m = rule.pattern.search(text)
    if not m:
        return PriorityMatch(residual=text)
    priority = rule.lookup(m.group(0))
    if priority is None:
        return PriorityMatch(residual=text)
    return PriorityMatch(residual=cut_spans(text, [m.span()]), priority=priority, keyword=m.group(0))


def extract_due_date(text: str, rules: RuleRegistry, today: date) -> DateMatch:
    """Find one due date: keywords in table order, then numeric patterns.

    A keyword hit removes every occurrence of that keyword. A pattern hit
    removes just the matched span. A pattern whose transform rejects the
    numbers (13/40, 2/30) falls through to the next pattern.
    """
    for kw in rules.date_keywords:
        hits = list(kw.pattern.finditer(text))
        if hits:
            return DateMatch(
                residual=cut_spans(text, [h.span() for h in hits]),
                due_date=kw.resolve(today),
                keyword=hits[0].group(0),
                rule=kw.keyword,
            )

    for pat in rules.date_patterns:
        m = pat.pattern.search(text)
        if not m:
            continue
        due = pat.transform(m, today)
        if due is None:
            continue
        return DateMatch(residual=cut_spans(text, [m.span()]), due_date=due, keyword=m.group(0), rule=pat.name)

    return DateMatch(residual=text)


def extract_labels(text: str, rule: LabelRule) -> LabelMatch:
    matches = list(rule.pattern.finditer(text))
    if not matches:
        return LabelMatch(residual=text)
    # preserve order, drop case-insensitive dups
    labels = tuple(dict.fromkeys(m.group(1).lower() for m in matches))
    return LabelMatch(
        residual=cut_spans(text, [m.span() for m in matches]),
        labels=labels,
        keywords=tuple(m.group(0) for m in matches),
    )
