import logging

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_clock, get_rules
from ..nlp.parser import ParsedInput, parse_task_input
from ..nlp.rules import RuleRegistry
from ..schemas import DEFAULT_PRIORITY, TITLE_MAX_LENGTH, DetectedKeywordsOut, IngestIn, TaskDraftOut
from ..utils.clock import Clock
from ..utils.text import collapse_whitespace

logger = logging.getLogger(__name__)

router = APIRouter()


def _uniq_lower(names: list[str]) -> list[str]:
    cleaned = (n.strip().lstrip("@").lower() for n in names)
    # preserve order, remove dups
    return list(dict.fromkeys(n for n in cleaned if n))


def _merge_labels(payload: IngestIn, parsed: ParsedInput) -> list[str]:
    if payload.labels is not None:
        return _uniq_lower(payload.labels)
    dismissed = set(_uniq_lower(payload.dismiss_labels))
    return [label for label in parsed.labels if label not in dismissed]


@router.post("", response_model=TaskDraftOut)
def ingest(payload: IngestIn, clock: Clock = Depends(get_clock), rules: RuleRegistry = Depends(get_rules)):
    parsed = parse_task_input(payload.text, rules=rules, now=clock())

    title = parsed.clean_title or collapse_whitespace(payload.text)
    if not title:
        raise HTTPException(400, "Task title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise HTTPException(422, f"Task title is longer than {TITLE_MAX_LENGTH} characters")

    priority = payload.priority
    if priority is None and not payload.dismiss_priority:
        priority = parsed.priority
    due = payload.due
    if due is None and not payload.dismiss_due:
        due = parsed.due_date

    if payload.dismiss_priority or payload.dismiss_due or payload.dismiss_labels:
        logger.debug(
            "dismissed priority=%s due=%s labels=%s",
            payload.dismiss_priority,
            payload.dismiss_due,
            payload.dismiss_labels,
        )

    return TaskDraftOut(
        title=title,
        priority=priority or DEFAULT_PRIORITY,
        due=due,
        labels=_merge_labels(payload, parsed),
        label_color=rules.labels.default_color,
        detected_keywords=DetectedKeywordsOut.model_validate(parsed.detected_keywords),
    )
