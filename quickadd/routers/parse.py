from datetime import date

from fastapi import APIRouter, Depends

from ..deps import get_clock, get_rules
from ..nlp.dates import describe_due_date
from ..nlp.parser import ParsedInput, parse_task_input
from ..nlp.rules import RuleRegistry
from ..schemas import ChipOut, ParsedInputOut, ParseIn
from ..utils.clock import Clock

router = APIRouter()


def _build_chips(parsed: ParsedInput, today: date, rules: RuleRegistry) -> list[ChipOut]:
    kw = parsed.detected_keywords
    chips: list[ChipOut] = []
    if parsed.priority is not None:
        chips.append(
            ChipOut(kind="priority", text=f"Priority {parsed.priority}", value=str(parsed.priority), keyword=kw.priority)
        )
    if parsed.due_date is not None:
        chips.append(
            ChipOut(
                kind="date",
                text=describe_due_date(parsed.due_date, today),
                value=parsed.due_date.isoformat(),
                keyword=kw.date,
            )
        )
    for label in parsed.labels:
        chips.append(
            ChipOut(kind="label", text=f"@{label}", value=label, keyword=f"@{label}", color=rules.labels.default_color)
        )
    return chips


@router.post("", response_model=ParsedInputOut)
def parse(payload: ParseIn, clock: Clock = Depends(get_clock), rules: RuleRegistry = Depends(get_rules)):
    now = clock()
    parsed = parse_task_input(payload.text, rules=rules, now=now)
    out = ParsedInputOut.model_validate(parsed)
    out.chips = _build_chips(parsed, now.date(), rules)
    return out
