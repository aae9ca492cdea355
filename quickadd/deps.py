from .nlp.rules import DEFAULT_RULES, RuleRegistry
from .utils.clock import Clock, system_clock


def get_clock() -> Clock:
    return system_clock


def get_rules() -> RuleRegistry:
    return DEFAULT_RULES
