"""
Recommendation Rule Engine
==========================
Ordered (predicate -> texts) rules evaluated over a calculator's facts.

Rules are data, not control flow:
- evaluated independently, in declaration order
- a triggered rule appends all of its texts at once
- when nothing triggers, the rule set's fallback texts are emitted

PRINCIPLE: same facts -> same recommendations, in the same order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

FALLBACK_RULE_ID = "fallback"


@dataclass(frozen=True)
class Rule:
    """A single trigger and the recommendations it contributes."""
    rule_id: str
    predicate: Callable[[Dict[str, Any]], bool]
    recommendations: Tuple[str, ...]


@dataclass(frozen=True)
class RuleSet:
    """Named, ordered rule list with an optional fallback."""
    name: str
    rules: Tuple[Rule, ...]
    fallback: Tuple[str, ...] = ()

    def __post_init__(self):
        ids = [r.rule_id for r in self.rules]
        if len(ids) != len(set(ids)):
            raise ValueError(f"RuleSet '{self.name}' has duplicate rule ids")
        if FALLBACK_RULE_ID in ids:
            raise ValueError(f"RuleSet '{self.name}': '{FALLBACK_RULE_ID}' is reserved")


@dataclass(frozen=True)
class RuleOutcome:
    """Recommendations in trigger order plus the ids of the rules that fired."""
    recommendations: Tuple[str, ...]
    triggered: Tuple[str, ...]


def evaluate_rules(rule_set: RuleSet, facts: Dict[str, Any]) -> RuleOutcome:
    """
    Evaluate every rule against facts.

    Args:
        rule_set: Ordered rules for one calculator
        facts: Computed factors the predicates read (scores, ratios, flags)

    Returns:
        RuleOutcome; the fallback shows up in `triggered` as "fallback"
    """
    recommendations: List[str] = []
    triggered: List[str] = []

    for rule in rule_set.rules:
        if rule.predicate(facts):
            triggered.append(rule.rule_id)
            recommendations.extend(rule.recommendations)

    if not triggered and rule_set.fallback:
        triggered.append(FALLBACK_RULE_ID)
        recommendations.extend(rule_set.fallback)

    logger.debug(f"RuleSet '{rule_set.name}' triggered {triggered}")
    return RuleOutcome(recommendations=tuple(recommendations), triggered=tuple(triggered))
