"""
Ability - Decision Engine
=========================
Last-match-wins evaluation of a grant set against one (verb, target).

Every rule is scanned; the polarity of the last matching rule is the
answer, so a later cannot overrides an earlier can (and vice versa).
No match is a deny. Unknown verbs and resource types match nothing
except MANAGE / GLOBAL_WILDCARD rules and never raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Tuple

from core.ability.models import (
    AttributeCondition,
    GlobalWildcard,
    GrantRule,
    GrantSet,
    ResourceClass,
    ResourceInstance,
    ResourceRef,
    resource_class_name,
)

logger = logging.getLogger("ability.decisions")

_MISSING = object()
_INSTANCE_FIELDS = frozenset({"id", "facility_id", "account_id"})


@dataclass(frozen=True)
class Decision:
    allowed: bool
    verb: str
    target: str
    rule: Optional[GrantRule] = None
    reason: str = ""


# ══════════════════════════════════════════════════════════════
# PATH CONDITIONS
# ══════════════════════════════════════════════════════════════

def _walk(value: Any, path: Tuple[str, ...]) -> Iterator[Any]:
    if value is _MISSING:
        return
    if isinstance(value, Mapping):
        if path:
            yield from _walk(value.get(path[0], _MISSING), path[1:])
        return
    if isinstance(value, (list, tuple, set, frozenset)):
        # to-many relation: each element is walked with the same remaining path
        for item in value:
            yield from _walk(item, path)
        return
    if not path:
        yield value


def path_values(instance: ResourceInstance, path: Tuple[str, ...]) -> Tuple[Any, ...]:
    """All leaf values reachable from instance along path."""
    head, rest = path[0], path[1:]
    if head in _INSTANCE_FIELDS:
        start = getattr(instance, head)
    else:
        start = instance.attributes.get(head, _MISSING)
    return tuple(_walk(start, rest))


def condition_holds(condition: AttributeCondition, instance: ResourceInstance) -> bool:
    for value in path_values(instance, condition.path):
        try:
            if value in condition.values:
                return True
        except TypeError:
            continue
    return False


# ══════════════════════════════════════════════════════════════
# MATCHING
# ══════════════════════════════════════════════════════════════

def _verb_matches(rule: GrantRule, verb: str) -> bool:
    return rule.covers_all_verbs or verb in rule.verbs


def _resource_matches(rule: GrantRule, target: ResourceRef) -> bool:
    if isinstance(rule.resource, GlobalWildcard):
        return True
    name = resource_class_name(target)
    return name is not None and name == rule.resource.name


def _scope_matches(rule: GrantRule, target: ResourceRef) -> bool:
    if not rule.conditions:
        return True
    if isinstance(target, ResourceClass):
        # class-level checks ask "could any record match", conditions aside
        return True
    if not isinstance(target, ResourceInstance):
        return False
    return all(condition_holds(c, target) for c in rule.conditions)


def rule_matches(rule: GrantRule, verb: str, target: ResourceRef) -> bool:
    return (
        _verb_matches(rule, verb)
        and _resource_matches(rule, target)
        and _scope_matches(rule, target)
    )


# ══════════════════════════════════════════════════════════════
# EVALUATION
# ══════════════════════════════════════════════════════════════

def evaluate(grant_set: GrantSet, verb: str, target: Optional[ResourceRef]) -> Decision:
    """Evaluate verb on target. The last matching rule decides."""
    target_text = str(target)

    if target is None or not isinstance(verb, str) or not verb:
        return Decision(
            allowed=False,
            verb=str(verb),
            target=target_text,
            reason="No verb or target to evaluate.",
        )

    winner: Optional[GrantRule] = None
    for rule in grant_set:
        if rule_matches(rule, verb, target):
            winner = rule

    if winner is None:
        decision = Decision(
            allowed=False,
            verb=verb,
            target=target_text,
            reason="No rule matched.",
        )
    else:
        decision = Decision(
            allowed=winner.allowed,
            verb=verb,
            target=target_text,
            rule=winner,
            reason=winner.describe(),
        )

    logger.debug(
        "%s %s on %s (%s)",
        "ALLOW" if decision.allowed else "DENY",
        verb,
        target_text,
        decision.reason,
    )
    return decision


def can(grant_set: GrantSet, verb: str, target: Optional[ResourceRef]) -> bool:
    return evaluate(grant_set, verb, target).allowed
