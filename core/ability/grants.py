"""
Ability - Grant Set Builder
===========================
Builds the ordered can/cannot rule list for one actor, one contextual
resource and one calling context.

Order is significant. Rules are only ever appended; a later rule for
the same (verb, resource) pair wins at evaluation time. Within a
facility the operator rules come before the director and manager rules
so that the manager's show_problems re-allow lands after the
operator's deny.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from core.ability.constants import (
    ACCOUNT,
    ACCOUNT_ADMINISTRATOR_STATEMENT_VERBS,
    ACCOUNT_USER,
    DIRECTOR_SURVEYOR_VERBS,
    FACILITY,
    JOURNAL,
    MANAGER_FACILITY_VERBS,
    MANAGER_MANAGED_RESOURCES,
    OPERATOR_FACILITY_VERBS,
    OPERATOR_INDEXED_RESOURCES,
    OPERATOR_MANAGED_RESOURCES,
    ORDER,
    ORDER_DETAIL,
    RESERVATION,
    STATEMENT,
    SURVEYOR,
    USER,
    ContextHint,
    Verb,
)
from core.ability.models import (
    BILLING_TAB,
    GLOBAL_WILDCARD,
    ActorSnapshot,
    AttributeCondition,
    GrantRule,
    GrantSet,
    ResourceClass,
    ResourceInstance,
    ResourceRef,
)
from core.ability.roles import (
    is_account_administrator_of,
    is_billing_administrator,
    is_facility_director_of,
    is_global_administrator,
    is_manager_of,
    is_operator_of,
)

logger = logging.getLogger("ability.grants")


def _can(verbs: Iterable[str], resource_name: str, *conditions: AttributeCondition) -> GrantRule:
    return GrantRule(
        verbs=frozenset(verbs),
        resource=ResourceClass(resource_name),
        conditions=tuple(conditions),
    )


def _can_all(verbs: Iterable[str], resource_names: Iterable[str]) -> List[GrantRule]:
    return [_can(verbs, name) for name in resource_names]


def _cannot(verbs: Iterable[str], resource_name: str) -> GrantRule:
    return GrantRule(
        verbs=frozenset(verbs),
        resource=ResourceClass(resource_name),
        allowed=False,
    )


# ══════════════════════════════════════════════════════════════
# RULE GROUPS
# ══════════════════════════════════════════════════════════════

def _billing_rules(actor: ActorSnapshot) -> List[GrantRule]:
    facility_ids = actor.manageable_facility_ids
    manage = (Verb.MANAGE,)

    return [
        _can(manage, ORDER, AttributeCondition(("facility_id",), facility_ids)),
        _can(
            manage,
            ORDER_DETAIL,
            AttributeCondition(("order", "facility_id"), facility_ids),
        ),
        _can(
            manage,
            RESERVATION,
            AttributeCondition(("order_detail", "order", "facility_id"), facility_ids),
        ),
        _can(manage, JOURNAL, AttributeCondition(("facility_id",), facility_ids)),
        # Multi-facility journals: no facility of their own, any row counts.
        _can(
            manage,
            JOURNAL,
            AttributeCondition(("facility_id",), frozenset({None})),
            AttributeCondition(
                ("journal_rows", "order_detail", "order", "facility_id"),
                facility_ids,
            ),
        ),
        _can(manage, ACCOUNT),
    ]


def _operator_rules(context: Optional[ContextHint]) -> List[GrantRule]:
    rules = _can_all((Verb.MANAGE,), OPERATOR_MANAGED_RESOURCES)
    if context == ContextHint.FACILITY_USER_MANAGEMENT:
        rules.append(_can((Verb.MANAGE,), USER))
    rules.append(_cannot((Verb.SHOW_PROBLEMS,), ORDER))
    rules.append(_can(OPERATOR_FACILITY_VERBS, FACILITY))
    rules.extend(_can_all((Verb.INDEX,), OPERATOR_INDEXED_RESOURCES))
    return rules


def _director_rules() -> List[GrantRule]:
    return [_can(DIRECTOR_SURVEYOR_VERBS, SURVEYOR)]


def _manager_rules(context: Optional[ContextHint]) -> List[GrantRule]:
    rules = _can_all((Verb.MANAGE,), MANAGER_MANAGED_RESOURCES)
    if context == ContextHint.FACILITY_USER_MANAGEMENT:
        rules.append(_can((Verb.MANAGE,), USER))
    rules.append(_can(MANAGER_FACILITY_VERBS, FACILITY))
    rules.append(_can((Verb.SHOW_PROBLEMS,), ORDER))
    return rules


def _facility_rules(
    actor: ActorSnapshot,
    facility: ResourceInstance,
    context: Optional[ContextHint],
) -> List[GrantRule]:
    rules = [_can((Verb.COMPLETE,), SURVEYOR)]

    if is_operator_of(actor, facility):
        rules.extend(_operator_rules(context))

    if is_facility_director_of(actor, facility):
        rules.extend(_director_rules())

    if is_manager_of(actor, facility):
        rules.extend(_manager_rules(context))

    return rules


def _account_rules(actor: ActorSnapshot, account: ResourceInstance) -> List[GrantRule]:
    if not is_account_administrator_of(actor, account):
        return []

    this_account = frozenset({account.id})
    return [
        _can((Verb.MANAGE,), ACCOUNT, AttributeCondition(("id",), this_account)),
        _can(
            (Verb.MANAGE,),
            ACCOUNT_USER,
            AttributeCondition(("account_id",), this_account),
        ),
        _can(
            ACCOUNT_ADMINISTRATOR_STATEMENT_VERBS,
            STATEMENT,
            AttributeCondition(("account_id",), this_account),
        ),
    ]


# ══════════════════════════════════════════════════════════════
# BUILDER
# ══════════════════════════════════════════════════════════════

def build_grant_set(
    actor: Optional[ActorSnapshot],
    resource: Optional[ResourceRef],
    context: Optional[ContextHint] = None,
) -> GrantSet:
    """
    Build the ordered grant set for actor against the contextual resource.

    resource is the record the calling screen is about (a facility, an
    account, BILLING_TAB, ...), not necessarily the record being checked.
    """
    if actor is None:
        return tuple()

    if is_global_administrator(actor):
        return (GrantRule(verbs=frozenset({Verb.MANAGE}), resource=GLOBAL_WILDCARD),)

    rules: List[GrantRule] = []

    if actor.manageable_facility_ids and context == ContextHint.FACILITY_LISTING:
        rules.append(_can((Verb.LIST,), FACILITY))

    if resource is None:
        logger.debug(
            "No contextual resource for actor %s; %d rule(s) built",
            actor.actor_id,
            len(rules),
        )
        return tuple(rules)

    if resource == BILLING_TAB or is_billing_administrator(actor):
        rules.extend(_billing_rules(actor))

    if isinstance(resource, ResourceInstance):
        if resource.is_facility:
            rules.extend(_facility_rules(actor, resource, context))
        elif resource.is_account:
            rules.extend(_account_rules(actor, resource))

    logger.debug(
        "Built %d rule(s) for actor %s on %s (context=%s)",
        len(rules),
        actor.actor_id,
        resource,
        None if context is None else context.value,
    )
    return tuple(rules)
