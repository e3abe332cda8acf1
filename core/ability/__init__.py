"""
Ability - Public API
====================
Resource-scoped, role-based authorization for facilities and accounts.
"""

from core.ability.constants import ContextHint, Verb
from core.ability.evaluator import Decision, can, evaluate
from core.ability.exceptions import AbilityError, AccessDenied
from core.ability.grants import build_grant_set
from core.ability.models import (
    BILLING_TAB,
    GLOBAL_WILDCARD,
    ActorSnapshot,
    AttributeCondition,
    GrantRule,
    GrantSet,
    ResourceClass,
    ResourceInstance,
    owning_resource,
)
from core.ability.roles import (
    is_account_administrator_of,
    is_billing_administrator,
    is_facility_director_of,
    is_global_administrator,
    is_manager_of,
    is_operator_of,
)
from core.ability.scope import manageable_facility_ids, scope_to_facilities
from core.ability.service import Ability, authorize, decide, scope_facilities

__all__ = [
    # Vocabulary
    "Verb",
    "ContextHint",
    # Models
    "ActorSnapshot",
    "ResourceClass",
    "ResourceInstance",
    "GLOBAL_WILDCARD",
    "BILLING_TAB",
    "AttributeCondition",
    "GrantRule",
    "GrantSet",
    "owning_resource",
    # Role classifier
    "is_global_administrator",
    "is_billing_administrator",
    "is_operator_of",
    "is_facility_director_of",
    "is_manager_of",
    "is_account_administrator_of",
    # Builder / engine / scope
    "build_grant_set",
    "Decision",
    "evaluate",
    "can",
    "manageable_facility_ids",
    "scope_to_facilities",
    # Entry points
    "Ability",
    "decide",
    "authorize",
    "scope_facilities",
    # Errors
    "AbilityError",
    "AccessDenied",
]
