"""
Ability - Role Classifier
=========================
Pure role-membership queries over an ActorSnapshot.

Absence of an actor, a resource, or a membership is always False.
"""

from __future__ import annotations

from typing import Optional

from core.ability.constants import ACCOUNT, FACILITY
from core.ability.models import ActorSnapshot, ResourceInstance


def _instance_id(resource: Optional[ResourceInstance], expect_class: str):
    if not isinstance(resource, ResourceInstance):
        return None
    if resource.resource_class != expect_class:
        return None
    return resource.id


def is_global_administrator(actor: Optional[ActorSnapshot]) -> bool:
    return actor is not None and actor.is_global_administrator


def is_billing_administrator(actor: Optional[ActorSnapshot]) -> bool:
    return actor is not None and actor.is_billing_administrator


def is_operator_of(
    actor: Optional[ActorSnapshot],
    facility: Optional[ResourceInstance],
) -> bool:
    facility_id = _instance_id(facility, FACILITY)
    if actor is None or facility_id is None:
        return False
    return facility_id in actor.operator_facility_ids


def is_facility_director_of(
    actor: Optional[ActorSnapshot],
    facility: Optional[ResourceInstance],
) -> bool:
    facility_id = _instance_id(facility, FACILITY)
    if actor is None or facility_id is None:
        return False
    return facility_id in actor.director_facility_ids


def is_manager_of(
    actor: Optional[ActorSnapshot],
    facility: Optional[ResourceInstance],
) -> bool:
    facility_id = _instance_id(facility, FACILITY)
    if actor is None or facility_id is None:
        return False
    return facility_id in actor.manager_facility_ids


def is_account_administrator_of(
    actor: Optional[ActorSnapshot],
    account: Optional[ResourceInstance],
) -> bool:
    account_id = _instance_id(account, ACCOUNT)
    if actor is None or account_id is None:
        return False
    return account_id in actor.account_administrator_account_ids
