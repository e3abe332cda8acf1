"""
Ability - Immutable Actor, Resource and Rule Models
===================================================
Plain data handed to the grant set builder and the decision engine.

Nothing here loads or walks domain records: every identifier a rule
may test (own facility, related order's facility, journal rows, ...)
is resolved by the caller and carried on the ResourceInstance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping, Optional, Tuple, Union

from core.ability.constants import (
    ACCOUNT,
    ACCOUNT_OWNED_RESOURCES,
    BILLING_TAB_NAME,
    FACILITY,
    Verb,
)


def _frozen_ids(value: Optional[Iterable[Hashable]]) -> frozenset:
    if value is None:
        return frozenset()
    if isinstance(value, (str, bytes)):
        raise ValueError("membership ids must be an iterable of ids, not a string.")
    return frozenset(value)


# ══════════════════════════════════════════════════════════════
# ACTOR
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ActorSnapshot:
    """
    Role memberships of one actor, loaded by the caller before a check.

    Memberships are direct: being a manager of a facility says nothing
    about being an operator of it. None is accepted for any membership
    set and treated as empty.

    manageable_facility_ids defaults to the union of the operator,
    director and manager sets. Callers pass it explicitly when the actor
    oversees facilities without holding a role there (billing
    administrators).
    """

    actor_id: str
    is_global_administrator: bool = False
    is_billing_administrator: bool = False
    operator_facility_ids: frozenset = field(default_factory=frozenset)
    director_facility_ids: frozenset = field(default_factory=frozenset)
    manager_facility_ids: frozenset = field(default_factory=frozenset)
    account_administrator_account_ids: frozenset = field(default_factory=frozenset)
    display_name: str = ""
    manageable_facility_ids: Optional[frozenset] = None

    def __post_init__(self):
        if not self.actor_id or not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a non-empty string.")

        for name in (
            "operator_facility_ids",
            "director_facility_ids",
            "manager_facility_ids",
            "account_administrator_account_ids",
        ):
            object.__setattr__(self, name, _frozen_ids(getattr(self, name)))

        if self.manageable_facility_ids is None:
            manageable = (
                self.operator_facility_ids
                | self.director_facility_ids
                | self.manager_facility_ids
            )
        else:
            manageable = _frozen_ids(self.manageable_facility_ids)
        object.__setattr__(self, "manageable_facility_ids", manageable)

        object.__setattr__(
            self, "is_global_administrator", bool(self.is_global_administrator)
        )
        object.__setattr__(
            self, "is_billing_administrator", bool(self.is_billing_administrator)
        )


# ══════════════════════════════════════════════════════════════
# RESOURCE REFERENCES
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class GlobalWildcard:
    """Matches every resource. Only used as the subject of a rule."""

    def __repr__(self) -> str:
        return "GLOBAL_WILDCARD"


GLOBAL_WILDCARD = GlobalWildcard()


@dataclass(frozen=True)
class ResourceClass:
    """A resource type, e.g. ResourceClass("Order")."""

    name: str

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("resource class name must be a non-empty string.")

    def __str__(self) -> str:
        return self.name


BILLING_TAB = ResourceClass(BILLING_TAB_NAME)


@dataclass(frozen=True)
class ResourceInstance:
    """
    One concrete record.

    Fields:
        resource_class: Resource class name (e.g. "Order").
        id:             Record identifier.
        facility_id:    The record's own facility, if it has one.
        account_id:     The record's own account, if it has one.
        attributes:     Pre-resolved related data keyed by relation name.
                        Nested mappings for to-one relations, lists of
                        mappings for to-many relations, e.g.
                        {"order_detail": {"order": {"facility_id": 7}}}.
    """

    resource_class: str
    id: Hashable
    facility_id: Optional[Hashable] = None
    account_id: Optional[Hashable] = None
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if not self.resource_class or not isinstance(self.resource_class, str):
            raise ValueError("resource_class must be a non-empty string.")
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes or {}))
        )

    @property
    def is_facility(self) -> bool:
        return self.resource_class == FACILITY

    @property
    def is_account(self) -> bool:
        return self.resource_class == ACCOUNT

    @classmethod
    def facility(cls, facility_id: Hashable, **attributes: Any) -> ResourceInstance:
        """Factory for facilities. A facility is its own facility_id."""
        return cls(
            resource_class=FACILITY,
            id=facility_id,
            facility_id=facility_id,
            attributes=attributes,
        )

    @classmethod
    def account(
        cls,
        account_id: Hashable,
        facility_id: Optional[Hashable] = None,
        **attributes: Any,
    ) -> ResourceInstance:
        """Factory for accounts. An account is its own account_id."""
        return cls(
            resource_class=ACCOUNT,
            id=account_id,
            facility_id=facility_id,
            account_id=account_id,
            attributes=attributes,
        )

    def __str__(self) -> str:
        return f"{self.resource_class}#{self.id}"


ResourceRef = Union[GlobalWildcard, ResourceClass, ResourceInstance]


def resource_class_name(resource: ResourceRef) -> Optional[str]:
    if isinstance(resource, ResourceInstance):
        return resource.resource_class
    if isinstance(resource, ResourceClass):
        return resource.name
    return None


def owning_resource(target: Optional[ResourceRef]) -> Optional[ResourceRef]:
    """
    Contextual resource to build grants against when the caller gave none.

    Facilities, accounts and class-level targets stand for themselves.
    Account-owned records (statements, account users) resolve to their
    account first; other records to their facility first.
    """
    if target is None or not isinstance(target, ResourceInstance):
        return target
    if target.is_facility or target.is_account:
        return target
    if target.resource_class in ACCOUNT_OWNED_RESOURCES and target.account_id is not None:
        return ResourceInstance.account(target.account_id)
    if target.facility_id is not None:
        return ResourceInstance.facility(target.facility_id)
    if target.account_id is not None:
        return ResourceInstance.account(target.account_id)
    return target


# ══════════════════════════════════════════════════════════════
# RULES
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AttributeCondition:
    """
    Declarative path test: the value reached by `path` must be in `values`.

    Example: AttributeCondition(("order", "facility_id"), frozenset({1, 2}))
    """

    path: Tuple[str, ...]
    values: frozenset

    def __post_init__(self):
        if not isinstance(self.path, tuple) or not self.path:
            raise ValueError("path must be a non-empty tuple.")
        for segment in self.path:
            if not isinstance(segment, str) or not segment:
                raise ValueError("path segments must be non-empty strings.")
        object.__setattr__(self, "values", frozenset(self.values))

    def __str__(self) -> str:
        return f"{'.'.join(self.path)} IN {sorted(map(repr, self.values))}"


@dataclass(frozen=True)
class GrantRule:
    """
    One can/cannot statement.

    verbs containing MANAGE match every verb. An empty conditions tuple
    means the rule is unscoped. allowed=False is an explicit deny.
    """

    verbs: frozenset
    resource: Union[ResourceClass, GlobalWildcard]
    conditions: Tuple[AttributeCondition, ...] = ()
    allowed: bool = True

    def __post_init__(self):
        verbs = frozenset(self.verbs)
        if not verbs:
            raise ValueError("verbs must contain at least one value.")
        for verb in verbs:
            if not isinstance(verb, str) or not verb:
                raise ValueError("verbs must be non-empty strings.")
        object.__setattr__(self, "verbs", verbs)

        if not isinstance(self.resource, (ResourceClass, GlobalWildcard)):
            raise ValueError("rule resource must be ResourceClass or GLOBAL_WILDCARD.")

        if not isinstance(self.conditions, tuple):
            raise ValueError("conditions must be a tuple.")
        for condition in self.conditions:
            if not isinstance(condition, AttributeCondition):
                raise ValueError("conditions must be AttributeCondition values.")

        if not isinstance(self.allowed, bool):
            raise ValueError("allowed must be a bool.")

    @property
    def covers_all_verbs(self) -> bool:
        return Verb.MANAGE in self.verbs

    def describe(self) -> str:
        keyword = "can" if self.allowed else "cannot"
        verbs = ",".join(sorted(self.verbs))
        text = f"{keyword} [{verbs}] {self.resource!s}"
        if self.conditions:
            text += " where " + " AND ".join(str(c) for c in self.conditions)
        return text


GrantSet = Tuple[GrantRule, ...]
