"""
Ability - Scope Resolver
========================
Facility ids an actor may list or search over.

Built only from the actor snapshot. Callers apply the result to their
own queries; scope_to_facilities is the in-memory equivalent for
records that are already loaded.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Optional, TypeVar

from core.ability.models import ActorSnapshot

T = TypeVar("T")


def manageable_facility_ids(actor: Optional[ActorSnapshot]) -> frozenset:
    """The actor's manageable facilities (the facility role union unless supplied)."""
    if actor is None:
        return frozenset()
    return actor.manageable_facility_ids


def scope_to_facilities(
    records: Iterable[T],
    facility_ids: Iterable[Hashable],
) -> Iterator[T]:
    """
    Yield the records whose facility_id is in facility_ids.

    An empty scope yields nothing. Records without a facility_id never
    match.
    """
    allowed = frozenset(facility_ids)
    if not allowed:
        return
    for record in records:
        facility_id = getattr(record, "facility_id", None)
        if facility_id is not None and facility_id in allowed:
            yield record
