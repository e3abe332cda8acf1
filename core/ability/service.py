"""
Ability - Caller Entry Points
=============================
decide / authorize / scope_facilities, plus Ability for callers that
run several checks against the same actor and contextual resource
within one request.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.ability.constants import ContextHint
from core.ability.evaluator import Decision, evaluate
from core.ability.exceptions import AccessDenied
from core.ability.grants import build_grant_set
from core.ability.models import ActorSnapshot, GrantSet, ResourceRef, owning_resource
from core.ability.scope import manageable_facility_ids

logger = logging.getLogger("ability.decisions")


class Ability:
    """
    A grant set bound to one actor, contextual resource and context.

    Build one per request. It holds no mutable state and may be shared
    between threads handling that request.

    Usage:
        ability = Ability(actor, ResourceInstance.facility(7), ContextHint.GENERAL)
        ability.can(Verb.SHOW, order)
    """

    __slots__ = ("_actor", "_resource", "_context", "_grant_set")

    def __init__(
        self,
        actor: Optional[ActorSnapshot],
        resource: Optional[ResourceRef],
        context: Optional[ContextHint] = None,
    ):
        self._actor = actor
        self._resource = resource
        self._context = context
        self._grant_set = build_grant_set(actor, resource, context)

    @property
    def actor(self) -> Optional[ActorSnapshot]:
        return self._actor

    @property
    def resource(self) -> Optional[ResourceRef]:
        return self._resource

    @property
    def context(self) -> Optional[ContextHint]:
        return self._context

    @property
    def grant_set(self) -> GrantSet:
        return self._grant_set

    def evaluate(self, verb: str, target: Optional[ResourceRef]) -> Decision:
        return evaluate(self._grant_set, verb, target)

    def can(self, verb: str, target: Optional[ResourceRef]) -> bool:
        return self.evaluate(verb, target).allowed

    def cannot(self, verb: str, target: Optional[ResourceRef]) -> bool:
        return not self.can(verb, target)

    def authorize(self, verb: str, target: Optional[ResourceRef]) -> Decision:
        decision = self.evaluate(verb, target)
        if not decision.allowed:
            actor_id = "anonymous" if self._actor is None else self._actor.actor_id
            logger.info(
                "Access denied: actor=%s verb=%s target=%s reason=%s",
                actor_id,
                verb,
                decision.target,
                decision.reason,
            )
            raise AccessDenied(actor_id, verb, decision.target, decision.reason)
        return decision


def decide(
    actor: Optional[ActorSnapshot],
    verb: str,
    target: Optional[ResourceRef],
    context: Optional[ContextHint] = None,
    resource: Optional[ResourceRef] = None,
) -> bool:
    """
    Allow or deny verb on target.

    resource is the contextual resource grants are built against. When
    omitted it is the target's owning facility or account (see
    owning_resource).
    """
    if resource is None:
        resource = owning_resource(target)
    return Ability(actor, resource, context).can(verb, target)


def authorize(
    actor: Optional[ActorSnapshot],
    verb: str,
    target: Optional[ResourceRef],
    context: Optional[ContextHint] = None,
    resource: Optional[ResourceRef] = None,
) -> Decision:
    """Same as decide() but raises AccessDenied on deny."""
    if resource is None:
        resource = owning_resource(target)
    return Ability(actor, resource, context).authorize(verb, target)


def scope_facilities(actor: Optional[ActorSnapshot]) -> frozenset:
    return manageable_facility_ids(actor)
