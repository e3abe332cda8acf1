"""
Ability - Exceptions
====================
Decision functions never raise for unknown input. These errors exist
for callers that choose to escalate a deny.
"""

from __future__ import annotations


class AbilityError(Exception):
    """Base error for the ability package."""
    pass


class AccessDenied(AbilityError):
    """Raised by authorize() when the decision is a deny."""

    def __init__(self, actor_id: str, verb: str, target: str, reason: str = ""):
        self.actor_id = actor_id
        self.verb = verb
        self.target = target
        self.reason = reason
        super().__init__(
            f"Actor '{actor_id}' is not authorized to {verb} {target}."
        )
