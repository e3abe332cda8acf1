"""
Secure Rooms - Account Resolution
=================================
Which accounts a cardholder may charge at a reader.

Not an authorization decision: no facility scoping happens here. One
or more linked accounts become a choice for the cardholder, none is a
deny.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from core.ability.models import ActorSnapshot
from core.secure_rooms.models import AccountSummary

logger = logging.getLogger("ability.secure_rooms")

NO_ACCOUNTS_REASON = "No accounts found"


@dataclass(frozen=True)
class SelectAccount:
    accounts: tuple[AccountSummary, ...]

    def __post_init__(self):
        if not isinstance(self.accounts, tuple) or not self.accounts:
            raise ValueError("SelectAccount requires a non-empty accounts tuple.")

    @property
    def has_multiple(self) -> bool:
        return len(self.accounts) > 1


@dataclass(frozen=True)
class Deny:
    reason: str

    def __post_init__(self):
        if not self.reason or not isinstance(self.reason, str):
            raise ValueError("reason must be a non-empty string.")


AccountResolution = Union[SelectAccount, Deny]


def resolve_accounts_for_actor(
    actor: Optional[ActorSnapshot],
    accounts: Optional[Iterable[AccountSummary]],
) -> AccountResolution:
    linked = tuple(accounts or ())
    actor_id = "unknown" if actor is None else actor.actor_id

    if actor is None or not linked:
        logger.info("Secure room deny for actor %s: %s", actor_id, NO_ACCOUNTS_REASON)
        return Deny(reason=NO_ACCOUNTS_REASON)

    logger.debug("Actor %s offered %d account(s)", actor_id, len(linked))
    return SelectAccount(accounts=linked)
