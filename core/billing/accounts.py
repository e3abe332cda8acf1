"""
Billing - Facility Account Listing and Receivables
==================================================
Account index and accounts-receivable totals for a facility screen,
computed over records the caller already loaded.

The cross-facility pseudo facility (a Facility instance carrying
cross_facility=True) spans every facility the actor can see: all of
them for global and billing administrators, the actor's facility
scope otherwise. Its account index only lists accounts that belong to
no single facility.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Hashable, Iterable, Optional

from core.ability.models import ActorSnapshot, ResourceInstance
from core.ability.roles import is_billing_administrator, is_global_administrator
from core.ability.scope import manageable_facility_ids, scope_to_facilities

ORDER_DETAIL_STATE_COMPLETE = "complete"


@dataclass(frozen=True)
class OrderDetailRecord:
    order_detail_id: Hashable
    account_id: Hashable
    facility_id: Hashable
    total: Decimal
    state: str = ORDER_DETAIL_STATE_COMPLETE

    def __post_init__(self):
        if not isinstance(self.total, Decimal):
            raise ValueError("total must be Decimal.")

    @property
    def is_complete(self) -> bool:
        return self.state == ORDER_DETAIL_STATE_COMPLETE


def is_cross_facility(facility: Optional[ResourceInstance]) -> bool:
    if facility is None:
        return False
    return bool(facility.attributes.get("cross_facility", False))


def facility_order_details(
    actor: Optional[ActorSnapshot],
    facility: ResourceInstance,
    order_details: Iterable[OrderDetailRecord],
) -> list[OrderDetailRecord]:
    """Order details that belong to the facility screen."""
    if not is_cross_facility(facility):
        return [d for d in order_details if d.facility_id == facility.id]

    if is_global_administrator(actor) or is_billing_administrator(actor):
        return list(order_details)

    return list(scope_to_facilities(order_details, manageable_facility_ids(actor)))


def facility_account_index(
    actor: Optional[ActorSnapshot],
    facility: ResourceInstance,
    accounts: Iterable[ResourceInstance],
    order_details: Iterable[OrderDetailRecord],
) -> list[ResourceInstance]:
    """Accounts with orders at the facility, in the order given."""
    cross_facility = is_cross_facility(facility)
    account_ids = {
        d.account_id for d in facility_order_details(actor, facility, order_details)
    }

    listed = [account for account in accounts if account.id in account_ids]
    if cross_facility:
        listed = [account for account in listed if account.facility_id is None]
    return listed


def accounts_receivable(
    actor: Optional[ActorSnapshot],
    facility: ResourceInstance,
    order_details: Iterable[OrderDetailRecord],
) -> dict[Hashable, Decimal]:
    """Sum of completed order detail totals per account."""
    balances: dict[Hashable, Decimal] = {}
    for detail in facility_order_details(actor, facility, order_details):
        if not detail.is_complete:
            continue
        balances[detail.account_id] = (
            balances.get(detail.account_id, Decimal("0")) + detail.total
        )
    return balances
