"""
Tests for core.billing — Facility account index and receivables.
"""

from decimal import Decimal

import pytest

from core.ability import ActorSnapshot, ResourceInstance
from core.billing import (
    OrderDetailRecord,
    accounts_receivable,
    facility_account_index,
    facility_order_details,
    is_cross_facility,
)


FACILITY = ResourceInstance.facility(1)
CROSS_FACILITY = ResourceInstance.facility("all", cross_facility=True)

SHARED_ACCOUNT = ResourceInstance.account(10)
LOCAL_ACCOUNT = ResourceInstance.account(20, facility_id=1)
OTHER_ACCOUNT = ResourceInstance.account(30)

DETAILS = [
    OrderDetailRecord(1, account_id=10, facility_id=1, total=Decimal("10.00")),
    OrderDetailRecord(2, account_id=10, facility_id=1, total=Decimal("2.50")),
    OrderDetailRecord(3, account_id=20, facility_id=1, total=Decimal("7.00")),
    OrderDetailRecord(4, account_id=30, facility_id=2, total=Decimal("5.00")),
    OrderDetailRecord(5, account_id=20, facility_id=1, total=Decimal("99.00"), state="new"),
]


def _actor(**kwargs) -> ActorSnapshot:
    return ActorSnapshot(actor_id="user-1", **kwargs)


class TestOrderDetails:
    def test_single_facility(self):
        details = facility_order_details(_actor(), FACILITY, DETAILS)
        assert [d.order_detail_id for d in details] == [1, 2, 3, 5]

    def test_cross_facility_for_billing_administrator(self):
        details = facility_order_details(
            _actor(is_billing_administrator=True), CROSS_FACILITY, DETAILS
        )
        assert len(details) == len(DETAILS)

    def test_cross_facility_scoped_for_staff(self):
        details = facility_order_details(
            _actor(manager_facility_ids={2}), CROSS_FACILITY, DETAILS
        )
        assert [d.order_detail_id for d in details] == [4]

    def test_cross_facility_without_roles_is_empty(self):
        assert facility_order_details(_actor(), CROSS_FACILITY, DETAILS) == []

    def test_cross_facility_flag(self):
        assert is_cross_facility(CROSS_FACILITY)
        assert not is_cross_facility(FACILITY)
        assert not is_cross_facility(None)

    def test_total_must_be_decimal(self):
        with pytest.raises(ValueError):
            OrderDetailRecord(9, account_id=1, facility_id=1, total=1.5)


class TestAccountIndex:
    def test_accounts_with_orders_at_facility(self):
        accounts = [SHARED_ACCOUNT, LOCAL_ACCOUNT, OTHER_ACCOUNT]
        listed = facility_account_index(_actor(), FACILITY, accounts, DETAILS)
        assert listed == [SHARED_ACCOUNT, LOCAL_ACCOUNT]

    def test_cross_facility_lists_only_shared_accounts(self):
        accounts = [SHARED_ACCOUNT, LOCAL_ACCOUNT, OTHER_ACCOUNT]
        listed = facility_account_index(
            _actor(is_global_administrator=True), CROSS_FACILITY, accounts, DETAILS
        )
        assert listed == [SHARED_ACCOUNT, OTHER_ACCOUNT]


class TestAccountsReceivable:
    def test_sums_completed_details(self):
        balances = accounts_receivable(_actor(), FACILITY, DETAILS)
        assert balances == {10: Decimal("12.50"), 20: Decimal("7.00")}

    def test_cross_facility_scope(self):
        balances = accounts_receivable(
            _actor(operator_facility_ids={2}), CROSS_FACILITY, DETAILS
        )
        assert balances == {30: Decimal("5.00")}
