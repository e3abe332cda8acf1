"""
Billing - Public API
====================
"""

from core.billing.accounts import (
    ORDER_DETAIL_STATE_COMPLETE,
    OrderDetailRecord,
    accounts_receivable,
    facility_account_index,
    facility_order_details,
    is_cross_facility,
)

__all__ = [
    "ORDER_DETAIL_STATE_COMPLETE",
    "OrderDetailRecord",
    "is_cross_facility",
    "facility_order_details",
    "facility_account_index",
    "accounts_receivable",
]
