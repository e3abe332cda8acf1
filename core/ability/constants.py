"""
Ability - Verbs, Resource Classes and Role Resource Sets
========================================================
Closed vocabulary used by the grant set builder.
"""

from __future__ import annotations

from enum import Enum


# ══════════════════════════════════════════════════════════════
# VERBS
# ══════════════════════════════════════════════════════════════

class Verb:
    """
    Known verbs.

    MANAGE is the wildcard: a rule granting it covers every other verb.
    Verbs outside this list are accepted by the engine and only ever
    match MANAGE rules.
    """

    MANAGE = "manage"
    LIST = "list"
    SHOW = "show"
    CREATE = "create"
    UPDATE = "update"
    SUSPEND = "suspend"
    UNSUSPEND = "unsuspend"
    INDEX = "index"
    SCHEDULE = "schedule"
    AGENDA = "agenda"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    SHOW_PROBLEMS = "show_problems"
    COMPLETE = "complete"
    USER_SEARCH = "user_search"
    USER_ACCOUNTS = "user_accounts"
    STATEMENTS = "statements"
    SHOW_STATEMENT = "show_statement"


# ══════════════════════════════════════════════════════════════
# RESOURCE CLASS NAMES
# ══════════════════════════════════════════════════════════════

ACCOUNT = "Account"
ACCOUNT_PRICE_GROUP_MEMBER = "AccountPriceGroupMember"
ACCOUNT_USER = "AccountUser"
BUNDLE = "Bundle"
BUNDLE_PRODUCT = "BundleProduct"
FACILITY = "Facility"
FACILITY_ACCOUNT = "FacilityAccount"
FILE_UPLOAD = "FileUpload"
INSTRUMENT = "Instrument"
INSTRUMENT_PRICE_POLICY = "InstrumentPricePolicy"
ITEM = "Item"
ITEM_PRICE_POLICY = "ItemPricePolicy"
JOURNAL = "Journal"
ORDER = "Order"
ORDER_DETAIL = "OrderDetail"
ORDER_STATUS = "OrderStatus"
PRICE_GROUP = "PriceGroup"
PRICE_GROUP_PRODUCT = "PriceGroupProduct"
PRODUCT = "Product"
PRODUCT_ACCESS_GROUP = "ProductAccessGroup"
PRODUCT_ACCESSORY = "ProductAccessory"
PRODUCT_USER = "ProductUser"
REPORTS = "Reports"
RESERVATION = "Reservation"
SCHEDULE_RULE = "ScheduleRule"
SERVICE = "Service"
SERVICE_PRICE_POLICY = "ServicePricePolicy"
STATEMENT = "Statement"
SURVEYOR = "Surveyor"
USER = "User"
USER_PRICE_GROUP_MEMBER = "UserPriceGroupMember"

BILLING_TAB_NAME = "billing_tab"


# ══════════════════════════════════════════════════════════════
# CALLING CONTEXTS
# ══════════════════════════════════════════════════════════════

class ContextHint(Enum):
    """The subsystem asking for a decision."""
    FACILITY_LISTING = "facilities"
    USER_MANAGEMENT = "users"
    FACILITY_USER_MANAGEMENT = "facility_users"
    FACILITY_ACCOUNTS = "facility_accounts"
    KIOSK_RESERVATIONS = "kiosk_reservations"
    SECURE_ROOMS = "secure_rooms"
    GENERAL = "general"


# ══════════════════════════════════════════════════════════════
# ROLE RESOURCE SETS (order preserved for deterministic rule output)
# ══════════════════════════════════════════════════════════════

OPERATOR_MANAGED_RESOURCES = (
    ACCOUNT_PRICE_GROUP_MEMBER,
    SERVICE,
    BUNDLE_PRODUCT,
    BUNDLE,
    ORDER_DETAIL,
    ORDER,
    RESERVATION,
    INSTRUMENT,
    ITEM,
    PRODUCT_USER,
    PRODUCT,
    PRODUCT_ACCESSORY,
    USER_PRICE_GROUP_MEMBER,
)

OPERATOR_INDEXED_RESOURCES = (
    INSTRUMENT_PRICE_POLICY,
    ITEM_PRICE_POLICY,
    SCHEDULE_RULE,
    SERVICE_PRICE_POLICY,
)

OPERATOR_FACILITY_VERBS = (Verb.SCHEDULE, Verb.AGENDA, Verb.LIST)

DIRECTOR_SURVEYOR_VERBS = (Verb.ACTIVATE, Verb.DEACTIVATE)

MANAGER_MANAGED_RESOURCES = (
    ACCOUNT_USER,
    ACCOUNT,
    FACILITY_ACCOUNT,
    JOURNAL,
    STATEMENT,
    FILE_UPLOAD,
    INSTRUMENT_PRICE_POLICY,
    ITEM_PRICE_POLICY,
    ORDER_STATUS,
    PRICE_GROUP,
    REPORTS,
    SCHEDULE_RULE,
    SERVICE_PRICE_POLICY,
    PRICE_GROUP_PRODUCT,
    PRODUCT_ACCESS_GROUP,
)

MANAGER_FACILITY_VERBS = (Verb.UPDATE, Verb.MANAGE)

ACCOUNT_ADMINISTRATOR_STATEMENT_VERBS = (
    Verb.SHOW,
    Verb.SUSPEND,
    Verb.UNSUSPEND,
    Verb.USER_SEARCH,
    Verb.USER_ACCOUNTS,
    Verb.STATEMENTS,
    Verb.SHOW_STATEMENT,
    Verb.INDEX,
)

# Records whose default contextual resource is their account, not their facility.
ACCOUNT_OWNED_RESOURCES = (ACCOUNT, ACCOUNT_USER, STATEMENT)
