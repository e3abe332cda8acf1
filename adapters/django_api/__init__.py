"""
Secure rooms Django HTTP adapter.
Thin framework glue over core/secure_rooms.
"""

from adapters.django_api.wiring import (
    DEV_CONTROLLER_NUMBER,
    DEV_MULTI_ACCOUNT_CARD,
    DEV_NO_ACCOUNT_CARD,
    DEV_READER_NUMBER,
    DEV_SINGLE_ACCOUNT_CARD,
    SecureRoomsDependencies,
    build_dependencies,
)

__all__ = [
    "DEV_SINGLE_ACCOUNT_CARD",
    "DEV_MULTI_ACCOUNT_CARD",
    "DEV_NO_ACCOUNT_CARD",
    "DEV_READER_NUMBER",
    "DEV_CONTROLLER_NUMBER",
    "SecureRoomsDependencies",
    "build_dependencies",
]
