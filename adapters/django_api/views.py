"""
Secure Rooms Django Adapter Views
=================================
Pass-through HTTP view over core/secure_rooms scan handling.
"""

from __future__ import annotations

import base64
import binascii
import hmac
import json
import logging
from typing import Any

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from core.secure_rooms import process_scan

logger = logging.getLogger("ability.http")

_REQUIRED_SCAN_FIELDS = ("card_number", "reader_identifier", "controller_identifier")


def _json_error(reason: str, status: int = 400) -> JsonResponse:
    return JsonResponse({"response": "deny", "reason": reason}, status=status)


def _method_not_allowed() -> JsonResponse:
    return _json_error("Method not allowed for this endpoint.", status=405)


def _unauthorized() -> JsonResponse:
    response = _json_error("HTTP Basic: Access denied.", status=401)
    response["WWW-Authenticate"] = 'Basic realm="Application"'
    return response


def _basic_auth_matches(request: HttpRequest) -> bool:
    header = request.headers.get("Authorization", "")
    scheme, _, encoded = header.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        return False
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return False

    name, separator, password = decoded.partition(":")
    if not separator:
        return False

    config = settings.SECURE_ROOMS_API
    name_ok = hmac.compare_digest(name, config["BASIC_AUTH_NAME"])
    password_ok = hmac.compare_digest(password, config["BASIC_AUTH_PASSWORD"])
    return name_ok and password_ok


def _parse_scan_params(request: HttpRequest) -> dict[str, str]:
    if request.content_type == "application/json":
        if not request.body:
            body: Any = {}
        else:
            try:
                body = json.loads(request.body.decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError) as exc:
                raise ValueError("Request body must be valid JSON.") from exc
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object.")
    else:
        body = request.POST

    params = {}
    for name in _REQUIRED_SCAN_FIELDS:
        value = body.get(name)
        if value is None or str(value).strip() == "":
            raise ValueError(f"{name} is required.")
        params[name] = str(value).strip()
    return params


@csrf_exempt
def scan_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()

    if not _basic_auth_matches(request):
        logger.warning("Secure rooms scan with invalid credentials")
        return _unauthorized()

    try:
        params = _parse_scan_params(request)
    except ValueError as exc:
        return _json_error(str(exc), status=400)

    dependencies = build_dependencies()
    result = process_scan(
        card_number=params["card_number"],
        reader_identifier=params["reader_identifier"],
        controller_identifier=params["controller_identifier"],
        cardholders=dependencies.cardholders,
        card_readers=dependencies.card_readers,
        tablet_identifier=settings.SECURE_ROOMS_API["TABLET_IDENTIFIER"],
    )
    return JsonResponse(result.body, status=result.status)
