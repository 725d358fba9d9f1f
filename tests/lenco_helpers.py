"""Shared helpers for building Lenco API payloads in tests."""
from __future__ import annotations

import json
from typing import Any, Optional

import httpx

BASE_URL = "https://api.lenco.co/access/v2"
INITIATE_URL = f"{BASE_URL}/collections/mobile-money"
SUBMIT_OTP_URL = f"{BASE_URL}/collections/mobile-money/submit-otp"


def status_url(reference: str) -> str:
    return f"{BASE_URL}/collections/status/{reference}"


def envelope(status: Optional[str], reference: Optional[str] = "ref_server", **extra: Any) -> dict[str, Any]:
    """Build a Lenco API envelope around a collection ``data`` object."""
    data: dict[str, Any] = {"id": "col_123", "amount": "10.00", "currency": "ZMW", **extra}
    if status is not None:
        data["status"] = status
    if reference is not None:
        data["reference"] = reference
    return {"status": True, "message": "", "data": data}


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


class StatusRecorder:
    """Collects on_status_changed calls in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Optional[str], dict[str, Any]]] = []

    def __call__(self, status: Optional[str], payload: dict[str, Any]) -> None:
        self.calls.append((status, payload))

    @property
    def statuses(self) -> list[Optional[str]]:
        return [status for status, _ in self.calls]
