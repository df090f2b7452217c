# gateway/client.py
"""
HTTP client for the hosted payment gateway.

Both gateway calls (request + verify) are plain JSON POSTs. Transport problems
never escape this module: they come back as a ``GatewayResponse`` whose result
is ``TRANSPORT_FAILURE`` so the initiator and the callback handler only ever
branch on the result code.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from .codes import SUCCESS, TRANSPORT_FAILURE
from .config import GatewayConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewayResponse:
    result: int
    track_id: Optional[str] = None
    ref_number: Optional[str] = None
    amount: Optional[int] = None
    message: str = ""
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.result == SUCCESS

    @property
    def transport_failed(self) -> bool:
        return self.result == TRANSPORT_FAILURE

    @classmethod
    def transport_failure(cls, reason: str = "") -> "GatewayResponse":
        return cls(result=TRANSPORT_FAILURE, message=reason)

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> "GatewayResponse":
        track_id = body.get("trackId")
        ref_number = body.get("refNumber")
        amount = body.get("amount")
        return cls(
            result=int(body["result"]),
            track_id=str(track_id) if track_id not in (None, "") else None,
            ref_number=str(ref_number) if ref_number not in (None, "") else None,
            amount=int(amount) if isinstance(amount, (int, float)) and math.isfinite(amount) else None,
            message=str(body.get("message") or ""),
            raw=body,
        )


class GatewayClient:
    def __init__(self, config: GatewayConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def send_request(self, endpoint: str, payload: Dict[str, Any]) -> GatewayResponse:
        """POST ``payload`` as JSON to ``endpoint`` and decode the reply."""
        try:
            response = self.session.post(
                endpoint,
                json=payload,
                headers={"Accept": "application/json"},
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Gateway call to %s failed: %s", endpoint, exc)
            return GatewayResponse.transport_failure(str(exc))

        try:
            body = response.json()
        except ValueError:
            logger.error(
                "Gateway call to %s returned HTTP %s with a non-JSON body",
                endpoint,
                response.status_code,
            )
            return GatewayResponse.transport_failure(f"HTTP {response.status_code}")

        # A non-2xx reply still counts when it carries a readable result code
        if not isinstance(body, dict) or not _has_result(body):
            logger.error(
                "Gateway call to %s returned HTTP %s without a result code: %r",
                endpoint,
                response.status_code,
                body,
            )
            return GatewayResponse.transport_failure(f"HTTP {response.status_code}")

        decoded = GatewayResponse.from_body(body)
        if not decoded.ok:
            logger.warning("Gateway call to %s returned result=%s", endpoint, decoded.result)
        return decoded

    def request_payment(self, payload: Dict[str, Any]) -> GatewayResponse:
        return self.send_request(self.config.request_url, payload)

    def verify(self, track_id: Any) -> GatewayResponse:
        payload = {"merchant": self.config.merchant_id, "trackId": track_id}
        return self.send_request(self.config.verify_url, payload)


def _has_result(body: Dict[str, Any]) -> bool:
    try:
        int(body.get("result"))
    except (TypeError, ValueError, OverflowError):
        return False
    return True
