# gateway/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_REQUEST_URL = "https://gateway.zibal.ir/v1/request"
DEFAULT_VERIFY_URL = "https://gateway.zibal.ir/v1/verify"
DEFAULT_START_URL = "https://gateway.zibal.ir/start/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_ORDER_DESCRIPTION = "Payment for order #{number}"


@dataclass(frozen=True)
class GatewayConfig:
    """
    Immutable gateway settings handed to the initiator, the callback handler
    and the client at construction time.

    ``title`` and ``description`` are display-only (checkout page);
    ``order_description`` is the text sent to the gateway with each payment
    and may reference ``{number}``.
    """

    merchant_id: str
    title: str = "Online payment"
    description: str = ""
    request_url: str = DEFAULT_REQUEST_URL
    verify_url: str = DEFAULT_VERIFY_URL
    start_url: str = DEFAULT_START_URL
    timeout: float = DEFAULT_TIMEOUT
    order_description: str = DEFAULT_ORDER_DESCRIPTION

    def __post_init__(self):
        if not (self.merchant_id or "").strip():
            raise ImproperlyConfigured("Gateway MERCHANT_ID must be set.")
        if self.timeout <= 0:
            raise ImproperlyConfigured("Gateway TIMEOUT must be a positive number of seconds.")

    def start_url_for(self, track_id: Any) -> str:
        """Hosted payment page for a trackId."""
        return f"{self.start_url}{track_id}"

    def describe_order(self, number: str) -> str:
        return self.order_description.format(number=number)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GatewayConfig":
        try:
            timeout = float(data.get("TIMEOUT", DEFAULT_TIMEOUT))
        except (TypeError, ValueError) as exc:
            raise ImproperlyConfigured("Gateway TIMEOUT must be a number.") from exc

        return cls(
            merchant_id=str(data.get("MERCHANT_ID") or ""),
            title=data.get("TITLE") or "Online payment",
            description=data.get("DESCRIPTION") or "",
            request_url=data.get("REQUEST_URL") or DEFAULT_REQUEST_URL,
            verify_url=data.get("VERIFY_URL") or DEFAULT_VERIFY_URL,
            start_url=data.get("START_URL") or DEFAULT_START_URL,
            timeout=timeout,
            order_description=data.get("ORDER_DESCRIPTION") or DEFAULT_ORDER_DESCRIPTION,
        )

    @classmethod
    def from_settings(cls, source: Optional[Dict[str, Any]] = None) -> "GatewayConfig":
        """Build from ``settings.PAYBRIDGE_GATEWAY`` (or an explicit dict)."""
        if source is None:
            source = getattr(settings, "PAYBRIDGE_GATEWAY", None)
        if not source:
            raise ImproperlyConfigured("PAYBRIDGE_GATEWAY setting is missing.")
        return cls.from_dict(source)
