# gateway/initiator.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .client import GatewayClient
from .codes import TRANSPORT_FAILURE, translate_code
from .config import GatewayConfig

logger = logging.getLogger(__name__)

# Store currencies priced in Toman; the gateway expects Rial (1 Toman = 10 Rial).
TOMAN_CURRENCIES = frozenset({"irt", "toman"})
TOMAN_TO_RIAL = 10


@dataclass(frozen=True)
class PaymentRequest:
    merchant: str
    amount: int
    callback_url: str
    description: str
    mobile: str = ""

    def as_payload(self) -> Dict[str, Any]:
        return {
            "merchant": self.merchant,
            "amount": self.amount,
            "callbackUrl": self.callback_url,
            "description": self.description,
            "mobile": self.mobile,
        }


@dataclass(frozen=True)
class PaymentRedirect:
    url: str
    track_id: str


@dataclass(frozen=True)
class PaymentFailure:
    code: int
    message: str


InitiationResult = Union[PaymentRedirect, PaymentFailure]


def gateway_amount(total: Any, currency: str) -> int:
    """Order total in the gateway's unit (Rial)."""
    amount = int(total)
    if (currency or "").strip().lower() in TOMAN_CURRENCIES:
        amount *= TOMAN_TO_RIAL
    return amount


def with_order_id(url: str, order_id: Any) -> str:
    """Append ``order_id`` to ``url``, keeping any query it already has."""
    scheme, netloc, path, query, fragment = urlsplit(url)
    params = [(k, v) for k, v in parse_qsl(query, keep_blank_values=True) if k != "order_id"]
    params.append(("order_id", str(order_id)))
    return urlunsplit((scheme, netloc, path, urlencode(params), fragment))


class PaymentInitiator:
    """
    Registers a payment for an order and returns where to send the payer.

    Initiation never touches the order: a failed attempt leaves it as it was
    so the customer can simply try again.
    """

    def __init__(self, config: GatewayConfig, client: GatewayClient, callback_url: str):
        self.config = config
        self.client = client
        self.callback_url = callback_url

    def build_request(self, order) -> PaymentRequest:
        return PaymentRequest(
            merchant=self.config.merchant_id,
            amount=gateway_amount(order.total, order.currency),
            callback_url=with_order_id(self.callback_url, order.pk),
            description=self.config.describe_order(order.number or str(order.pk)),
            mobile=order.billing_phone or "",
        )

    def initiate(self, order) -> InitiationResult:
        payment_request = self.build_request(order)
        response = self.client.request_payment(payment_request.as_payload())

        code = response.result
        if response.ok:
            if response.track_id:
                logger.info("Order %s: payment registered, trackId=%s", order.pk, response.track_id)
                return PaymentRedirect(
                    url=self.config.start_url_for(response.track_id),
                    track_id=response.track_id,
                )
            logger.error("Order %s: gateway accepted the payment but sent no trackId", order.pk)
            code = TRANSPORT_FAILURE

        message = translate_code(code)
        logger.warning("Order %s: payment request rejected, result=%s (%s)", order.pk, code, message)
        return PaymentFailure(code=code, message=message)
