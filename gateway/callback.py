# gateway/callback.py
"""
Handles the payer's return from the hosted payment page.

One inbound request walks through at most two states::

    RECEIVED -> INVALID | CANCELLED | ALREADY_VERIFIED | VERIFYING
    VERIFYING -> VERIFIED_SUCCESS | VERIFIED_FAILURE

Nothing is persisted between states; every outcome carries the notice to show
and where to redirect, and the view does the rest.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from django.contrib import messages

from .adapters import OrderRepository
from .client import GatewayClient
from .codes import translate_code

logger = logging.getLogger(__name__)

SUCCESS_FLAG = "1"
STATUS_ALREADY_VERIFIED = 2

INCOMPLETE_MESSAGE = "Payment return information is incomplete."
ORDER_NOT_FOUND_MESSAGE = "Order not found."
CANCELLED_NOTE = "Payment cancelled by user."
CANCELLED_MESSAGE = "Your payment was cancelled. You can try again from the checkout page."
ALREADY_VERIFIED_MESSAGE = "Your payment has already been confirmed."
SUCCESS_MESSAGE = "Payment completed successfully. Tracking code: {track_id}"


class CallbackState(enum.Enum):
    RECEIVED = "received"
    INVALID = "invalid"
    CANCELLED = "cancelled"
    ALREADY_VERIFIED = "already_verified"
    VERIFYING = "verifying"
    VERIFIED_SUCCESS = "verified_success"
    VERIFIED_FAILURE = "verified_failure"


@dataclass(frozen=True)
class CallbackParameters:
    track_id: str = ""
    success: str = ""
    status: str = ""
    order_id: str = ""

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "CallbackParameters":
        def _get(key: str) -> str:
            return str(query.get(key) or "").strip()

        return cls(
            track_id=_get("trackId"),
            success=_get("success"),
            status=_get("status"),
            order_id=_get("order_id"),
        )

    @property
    def is_complete(self) -> bool:
        return bool(self.track_id and self.success and self.order_id)

    @property
    def already_verified(self) -> bool:
        # missing or non-numeric status means "not verified yet"
        try:
            return int(self.status) == STATUS_ALREADY_VERIFIED
        except ValueError:
            return False

    @property
    def gateway_track_id(self):
        try:
            return int(self.track_id)
        except ValueError:
            return self.track_id


@dataclass(frozen=True)
class CallbackResult:
    state: CallbackState
    level: int
    message: str
    redirect_url: str
    order: Optional[Any] = None


class CallbackHandler:
    def __init__(
        self,
        client: GatewayClient,
        orders: OrderRepository,
        checkout_url: str,
        return_url: Callable[[Any], str],
    ):
        self.client = client
        self.orders = orders
        self.checkout_url = checkout_url
        self.return_url = return_url

    def handle(self, params: CallbackParameters) -> CallbackResult:
        if not params.is_complete:
            logger.warning("Callback rejected: incomplete parameters %r", params)
            return self._to_checkout(CallbackState.INVALID, messages.ERROR, INCOMPLETE_MESSAGE)

        order = self.orders.get(params.order_id)
        if order is None:
            logger.warning("Callback rejected: order %r not found", params.order_id)
            return self._to_checkout(CallbackState.INVALID, messages.ERROR, ORDER_NOT_FOUND_MESSAGE)

        if params.success != SUCCESS_FLAG:
            self.orders.cancel(order, CANCELLED_NOTE)
            logger.info("Order %s: payment cancelled by payer, trackId=%s", order.pk, params.track_id)
            return self._to_checkout(CallbackState.CANCELLED, messages.WARNING, CANCELLED_MESSAGE, order)

        if params.already_verified:
            logger.info("Order %s: trackId=%s already verified, skipping verify", order.pk, params.track_id)
            return CallbackResult(
                state=CallbackState.ALREADY_VERIFIED,
                level=messages.SUCCESS,
                message=ALREADY_VERIFIED_MESSAGE,
                redirect_url=self.return_url(order),
                order=order,
            )

        return self._verify(order, params)

    def _verify(self, order, params: CallbackParameters) -> CallbackResult:
        response = self.client.verify(params.gateway_track_id)

        if response.ok:
            ref_number = response.ref_number or ""
            note = f"Payment verified. trackId: {params.track_id}, refNumber: {ref_number}"
            self.orders.complete(order, ref_number, note)
            logger.info("Order %s: payment verified, refNumber=%s", order.pk, ref_number)
            return CallbackResult(
                state=CallbackState.VERIFIED_SUCCESS,
                level=messages.SUCCESS,
                message=SUCCESS_MESSAGE.format(track_id=params.track_id),
                redirect_url=self.return_url(order),
                order=order,
            )

        message = translate_code(response.result)
        if getattr(order, "is_paid", False):
            # a replayed verify (e.g. 201) must not downgrade a paid order
            logger.info("Order %s: already paid, keeping status after result=%s", order.pk, response.result)
            return self._to_checkout(CallbackState.VERIFIED_FAILURE, messages.ERROR, message, order)
        self.orders.fail(order, message)
        logger.warning(
            "Order %s: verification failed, trackId=%s result=%s (%s)",
            order.pk,
            params.track_id,
            response.result,
            message,
        )
        return self._to_checkout(CallbackState.VERIFIED_FAILURE, messages.ERROR, message, order)

    def _to_checkout(self, state: CallbackState, level: int, message: str, order=None) -> CallbackResult:
        return CallbackResult(
            state=state,
            level=level,
            message=message,
            redirect_url=self.checkout_url,
            order=order,
        )
