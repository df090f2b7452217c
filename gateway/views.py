# gateway/views.py
from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST

from shop.models import Order

from .adapters import DjangoOrderRepository
from .callback import CallbackHandler, CallbackParameters
from .client import GatewayClient
from .config import GatewayConfig
from .initiator import PaymentInitiator, PaymentRedirect

logger = logging.getLogger(__name__)


# ===== Helpers =================================================================
def _build_client(config: GatewayConfig) -> GatewayClient:
    return GatewayClient(config)


def _order_return_url(order) -> str:
    return reverse("shop:order-received", args=[order.pk])


# ===== Payment start ===========================================================
@require_POST
def pay(request, order_id: int):
    """
    Registers the payment with the gateway and sends the payer to the hosted
    page. Failures go back to checkout with the gateway's message; the order
    is left untouched so it can be retried.
    """
    order = get_object_or_404(Order, pk=order_id)

    if not order.needs_payment():
        logger.info("Order %s: pay requested but status is %s", order.pk, order.status)
        messages.info(request, f"Order #{order.display_number} does not need payment.")
        return redirect("shop:checkout")

    config = GatewayConfig.from_settings()
    initiator = PaymentInitiator(
        config,
        _build_client(config),
        callback_url=request.build_absolute_uri(reverse("gateway:callback")),
    )

    result = initiator.initiate(order)
    if isinstance(result, PaymentRedirect):
        return redirect(result.url)

    messages.error(request, result.message)
    return redirect("shop:checkout")


# ===== Payer return ============================================================
@require_GET
def callback(request):
    """Return URL the gateway sends the payer back to."""
    config = GatewayConfig.from_settings()
    handler = CallbackHandler(
        _build_client(config),
        DjangoOrderRepository(),
        checkout_url=reverse("shop:checkout"),
        return_url=_order_return_url,
    )

    result = handler.handle(CallbackParameters.from_query(request.GET))
    messages.add_message(request, result.level, result.message)
    return redirect(result.redirect_url)
