# shop/views.py
from __future__ import annotations

from django.shortcuts import get_object_or_404, render

from gateway.config import GatewayConfig

from .models import Order


# ===== Helpers =================================================================
def _customer_orders(request):
    """Orders belonging to the logged-in user, or to the guest's session."""
    if request.user.is_authenticated:
        return Order.objects.filter(user=request.user)
    session_key = request.session.session_key
    if not session_key:
        return Order.objects.none()
    return Order.objects.filter(session_key=session_key)


# ===== Checkout ================================================================
def checkout(request):
    """
    Checkout page: lists orders still awaiting payment, each with a button
    that POSTs to the gateway pay endpoint. Failed and cancelled payments
    land back here with a message.
    Template: shop/checkout.html
    """
    config = GatewayConfig.from_settings()
    orders = _customer_orders(request).awaiting_payment()
    context = {
        "orders": orders,
        "gateway_title": config.title,
        "gateway_description": config.description,
    }
    return render(request, "shop/checkout.html", context)


def order_received(request, order_id: int):
    """
    Thank-you page shown after a verified payment.
    Template: shop/order_received.html
    """
    # only the customer who placed the order may see its reference and notes
    order = get_object_or_404(_customer_orders(request), pk=order_id)
    return render(request, "shop/order_received.html", {"order": order, "notes": order.notes.all()})
