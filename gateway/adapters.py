"""
Order-store adapter pattern.

The payment core never imports the host's models directly. It reads an order
through ``PayableOrder`` and transitions it through ``OrderRepository``, so a
different host only has to provide another repository.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from django.db import transaction

logger = logging.getLogger(__name__)


class PayableOrder(Protocol):
    """What the core reads from an order."""

    pk: Any
    number: str
    total: int
    currency: str
    billing_phone: str


class OrderRepository(Protocol):
    """
    Minimal interface the host order store exposes to the core.
    Every transition attaches ``note`` to the order's audit trail.
    """

    def get(self, order_id: Any) -> Optional[PayableOrder]:
        ...

    def cancel(self, order: PayableOrder, note: str) -> None:
        ...

    def fail(self, order: PayableOrder, note: str) -> None:
        ...

    def complete(self, order: PayableOrder, reference: str, note: str) -> None:
        ...


@dataclass
class DjangoOrderRepository:
    """Repository over ``shop.models.Order``; each transition locks the row."""

    model: Any = None

    def __post_init__(self):
        if self.model is None:
            from shop.models import Order

            self.model = Order

    def get(self, order_id: Any):
        try:
            pk = int(str(order_id).strip())
        except (TypeError, ValueError):
            return None
        return self.model.objects.filter(pk=pk).first()

    def cancel(self, order, note: str) -> None:
        with transaction.atomic():
            locked = self._lock(order)
            if locked.is_paid:
                locked.add_note(note)
            else:
                locked.update_status(self.model.STATUS_CANCELLED, note)
        self._refresh(order, locked)

    def fail(self, order, note: str) -> None:
        with transaction.atomic():
            locked = self._lock(order)
            if locked.is_paid:
                # keep the paid status, only record what the gateway said
                locked.add_note(note)
            else:
                locked.update_status(self.model.STATUS_FAILED, note)
        self._refresh(order, locked)

    def complete(self, order, reference: str, note: str) -> None:
        with transaction.atomic():
            locked = self._lock(order)
            locked.payment_complete(reference)
            if note:
                locked.add_note(note)
        self._refresh(order, locked)

    def _lock(self, order):
        return self.model.objects.select_for_update().get(pk=order.pk)

    @staticmethod
    def _refresh(order, locked) -> None:
        # keep the caller's instance in step with what was written
        if order is not locked:
            order.status = locked.status
            order.transaction_ref = locked.transaction_ref
            order.paid_at = locked.paid_at
        logger.info("Order %s is now %s", order.pk, order.status)
