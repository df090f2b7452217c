# shop/models.py
from django.conf import settings
from django.db import models
from django.utils.timezone import now


# -----------------------------
# 🧾 Order Model
# -----------------------------
class OrderQuerySet(models.QuerySet):
    def awaiting_payment(self):
        """Orders a customer can still (re)start a payment for."""
        return self.filter(status__in=Order.PAYABLE_STATUSES)


class Order(models.Model):
    STATUS_PENDING = "pending"
    STATUS_CANCELLED = "cancelled"
    STATUS_FAILED = "failed"
    STATUS_COMPLETED = "completed"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending payment"),
        (STATUS_CANCELLED, "Cancelled"),
        (STATUS_FAILED, "Failed"),
        (STATUS_COMPLETED, "Completed"),
    ]

    # cancelled/failed orders stay reusable for a fresh checkout attempt
    PAYABLE_STATUSES = (STATUS_PENDING, STATUS_CANCELLED, STATUS_FAILED)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
    )
    session_key = models.CharField(max_length=40, null=True, blank=True)

    number = models.CharField(max_length=32, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)

    # integer amount in the store currency (no decimals for IRT/IRR)
    total = models.PositiveBigIntegerField(default=0)
    currency = models.CharField(max_length=8, default="IRT")
    billing_phone = models.CharField(max_length=32, blank=True)

    # gateway refNumber once the payment is verified
    transaction_ref = models.CharField(max_length=64, blank=True)
    paid_at = models.DateTimeField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OrderQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"Order #{self.display_number}"

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        # Default the human-readable number to the pk once we have one
        if not self.number:
            self.number = str(self.pk)
            super().save(update_fields=["number"])

    @property
    def display_number(self) -> str:
        return self.number or str(self.pk or "")

    # ✅ Payment helpers
    @property
    def is_paid(self) -> bool:
        return self.status == self.STATUS_COMPLETED and bool(self.transaction_ref)

    def needs_payment(self) -> bool:
        # a verified reference means the money was taken, whatever the status says
        return self.status in self.PAYABLE_STATUSES and self.total > 0 and not self.transaction_ref

    def add_note(self, text: str) -> "OrderNote":
        return self.notes.create(text=text)

    def update_status(self, status: str, note: str = "") -> None:
        self.status = status
        self.save(update_fields=["status", "updated_at"])
        if note:
            self.add_note(note)

    def payment_complete(self, transaction_ref: str) -> None:
        self.status = self.STATUS_COMPLETED
        self.transaction_ref = transaction_ref or ""
        self.paid_at = now()
        self.save(update_fields=["status", "transaction_ref", "paid_at", "updated_at"])


# -----------------------------
# 🗒️ Order Note Model
# -----------------------------
class OrderNote(models.Model):
    """Append-only audit trail attached to an order."""

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="notes",
    )
    text = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"Note on {self.order}: {self.text[:40]}"
