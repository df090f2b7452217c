from django.contrib import admin

from .models import Order, OrderNote


class OrderNoteInline(admin.TabularInline):
    model = OrderNote
    extra = 0
    fields = ("text", "created_at")
    readonly_fields = ("created_at",)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "number", "status", "total", "currency", "transaction_ref", "created_at")
    list_filter = ("status", "currency", "created_at")
    date_hierarchy = "created_at"
    search_fields = ("id", "number", "billing_phone", "transaction_ref", "user__username", "user__email")
    inlines = [OrderNoteInline]
    readonly_fields = ("transaction_ref", "paid_at", "created_at", "updated_at")
    ordering = ("-created_at",)

    # speed up list view
    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related("user")

    # quick admin actions; completion only happens through gateway verification, which records the refNumber
    actions = ["mark_cancelled"]

    def mark_cancelled(self, request, queryset):
        updated = 0
        for order in queryset.exclude(status=Order.STATUS_CANCELLED):
            order.update_status(Order.STATUS_CANCELLED, f"Marked cancelled by {request.user}.")
            updated += 1
        self.message_user(request, f"{updated} order(s) marked Cancelled.")
    mark_cancelled.short_description = "Mark selected orders as Cancelled"


@admin.register(OrderNote)
class OrderNoteAdmin(admin.ModelAdmin):
    list_display = ("order", "text", "created_at")
    search_fields = ("text", "order__id", "order__number")
    list_select_related = ("order",)
