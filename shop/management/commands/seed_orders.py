from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
import random

from shop.models import Order

class Command(BaseCommand):
    help = "Seed pending orders for trying out the payment flow."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=5,
            help="Number of orders to create (default=5)",
        )
        parser.add_argument(
            "--currency",
            default="IRT",
            help="Store currency for the orders (default=IRT)",
        )
        parser.add_argument(
            "--phone",
            default="09120000000",
            help="Billing phone put on every order",
        )

    def handle(self, *args, **options):
        if options["count"] < 1:
            self.stdout.write(self.style.ERROR("--count must be at least 1."))
            return

        # attach to the first user when there is one; guests are fine otherwise
        user = get_user_model().objects.order_by("id").first()

        created = 0
        for _ in range(options["count"]):
            Order.objects.create(
                user=user,
                status=Order.STATUS_PENDING,
                total=random.choice([50000, 120000, 150000, 480000]),
                currency=options["currency"],
                billing_phone=options["phone"],
            )
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} pending order(s)."))
