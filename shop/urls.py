# shop/urls.py
from django.urls import path

from . import views

app_name = "shop"

urlpatterns = [
    path("checkout/",                        views.checkout,       name="checkout"),
    path("orders/<int:order_id>/received/",  views.order_received, name="order-received"),
]
