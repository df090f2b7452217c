# gateway/urls.py
from django.urls import path

from . import views

app_name = "gateway"

urlpatterns = [
    path("pay/<int:order_id>/", views.pay,      name="pay"),
    path("callback/",           views.callback, name="callback"),
]
