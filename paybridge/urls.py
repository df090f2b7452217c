"""
URL configuration for the paybridge project.

The shop app owns the host pages (checkout, order received); the gateway app
owns the pay and callback endpoints the payment flow bounces through.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('shop.urls')),
    path('gateway/', include('gateway.urls')),
]
