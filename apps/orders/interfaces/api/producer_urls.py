"""
Producer orders API URLs.
"""
from django.urls import path, include

from .v1.urls import producer_urlpatterns

urlpatterns = [
    path('', include(producer_urlpatterns)),
]
