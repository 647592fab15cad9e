"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    OrderListCreateView,
    OrderDetailView,
    ProducerOrderListView,
    ProducerOrderStatusView,
)

urlpatterns = [
    path('', OrderListCreateView.as_view(), name='order-list-create'),
    path('<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
]

producer_urlpatterns = [
    path('', ProducerOrderListView.as_view(), name='producer-order-list'),
    path('<uuid:order_id>/status/', ProducerOrderStatusView.as_view(), name='producer-order-status'),
]
