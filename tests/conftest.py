"""
Pytest configuration and fixtures.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def customer(django_user_model):
    """A consumer account."""
    return django_user_model.objects.create_user(
        email='test@example.com',
        username='testuser',
        password='testpass123',
        first_name='Asha',
        last_name='Kumar',
        user_type='consumer',
    )


@pytest.fixture
def authenticated_client(api_client, customer):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=customer)
    return api_client


@pytest.fixture
def producer(django_user_model):
    """A producer account."""
    return django_user_model.objects.create_user(
        email='farm@example.com',
        username='greenfarm',
        password='testpass123',
        first_name='Green',
        last_name='Farm',
        user_type='producer',
    )


@pytest.fixture
def producer_client(producer):
    """API client authenticated as the producer."""
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=producer)
    return client


@pytest.fixture
def make_product(producer):
    """Factory for products owned by the producer fixture unless told otherwise."""
    from apps.products.models import ProductModel

    def factory(**overrides):
        values = {
            'producer': producer,
            'name': 'Tomatoes',
            'unit': 'kg',
            'price_per_unit': Decimal('45.00'),
            'available_quantity': 10,
            'is_organic': True,
            'images': ['https://cdn.example.com/tomatoes.jpg'],
            'status': 'active',
        }
        values.update(overrides)
        return ProductModel.objects.create(**values)

    return factory


@pytest.fixture
def tomorrow():
    return timezone.localdate() + timedelta(days=1)


@pytest.fixture
def order_payload(tomorrow):
    """Factory for order submission bodies."""

    def factory(items, city='Trichy', payment_method='cod', **customer_overrides):
        customer_details = {
            'contactName': 'Asha Kumar',
            'email': 'asha@example.com',
            'phone': '9876543210',
            'address': '12 Market Road',
            'city': city,
            'pincode': '620001',
            'deliveryDate': tomorrow.isoformat(),
        }
        customer_details.update(customer_overrides)
        return {
            'items': items,
            'customerDetails': customer_details,
            'paymentMethod': payment_method,
        }

    return factory
