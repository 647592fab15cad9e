"""Tests for the HTTP order gateway and the order status poller."""

import threading
from unittest.mock import Mock

import pytest
import requests

from storefront.application import OrderStatusPoller
from storefront.domain import OrderGatewayError
from storefront.infrastructure import HttpOrderGateway


def response(status_code=200, body=None, json_error=False):
    mock = Mock()
    mock.status_code = status_code
    mock.ok = status_code < 400
    if json_error:
        mock.json.side_effect = ValueError('No JSON object could be decoded')
    else:
        mock.json.return_value = body
    return mock


@pytest.fixture
def session():
    mock = Mock()
    mock.headers = {}
    return mock


@pytest.fixture
def gateway(session):
    return HttpOrderGateway('https://shop.example.com/', access_token='token-1', session=session)


class TestHttpOrderGateway:
    """Tests for HttpOrderGateway."""

    def test_headers(self, gateway, session):
        assert session.headers['Authorization'] == 'Bearer token-1'
        assert session.headers['Accept'] == 'application/json'
        assert session.headers['Origin'] == 'https://shop.example.com'

    def test_explicit_origin(self, session):
        HttpOrderGateway('https://api.example.com/backend', session=session, origin='https://shop.example.com/')

        assert session.headers['Origin'] == 'https://shop.example.com'
        assert 'Authorization' not in session.headers

    def test_place_order(self, gateway, session):
        session.request.return_value = response(201, {'orderId': 'o-1', 'total': '120.00'})

        body = gateway.place_order({'items': []})

        assert body['orderId'] == 'o-1'
        session.request.assert_called_once_with(
            'POST', 'https://shop.example.com/api/v1/orders/', timeout=10, json={'items': []},
        )

    def test_error_body(self, gateway, session):
        session.request.return_value = response(400, {
            'error': 'Insufficient stock for Tomatoes. Available: 1, Requested: 2',
            'code': 'INSUFFICIENT_STOCK',
            'product_name': 'Tomatoes',
        })

        with pytest.raises(OrderGatewayError) as exc_info:
            gateway.place_order({'items': []})

        error = exc_info.value
        assert error.status_code == 400
        assert error.is_stock_conflict
        assert error.details['product_name'] == 'Tomatoes'

    def test_error_without_json(self, gateway, session):
        session.request.return_value = response(502, json_error=True)

        with pytest.raises(OrderGatewayError) as exc_info:
            gateway.get_order('o-1')

        assert exc_info.value.status_code == 502
        assert exc_info.value.code == 'ORDER_GATEWAY_ERROR'

    def test_transport_error(self, gateway, session):
        session.request.side_effect = requests.ConnectionError('refused')

        with pytest.raises(OrderGatewayError) as exc_info:
            gateway.place_order({'items': []})

        assert exc_info.value.is_transport_error

    def test_incomplete_confirmation(self, gateway, session):
        session.request.return_value = response(201, {'order': {}})

        with pytest.raises(OrderGatewayError) as exc_info:
            gateway.place_order({'items': []})

        assert exc_info.value.code == OrderGatewayError.INVALID_RESPONSE

    def test_list_orders_page(self, gateway, session):
        session.request.return_value = response(200, {'count': 0, 'results': []})

        assert gateway.list_orders(page=2)['count'] == 0
        session.request.assert_called_once_with(
            'GET', 'https://shop.example.com/api/v1/orders/', timeout=10, params={'page': 2},
        )


class TestOrderStatusPoller:
    """Tests for OrderStatusPoller."""

    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError):
            OrderStatusPoller(fetch=lambda: None, on_update=lambda data: None, interval=0)

    def test_poll_once_delivers_result(self):
        updates = []
        poller = OrderStatusPoller(fetch=lambda: {'status': 'confirmed'}, on_update=updates.append)

        assert poller.poll_once()
        assert updates == [{'status': 'confirmed'}]

    def test_poll_failure_is_swallowed(self):
        updates = []
        fetch = Mock(side_effect=OrderGatewayError('down', code=OrderGatewayError.TRANSPORT_ERROR))
        poller = OrderStatusPoller(fetch=fetch, on_update=updates.append)

        assert not poller.poll_once()
        assert updates == []

    def test_keeps_polling_after_failure_until_stopped(self):
        ticks = []
        done = threading.Event()

        def fetch():
            ticks.append(1)
            if len(ticks) == 1:
                raise OrderGatewayError('down', code=OrderGatewayError.TRANSPORT_ERROR)
            if len(ticks) >= 3:
                done.set()
            return len(ticks)

        updates = []
        poller = OrderStatusPoller(fetch=fetch, on_update=updates.append, interval=0.01)
        poller.start()
        try:
            assert done.wait(5)
        finally:
            poller.stop(timeout=5)

        assert not poller.is_running
        assert updates[:2] == [2, 3]
