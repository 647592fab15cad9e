"""
HTTP order gateway built on requests.
"""
import logging
from typing import Optional
from urllib.parse import urlsplit

import requests

from ..domain.exceptions import OrderGatewayError
from ..domain.repositories.order_gateway import OrderGateway

logger = logging.getLogger(__name__)


class HttpOrderGateway(OrderGateway):
    """
    Talks to the orders API under ``/api/v1/``.

    ``origin`` is sent as the ``Origin`` header and defaults to the scheme and
    host of ``base_url``.
    """

    def __init__(
        self,
        base_url: str,
        access_token: Optional[str] = None,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
        origin: Optional[str] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        # Mutating calls must carry an origin the server trusts
        if origin is None:
            parts = urlsplit(self.base_url)
            origin = f"{parts.scheme}://{parts.netloc}"
        self.session.headers['Origin'] = origin.rstrip('/')
        if access_token:
            self.set_access_token(access_token)

    def set_access_token(self, access_token: str) -> None:
        self.session.headers['Authorization'] = f"Bearer {access_token}"

    def place_order(self, payload: dict) -> dict:
        body = self._request('POST', '/api/v1/orders/', json=payload)
        if 'orderId' not in body or 'total' not in body:
            raise OrderGatewayError(
                "Order service returned an incomplete confirmation",
                code=OrderGatewayError.INVALID_RESPONSE,
                details=body,
            )
        return body

    def list_orders(self, page: int = 1) -> dict:
        return self._request('GET', '/api/v1/orders/', params={'page': page})

    def get_order(self, order_id: str) -> dict:
        return self._request('GET', f'/api/v1/orders/{order_id}/')

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise OrderGatewayError(
                "Could not reach the order service; the order state is unknown",
                code=OrderGatewayError.TRANSPORT_ERROR,
            ) from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {'data': body}

        if not response.ok:
            raise OrderGatewayError(
                body.get('error') or body.get('detail') or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                code=body.get('code'),
                details=body,
            )
        return body
