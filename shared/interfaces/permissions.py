"""
Request authenticity permission.

Mutating requests must come from a page served by one of the configured
origins. The check compares the ``Origin`` header, falling back to the
origin part of ``Referer`` when the browser omits ``Origin``. An empty
allow-list refuses every mutating request unless
``ALLOW_UNCONFIGURED_ORIGINS`` is set.
"""
import logging
from urllib.parse import urlsplit

from django.conf import settings
from rest_framework.permissions import SAFE_METHODS, BasePermission

logger = logging.getLogger(__name__)


def _origin_of(url: str) -> str:
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return ''
    return f"{parts.scheme}://{parts.netloc}"


class TrustedOriginPermission(BasePermission):
    """Reject cross-origin writes."""

    message = 'Request origin is not allowed'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True

        allowed = [origin.rstrip('/') for origin in getattr(settings, 'TRUSTED_REQUEST_ORIGINS', [])]
        if not allowed:
            if getattr(settings, 'ALLOW_UNCONFIGURED_ORIGINS', False):
                return True
            logger.error("TRUSTED_REQUEST_ORIGINS is not configured; refusing mutating request")
            return False

        origin = request.headers.get('Origin')
        if origin:
            if origin.rstrip('/') in allowed:
                return True
            logger.warning(f"Rejected request from origin {origin}")
            return False

        referer = request.headers.get('Referer')
        if referer and _origin_of(referer) in allowed:
            return True

        logger.warning(f"Rejected request without trusted origin (referer={referer!r})")
        return False
