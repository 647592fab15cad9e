# Django discovers models through this module
from .infrastructure.models import ProductModel  # noqa: F401
