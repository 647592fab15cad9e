# Django discovers models through this module
from .infrastructure.models import UserModel, UserType  # noqa: F401
