# Django models
from .user_model import UserModel, UserType

__all__ = ['UserModel', 'UserType']
