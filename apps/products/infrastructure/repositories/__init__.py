from .django_product_repository import DjangoProductRepository

__all__ = ['DjangoProductRepository']
