"""
Repository Pattern for Database Operations

- AdminRepository: admin lookup and login
- OrderRepository: order and payment figures for the dashboard
- ProductRepository: product catalog
- UserRepository: user listing and partner status for the admin panel
"""
from .admin_repo import AdminRepository
from .order_repo import OrderRepository
from .product_repo import ProductRepository
from .user_repo import UserRepository

__all__ = [
    "AdminRepository",
    "OrderRepository",
    "ProductRepository",
    "UserRepository",
]
