"""Database Models - Pydantic models for the rows the API reads."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    """Product row."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: Optional[str] = None
    category_id: Optional[str] = None
    images: Optional[list[str]] = None
    rating: Optional[float] = None
    variants: Optional[list[dict[str, Any]]] = None
    in_stock: bool = True

    def to_cart_dict(self) -> dict:
        """Shape the storefront expects next to a cart line."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "categoryId": self.category_id,
            "images": self.images or [],
            "rating": self.rating,
            "variants": self.variants or [],
            "inStock": self.in_stock,
        }


class AdminUser(BaseModel):
    """Row of the admins table. The password column is never loaded into the model."""
    model_config = ConfigDict(extra="ignore")

    id: str
    email: str
    full_name: Optional[str] = None
    role: str = "admin"
    is_active: bool = True
    permissions: list[str] = []
    department: Optional[str] = None
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None


class MarketplaceUser(BaseModel):
    """Row of the users table as listed in the admin panel."""
    model_config = ConfigDict(extra="ignore")

    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    wallet_balance: float = 0.0
    is_partner: bool = False
    created_at: Optional[datetime] = None

    def to_admin_dict(self) -> dict:
        email = self.email or "N/A"
        return {
            "id": self.id,
            "fullName": self.full_name or (self.email.split("@")[0] if self.email else "N/A"),
            "email": email,
            "phoneNumber": self.phone_number or "N/A",
            "walletBalance": float(self.wallet_balance or 0),
            "isPartner": self.is_partner,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class OrderSummary(BaseModel):
    """Order row with the ordering user's name and email, for dashboards."""
    model_config = ConfigDict(extra="ignore")

    id: str
    user_id: Optional[str] = None
    status: str
    total_price: float = 0.0
    payment_method: Optional[str] = None
    created_at: Optional[datetime] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "OrderSummary":
        # PostgREST embeds the joined user as {"users": {...}} (or None)
        user = row.get("users") or {}
        return cls(**row, user_name=user.get("full_name"), user_email=user.get("email"))

    def to_admin_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "status": self.status,
            "totalPrice": self.total_price,
            "paymentMethod": self.payment_method,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "userName": self.user_name,
            "userEmail": self.user_email,
        }


class DashboardStats(BaseModel):
    total_users: int = 0
    total_orders: int = 0
    total_revenue: float = 0.0
    pending_orders: int = 0
    pending_payments: int = 0
    recent_orders: list[OrderSummary] = []

    def to_dict(self) -> dict:
        return {
            "totalUsers": self.total_users,
            "totalOrders": self.total_orders,
            "totalRevenue": self.total_revenue,
            "pendingOrders": self.pending_orders,
            "pendingPayments": self.pending_payments,
            "recentOrders": [order.to_admin_dict() for order in self.recent_orders],
        }
