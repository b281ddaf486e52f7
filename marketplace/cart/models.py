"""Cart line models."""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class SelectedPackage:
    """Priced variant of a product; the name is part of the line identity."""
    name: str
    price: str

    def to_dict(self) -> dict:
        return {"name": self.name, "price": self.price}

    @classmethod
    def from_dict(cls, data: dict) -> "SelectedPackage":
        return cls(name=str(data["name"]), price=str(data.get("price", "")))


def new_line_id() -> str:
    return f"cart-{uuid.uuid4().hex}"


@dataclass
class CartLine:
    """One product selection for one shopper."""
    user_id: str
    product_id: str
    quantity: int
    selected_package: SelectedPackage
    id: str = field(default_factory=new_line_id)
    added_at: str = ""

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()

    def matches(self, product_id: str, package_name: str) -> bool:
        """True if this line is the (product, package) the caller is adding."""
        return self.product_id == product_id and self.selected_package.name == package_name

    def to_dict(self) -> dict:
        """Wire shape used by the cart routes."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "productId": self.product_id,
            "quantity": self.quantity,
            "selectedPackage": self.selected_package.to_dict(),
            "addedAt": self.added_at,
        }
