"""
API Pydantic Models

Request bodies use the storefront's camelCase field names.
"""

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ==================== CART MODELS ====================

class SelectedPackageIn(_CamelModel):
    name: str = Field(min_length=1)
    price: str | int | float


class AddToCartRequest(_CamelModel):
    user_id: str = Field(alias="userId", min_length=1)
    product_id: str = Field(alias="productId", min_length=1)
    quantity: int = Field(ge=1)
    selected_package: SelectedPackageIn = Field(alias="selectedPackage")


class UpdateCartItemRequest(_CamelModel):
    quantity: int


# ==================== ADMIN MODELS ====================

class AdminLoginRequest(_CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ToggleUserRequest(_CamelModel):
    is_active: bool = Field(alias="isActive")

