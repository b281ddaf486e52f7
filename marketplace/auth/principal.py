"""Resolved identity of a caller attempting a privileged operation."""
from dataclasses import dataclass, field
from typing import Iterable, Optional

from marketplace.services.models import AdminUser


@dataclass(frozen=True)
class AdminPrincipal:
    id: str
    role: str
    is_active: bool
    email: Optional[str] = None
    full_name: Optional[str] = None
    permissions: tuple[str, ...] = field(default_factory=tuple)

    def is_elevated(self, elevated_roles: Iterable[str]) -> bool:
        return self.role in set(elevated_roles)

    @classmethod
    def from_admin(cls, admin: AdminUser) -> "AdminPrincipal":
        return cls(
            id=admin.id,
            role=admin.role,
            is_active=admin.is_active,
            email=admin.email,
            full_name=admin.full_name,
            permissions=tuple(admin.permissions),
        )

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "fullName": self.full_name,
            "role": self.role,
            "isActive": self.is_active,
            "permissions": list(self.permissions),
        }
