"""Acting principal passed explicitly into every workflow operation.

Authentication itself happens upstream; by the time a request reaches the
API, the gateway has stamped the caller's identity and role onto the
``X-User-Id`` and ``X-User-Role`` headers.
"""

from dataclasses import dataclass
from enum import Enum

from fastapi import Depends, Header

from shared.errors import UnauthorizedError


class Role(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@dataclass(frozen=True)
class Principal:
    user_id: str
    role: Role = Role.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_values(cls, user_id, role):
        """Build a principal from loosely typed values (command fields, headers)."""
        if not user_id:
            raise UnauthorizedError("An authenticated user is required")
        try:
            return cls(user_id=str(user_id), role=Role((role or Role.CUSTOMER.value).lower()))
        except ValueError:
            raise UnauthorizedError(f"Unknown role '{role}'") from None

    def headers(self) -> dict[str, str]:
        return {"X-User-Id": self.user_id, "X-User-Role": self.role.value}


def get_principal(
    x_user_id: str | None = Header(None),
    x_user_role: str | None = Header(None),
) -> Principal:
    """Resolve the acting principal from the request headers."""
    return Principal.from_values(x_user_id, x_user_role)


def require_admin(principal: Principal = Depends(get_principal)) -> Principal:
    if not principal.is_admin:
        raise UnauthorizedError("Admin access required")
    return principal
