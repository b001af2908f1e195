from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc
from ..core.constants import ADMIN_USER_ID
from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    authenticated_at: datetime

    def to_dict(self) -> dict:
        return {"id": self.user_id, "authenticatedAt": self.authenticated_at.isoformat()}


class AuthService:
    """Use case: authenticate the administrator by PIN.

    The PIN is only kept as a werkzeug hash.
    """

    def __init__(self, admin_pin: str, *, clock: Callable[[], datetime] = now_utc):
        self._pin_hash = generate_password_hash(admin_pin) if admin_pin else None
        self._clock = clock

    @property
    def enabled(self) -> bool:
        return self._pin_hash is not None

    def authenticate(self, pin: Any) -> SessionUser:
        if not self._pin_hash or not isinstance(pin, str) or not pin:
            raise AuthenticationError("Invalid PIN")

        try:
            ok = check_password_hash(self._pin_hash, pin)
        except ValueError:
            ok = False

        if not ok:
            raise AuthenticationError("Invalid PIN")
        return SessionUser(user_id=ADMIN_USER_ID, authenticated_at=self._clock())
