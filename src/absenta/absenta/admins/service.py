from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..common.validators import optional_text
from ..core.exceptions import AuthenticationError
from .model import AdminProfile
from .repository import AdminRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate an admin by roll number or email."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def authenticate(self, identifier: str, password: str) -> AdminProfile:
        identifier = optional_text(identifier)
        if not identifier or not password:
            raise AuthenticationError("Invalid credentials")

        admin = self._admins.get_by_identifier(identifier)
        if not admin:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. a placeholder or corrupted hash in the table
            logger.warning("Unreadable password hash for admin id=%s", admin.admin_id)
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return admin.to_profile()
