from __future__ import annotations

from typing import Optional, Protocol

from .model import Admin


class AdminRepository(Protocol):
    """Repository interface for Admin.

    Note: services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_identifier(self, identifier: str) -> Optional[Admin]:
        """Look an admin up by roll number (nis) or email."""

        raise NotImplementedError
