from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Admin
from .repository import AdminRepository

_ADMIN_COLUMNS = "id, nis, email, password, full_name, created_at, updated_at"


def _to_admin(row: dict) -> Admin:
    return Admin(
        admin_id=int(row["id"]),
        nis=row["nis"],
        email=row["email"],
        password_hash=row["password"],
        full_name=row["full_name"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_ADMIN_COLUMNS} FROM admins WHERE id=%s", (int(admin_id),))
            row = fetchone(cur)
            return _to_admin(row) if row else None

    def get_by_identifier(self, identifier: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_ADMIN_COLUMNS}
                FROM admins
                WHERE nis=%s OR email=%s
                LIMIT 1
                """,
                (identifier, identifier),
            )
            row = fetchone(cur)
            return _to_admin(row) if row else None
