from __future__ import annotations

from typing import Optional, Sequence

from ..database.json_base import JsonRepositoryBase, Row, find_one
from .model import AdminProfile
from .repository import AdminRepository


def _to_admin(row: Row) -> AdminProfile:
    return AdminProfile(
        admin_id=row["id"],
        name=row["name"],
        avatar=row.get("avatar", ""),
        username=row["username"],
        password_hash=row.get("passwordHash"),
    )


def _to_row(admin: AdminProfile) -> Row:
    return {
        "id": admin.admin_id,
        "name": admin.name,
        "avatar": admin.avatar,
        "username": admin.username,
        "passwordHash": admin.password_hash,
    }


class JsonAdminRepository(JsonRepositoryBase, AdminRepository):
    collection = "adminProfiles"

    def get_by_id(self, admin_id: str) -> Optional[AdminProfile]:
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["id"] == admin_id)
            return _to_admin(row) if row else None

    def get_by_username(self, username: str) -> Optional[AdminProfile]:
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["username"] == username)
            return _to_admin(row) if row else None

    def list_all(self) -> Sequence[AdminProfile]:
        with self._store.read() as doc:
            return [_to_admin(r) for r in self._rows(doc)]

    def add(self, admin: AdminProfile) -> AdminProfile:
        with self._store.transaction() as doc:
            self._rows(doc).append(_to_row(admin))
        return admin

    def update(self, admin: AdminProfile) -> bool:
        with self._store.transaction() as doc:
            rows = self._rows(doc)
            for i, r in enumerate(rows):
                if r["id"] == admin.admin_id:
                    rows[i] = {**r, **_to_row(admin)}
                    return True
        return False
