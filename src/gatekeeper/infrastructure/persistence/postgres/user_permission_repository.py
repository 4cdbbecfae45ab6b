"""PostgreSQL user permission override repository implementation."""

from psycopg import AsyncConnection

from gatekeeper.domain.entities import UserPermissionOverride

UPSERT_OVERRIDE_SQL = (
    "INSERT INTO user_permission (user_id, permission_code, is_denied, granted_at, granted_by) "
    "VALUES (%s, %s, %s, %s, %s) "
    "ON CONFLICT (user_id, permission_code) DO UPDATE SET "
    "is_denied = EXCLUDED.is_denied, granted_at = EXCLUDED.granted_at, "
    "granted_by = EXCLUDED.granted_by"
)


class PostgresUserPermissionRepository:
    """User permission override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_user(self, user_id: int) -> list[UserPermissionOverride]:
        """List overrides for user."""
        cur = await self._conn.execute(
            "SELECT user_id, permission_code, is_denied, granted_at, granted_by "
            "FROM user_permission WHERE user_id = %s ORDER BY permission_code",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [
            UserPermissionOverride(
                user_id=r[0],
                permission_code=r[1],
                is_denied=r[2],
                granted_at=r[3],
                granted_by=r[4],
            )
            for r in rows
        ]

    async def upsert(self, override: UserPermissionOverride) -> None:
        """Insert override or replace the existing row for (user_id, code)."""
        await self._conn.execute(
            UPSERT_OVERRIDE_SQL,
            (
                override.user_id,
                override.permission_code,
                override.is_denied,
                override.granted_at,
                override.granted_by,
            ),
        )

    async def delete(self, user_id: int, permission_code: str) -> bool:
        """Delete override. Returns whether a row existed."""
        cur = await self._conn.execute(
            "DELETE FROM user_permission WHERE user_id = %s AND permission_code = %s "
            "RETURNING user_id",
            (user_id, permission_code),
        )
        return await cur.fetchone() is not None
