"""PostgreSQL permission descriptor repository implementation."""

from collections.abc import Sequence

from psycopg import AsyncConnection

from gatekeeper.domain.entities import PermissionDescriptor

_COLUMNS = "code, name, description, category, action"

# Rows whose text is unchanged are skipped, so re-seeding leaves updated_at alone.
UPSERT_DESCRIPTOR_SQL = (
    f"INSERT INTO permission ({_COLUMNS}, created_at, updated_at) "
    "VALUES (%s, %s, %s, %s, %s, now(), now()) "
    "ON CONFLICT (code) DO UPDATE SET "
    "name = EXCLUDED.name, description = EXCLUDED.description, "
    "category = EXCLUDED.category, action = EXCLUDED.action, updated_at = now() "
    "WHERE (permission.name, permission.description, permission.category, permission.action) "
    "IS DISTINCT FROM (EXCLUDED.name, EXCLUDED.description, EXCLUDED.category, EXCLUDED.action)"
)


def _descriptor_params(
    descriptors: Sequence[PermissionDescriptor],
) -> list[tuple[str, str, str, str, str]]:
    """One parameter tuple per distinct code; a later entry for a code wins."""
    by_code: dict[str, PermissionDescriptor] = {}
    for d in descriptors:
        by_code[d.code] = d
    return [(d.code, d.name, d.description, d.category, d.action) for d in by_code.values()]


def _row_to_descriptor(r: tuple) -> PermissionDescriptor:
    return PermissionDescriptor(code=r[0], name=r[1], description=r[2], category=r[3], action=r[4])


class PostgresPermissionRepository:
    """Permission descriptor repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[PermissionDescriptor]:
        """List all descriptors ordered by category and code."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission ORDER BY category, code"
        )
        rows = await cur.fetchall()
        return [_row_to_descriptor(r) for r in rows]

    async def upsert_many(self, descriptors: Sequence[PermissionDescriptor]) -> int:
        """Insert or update descriptors by code. Returns rows written."""
        params = _descriptor_params(descriptors)
        if not params:
            return 0
        written = 0
        async with self._conn.cursor() as cur:
            for p in params:
                await cur.execute(UPSERT_DESCRIPTOR_SQL, p)
                written += cur.rowcount
        return written
