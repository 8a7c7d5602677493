"""PostgreSQL registry state repository implementation."""

from psycopg import AsyncConnection


class PostgresRegistryStateRepository:
    """Single-row registry_state table: administrator and sequence."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def initialize(self, administrator: str) -> str:
        """Insert the state row if absent and return the effective administrator."""
        await self._conn.execute(
            "INSERT INTO registry_state (id, administrator, sequence) VALUES (1, %s, 0) "
            "ON CONFLICT (id) DO NOTHING",
            (administrator,),
        )
        return await self.get_administrator()

    async def get_administrator(self, *, for_update: bool = False) -> str | None:
        q = "SELECT administrator FROM registry_state WHERE id = 1"
        if for_update:
            q += " FOR UPDATE"
        cur = await self._conn.execute(q)
        r = await cur.fetchone()
        return r[0] if r else None

    async def set_administrator(self, identity: str) -> None:
        await self._conn.execute(
            "UPDATE registry_state SET administrator = %s WHERE id = 1",
            (identity,),
        )

    async def get_sequence(self) -> int:
        cur = await self._conn.execute("SELECT sequence FROM registry_state WHERE id = 1")
        r = await cur.fetchone()
        return r[0] if r else 0

    async def increment_sequence(self) -> int:
        cur = await self._conn.execute(
            "UPDATE registry_state SET sequence = sequence + 1 WHERE id = 1 RETURNING sequence"
        )
        r = await cur.fetchone()
        return r[0]
