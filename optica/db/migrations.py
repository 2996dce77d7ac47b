"""Idempotent schema changes (check the catalog, then ALTER only if needed)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from optica.common.exceptions import ConfigurationError, MigrationError
from optica.common.settings import Settings, get_settings

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


@dataclass(frozen=True)
class ColumnMigration:
    table: str
    column: str
    definition: str

    def __post_init__(self) -> None:
        for identifier in (self.table, self.column):
            if not _IDENTIFIER.match(identifier):
                raise MigrationError(f"Invalid SQL identifier: {identifier!r}")

    @property
    def name(self) -> str:
        return f"{self.table}.{self.column}"


PURCHASE_ORDER_MIGRATIONS = (
    ColumnMigration(
        "accounts_payable",
        "purchase_order_id",
        "INTEGER REFERENCES purchase_orders(id)",
    ),
    ColumnMigration("purchase_orders", "payment_date", "TIMESTAMP"),
    ColumnMigration("purchase_orders", "installments", "INTEGER DEFAULT 1 NOT NULL"),
)


def column_exists(conn: Any, table: str, column: str) -> bool:
    with conn.cursor() as cur:
        cur.execute(
            "SELECT column_name FROM information_schema.columns "
            "WHERE table_name = %s AND column_name = %s",
            (table, column),
        )
        return cur.fetchone() is not None


def ensure_column(conn: Any, migration: ColumnMigration) -> bool:
    """Add the column when missing. Returns whether the table was altered."""
    if column_exists(conn, migration.table, migration.column):
        logger.info("Column %s already exists", migration.name)
        return False

    with conn.cursor() as cur:
        cur.execute(
            f"ALTER TABLE {migration.table} "  # noqa: S608
            f"ADD COLUMN {migration.column} {migration.definition}",
        )
    logger.info("Added column %s", migration.name)
    return True


def apply_migrations(
    conn: Any,
    migrations: Sequence[ColumnMigration] = PURCHASE_ORDER_MIGRATIONS,
) -> List[str]:
    """Apply ``migrations`` in order inside one transaction; safe to re-run."""
    applied: List[str] = []
    try:
        for migration in migrations:
            if ensure_column(conn, migration):
                applied.append(migration.name)
        conn.commit()
    except MigrationError:
        conn.rollback()
        raise
    except Exception as exc:
        conn.rollback()
        raise MigrationError(f"Migration failed after {applied or 'no changes'}: {exc}") from exc
    return applied


def connect(settings: Optional[Settings] = None) -> Any:
    settings = settings or get_settings()
    if not settings.database_url:
        raise ConfigurationError("DATABASE_URL não configurada.")

    import psycopg

    return psycopg.connect(settings.database_url)
