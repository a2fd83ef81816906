"""
Generic record persistence (raw SQL) shared by every entity table.

Each feature repository describes its table once with `Table` and calls the
helpers below. Table and column names only ever come from those `Table`
constants; values are always passed as positional parameters.

Integrity violations raised by Postgres are translated to
`ValidationFailedError` so handlers never report them as server faults.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

import asyncpg

from . import db
from .errors import ValidationFailedError

TIMESTAMP_COLUMNS = ("created_at", "updated_at")


@dataclass(frozen=True)
class Table:
    name: str
    columns: tuple[str, ...]
    parent_column: str | None = None

    @property
    def all_columns(self) -> tuple[str, ...]:
        return ("id", *self.columns, *TIMESTAMP_COLUMNS)

    def select_list(self) -> str:
        return ", ".join(self.all_columns)

    def writable(self, values: dict[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in values.items() if k in self.columns}


def sanitize(row: dict[str, Any], *, drop: tuple[str, ...] = ()) -> dict[str, Any]:
    """
    Strip internal bookkeeping (timestamps) plus any extra fields from a row.
    NUMERIC values come back from Postgres as Decimal; they are sent as JSON numbers.
    """
    hidden = set(TIMESTAMP_COLUMNS) | set(drop)
    return {k: float(v) if isinstance(v, Decimal) else v for k, v in row.items() if k not in hidden}


def _integrity_error(table: Table, exc: asyncpg.IntegrityConstraintViolationError) -> ValidationFailedError:
    if isinstance(exc, asyncpg.UniqueViolationError):
        column = _constraint_column(table, exc)
        return ValidationFailedError(f"{(column or 'value').capitalize()} is already registered.")
    if isinstance(exc, asyncpg.ForeignKeyViolationError):
        parent = table.parent_column or "parent"
        return ValidationFailedError(f"Referenced {parent} does not exist.")
    if isinstance(exc, asyncpg.NotNullViolationError):
        column = getattr(exc, "column_name", None) or "A required field"
        return ValidationFailedError(f"{column} is required.")
    return ValidationFailedError("Record violates a data constraint.")


def _constraint_column(table: Table, exc: asyncpg.PostgresError) -> str | None:
    constraint = str(getattr(exc, "constraint_name", "") or "")
    for column in table.columns:
        if f"_{column}_" in constraint:
            return column
    return None


async def insert(table: Table, values: dict[str, Any]) -> dict[str, Any]:
    payload = table.writable(values)
    columns = list(payload)
    placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
    sql = f"""
        INSERT INTO {table.name} ({", ".join(columns)})
        VALUES ({placeholders})
        RETURNING {table.select_list()}
    """
    try:
        row = await db.fetch_one(sql, *payload.values())
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise _integrity_error(table, exc) from exc
    if row is None:
        raise RuntimeError(f"Failed to insert into {table.name}.")
    return row


async def get(table: Table, record_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {table.select_list()}
        FROM {table.name}
        WHERE id = $1
        """,
        record_id,
    )


async def find_one(table: Table, column: str, value: Any) -> dict[str, Any] | None:
    if column not in table.all_columns:
        raise ValueError(f"Unknown column {column!r} for {table.name}.")
    return await db.fetch_one(
        f"""
        SELECT {table.select_list()}
        FROM {table.name}
        WHERE {column} = $1
        LIMIT 1
        """,
        value,
    )


async def update(table: Table, record_id: int, values: dict[str, Any]) -> dict[str, Any] | None:
    """
    Merge `values` into the row. Columns not present in `values` are untouched.
    Returns the updated row, or None when no row has that id.
    """
    payload = table.writable(values)
    if not payload:
        return await get(table, record_id)

    assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(payload, start=2))
    sql = f"""
        UPDATE {table.name}
        SET {assignments},
            updated_at = now()
        WHERE id = $1
        RETURNING {table.select_list()}
    """
    try:
        return await db.fetch_one(sql, record_id, *payload.values())
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise _integrity_error(table, exc) from exc


async def delete(table: Table, record_id: int) -> bool:
    row = await db.fetch_one(
        f"""
        DELETE FROM {table.name}
        WHERE id = $1
        RETURNING id
        """,
        record_id,
    )
    return row is not None


async def list_by_parent(
    table: Table,
    parent_id: int,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[dict[str, Any]]:
    """
    All rows owned by `parent_id`, oldest id first.
    With both dates given, only rows whose `date` is within [start_date, end_date].
    """
    if table.parent_column is None:
        raise ValueError(f"{table.name} has no parent column.")

    if start_date is None or end_date is None:
        return await db.fetch_all(
            f"""
            SELECT {table.select_list()}
            FROM {table.name}
            WHERE {table.parent_column} = $1
            ORDER BY id ASC
            """,
            parent_id,
        )

    return await db.fetch_all(
        f"""
        SELECT {table.select_list()}
        FROM {table.name}
        WHERE {table.parent_column} = $1
          AND date BETWEEN $2 AND $3
        ORDER BY id ASC
        """,
        parent_id,
        start_date,
        end_date,
    )
