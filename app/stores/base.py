"""Shared helpers for the resource stores."""

from typing import Any, Dict, Sequence

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert(
    db: Session,
    model,
    values: Dict[str, Any],
    key_columns: Sequence[str],
) -> None:
    """
    Insert a row or replace the non-key columns of the existing one.

    Runs as a single INSERT ... ON CONFLICT DO UPDATE statement so concurrent
    writers to the same key resolve last-write-wins. Does not commit.
    """
    dialect = db.get_bind().dialect.name
    try:
        insert = _DIALECT_INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"Upsert is not supported on the {dialect} dialect")

    stmt = insert(model).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=list(key_columns),
        set_={
            name: stmt.excluded[name]
            for name in values
            if name not in key_columns
        },
    )
    db.execute(stmt)
