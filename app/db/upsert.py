# app/db/upsert.py
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def upsert(db: Session, model, values: dict, keys: tuple[str, ...]) -> None:
    """
    INSERT ... ON CONFLICT (keys) DO UPDATE in one statement.

    Concurrent writers of the same key never collide on the unique
    constraint; the last statement's values win. ``keys`` must name a unique
    constraint or unique index of ``model``.
    """
    dialect = db.get_bind().dialect.name
    if dialect not in _INSERTS:
        raise NotImplementedError(f"conflict upsert is not supported on {dialect}")
    stmt = _INSERTS[dialect](model).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=list(keys),
        set_={col: stmt.excluded[col] for col in values if col not in keys},
    )
    db.execute(stmt)
