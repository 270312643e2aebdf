"""Persistence operations for enum fields (immediate save and label queries)."""

from typing import Any

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from enumfield.core.column import EnumCode
from enumfield.core.definition import EnumDefinition
from enumfield.core.logging import get_logger
from enumfield.core.value import EnumValue

logger = get_logger(__name__)


def _enum_type(column: Any) -> EnumCode:
    sql_type = column.property.columns[0].type
    if not isinstance(sql_type, EnumCode):
        raise TypeError(f"{column} is not an enum column")
    return sql_type


def definition_for(record: Any, field: str) -> EnumDefinition:
    """Definition behind an enum attribute of a mapped record."""
    column_attr = inspect(type(record)).column_attrs[field]
    return _enum_type(column_attr.class_attribute).definition


async def set_and_persist(
    db: AsyncSession,
    record: Any,
    field: str,
    label: str,
) -> EnumValue:
    """
    Set an enum attribute to label and commit immediately.

    Args:
        db: Database session owning the record
        record: Mapped instance to update; must be loaded, since reading an
            expired attribute would lazy-load outside the async context
        field: Name of the enum attribute (e.g. "role")
        label: Target label

    Returns:
        The persisted EnumValue

    Raises:
        UnknownLabelError: If label is not in the field's definition
        sqlalchemy.exc.SQLAlchemyError: If the commit fails; the session is
            rolled back and the record is expired, so re-read it with
            `await db.refresh(record)` before use
    """
    definition = definition_for(record, field)
    new_value = EnumValue(definition, definition.encode(label))
    previous = getattr(record, field)

    setattr(record, field, new_value)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        logger.error(
            "enum.persist_failed",
            model=type(record).__name__,
            field=field,
            label=label,
            exc_info=True,
        )
        raise
    await db.refresh(record)

    logger.info(
        "enum.persisted",
        model=type(record).__name__,
        field=field,
        previous=str(previous) if previous is not None else None,
        label=new_value.label,
        code=new_value.code,
    )
    return getattr(record, field)


def with_label(column: InstrumentedAttribute, label: str) -> Select:
    """SELECT of the column's entity filtered to rows holding label."""
    definition = _enum_type(column).definition
    value = EnumValue(definition, definition.encode(label))
    return select(column.class_).where(column == value)


def without_label(column: InstrumentedAttribute, label: str) -> Select:
    """SELECT of the column's entity filtered to rows not holding label."""
    definition = _enum_type(column).definition
    value = EnumValue(definition, definition.encode(label))
    return select(column.class_).where(column != value)


async def all_with_label(db: AsyncSession, column: InstrumentedAttribute, label: str) -> list[Any]:
    """All records whose enum column holds label."""
    result = await db.execute(with_label(column, label))
    return list(result.scalars().all())


async def all_without_label(
    db: AsyncSession, column: InstrumentedAttribute, label: str
) -> list[Any]:
    """All records whose enum column holds any other label."""
    result = await db.execute(without_label(column, label))
    return list(result.scalars().all())


async def count_by_label(db: AsyncSession, column: InstrumentedAttribute) -> dict[str, int]:
    """Row count per label, in declaration order, zero-filled."""
    definition = _enum_type(column).definition
    counts = {label: 0 for label in definition.labels}

    result = await db.execute(select(column, func.count()).group_by(column))
    for value, count in result.all():
        if value is not None:
            counts[value.label] = count
    return counts
