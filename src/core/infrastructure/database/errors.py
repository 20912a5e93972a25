"""Translate database integrity errors into domain exceptions."""

from collections.abc import Callable

from psycopg import errors as pg_errors
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.core.domain.exceptions import DomainException, InvalidReferenceError


def foreign_key_field(error: IntegrityError) -> str | None:
    """Column name of a violated foreign key, e.g. posts_category_id_fkey -> category_id."""
    orig = error.orig
    if not isinstance(orig, pg_errors.ForeignKeyViolation):
        return None
    constraint = orig.diag.constraint_name or ""
    table = orig.diag.table_name or ""
    field = constraint.removeprefix(f"{table}_").removesuffix("_fkey")
    return field or None


def is_unique_violation(error: IntegrityError) -> bool:
    return isinstance(error.orig, pg_errors.UniqueViolation)


async def flush_in_savepoint(
    session: AsyncSession,
    model: SQLModel,
    on_duplicate: Callable[[], DomainException],
) -> None:
    """Flush one model inside a SAVEPOINT.

    唯一约束冲突（并发写入相同 slug）转为 on_duplicate() 的领域异常，
    外键不存在转为 InvalidReferenceError；只回滚保存点，请求事务保持可用。
    """
    try:
        async with session.begin_nested():
            session.add(model)
            await session.flush()
    except IntegrityError as e:
        if is_unique_violation(e):
            raise on_duplicate() from e
        field = foreign_key_field(e)
        if field:
            raise InvalidReferenceError([field]) from e
        raise
