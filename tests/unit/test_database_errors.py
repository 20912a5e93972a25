"""保存点写入：数据库完整性错误到领域异常的转换。"""

from types import SimpleNamespace

import pytest
from psycopg import errors as pg_errors
from sqlalchemy.exc import IntegrityError

from src.core.domain.exceptions import InvalidReferenceError
from src.core.infrastructure.database.errors import flush_in_savepoint
from src.modules.posts.domain.exceptions import PostSlugExistsError

pytestmark = pytest.mark.anyio


class _CategoryFkViolation(pg_errors.ForeignKeyViolation):
    diag = SimpleNamespace(
        constraint_name="posts_category_id_fkey", table_name="posts"
    )


class _SavepointSession:
    """Records savepoint use; flush raises the configured error."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.added: list = []
        self.rolled_back = False

    def begin_nested(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.rolled_back = exc_type is not None
        return False

    def add(self, model) -> None:
        self.added.append(model)

    async def flush(self) -> None:
        if self.error is not None:
            raise self.error


def _integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO posts ...", {}, orig)


class TestFlushInSavepoint:
    async def test_success(self):
        session = _SavepointSession()
        model = object()

        await flush_in_savepoint(session, model, lambda: PostSlugExistsError("x"))

        assert session.added == [model]
        assert session.rolled_back is False

    async def test_concurrent_duplicate_slug(self):
        session = _SavepointSession(
            _integrity_error(pg_errors.UniqueViolation("duplicate key"))
        )

        with pytest.raises(PostSlugExistsError):
            await flush_in_savepoint(
                session, object(), lambda: PostSlugExistsError("hello-academy")
            )
        assert session.rolled_back is True

    async def test_missing_foreign_key_row(self):
        session = _SavepointSession(_integrity_error(_CategoryFkViolation("fk")))

        with pytest.raises(InvalidReferenceError) as exc_info:
            await flush_in_savepoint(session, object(), lambda: PostSlugExistsError("x"))

        assert exc_info.value.fields[0]["field"] == "category_id"
        assert exc_info.value.http_status_code == 400

    async def test_other_integrity_errors_propagate(self):
        session = _SavepointSession(
            _integrity_error(pg_errors.NotNullViolation("null title"))
        )

        with pytest.raises(IntegrityError):
            await flush_in_savepoint(session, object(), lambda: PostSlugExistsError("x"))
