"""HTTP 层测试：响应结构、缓存头、错误格式与后台鉴权。

通过 httpx.ASGITransport 调用 FastAPI 应用，仓储依赖替换为内存实现。
"""

from datetime import timedelta

import pytest

from src.core.infrastructure.security.jwt import create_access_token
from src.modules.contacts.application import dependencies as contacts_app_deps
from src.modules.newsletter.application import dependencies as newsletter_app_deps
from src.modules.newsletter.domain.entities import NewsletterSubscriber, SubscriberStatus
from src.modules.pages.application import dependencies as pages_app_deps
from src.modules.pages.domain.entities import Page, PageStatus
from src.modules.posts.application import dependencies as posts_app_deps
from src.modules.programs.application import dependencies as programs_app_deps
from src.modules.taxonomy.application import dependencies as taxonomy_app_deps
from src.modules.taxonomy.domain.entities import PostCategory, ProgramCategory
from src.modules.users.domain.entities import User
from tests.unit.fakes import (
    BASE_TIME,
    _FakeContactRepo,
    _FakePageRepo,
    _FakePostCategoryRepo,
    _FakePostRepo,
    _FakeProgramCategoryRepo,
    _FakeProgramRepo,
    _FakeScheduleRepo,
    _FakeSubscriberRepo,
    make_post,
    make_program,
)

pytestmark = pytest.mark.anyio

LIST_CACHE_HEADER = "public, s-maxage=60, stale-while-revalidate=300"
TAXONOMY_CACHE_HEADER = "public, s-maxage=3600, stale-while-revalidate=86400"


@pytest.fixture
def repos() -> dict:
    return {
        "programs": _FakeProgramRepo(
            [make_program(i) for i in range(1, 13)],
            [ProgramCategory(id=1, name="Leadership", slug="leadership")],
        ),
        "schedules": _FakeScheduleRepo(),
        "posts": _FakePostRepo(
            [make_post(i) for i in range(1, 4)],
            [PostCategory(id=1, name="Tips", slug="tips")],
            [User(id=1, name="Admin", email="admin@example.com")],
        ),
        "pages": _FakePageRepo(
            [
                Page(id=1, title="About", slug="about", status=PageStatus.PUBLISHED),
                Page(id=2, title="Hidden", slug="hidden"),
            ]
        ),
        "contacts": _FakeContactRepo(),
        "subscribers": _FakeSubscriberRepo(),
    }


@pytest.fixture
async def client(async_client, repos):
    from main import app

    overrides = app.dependency_overrides
    overrides[programs_app_deps.get_program_repository] = lambda: repos["programs"]
    overrides[programs_app_deps.get_schedule_repository] = lambda: repos["schedules"]
    overrides[posts_app_deps.get_post_repository] = lambda: repos["posts"]
    overrides[pages_app_deps.get_page_repository] = lambda: repos["pages"]
    overrides[contacts_app_deps.get_contact_repository] = lambda: repos["contacts"]
    overrides[newsletter_app_deps.get_subscriber_repository] = lambda: repos[
        "subscribers"
    ]
    overrides[taxonomy_app_deps.get_program_category_repository] = (
        lambda: _FakeProgramCategoryRepo(
            [
                ProgramCategory(id=2, name="Sales", slug="sales", display_order=1),
                ProgramCategory(id=1, name="Leadership", slug="leadership"),
            ]
        )
    )
    overrides[taxonomy_app_deps.get_post_category_repository] = (
        lambda: _FakePostCategoryRepo([PostCategory(id=1, name="Tips", slug="tips")])
    )
    return async_client


class TestPublicLists:
    async def test_program_list_envelope(self, client):
        response = await client.get("/api/programs", params={"limit": "5", "page": "2"})

        assert response.status_code == 200
        assert response.headers["cache-control"] == LIST_CACHE_HEADER
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 5
        assert body["pagination"] == {
            "page": 2,
            "limit": 5,
            "total": 12,
            "totalPages": 3,
        }

    async def test_garbage_params_never_fail(self, client):
        response = await client.get(
            "/api/programs",
            params={
                "page": "abc",
                "limit": "-5",
                "category_id": "x",
                "sortBy": "nope",
                "sortOrder": "sideways",
                "min_price": "cheap",
            },
        )

        assert response.status_code == 200
        pagination = response.json()["pagination"]
        assert pagination["page"] == 1
        assert pagination["limit"] == 1

    async def test_nul_bytes_stripped_from_search(self, client):
        response = await client.get("/api/posts", params={"search": "Po\x00st 2"})

        assert response.status_code == 200
        assert [p["slug"] for p in response.json()["data"]] == ["post-2"]

    async def test_post_list(self, client):
        response = await client.get("/api/posts")

        assert response.status_code == 200
        assert response.headers["cache-control"] == LIST_CACHE_HEADER
        assert response.json()["pagination"]["total"] == 3


class TestDetails:
    async def test_program_detail_counts_view(self, client):
        first = await client.get("/api/programs/program-1")
        second = await client.get("/api/programs/program-1")

        assert first.status_code == 200
        assert first.headers["cache-control"] == LIST_CACHE_HEADER
        assert first.json()["data"]["views"] == 1
        assert second.json()["data"]["views"] == 2
        assert first.json()["data"]["schedules"] == []

    async def test_missing_program(self, client):
        response = await client.get("/api/programs/nope")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"

    async def test_post_detail(self, client):
        response = await client.get("/api/posts/post-2")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["slug"] == "post-2"
        assert data["related"] == []

    async def test_page(self, client):
        found = await client.get("/api/pages/about")
        hidden = await client.get("/api/pages/hidden")

        assert found.status_code == 200
        assert found.headers["cache-control"] == TAXONOMY_CACHE_HEADER
        assert found.json()["data"]["title"] == "About"
        assert hidden.status_code == 404

    @pytest.mark.parametrize(
        "path",
        ["/api/programs/a%00b", "/api/posts/a%00b", "/api/pages/a%00b"],
    )
    async def test_malformed_slug_is_not_found(self, client, path):
        response = await client.get(path)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestTaxonomy:
    async def test_program_categories_ordered(self, client):
        response = await client.get("/api/program-categories")

        assert response.status_code == 200
        assert response.headers["cache-control"] == TAXONOMY_CACHE_HEADER
        assert [c["slug"] for c in response.json()["data"]] == ["leadership", "sales"]

    async def test_post_categories(self, client):
        response = await client.get("/api/post-categories")

        assert response.status_code == 200
        assert response.headers["cache-control"] == TAXONOMY_CACHE_HEADER


class TestForms:
    async def test_contact_validation_fields(self, client):
        response = await client.post(
            "/api/contact",
            json={"name": "B", "email": "not-an-email", "message": "short"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert {f["field"] for f in error["fields"]} == {"name", "email", "message"}

    async def test_contact_stored_with_client_ip(self, client, repos):
        response = await client.post(
            "/api/contact",
            json={
                "name": "Budi",
                "email": "budi@example.com",
                "subject": "",
                "message": "Please send me the 2025 training calendar.",
            },
            headers={"X-Forwarded-For": "198.51.100.4, 10.0.0.1"},
        )

        assert response.status_code == 201
        contact = repos["contacts"].items[response.json()["data"]["id"]]
        assert contact.ip_address == "198.51.100.4"
        assert contact.subject is None
        assert contact.status.value == "unread"

    async def test_newsletter_twice(self, client):
        first = await client.post("/api/newsletter", json={"email": "a@example.com"})
        second = await client.post("/api/newsletter", json={"email": "a@example.com"})

        assert first.status_code == 200
        assert first.json()["data"]["status"] == "active"
        assert second.status_code == 400
        assert second.json()["error"]["code"] == "ALREADY_SUBSCRIBED"


class TestAdmin:
    async def test_requires_token(self, client):
        response = await client.get("/api/admin/programs")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    async def test_rejects_invalid_token(self, client):
        response = await client.get(
            "/api/admin/programs", headers={"Authorization": "Bearer garbage"}
        )
        assert response.status_code == 401

    async def test_rejects_non_admin(self, client, editor_token):
        response = await client.get(
            "/api/admin/contacts",
            headers={"Authorization": f"Bearer {editor_token}"},
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"

    async def test_admin_list_sees_drafts(self, client, repos, admin_token):
        repos["programs"].items[1].status = "draft"

        response = await client.get(
            "/api/admin/programs",
            params={"status": "draft"},
            headers={"Authorization": f"Bearer {admin_token}"},
        )

        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]] == [1]
        assert "cache-control" not in response.headers

    async def test_create_and_duplicate(self, client, admin_token):
        headers = {"Authorization": f"Bearer {admin_token}"}
        payload = {
            "title": "Leadership Essentials",
            "price": 2500000,
            "certificate": "yes",
            "status": "published",
        }

        created = await client.post("/api/admin/programs", json=payload, headers=headers)
        duplicate = await client.post(
            "/api/admin/programs", json=payload, headers=headers
        )

        assert created.status_code == 201
        data = created.json()["data"]
        assert data["slug"] == "leadership-essentials"
        assert data["certificate"] is True
        assert duplicate.status_code == 409
        assert duplicate.json()["error"]["code"] == "DUPLICATE_ENTITY"

    async def test_create_post_uses_admin_as_author(self, client, repos, admin_token):
        response = await client.post(
            "/api/admin/posts",
            json={"title": "Hello Academy", "status": "published"},
            headers={"Authorization": f"Bearer {admin_token}"},
        )

        assert response.status_code == 201
        post_id = response.json()["data"]["id"]
        assert repos["posts"].items[post_id].author_id == 1

    async def test_admin_without_user_row_saves_post_without_author(
        self, client, repos
    ):
        token = create_access_token(
            "77", expires_delta=timedelta(minutes=5), extra_claims={"role": "admin"}
        )

        response = await client.post(
            "/api/admin/posts",
            json={"title": "Guest Column"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201
        assert response.json()["data"]["author"] is None

    async def test_unknown_references_are_field_errors(self, client, admin_token):
        headers = {"Authorization": f"Bearer {admin_token}"}

        program = await client.post(
            "/api/admin/programs",
            json={"title": "Coaching Clinic", "category_id": 42, "instructor_id": 9},
            headers=headers,
        )
        post = await client.put(
            "/api/admin/posts/1", json={"category_id": 42}, headers=headers
        )

        assert program.status_code == 400
        error = program.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert [f["field"] for f in error["fields"]] == ["category_id", "instructor_id"]
        assert post.status_code == 400
        assert post.json()["error"]["fields"][0]["field"] == "category_id"

    async def test_update_contact_status(self, client, repos, admin_token):
        await client.post(
            "/api/contact",
            json={
                "name": "Budi",
                "email": "budi@example.com",
                "message": "Please send me the 2025 training calendar.",
            },
        )

        response = await client.patch(
            "/api/admin/contacts/1",
            json={"status": "read"},
            headers={"Authorization": f"Bearer {admin_token}"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "read"
        assert response.json()["data"]["read_at"] is not None


class TestAdminInboxAndNewsletter:
    @pytest.fixture
    def headers(self, admin_token) -> dict[str, str]:
        return {"Authorization": f"Bearer {admin_token}"}

    @pytest.fixture
    def subscribers(self, repos) -> _FakeSubscriberRepo:
        store = repos["subscribers"]
        for subscriber_id, (email, status) in enumerate(
            [
                ("john@example.com", SubscriberStatus.ACTIVE),
                ("jane@example.com", SubscriberStatus.ACTIVE),
                ("alice@example.com", SubscriberStatus.UNSUBSCRIBED),
            ],
            start=1,
        ):
            store.items[subscriber_id] = NewsletterSubscriber(
                id=subscriber_id,
                email=email,
                status=status,
                token=f"token-{subscriber_id}",
                created_at=BASE_TIME + timedelta(days=subscriber_id),
            )
        store._next_id = 4
        return store

    async def test_newsletter_list_filters_by_status(
        self, client, headers, subscribers
    ):
        response = await client.get(
            "/api/admin/newsletter", params={"status": "active"}, headers=headers
        )

        assert response.status_code == 200
        body = response.json()
        assert [s["email"] for s in body["data"]] == [
            "jane@example.com",
            "john@example.com",
        ]
        assert "token" not in body["data"][0]
        assert body["pagination"]["total"] == 2

    async def test_newsletter_list_requires_admin(self, client, subscribers):
        response = await client.get("/api/admin/newsletter")

        assert response.status_code == 401

    async def test_delete_subscriber(self, client, headers, subscribers):
        deleted = await client.delete("/api/admin/newsletter/2", headers=headers)
        again = await client.delete("/api/admin/newsletter/2", headers=headers)

        assert deleted.status_code == 200
        assert deleted.json()["data"] == {"deleted": True}
        assert 2 not in subscribers.items
        assert again.status_code == 404
        assert again.json()["error"]["code"] == "NOT_FOUND"

    async def test_delete_contact(self, client, repos, headers):
        await client.post(
            "/api/contact",
            json={
                "name": "Budi",
                "email": "budi@example.com",
                "message": "Please send me the 2025 training calendar.",
            },
        )

        deleted = await client.delete("/api/admin/contacts/1", headers=headers)
        missing = await client.delete("/api/admin/contacts/1", headers=headers)

        assert deleted.status_code == 200
        assert repos["contacts"].items == {}
        assert missing.status_code == 404

    async def test_inbox_page_size_uses_limit(self, client, headers):
        for i in range(3):
            await client.post(
                "/api/contact",
                json={
                    "name": f"Visitor {i}",
                    "email": f"visitor{i}@example.com",
                    "message": "Do you run in-house training sessions?",
                },
            )

        response = await client.get(
            "/api/admin/contacts", params={"limit": "2"}, headers=headers
        )

        assert response.status_code == 200
        assert len(response.json()["data"]) == 2
        assert response.json()["pagination"] == {
            "page": 1,
            "limit": 2,
            "total": 3,
            "totalPages": 2,
        }


async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json()["success"] is False
