"""联系表单与邮件订阅单元测试。"""

import pytest

from src.core.domain.listing import RawListParams, Visibility, normalize_list_params
from src.modules.contacts.application.commands import (
    SubmitContactCommand,
    UpdateContactStatusCommand,
)
from src.modules.contacts.application.handlers import (
    SubmitContactHandler,
    UpdateContactStatusHandler,
)
from src.modules.contacts.application.services import ContactQueryService
from src.modules.contacts.domain.entities import ContactStatus
from src.modules.contacts.domain.exceptions import ContactNotFoundError
from src.modules.contacts.domain.listing import contact_list_policy
from src.modules.newsletter.application.commands import SubscribeCommand
from src.modules.newsletter.application.handlers import SubscribeHandler
from src.modules.newsletter.domain.entities import SubscriberStatus
from src.modules.newsletter.domain.exceptions import AlreadySubscribedError
from tests.unit.fakes import _FakeContactRepo, _FakeSubscriberRepo

pytestmark = pytest.mark.anyio


def _submission(**overrides) -> SubmitContactCommand:
    data = {
        "name": "Budi",
        "email": "budi@example.com",
        "message": "I would like a quote for in-house training.",
        "ip_address": "203.0.113.7",
        "user_agent": "pytest",
    }
    data.update(overrides)
    return SubmitContactCommand(**data)


class TestContacts:
    async def test_submission_stored_unread(self):
        repo = _FakeContactRepo()

        contact = await SubmitContactHandler(repo).handle(_submission())

        stored = repo.items[contact.id]
        assert stored.status == ContactStatus.UNREAD
        assert stored.ip_address == "203.0.113.7"
        assert stored.read_at is None

    async def test_mark_read_sets_read_at_once(self):
        repo = _FakeContactRepo()
        contact = await SubmitContactHandler(repo).handle(_submission())
        handler = UpdateContactStatusHandler(repo)

        first = await handler.handle(
            UpdateContactStatusCommand(
                actor_id="1", contact_id=contact.id, status=ContactStatus.READ
            )
        )
        replied = await handler.handle(
            UpdateContactStatusCommand(
                actor_id="1", contact_id=contact.id, status=ContactStatus.REPLIED
            )
        )

        assert first.read_at is not None
        assert replied.read_at == first.read_at
        assert replied.replied_at is not None

    async def test_unknown_contact(self):
        handler = UpdateContactStatusHandler(_FakeContactRepo())

        with pytest.raises(ContactNotFoundError):
            await handler.handle(
                UpdateContactStatusCommand(
                    actor_id="1", contact_id=5, status=ContactStatus.ARCHIVED
                )
            )

    async def test_inbox_filters_by_status(self):
        repo = _FakeContactRepo()
        submit = SubmitContactHandler(repo)
        for i in range(3):
            await submit.handle(_submission(name=f"Sender {i}"))
        await UpdateContactStatusHandler(repo).handle(
            UpdateContactStatusCommand(
                actor_id="1", contact_id=2, status=ContactStatus.READ
            )
        )
        policy = contact_list_policy(page_size=20)

        unread = await ContactQueryService(repo).list_contacts(
            normalize_list_params(RawListParams(status="unread"), policy, Visibility.ANY)
        )
        everything = await ContactQueryService(repo).list_contacts(
            normalize_list_params(RawListParams(), policy, Visibility.ANY)
        )

        assert unread.total == 2
        assert everything.total == 3
        assert everything.page_size == 20


class TestNewsletter:
    async def test_new_subscriber(self):
        repo = _FakeSubscriberRepo()

        subscriber = await SubscribeHandler(repo).handle(
            SubscribeCommand(email="Reader@Example.com", name="Reader")
        )

        assert subscriber.email == "reader@example.com"
        assert subscriber.status == SubscriberStatus.ACTIVE
        assert subscriber.token and len(subscriber.token) >= 32
        assert subscriber.subscribed_at is not None

    async def test_tokens_are_unique(self):
        repo = _FakeSubscriberRepo()
        handler = SubscribeHandler(repo)

        a = await handler.handle(SubscribeCommand(email="a@example.com"))
        b = await handler.handle(SubscribeCommand(email="b@example.com"))

        assert a.token != b.token

    async def test_active_subscriber_rejected(self):
        repo = _FakeSubscriberRepo()
        handler = SubscribeHandler(repo)
        await handler.handle(SubscribeCommand(email="a@example.com"))

        with pytest.raises(AlreadySubscribedError) as exc_info:
            await handler.handle(SubscribeCommand(email="A@example.com"))

        assert exc_info.value.error_code == "ALREADY_SUBSCRIBED"
        assert exc_info.value.http_status_code == 400

    @pytest.mark.parametrize(
        "previous", [SubscriberStatus.UNSUBSCRIBED, SubscriberStatus.BOUNCED]
    )
    async def test_reactivation(self, previous):
        repo = _FakeSubscriberRepo()
        handler = SubscribeHandler(repo)
        first = await handler.handle(SubscribeCommand(email="a@example.com"))
        repo.items[first.id].status = previous

        again = await handler.handle(SubscribeCommand(email="a@example.com"))

        assert again.id == first.id
        assert again.status == SubscriberStatus.ACTIVE
        assert again.token == first.token
        assert len(repo.items) == 1
