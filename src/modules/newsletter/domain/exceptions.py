"""Newsletter domain exceptions."""

from fastapi import status

from src.core.domain.exceptions import DomainException, EntityNotFoundError


class AlreadySubscribedError(DomainException):
    """Raised when an active subscriber signs up again."""

    http_status_code = status.HTTP_400_BAD_REQUEST
    error_code = "ALREADY_SUBSCRIBED"

    def __init__(self, email: str):
        self.email = email
        super().__init__("This email is already subscribed to our newsletter")


class SubscriberNotFoundError(EntityNotFoundError):
    def __init__(self, subscriber_id: int):
        super().__init__("NewsletterSubscriber", subscriber_id)
