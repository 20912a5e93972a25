"""Newsletter entity-model mapper."""

from src.core.infrastructure.database.mapper import BaseMapper
from src.modules.newsletter.domain.entities import NewsletterSubscriber
from src.modules.newsletter.infrastructure.models import NewsletterSubscriberModel


class SubscriberMapper(BaseMapper[NewsletterSubscriber, NewsletterSubscriberModel]):
    def to_domain(self, model: NewsletterSubscriberModel) -> NewsletterSubscriber:
        return NewsletterSubscriber.model_validate(model, from_attributes=True)

    def to_model(self, entity: NewsletterSubscriber) -> NewsletterSubscriberModel:
        return NewsletterSubscriberModel(**entity.model_dump())
