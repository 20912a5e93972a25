"""Contact entity-model mapper."""

from src.core.infrastructure.database.mapper import BaseMapper
from src.modules.contacts.domain.entities import Contact
from src.modules.contacts.infrastructure.models import ContactModel


class ContactMapper(BaseMapper[Contact, ContactModel]):
    def to_domain(self, model: ContactModel) -> Contact:
        return Contact.model_validate(model, from_attributes=True)

    def to_model(self, entity: Contact) -> ContactModel:
        return ContactModel(**entity.model_dump())
