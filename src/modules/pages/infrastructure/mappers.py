"""Page entity-model mapper."""

from src.core.infrastructure.database.mapper import BaseMapper
from src.modules.pages.domain.entities import Page
from src.modules.pages.infrastructure.models import PageModel


class PageMapper(BaseMapper[Page, PageModel]):
    def to_domain(self, model: PageModel) -> Page:
        return Page.model_validate(model, from_attributes=True)

    def to_model(self, entity: Page) -> PageModel:
        return PageModel(**entity.model_dump())
