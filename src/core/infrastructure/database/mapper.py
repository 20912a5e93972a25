"""Base mapper for entity-model conversion."""

from abc import ABC, abstractmethod
from typing import TypeVar

E = TypeVar("E")  # Entity type
M = TypeVar("M")  # Model type


class BaseMapper[E, M](ABC):
    """Base mapper for converting between domain entities and database models."""

    @abstractmethod
    def to_domain(self, model: M) -> E:
        """Convert database model to domain entity."""
        pass

    @abstractmethod
    def to_model(self, entity: E) -> M:
        """Convert domain entity to database model."""
        pass

    def to_domain_list(self, models: list[M]) -> list[E]:
        """Convert list of models to list of entities."""
        return [self.to_domain(model) for model in models]

    def to_domain_or_none(self, model: M | None) -> E | None:
        """Convert an optional model, e.g. the side of an outer join."""
        return self.to_domain(model) if model is not None else None

    def apply_to_model(self, entity: E, model: M) -> M:
        """Copy entity state onto an already-persisted model.

        id 和 created_at 不会被覆盖。
        """
        values = self.to_model(entity).model_dump(exclude={"id", "created_at"})
        for key, value in values.items():
            setattr(model, key, value)
        return model
