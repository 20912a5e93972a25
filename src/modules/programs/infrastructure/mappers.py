"""Program entity-model mappers."""

from src.core.infrastructure.database.mapper import BaseMapper
from src.modules.programs.domain.entities import Instructor, Program, Schedule
from src.modules.programs.infrastructure.models import (
    InstructorModel,
    ProgramModel,
    ScheduleModel,
)


class ProgramMapper(BaseMapper[Program, ProgramModel]):
    """Program entity-model mapper."""

    def to_domain(self, model: ProgramModel) -> Program:
        return Program(
            id=model.id,
            title=model.title,
            slug=model.slug,
            category_id=model.category_id,
            instructor_id=model.instructor_id,
            description=model.description,
            content=model.content,
            image=model.image,
            duration=model.duration,
            price=model.price,
            max_participants=model.max_participants,
            requirements=model.requirements,
            benefits=list(model.benefits or []),
            certificate=model.certificate,
            status=model.status,
            views=model.views,
            meta_title=model.meta_title,
            meta_description=model.meta_description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def to_model(self, entity: Program) -> ProgramModel:
        return ProgramModel(
            id=entity.id,
            title=entity.title,
            slug=entity.slug,
            category_id=entity.category_id,
            instructor_id=entity.instructor_id,
            description=entity.description,
            content=entity.content,
            image=entity.image,
            duration=entity.duration,
            price=entity.price,
            max_participants=entity.max_participants,
            requirements=entity.requirements,
            benefits=list(entity.benefits),
            certificate=entity.certificate,
            status=entity.status,
            views=entity.views,
            meta_title=entity.meta_title,
            meta_description=entity.meta_description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class InstructorMapper(BaseMapper[Instructor, InstructorModel]):
    """Instructor entity-model mapper."""

    def to_domain(self, model: InstructorModel) -> Instructor:
        return Instructor.model_validate(model, from_attributes=True)

    def to_model(self, entity: Instructor) -> InstructorModel:
        return InstructorModel(**entity.model_dump())


class ScheduleMapper(BaseMapper[Schedule, ScheduleModel]):
    """Schedule entity-model mapper."""

    def to_domain(self, model: ScheduleModel) -> Schedule:
        return Schedule.model_validate(model, from_attributes=True)

    def to_model(self, entity: Schedule) -> ScheduleModel:
        return ScheduleModel(**entity.model_dump())
