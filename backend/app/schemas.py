from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import (
    BranchStatus,
    CaseProgress,
    EventStatus,
    ServiceCategory,
    TimelineBranch,
    TimelineEvent,
    in_enum_order,
)


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimelineEventSchema(CamelModel):
    id: str
    title: str
    description: str
    status: EventStatus
    date: datetime
    service_category: ServiceCategory
    duration: Optional[int] = None

    @classmethod
    def from_event(cls, event: TimelineEvent) -> "TimelineEventSchema":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            status=event.status,
            date=event.date,
            service_category=event.service_category,
            duration=event.duration,
        )


class TimelineBranchSchema(CamelModel):
    id: str
    title: str
    events: list[TimelineEventSchema]
    status: BranchStatus
    progress: float = Field(ge=0, le=100)

    @classmethod
    def from_branch(cls, branch: TimelineBranch) -> "TimelineBranchSchema":
        return cls(
            id=branch.id,
            title=branch.title,
            events=[TimelineEventSchema.from_event(e) for e in branch.events],
            status=branch.status,
            progress=branch.progress,
        )


class TimelineTrafficSchema(CamelModel):
    main_branch: TimelineBranchSchema
    parallel_branches: list[TimelineBranchSchema]
    merge_points: list[dict] = Field(default_factory=list)


class CaseProgressResponse(CamelModel):
    total_progress: float = Field(ge=0, le=100)
    completed_services: list[ServiceCategory]
    remaining_services: list[ServiceCategory]
    optional_services_completed: list[ServiceCategory]
    ready_for_review: bool
    timeline: TimelineTrafficSchema

    @classmethod
    def from_progress(cls, progress: CaseProgress) -> "CaseProgressResponse":
        timeline = progress.timeline
        return cls(
            total_progress=progress.total_progress,
            completed_services=in_enum_order(progress.completed_services),
            remaining_services=in_enum_order(progress.remaining_services),
            optional_services_completed=in_enum_order(
                progress.optional_services_completed
            ),
            ready_for_review=progress.ready_for_review,
            timeline=TimelineTrafficSchema(
                main_branch=TimelineBranchSchema.from_branch(timeline.main_branch),
                parallel_branches=[
                    TimelineBranchSchema.from_branch(b)
                    for b in timeline.parallel_branches
                ],
                merge_points=list(timeline.merge_points),
            ),
        )


class ProgressSummaryResponse(CamelModel):
    cases: dict[str, CaseProgressResponse]
    missing: list[str]
    average_progress: int
