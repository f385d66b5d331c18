from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ServiceCategory(str, Enum):
    # Declaration order is the classifier's evaluation order.
    CONSULTATION = "CONSULTATION"
    DOCUMENT_PREPARATION = "DOCUMENT_PREPARATION"
    COURT_APPEARANCE = "COURT_APPEARANCE"
    RESEARCH = "RESEARCH"
    COMMUNITY_OUTREACH = "COMMUNITY_OUTREACH"
    MEDIATION = "MEDIATION"
    CLIENT_MEETING = "CLIENT_MEETING"
    CASE_REVIEW = "CASE_REVIEW"

    @property
    def display_name(self) -> str:
        return self.value.lower().replace("_", " ")


class CaseCategory(str, Enum):
    FAMILY = "FAMILY"
    CRIMINAL = "CRIMINAL"
    CIVIL = "CIVIL"
    PROPERTY = "PROPERTY"
    LABOR = "LABOR"
    COMMERCIAL = "COMMERCIAL"
    CONSTITUTIONAL = "CONSTITUTIONAL"
    ADMINISTRATIVE = "ADMINISTRATIVE"
    TAX = "TAX"
    IMMIGRATION = "IMMIGRATION"
    HUMAN_RIGHTS = "HUMAN_RIGHTS"
    ENVIRONMENTAL = "ENVIRONMENTAL"
    OTHER = "OTHER"


class ActivityStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    PAUSED = "PAUSED"


class EventStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"


class BranchStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"


def in_enum_order(categories) -> list[ServiceCategory]:
    """Stable ordering for category sets when they leave the engine."""
    return [c for c in ServiceCategory if c in categories]


@dataclass(frozen=True)
class Activity:
    """A time-tracked service entry logged against a case."""

    id: str
    case_id: str
    description: str
    status: ActivityStatus
    created_at: datetime
    start_time: datetime
    duration: int = 0  # seconds
    end_time: datetime | None = None
    service_category: ServiceCategory | None = None
    needs_follow_up: bool = False
    follow_up_notes: str | None = None
    location: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == ActivityStatus.COMPLETED


@dataclass(frozen=True)
class TimelineEvent:
    id: str
    title: str
    description: str
    status: EventStatus
    date: datetime
    service_category: ServiceCategory
    duration: int | None = None


@dataclass(frozen=True)
class TimelineBranch:
    id: str
    title: str
    events: tuple[TimelineEvent, ...]
    status: BranchStatus
    progress: float


@dataclass(frozen=True)
class TimelineTraffic:
    main_branch: TimelineBranch
    parallel_branches: tuple[TimelineBranch, ...] = ()
    # Reserved for joining branches; nothing produces merge points yet.
    merge_points: tuple = ()


@dataclass(frozen=True)
class CaseProgress:
    total_progress: float
    completed_services: frozenset[ServiceCategory]
    remaining_services: frozenset[ServiceCategory]
    optional_services_completed: frozenset[ServiceCategory]
    timeline: TimelineTraffic

    @property
    def ready_for_review(self) -> bool:
        return not self.remaining_services


@dataclass(frozen=True)
class ProgressSummary:
    cases: dict[str, CaseProgress] = field(default_factory=dict)
    missing: tuple[str, ...] = ()
    average_progress: int = 0
