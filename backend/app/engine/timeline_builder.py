"""
Branching timeline for the case progress view.

The main branch holds the required path: completed activities in a
required category plus one pending placeholder per required category
nobody has worked on yet. The single parallel branch holds completed
optional work.

Branch progress is count based. The main branch counts every completed
activity, optional ones included, against the pending placeholders.
Neither figure is expected to agree with the weight-based
``total_progress`` from the calculator; they drive different widgets.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence

from ..knowledge import ProgressConfig
from ..models import (
    Activity,
    BranchStatus,
    CaseCategory,
    EventStatus,
    ServiceCategory,
    TimelineBranch,
    TimelineEvent,
    TimelineTraffic,
    in_enum_order,
)

MAIN_BRANCH_ID = "main"
OPTIONAL_BRANCH_ID = "optional"
PENDING_DESCRIPTION = "Required service that needs to be completed"


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC so every event date compares.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def completed_event(activity: Activity) -> TimelineEvent:
    # The service resolves a missing category before events are built.
    category = activity.service_category
    return TimelineEvent(
        id=activity.id,
        title=f"Service: {category.value}",
        description=activity.description,
        status=EventStatus.COMPLETED,
        date=as_utc(activity.created_at),
        service_category=category,
        duration=activity.duration,
    )


def pending_event(index: int, service: ServiceCategory, now: datetime) -> TimelineEvent:
    return TimelineEvent(
        id=f"pending-{index}",
        title=f"Pending {service.display_name}",
        description=PENDING_DESCRIPTION,
        status=EventStatus.PENDING,
        date=as_utc(now),
        service_category=service,
    )


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100


def _by_date(events: Iterable[TimelineEvent]) -> tuple[TimelineEvent, ...]:
    return tuple(sorted(events, key=lambda e: e.date))


def build_timeline(
    config: ProgressConfig,
    case_category: CaseCategory,
    completed_activities: Sequence[Activity],
    remaining_required: Iterable[ServiceCategory],
    now: datetime,
) -> TimelineTraffic:
    rule = config.rules_for(case_category)

    completed = [completed_event(a) for a in completed_activities]
    pending = [
        pending_event(i, service, now)
        for i, service in enumerate(in_enum_order(remaining_required))
    ]

    required_done = [e for e in completed if e.service_category in rule.required]
    main_branch = TimelineBranch(
        id=MAIN_BRANCH_ID,
        title="Required Services",
        events=_by_date(required_done + pending),
        status=BranchStatus.IN_PROGRESS if pending else BranchStatus.COMPLETED,
        progress=_percent(len(completed), len(completed) + len(pending)),
    )

    optional_done = [e for e in completed if e.service_category in rule.optional]
    optional_branch = TimelineBranch(
        id=OPTIONAL_BRANCH_ID,
        title="Optional Services",
        events=_by_date(optional_done),
        status=BranchStatus.IN_PROGRESS,
        progress=_percent(
            len({e.service_category for e in optional_done}), len(rule.optional)
        ),
    )

    return TimelineTraffic(
        main_branch=main_branch,
        parallel_branches=(optional_branch,),
        merge_points=(),
    )
