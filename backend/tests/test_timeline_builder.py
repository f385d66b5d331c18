import dataclasses
from datetime import datetime, timezone

import pytest

from app.engine import build_timeline
from app.models import BranchStatus, CaseCategory, EventStatus, ServiceCategory

from tests.conftest import NOW, make_activity

CONSULTATION = ServiceCategory.CONSULTATION
DOCUMENTS = ServiceCategory.DOCUMENT_PREPARATION
COURT = ServiceCategory.COURT_APPEARANCE
OUTREACH = ServiceCategory.COMMUNITY_OUTREACH


def optional_branch(timeline):
    (branch,) = timeline.parallel_branches
    return branch


class TestMainBranch:

    def test_one_of_three_required(self, config):
        consult = make_activity(CONSULTATION, id="t1")
        timeline = build_timeline(
            config, CaseCategory.CRIMINAL, [consult], {DOCUMENTS, COURT}, now=NOW
        )
        main = timeline.main_branch

        assert main.id == "main"
        assert main.title == "Required Services"
        assert main.status == BranchStatus.IN_PROGRESS
        assert main.progress == pytest.approx(100 / 3)
        assert [e.id for e in main.events] == ["t1", "pending-0", "pending-1"]

    def test_completed_event_shape(self, config):
        consult = make_activity(CONSULTATION, description="Intake call", id="t1")
        timeline = build_timeline(config, CaseCategory.CRIMINAL, [consult], set(), now=NOW)
        event = timeline.main_branch.events[0]

        assert event.title == "Service: CONSULTATION"
        assert event.description == "Intake call"
        assert event.status == EventStatus.COMPLETED
        assert event.date == consult.created_at
        assert event.service_category == CONSULTATION
        assert event.duration == 3600

    def test_pending_placeholders(self, config):
        timeline = build_timeline(
            config, CaseCategory.CRIMINAL, [], {COURT, DOCUMENTS, CONSULTATION}, now=NOW
        )
        events = timeline.main_branch.events

        assert [e.title for e in events] == [
            "Pending consultation",
            "Pending document preparation",
            "Pending court appearance",
        ]
        assert all(e.status == EventStatus.PENDING for e in events)
        assert all(e.date == NOW for e in events)
        assert all(e.duration is None for e in events)
        assert events[0].description == "Required service that needs to be completed"
        assert timeline.main_branch.progress == 0

    def test_all_required_done(self, config):
        activities = [
            make_activity(CONSULTATION, day=0),
            make_activity(DOCUMENTS, day=1),
            make_activity(COURT, day=2),
        ]
        main = build_timeline(
            config, CaseCategory.CRIMINAL, activities, set(), now=NOW
        ).main_branch

        assert main.status == BranchStatus.COMPLETED
        assert main.progress == 100

    def test_events_sorted_by_date(self, config):
        later = make_activity(DOCUMENTS, day=5, id="later")
        earlier = make_activity(CONSULTATION, day=1, id="earlier")
        main = build_timeline(
            config, CaseCategory.CRIMINAL, [later, earlier], {COURT}, now=NOW
        ).main_branch

        assert [e.id for e in main.events] == ["earlier", "later", "pending-0"]

    def test_progress_counts_events_not_weights(self, config):
        activities = [
            make_activity(CONSULTATION, day=0),
            make_activity(CONSULTATION, day=1),
        ]
        main = build_timeline(
            config, CaseCategory.CRIMINAL, activities, {DOCUMENTS, COURT}, now=NOW
        ).main_branch

        assert main.progress == 50

    def test_optional_events_listed_off_main_branch_but_counted(self, config):
        activities = [make_activity(CONSULTATION), make_activity(OUTREACH)]
        main = build_timeline(
            config, CaseCategory.CRIMINAL, activities, {DOCUMENTS, COURT}, now=NOW
        ).main_branch

        assert OUTREACH not in {e.service_category for e in main.events}
        assert main.progress == 50


class TestEventDates:

    def test_naive_created_at_is_treated_as_utc(self, config):
        naive = make_activity(CONSULTATION, id="naive")
        naive = dataclasses.replace(naive, created_at=datetime(2026, 1, 5, 9, 0))
        main = build_timeline(
            config, CaseCategory.CRIMINAL, [naive], {DOCUMENTS, COURT}, now=NOW
        ).main_branch

        assert [e.id for e in main.events] == ["naive", "pending-0", "pending-1"]
        assert main.events[0].date == datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)

    def test_naive_clock_is_treated_as_utc(self, config):
        aware = make_activity(CONSULTATION, id="aware")
        main = build_timeline(
            config,
            CaseCategory.CRIMINAL,
            [aware],
            {COURT},
            now=NOW.replace(tzinfo=None),
        ).main_branch

        assert [e.id for e in main.events] == ["aware", "pending-0"]
        assert main.events[1].date == NOW

    def test_aware_dates_kept_as_is(self, config):
        activity = make_activity(CONSULTATION)
        event = build_timeline(
            config, CaseCategory.CRIMINAL, [activity], set(), now=NOW
        ).main_branch.events[0]

        assert event.date is activity.created_at


class TestOptionalBranch:

    def test_empty(self, config):
        timeline = build_timeline(config, CaseCategory.CRIMINAL, [], set(), now=NOW)
        branch = optional_branch(timeline)

        assert branch.id == "optional"
        assert branch.title == "Optional Services"
        assert branch.events == ()
        assert branch.progress == 0
        assert branch.status == BranchStatus.IN_PROGRESS

    def test_all_optional_done(self, config):
        outreach = make_activity(OUTREACH)
        branch = optional_branch(
            build_timeline(config, CaseCategory.CRIMINAL, [outreach], set(), now=NOW)
        )

        assert branch.progress == 100
        assert [e.service_category for e in branch.events] == [OUTREACH]

    def test_distinct_categories(self, config):
        activities = [
            make_activity(ServiceCategory.RESEARCH, day=0),
            make_activity(ServiceCategory.RESEARCH, day=1),
        ]
        branch = optional_branch(
            build_timeline(config, CaseCategory.CIVIL, activities, set(), now=NOW)
        )

        assert len(branch.events) == 2
        assert branch.progress == 50

    def test_no_optional_categories_is_zero(self, config):
        branch = optional_branch(
            build_timeline(
                config,
                CaseCategory.OTHER,
                [make_activity(CONSULTATION)],
                set(),
                now=NOW,
            )
        )
        assert branch.progress == 0

    def test_merge_points_empty(self, config):
        timeline = build_timeline(config, CaseCategory.FAMILY, [], set(), now=NOW)
        assert timeline.merge_points == ()
