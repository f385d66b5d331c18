from __future__ import annotations

import dataclasses
import logging
import math
from datetime import datetime, timezone
from typing import Callable, Iterable, Protocol

from ..knowledge import ProgressConfig
from ..models import Activity, CaseProgress, ProgressSummary, ServiceCategory
from ..repository import CaseRepository
from .classifier import KeywordClassifier
from .progress_calculator import compute_progress
from .timeline_builder import build_timeline

logger = logging.getLogger(__name__)


class ServiceClassifier(Protocol):
    def classify(self, description: str | None) -> ServiceCategory: ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProgressService:
    """
    Entry point for case progress.

    Reads a case through the repository, resolves missing service
    categories, scores the case and lays out its timeline. Nothing is
    written back; calling it twice on unchanged data with the same clock
    gives equal results.
    """

    def __init__(
        self,
        repository: CaseRepository,
        config: ProgressConfig,
        classifier: ServiceClassifier | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.repository = repository
        self.config = config
        self.classifier = classifier or KeywordClassifier(
            config.keywords, default=config.default_service
        )
        self.clock = clock

    def get_case_progress(self, case_id: str) -> CaseProgress | None:
        record = self.repository.fetch_case_with_activities(case_id)
        if record is None:
            logger.info("Case %s not found", case_id)
            return None

        activities = self._resolve_categories(
            a for a in record.activities if a.is_completed
        )
        score = compute_progress(
            self.config,
            record.category,
            (a.service_category for a in activities),
        )
        timeline = build_timeline(
            self.config,
            record.category,
            activities,
            score.remaining,
            now=self.clock(),
        )

        logger.debug(
            "Case %s (%s): %d completed entries, total %.1f, %d required remaining",
            case_id,
            record.category.value,
            len(activities),
            score.total,
            len(score.remaining),
        )
        return CaseProgress(
            total_progress=score.total,
            completed_services=score.completed,
            remaining_services=score.remaining,
            optional_services_completed=score.optional_completed,
            timeline=timeline,
        )

    def summarize(self, case_ids: Iterable[str]) -> ProgressSummary:
        cases: dict[str, CaseProgress] = {}
        missing: list[str] = []
        for case_id in case_ids:
            if case_id in cases or case_id in missing:
                continue
            progress = self.get_case_progress(case_id)
            if progress is None:
                missing.append(case_id)
            else:
                cases[case_id] = progress

        average = 0
        if cases:
            mean = sum(p.total_progress for p in cases.values()) / len(cases)
            average = math.floor(mean + 0.5)
        return ProgressSummary(cases=cases, missing=tuple(missing), average_progress=average)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _resolve_categories(self, activities: Iterable[Activity]) -> list[Activity]:
        # Classified once per pass; the stored record keeps its empty category.
        resolved = []
        for activity in activities:
            if activity.service_category is None:
                activity = dataclasses.replace(
                    activity,
                    service_category=self.classifier.classify(activity.description),
                )
            resolved.append(activity)
        return resolved
