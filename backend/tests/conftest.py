"""
Pytest configuration and fixtures for the case progress tests.

Provides factory helpers for activities and case records plus a service
wired to an in-memory repository and a fixed clock.
"""
import pytest
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from app.engine import ProgressService
from app.knowledge import DEFAULT_CONFIG
from app.models import (
    Activity,
    ActivityStatus,
    CaseCategory,
    ServiceCategory,
)
from app.repository import CaseRecord, InMemoryCaseRepository


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
START = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_activity(
    service: ServiceCategory = None,
    description: str = "Logged work",
    case_id: str = "CASE-001",
    status: ActivityStatus = ActivityStatus.COMPLETED,
    day: int = 0,
    duration: int = 3600,
    id: str = None,
) -> Activity:
    """Create an Activity; ``day`` offsets created_at from START."""
    created = START + timedelta(days=day)
    return Activity(
        id=id or str(uuid4()),
        case_id=case_id,
        description=description,
        service_category=service,
        status=status,
        created_at=created,
        start_time=created,
        end_time=created + timedelta(seconds=duration),
        duration=duration,
    )


def make_record(
    category: CaseCategory = CaseCategory.CRIMINAL,
    activities=(),
    case_id: str = "CASE-001",
) -> CaseRecord:
    return CaseRecord(case_id=case_id, category=category, activities=tuple(activities))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def config():
    return DEFAULT_CONFIG.validate()


@pytest.fixture
def repository():
    return InMemoryCaseRepository()


@pytest.fixture
def service(repository, config):
    return ProgressService(repository=repository, config=config, clock=lambda: NOW)
