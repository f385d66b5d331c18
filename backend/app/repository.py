from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

import psycopg2
import psycopg2.extensions
import psycopg2.extras

from .models import Activity, ActivityStatus, CaseCategory, ServiceCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaseRecord:
    """A case's category and its activity log, read from one snapshot."""

    case_id: str
    category: CaseCategory
    activities: tuple[Activity, ...] = ()


class CaseRepository(Protocol):
    def fetch_case_with_activities(self, case_id: str) -> CaseRecord | None: ...


@dataclass
class InMemoryCaseRepository:
    records: dict[str, CaseRecord] = field(default_factory=dict)

    def add(self, record: CaseRecord) -> None:
        self.records[record.case_id] = record

    def fetch_case_with_activities(self, case_id: str) -> CaseRecord | None:
        return self.records.get(case_id)


CASE_QUERY = "SELECT id, category FROM cases WHERE id = %s"

TIME_ENTRIES_QUERY = """
    SELECT id, case_id, description, service_type, status, created_at,
           start_time, end_time, duration, needs_follow_up, follow_up_notes,
           outreach_location
    FROM time_entries
    WHERE case_id = %s AND status = %s
    ORDER BY created_at ASC
"""


def _activity_from_row(row: dict) -> Activity:
    return Activity(
        id=str(row["id"]),
        case_id=str(row["case_id"]),
        description=row["description"] or "",
        service_category=(
            ServiceCategory(row["service_type"]) if row["service_type"] else None
        ),
        status=ActivityStatus(row["status"]),
        created_at=row["created_at"],
        start_time=row["start_time"],
        end_time=row["end_time"],
        duration=row["duration"] or 0,
        needs_follow_up=bool(row["needs_follow_up"]),
        follow_up_notes=row["follow_up_notes"],
        location=row["outreach_location"],
    )


class PostgresCaseRepository:
    """
    Reads cases from the schema in ``db/schema.sql``.

    The case row and its time entries are read inside one read-only
    REPEATABLE READ transaction, so the category and the activity list
    always come from the same snapshot.
    """

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url

    def fetch_case_with_activities(self, case_id: str) -> CaseRecord | None:
        conn = psycopg2.connect(self.database_url)
        try:
            conn.set_session(
                isolation_level=psycopg2.extensions.ISOLATION_LEVEL_REPEATABLE_READ,
                readonly=True,
            )
            with conn:
                with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                    cur.execute(CASE_QUERY, (case_id,))
                    case_row = cur.fetchone()
                    if case_row is None:
                        return None
                    cur.execute(
                        TIME_ENTRIES_QUERY, (case_id, ActivityStatus.COMPLETED.value)
                    )
                    rows = cur.fetchall()
        finally:
            conn.close()

        logger.debug("Fetched case %s with %d completed entries", case_id, len(rows))
        return CaseRecord(
            case_id=str(case_row["id"]),
            category=CaseCategory(case_row["category"]),
            activities=tuple(_activity_from_row(r) for r in rows),
        )
