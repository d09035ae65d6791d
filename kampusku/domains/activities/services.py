"""Activity catalog service layer."""

from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from kampusku.core.errors import InvalidRequest
from kampusku.domains.activities.models import Activity
from kampusku.domains.enrollments.models import Enrollment
from kampusku.extensions import db

logger = logging.getLogger(__name__)


def _check_range(start_date: dt.date, end_date: dt.date) -> None:
    if end_date < start_date:
        raise InvalidRequest("Tanggal akhir tidak boleh sebelum tanggal mulai", code="invalid_date_range")


def list_activities() -> List[Activity]:
    return Activity.query.order_by(Activity.start_date.desc(), Activity.id.desc()).all()


def get_activity(activity_id: int) -> Optional[Activity]:
    return db.session.get(Activity, activity_id)


def create_activity(
    *, name: str, start_date: dt.date, end_date: dt.date, description: Optional[str] = None
) -> Activity:
    _check_range(start_date, end_date)
    activity = Activity(
        name=name.strip(),
        description=(description or "").strip(),
        start_date=start_date,
        end_date=end_date,
    )
    db.session.add(activity)
    db.session.commit()
    logger.info("Created activity %s (%s)", activity.id, activity.name)
    return activity


def update_activity(
    activity_id: int,
    *,
    name: str,
    start_date: dt.date,
    end_date: dt.date,
    description: Optional[str] = None,
) -> int:
    """Overwrite an activity in a single UPDATE and return the affected row count.

    A missing id is not an error: zero rows are updated.
    """
    _check_range(start_date, end_date)
    updated = Activity.query.filter_by(id=activity_id).update(
        {
            Activity.name: name.strip(),
            Activity.description: (description or "").strip(),
            Activity.start_date: start_date,
            Activity.end_date: end_date,
        },
    )
    db.session.commit()
    if not updated:
        logger.info("Update of missing activity %s ignored", activity_id)
    return updated


def delete_activity(activity_id: int) -> int:
    """Remove an activity together with its enrollments in one transaction."""
    Enrollment.query.filter_by(activity_id=activity_id).delete()
    deleted = Activity.query.filter_by(id=activity_id).delete()
    db.session.commit()
    logger.info("Deleted activity %s (%d row)", activity_id, deleted)
    return deleted
