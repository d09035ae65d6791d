"""Enrollment service layer.

``enroll_student`` runs its checks and the insert inside one transaction; the
``uq_pendaftaran_user_kegiatan`` constraint is the final word on duplicates, so
two concurrent attempts for the same student and activity yield exactly one row.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import contains_eager

from kampusku.core.auth.schemas import SessionUser
from kampusku.core.errors import ConflictError, DeadlineError, NotFoundError
from kampusku.domains.activities.models import Activity
from kampusku.domains.enrollments.models import Enrollment
from kampusku.domains.enrollments.schemas import EnrollmentCreate
from kampusku.extensions import db

logger = logging.getLogger(__name__)

ALREADY_ENROLLED_MESSAGE = "Sudah mendaftar kegiatan ini"


def _already_enrolled() -> ConflictError:
    return ConflictError(ALREADY_ENROLLED_MESSAGE, code="already_enrolled")


def enroll_student(
    session_user: SessionUser, payload: EnrollmentCreate, *, today: Optional[dt.date] = None
) -> Enrollment:
    """Register ``session_user`` for an activity; the first failing check wins.

    Registration stays open through the whole of ``end_date`` and closes at the
    start of the following day, rather than at midnight when ``end_date`` begins.
    """
    activity = db.session.get(Activity, payload.activity_id)
    if activity is None:
        raise NotFoundError("Kegiatan tidak ditemukan", code="activity_not_found")

    # The end date is the last day registration is open.
    today = today or dt.date.today()
    if today > activity.end_date:
        logger.info(
            "Rejected enrollment of user %s for activity %s: closed on %s",
            session_user.id,
            activity.id,
            activity.end_date.isoformat(),
        )
        raise DeadlineError()

    duplicate = Enrollment.query.filter_by(user_id=session_user.id, activity_id=activity.id).first()
    if duplicate:
        raise _already_enrolled()

    enrollment = Enrollment(
        user_id=session_user.id,
        name=session_user.username,
        student_number=payload.student_number,
        program=payload.program,
        email=session_user.email,
        activity_id=activity.id,
    )
    db.session.add(enrollment)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        logger.info("Concurrent duplicate enrollment of user %s for activity %s", session_user.id, activity.id)
        raise _already_enrolled() from exc

    logger.info("User %s enrolled in activity %s", session_user.id, activity.id)
    return enrollment


def _joined_query():
    return (
        Enrollment.query.join(Activity, Enrollment.activity_id == Activity.id)
        .options(contains_eager(Enrollment.activity))
        .order_by(Enrollment.registered_at.desc(), Enrollment.id.desc())
    )


def list_enrollments_for_admin(activity_id: Optional[int] = None) -> List[Enrollment]:
    query = _joined_query()
    if activity_id:
        query = query.filter(Enrollment.activity_id == activity_id)
    return query.all()


def list_enrollments_for_student(user_id: int) -> List[Enrollment]:
    return _joined_query().filter(Enrollment.user_id == user_id).all()
