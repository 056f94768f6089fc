"""
services/rating_service.py

Keeps the cached ``rating`` column of courses and professor pages equal to the
mean of their ratings, and enforces one rating per user per target.

Every public write runs as one transaction on the given Session:
    rating row insert/update/delete  →  AVG() recompute  →  target.rating update
If any step fails the whole transaction is rolled back, so the cached average
never drifts from the rating set.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.courses import Course as CourseModel
from models.professor_pages import ProfessorPage as ProfessorPageModel
from models.ratings import Rating as RatingModel, MIN_RATING, MAX_RATING
from schemas.ratings import RatingTarget, TargetKind
from services.exceptions import NotFoundError, RatingError, StoreError, ValidationError

logger = logging.getLogger(__name__)

# target kind → (target model, Rating foreign key attribute)
_TARGETS = {
    TargetKind.COURSE: (CourseModel, "course_id"),
    TargetKind.PROFESSOR_PAGE: (ProfessorPageModel, "professor_page_id"),
}


class RatingAggregator:
    def __init__(self, db: Session):
        self.db = db

    # ==========================================================
    # [READ]
    # ==========================================================

    def average_for(self, kind: TargetKind, target_id: int) -> float:
        """Mean of every rating value for the target, 0.0 when it has none."""
        fk = self._fk_column(kind)
        avg = self.db.execute(
            select(func.avg(RatingModel.value)).where(fk == target_id)
        ).scalar()
        return float(avg) if avg is not None else 0.0

    def get_user_rating(self, user_id: int, kind: TargetKind, target_id: int) -> Optional[RatingModel]:
        fk = self._fk_column(kind)
        return self.db.execute(
            select(RatingModel).where(RatingModel.user_id == user_id, fk == target_id)
        ).scalar_one_or_none()

    # ==========================================================
    # [WRITE]
    # ==========================================================

    def submit_or_update(self, user_id: int, kind: TargetKind, target_id: int, value: float) -> float:
        kind = self._kind(kind)
        value = self._checked_value(value)
        if target_id is None:
            raise ValidationError("Target id is required.")

        with self._transaction():
            target = self._lock_target(kind, target_id)
            if target is None:
                raise NotFoundError(f"{kind.value} {target_id} not found.")

            rating = self.get_user_rating(user_id, kind, target_id)
            if rating is not None:
                rating.value = value
                logger.info("Updated rating id=%s user=%s %s=%s value=%s", rating.id, user_id, kind.value, target_id, value)
            else:
                self._insert_or_update(user_id, kind, target_id, value)

            self.db.flush()
            average = self._store_average(target, kind, target_id)

        return average

    def delete(self, rating_id: int, requesting_user_id: int) -> Optional[dict]:
        """
        Delete a rating owned by the requesting user.

        Returns {"id": rating_id}, or None when the rating does not exist or
        belongs to someone else (both cases look the same to the caller).
        """
        with self._transaction():
            rating = self.db.get(RatingModel, rating_id)
            if rating is None or rating.user_id != requesting_user_id:
                return None

            # same lock order as submit_or_update: target row first, then the rating row
            target = self.target_of(rating)
            target_row = self._lock_target(target.kind, target.id)

            self.db.delete(rating)
            self.db.flush()
            logger.info("Deleted rating id=%s user=%s %s=%s", rating_id, requesting_user_id, target.kind.value, target.id)

            if target_row is not None:
                self._store_average(target_row, target.kind, target.id)

        return {"id": rating_id}

    def refresh_average(self, kind: TargetKind, target_id: int) -> float:
        """Recompute and persist the cached average for one target."""
        kind = self._kind(kind)
        with self._transaction():
            target = self._lock_target(kind, target_id)
            if target is None:
                raise NotFoundError(f"{kind.value} {target_id} not found.")
            average = self._store_average(target, kind, target_id)
        return average

    @staticmethod
    def target_of(rating: RatingModel) -> RatingTarget:
        """The RatingTarget a stored rating points to."""
        return RatingTarget.from_ids(rating.course_id, rating.professor_page_id)

    # ==========================================================
    # internals
    # ==========================================================

    @staticmethod
    def _kind(kind) -> TargetKind:
        try:
            return TargetKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown rating target kind: {kind!r}.") from None

    @staticmethod
    def _checked_value(value) -> float:
        # bool is an int subclass, but True is not a score
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError("Rating value must be a number.")
        if not (MIN_RATING <= value <= MAX_RATING):
            raise ValidationError(f"Rating value must be a number between {MIN_RATING:g} and {MAX_RATING:g}.")
        return float(value)

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.db.commit()
        except RatingError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Rating transaction rolled back: %s", e)
            raise StoreError("Failed to persist rating.") from e
        except Exception:
            self.db.rollback()
            raise

    @staticmethod
    def _fk_column(kind: TargetKind):
        _, fk_name = _TARGETS[RatingAggregator._kind(kind)]
        return getattr(RatingModel, fk_name)

    def _lock_target(self, kind: TargetKind, target_id: int):
        # row lock serializes concurrent writers of the same target (no-op on SQLite)
        model, _ = _TARGETS[self._kind(kind)]
        return self.db.execute(
            select(model).where(model.id == target_id).with_for_update()
        ).scalar_one_or_none()

    def _insert_or_update(self, user_id: int, kind: TargetKind, target_id: int, value: float) -> RatingModel:
        """
        Insert a new rating inside a savepoint. If a concurrent request inserted
        the same (user, target) first, the unique constraint fires and the
        existing row is updated instead.
        """
        _, fk_name = _TARGETS[TargetKind(kind)]
        rating = RatingModel(user_id=user_id, value=value, **{fk_name: target_id})
        try:
            with self.db.begin_nested():
                self.db.add(rating)
            logger.info("Created rating id=%s user=%s %s=%s value=%s", rating.id, user_id, kind.value, target_id, value)
            return rating
        except IntegrityError:
            existing = self.get_user_rating(user_id, kind, target_id)
            if existing is None:
                # not the uniqueness rule (e.g. a foreign key) → propagate
                raise
            logger.warning("Concurrent insert for user=%s %s=%s, retrying as update", user_id, kind.value, target_id)
            existing.value = value
            return existing

    def _store_average(self, target, kind: TargetKind, target_id: int) -> float:
        average = self.average_for(kind, target_id)
        target.rating = average
        self.db.flush()
        return average
