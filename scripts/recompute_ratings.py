import logging

from sqlalchemy.orm import Session
from config.logging_config import setup_logging
from database.db import SessionLocal
from models.courses import Course as CourseModel
from models.professor_pages import ProfessorPage as ProfessorPageModel
from schemas.ratings import TargetKind
from services.rating_service import RatingAggregator

logger = logging.getLogger(__name__)


def recompute_all(db: Session) -> int:
    """Rewrite every cached average from the ratings table; returns targets touched."""
    aggregator = RatingAggregator(db)
    count = 0

    for kind, model in ((TargetKind.COURSE, CourseModel), (TargetKind.PROFESSOR_PAGE, ProfessorPageModel)):
        target_ids = [row[0] for row in db.query(model.id).all()]
        for target_id in target_ids:
            average = aggregator.refresh_average(kind, target_id)
            logger.debug("%s %s → %.3f", kind.value, target_id, average)
            count += 1

    return count


def main():
    setup_logging()
    db: Session = SessionLocal()
    try:
        count = recompute_all(db)
    finally:
        db.close()
    logger.info("✅ Recomputed cached ratings for %d targets", count)


if __name__ == "__main__":
    main()
