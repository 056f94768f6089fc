import pytest

from models.courses import Course as CourseModel
from models.professor_pages import ProfessorPage as ProfessorPageModel
from models.ratings import Rating as RatingModel
from scripts.recompute_ratings import recompute_all


def test_recompute_all(db, users, course, professor_page):
    # rows written behind the aggregator's back leave the cache stale
    db.add_all([
        RatingModel(user_id=users["alice"], course_id=course, value=2.0),
        RatingModel(user_id=users["bob"], course_id=course, value=5.0),
        RatingModel(user_id=users["alice"], professor_page_id=professor_page, value=4.0),
    ])
    db.commit()

    assert recompute_all(db) == 2

    db.expire_all()
    assert db.get(CourseModel, course).rating == pytest.approx(3.5)
    assert db.get(ProfessorPageModel, professor_page).rating == pytest.approx(4.0)
