from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import CurrentUser, get_current_user
from schemas.common import ErrorResponse
from schemas.ratings import (
    AverageRatingOut, RatingDeleteOut, RatingOut, RatingSubmit, RatingSubmitOut, RatingTarget,
)
from services.exceptions import NotFoundError
from services.rating_service import RatingAggregator

router = APIRouter(prefix="/ratings", tags=["Ratings"])

_ERRORS = {400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


def get_aggregator(db: Session = Depends(get_db)) -> RatingAggregator:
    return RatingAggregator(db)


def get_target(
    course_id: Optional[int] = Query(default=None, alias="courseId"),
    professor_page_id: Optional[int] = Query(default=None, alias="professorPageId"),
) -> RatingTarget:
    return RatingTarget.from_ids(course_id, professor_page_id)


# ✅ [READ] average rating of a course or professor page
@router.get("", response_model=AverageRatingOut, responses=_ERRORS)
def read_average_rating(
    target: RatingTarget = Depends(get_target),
    aggregator: RatingAggregator = Depends(get_aggregator),
):
    return {"averageRating": aggregator.average_for(target.kind, target.id)}


# ✅ [READ] the logged-in user's own rating for a target
@router.get("/me", responses=_ERRORS)
def read_my_rating(
    target: RatingTarget = Depends(get_target),
    user: CurrentUser = Depends(get_current_user),
    aggregator: RatingAggregator = Depends(get_aggregator),
):
    rating = aggregator.get_user_rating(user.id, target.kind, target.id)
    data = RatingOut.model_validate(rating).model_dump(by_alias=True) if rating else None
    return {"rating": data}


# ✅ [CREATE/UPDATE] submit or overwrite a rating
@router.post("", response_model=RatingSubmitOut, responses=_ERRORS)
def submit_rating(
    body: RatingSubmit,
    user: CurrentUser = Depends(get_current_user),
    aggregator: RatingAggregator = Depends(get_aggregator),
):
    target = body.target
    average = aggregator.submit_or_update(user.id, target.kind, target.id, body.value)
    return RatingSubmitOut(averageRating=average)


# ✅ [DELETE] delete own rating
@router.delete("/{rating_id}", response_model=RatingDeleteOut, responses=_ERRORS)
def delete_rating(
    rating_id: int,
    user: CurrentUser = Depends(get_current_user),
    aggregator: RatingAggregator = Depends(get_aggregator),
):
    deleted = aggregator.delete(rating_id, user.id)
    if deleted is None:
        raise NotFoundError("Rating not found or you do not have permission to delete it.")
    return RatingDeleteOut(id=deleted["id"])
