from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.ratings import MIN_RATING, MAX_RATING
from services.exceptions import ValidationError


class TargetKind(str, Enum):
    COURSE = "course"
    PROFESSOR_PAGE = "professorPage"


class RatingTarget(BaseModel):
    """A Course or a ProfessorPage, the two things a rating can point to."""

    kind: TargetKind
    id: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_ids(cls, course_id: Optional[int], professor_page_id: Optional[int]) -> "RatingTarget":
        # exactly one of the two ids must be set
        if course_id is not None and professor_page_id is not None:
            raise ValidationError("Provide either courseId or professorPageId, not both.")
        if course_id is not None:
            return cls(kind=TargetKind.COURSE, id=course_id)
        if professor_page_id is not None:
            return cls(kind=TargetKind.PROFESSOR_PAGE, id=professor_page_id)
        raise ValidationError("courseId or professorPageId is required.")


# ✅ input: target selector shared by GET and POST
class RatingTargetQuery(BaseModel):
    course_id: Optional[int] = Field(default=None, alias="courseId")
    professor_page_id: Optional[int] = Field(default=None, alias="professorPageId")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def target(self) -> RatingTarget:
        return RatingTarget.from_ids(self.course_id, self.professor_page_id)


# ✅ input: POST /ratings body
class RatingSubmit(RatingTargetQuery):
    value: float = Field(..., ge=MIN_RATING, le=MAX_RATING, description="score between 1 and 5")

    @model_validator(mode="after")
    def _check_target(self):
        # raises ValidationError (a ValueError) → request validation error
        RatingTarget.from_ids(self.course_id, self.professor_page_id)
        return self


# ✅ output
class RatingOut(BaseModel):
    id: int
    user_id: int = Field(serialization_alias="userId")
    value: float
    course_id: Optional[int] = Field(default=None, serialization_alias="courseId")
    professor_page_id: Optional[int] = Field(default=None, serialization_alias="professorPageId")

    model_config = ConfigDict(from_attributes=True)


class AverageRatingOut(BaseModel):
    averageRating: float


class RatingSubmitOut(BaseModel):
    message: str = "Rating submitted successfully."
    averageRating: float


class RatingDeleteOut(BaseModel):
    message: str = "Rating deleted successfully."
    id: int
