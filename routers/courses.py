from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import CurrentUser, require_roles
from models.courses import Course as CourseModel
from models.users import UserType
from schemas.courses import Course as CourseSchema, CourseCreate
from services.exceptions import NotFoundError

router = APIRouter(prefix="/courses", tags=["Courses"])

# professors manage listings, admins moderate
can_manage = require_roles(UserType.PROFESSOR, UserType.ADMIN)


def _get_course_or_404(db: Session, course_id: int) -> CourseModel:
    course = db.get(CourseModel, course_id)
    if course is None:
        raise NotFoundError("Course not found.")
    return course


# ✅ [CREATE] add a course listing
@router.post("")
def create_course(course: CourseCreate, db: Session = Depends(get_db), _: CurrentUser = Depends(can_manage)):
    db_course = CourseModel(**course.model_dump())
    db.add(db_course)
    db.commit()
    db.refresh(db_course)
    return {
        "success": True,
        "data": CourseSchema.model_validate(db_course).model_dump(),
        "message": "Course created successfully."
    }


# ✅ [READ] all courses
@router.get("")
def read_courses(db: Session = Depends(get_db)):
    records = db.query(CourseModel).order_by(CourseModel.code).all()
    return {
        "success": True,
        "data": [CourseSchema.model_validate(r).model_dump() for r in records],
    }


# ✅ [READ] one course
@router.get("/{course_id}")
def read_course(course_id: int, db: Session = Depends(get_db)):
    course = _get_course_or_404(db, course_id)
    return {"success": True, "data": CourseSchema.model_validate(course).model_dump()}


# ✅ [UPDATE] edit a course listing (rating stays untouched)
@router.put("/{course_id}")
def update_course(
    course_id: int,
    updated: CourseCreate,
    db: Session = Depends(get_db),
    _: CurrentUser = Depends(can_manage),
):
    course = _get_course_or_404(db, course_id)
    for key, value in updated.model_dump().items():
        setattr(course, key, value)

    db.commit()
    db.refresh(course)
    return {
        "success": True,
        "data": CourseSchema.model_validate(course).model_dump(),
        "message": "Course updated successfully."
    }


# ✅ [DELETE] remove a course and its ratings
@router.delete("/{course_id}")
def delete_course(course_id: int, db: Session = Depends(get_db), _: CurrentUser = Depends(can_manage)):
    course = _get_course_or_404(db, course_id)
    db.delete(course)
    db.commit()
    return {
        "success": True,
        "data": {"course_id": course_id},
        "message": "Course deleted successfully."
    }
