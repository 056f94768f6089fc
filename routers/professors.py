from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from database.db import get_db
from dependencies.security import CurrentUser, require_roles
from models.professor_pages import ProfessorPage as ProfessorPageModel
from models.users import UserType
from schemas.professor_pages import ProfessorPage as ProfessorPageSchema, ProfessorPageUpdate
from services.exceptions import NotFoundError

router = APIRouter(prefix="/professors", tags=["Professors"])


def _to_dict(page: ProfessorPageModel) -> dict:
    data = ProfessorPageSchema.model_validate(page).model_dump()
    data["professor_name"] = page.professor.name if page.professor else None
    return data


def _get_page_or_404(db: Session, professor_id: int) -> ProfessorPageModel:
    page = (
        db.query(ProfessorPageModel)
        .options(joinedload(ProfessorPageModel.professor))
        .filter(ProfessorPageModel.professor_id == professor_id)
        .first()
    )
    if page is None:
        raise NotFoundError("Professor not found.")
    return page


# ✅ [READ] all professor pages
@router.get("")
def read_professors(db: Session = Depends(get_db)):
    pages = db.query(ProfessorPageModel).options(joinedload(ProfessorPageModel.professor)).all()
    return {"success": True, "data": [_to_dict(p) for p in pages]}


# ✅ [READ] one professor page by professor (user) id
@router.get("/{professor_id}")
def read_professor(professor_id: int, db: Session = Depends(get_db)):
    return {"success": True, "data": _to_dict(_get_page_or_404(db, professor_id))}


# ✅ [UPDATE] a professor edits their own page
@router.put("/{professor_id}/page")
def update_professor_page(
    professor_id: int,
    updated: ProfessorPageUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_roles(UserType.PROFESSOR, UserType.ADMIN)),
):
    if user.user_type == UserType.PROFESSOR and user.id != professor_id:
        raise HTTPException(status_code=403, detail="Access denied")

    page = _get_page_or_404(db, professor_id)
    for key, value in updated.model_dump(exclude_unset=True).items():
        setattr(page, key, value)

    db.commit()
    db.refresh(page)
    return {
        "success": True,
        "data": _to_dict(page),
        "message": "Professor page updated successfully."
    }
