from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from database.db import get_db
from models.users import User as UserModel
from services.exceptions import NotFoundError

router = APIRouter(prefix="/auth", tags=["Auth"])

# ✅ request body
class SessionRequest(BaseModel):
    user_id: int

# ✅ response body
class SessionResponse(BaseModel):
    id: int
    name: str
    user_type: str


# ✅ [LOGIN] dev-only: open a session for an existing user (no password check)
@router.post("/session", response_model=SessionResponse)
def open_session(body: SessionRequest, request: Request, db: Session = Depends(get_db)):
    user = db.get(UserModel, body.user_id)
    if user is None:
        raise NotFoundError("User not found.")
    request.session["user_id"] = user.id
    request.session["user_type"] = user.user_type.value
    return {"id": user.id, "name": user.name, "user_type": user.user_type.value}


# ✅ [LOGOUT]
@router.delete("/session")
def close_session(request: Request):
    request.session.clear()
    return {"message": "Logged out."}
