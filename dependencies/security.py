"""
Session based auth dependencies.

The signed session cookie (SessionMiddleware) carries ``user_id`` and
``user_type``; routes trust these values as already authenticated.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request

from models.users import UserType


@dataclass(frozen=True)
class CurrentUser:
    id: int
    user_type: UserType


def get_optional_user(request: Request) -> Optional[CurrentUser]:
    user_id = request.session.get("user_id")
    if user_id is None:
        return None
    return CurrentUser(id=int(user_id), user_type=UserType(request.session.get("user_type", UserType.STUDENT)))


def get_current_user(user: Optional[CurrentUser] = Depends(get_optional_user)) -> CurrentUser:
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized. Please log in.")
    return user


def require_roles(*roles: UserType):
    allowed = set(roles)

    def _check(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if user.user_type not in allowed:
            raise HTTPException(status_code=403, detail="Access denied")
        return user

    return _check
