import enum

from sqlalchemy import Column, Integer, String, Enum
from sqlalchemy.orm import relationship
from database.db import Base


class UserType(str, enum.Enum):
    STUDENT = "STUDENT"
    PROFESSOR = "PROFESSOR"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)                      # user id (PK)
    name = Column(String(100), nullable=False)                              # display name
    user_type = Column(Enum(UserType), nullable=False, default=UserType.STUDENT)

    # ✅ professor page (1:1, professors only)
    professor_page = relationship("ProfessorPage", back_populates="professor", uselist=False)

    # ✅ ratings written by this user (1:N)
    ratings = relationship("Rating", back_populates="user", cascade="all, delete-orphan")
