from sqlalchemy import Column, Integer, String, Text, Double, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base
from models.users import User   # ✅ import User directly so the mapper can resolve it


class Course(Base):
    __tablename__ = "courses"  # course listings

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(20), nullable=False, unique=True)        # e.g. CS 3340
    name = Column(String(200), nullable=False)
    description = Column(Text)
    professor_id = Column(Integer, ForeignKey("users.id"))        # teaching professor (FK)

    # cached mean of ratings.value, written only by RatingAggregator
    rating = Column(Double, nullable=False, default=0.0)

    professor = relationship(User)
    ratings = relationship("Rating", back_populates="course", cascade="all, delete-orphan")
