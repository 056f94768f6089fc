from sqlalchemy import Column, Integer, String, Text, Double, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base
from models.users import User   # ✅ import User directly so the mapper can resolve it


class ProfessorPage(Base):
    __tablename__ = "professor_pages"

    id = Column(Integer, primary_key=True, index=True)
    professor_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    bio = Column(Text)
    office_hours = Column(String(100))                            # e.g. TR 1-3PM
    office_location = Column(String(100))                         # e.g. HC3020

    # cached mean of ratings.value, written only by RatingAggregator
    rating = Column(Double, nullable=False, default=0.0)

    professor = relationship(User, back_populates="professor_page")
    ratings = relationship("Rating", back_populates="professor_page", cascade="all, delete-orphan")
