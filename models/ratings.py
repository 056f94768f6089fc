from sqlalchemy import Column, Integer, Double, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base

MIN_RATING = 1.0
MAX_RATING = 5.0


class Rating(Base):
    __tablename__ = "ratings"
    __table_args__ = (
        # one rating per user per target
        UniqueConstraint("user_id", "course_id", name="user_course_unique"),
        UniqueConstraint("user_id", "professor_page_id", name="user_professor_unique"),
        CheckConstraint(f"value >= {MIN_RATING} AND value <= {MAX_RATING}", name="rating_value_range"),
        # exactly one target foreign key is set
        CheckConstraint(
            "(course_id IS NULL) <> (professor_page_id IS NULL)",
            name="rating_single_target",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    value = Column(Double, nullable=False)                        # DOUBLE on MySQL
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), index=True)
    professor_page_id = Column(Integer, ForeignKey("professor_pages.id", ondelete="CASCADE"), index=True)

    user = relationship("User", back_populates="ratings")
    course = relationship("Course", back_populates="ratings")
    professor_page = relationship("ProfessorPage", back_populates="ratings")

