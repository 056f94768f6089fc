from pydantic import BaseModel, ConfigDict
from typing import Optional

# ✅ input: POST / PUT body (rating is not writable here)
class CourseCreate(BaseModel):
    code: str                                   # e.g. CS 3340
    name: str
    description: Optional[str] = None
    professor_id: Optional[int] = None

    model_config = ConfigDict(extra="forbid")

# ✅ output
class Course(BaseModel):
    id: int
    code: str
    name: str
    description: Optional[str] = None
    professor_id: Optional[int] = None
    rating: float                               # cached average, read only

    model_config = ConfigDict(from_attributes=True)
