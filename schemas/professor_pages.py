from pydantic import BaseModel, ConfigDict
from typing import Optional

# ✅ input: PUT body (rating is not writable here)
class ProfessorPageUpdate(BaseModel):
    bio: Optional[str] = None
    office_hours: Optional[str] = None
    office_location: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

# ✅ output
class ProfessorPage(BaseModel):
    id: int
    professor_id: int
    professor_name: Optional[str] = None
    bio: Optional[str] = None
    office_hours: Optional[str] = None
    office_location: Optional[str] = None
    rating: float                               # cached average, read only

    model_config = ConfigDict(from_attributes=True)
