"""Intermediate scorer output. Never persisted."""

from pydantic import BaseModel, Field

from models.schemas.catalog import Course, ProjectCandidate
from models.schemas.employee import EmployeeProfile


class ScoredCandidate(BaseModel):
    """A catalog item with its relevance score and the signals that fired."""
    item: Course | EmployeeProfile | ProjectCandidate
    score: float = Field(default=0.0, ge=0.0, le=1.0)  # weighted sum
    reasons: list[str] = []
    fallback_reason: str = ""  # used when no signal fired

    @property
    def reason_text(self) -> str:
        if not self.reasons:
            return self.fallback_reason
        return "; ".join(self.reasons) + "."
