from pydantic import BaseModel, Field, field_validator


class SkillGapRequest(BaseModel):
    target_position: str = Field(..., max_length=200, description="Position to analyze readiness for")

    @field_validator("target_position")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("target_position must not be blank")
        return value
