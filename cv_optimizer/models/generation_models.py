"""Models tracking a CV generation run."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import Field, field_validator

from .base import CamelModel


class GenerationStatus(str, Enum):
    """Lifecycle of a generation run."""

    IDLE = "idle"
    ANALYZING = "analyzing"
    GENERATING = "generating"
    COMPLETED = "completed"
    ERROR = "error"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _clamp_progress(value) -> int:
    return max(0, min(100, int(value)))


class GenerationResult(CamelModel):
    """Outcome of one generation run.

    Transition helpers return new instances; a result is never mutated in place.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    job_description_id: str = ""
    cv_id: str = ""
    status: GenerationStatus = GenerationStatus.IDLE
    optimized_cv: Optional[str] = Field(default=None, alias="optimizedCV")
    cover_letter: Optional[str] = None
    error: Optional[str] = None
    progress: int = 0
    created_at: datetime = Field(default_factory=_now)
    completed_at: Optional[datetime] = None

    @field_validator("progress", mode="before")
    @classmethod
    def validate_progress(cls, v):
        return _clamp_progress(v or 0)

    def _transition(self, **changes) -> "GenerationResult":
        # model_copy skips validation, so progress is clamped here as well
        if "progress" in changes:
            changes["progress"] = _clamp_progress(changes["progress"])
        return self.model_copy(update=changes)

    def start_analysis(self) -> "GenerationResult":
        return self._transition(
            status=GenerationStatus.ANALYZING, progress=0, error=None
        )

    def start_generation(self) -> "GenerationResult":
        return self._transition(status=GenerationStatus.GENERATING, error=None)

    def update_progress(self, progress: int) -> "GenerationResult":
        return self._transition(progress=progress)

    def complete(
        self, optimized_cv: str, cover_letter: Optional[str] = None
    ) -> "GenerationResult":
        return self._transition(
            status=GenerationStatus.COMPLETED,
            optimized_cv=optimized_cv,
            cover_letter=cover_letter,
            progress=100,
            error=None,
            completed_at=_now(),
        )

    def fail(self, error: str) -> "GenerationResult":
        return self._transition(status=GenerationStatus.ERROR, error=error)

    def reset(self) -> "GenerationResult":
        return GenerationResult(
            job_description_id=self.job_description_id, cv_id=self.cv_id
        )
