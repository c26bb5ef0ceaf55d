"""Request and response models for the HTTP API."""

from typing import Any, Dict, Generic, Optional, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from cv_optimizer.models.base import CamelModel
from cv_optimizer.models.cv_models import CVMatchAnalysis
from cv_optimizer.models.job_models import JobAnalysis

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):
    """Standard API response envelope."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None

    def to_content(self) -> Dict[str, Any]:
        """JSON body with unset envelope keys omitted."""
        content: Dict[str, Any] = {"success": self.success}
        for key in ("data", "error", "message"):
            value = getattr(self, key)
            if value is not None:
                content[key] = jsonable_encoder(value, by_alias=True)
        return content


def api_success(data: Any, message: Optional[str] = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(success=True, data=data, message=message).to_content(),
    )


def api_error(error: str, status_code: int, message: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(success=False, error=error, message=message).to_content(),
    )


# Fields that the routes validate themselves are typed loosely so that a
# wrong type produces the route's own message instead of a schema error.
class AnalyzeRequest(CamelModel):
    job_description: Any = None
    cv_content: Any = None


class GenerateQuestionsRequest(CamelModel):
    job_analysis: Optional[JobAnalysis] = None
    cv_match: Optional[CVMatchAnalysis] = None
    cv_content: Any = None


class GenerateCVRequest(CamelModel):
    job_description: Any = None
    cv_data: Any = None
    job_analysis: Optional[JobAnalysis] = None


class AnalyzeResult(CamelModel):
    job_analysis: JobAnalysis
    cv_match: CVMatchAnalysis


class HealthStatus(CamelModel):
    status: str = "ok"
    version: str
