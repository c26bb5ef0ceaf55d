"""Models reported by the connection and model diagnostics."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from .base import CamelModel


class ConnectionDiagnostics(CamelModel):
    """Result of a single credential check against the Hugging Face Hub."""

    connected: bool = False
    token_found: bool = False
    token_prefix: str = ""
    user: Optional[str] = None
    error: Optional[str] = None
    response_time_ms: Optional[float] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ModelProbeResult(CamelModel):
    """Availability of one model through the enabled inference providers."""

    model: str
    available: bool
    conversational: bool
    latency_ms: Optional[float] = None
    error_category: Optional[str] = None
    error: Optional[str] = None
