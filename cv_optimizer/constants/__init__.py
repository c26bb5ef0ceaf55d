"""Constants package for centralized configuration values."""

from .analysis_constants import AnalysisConstants
from .config_constants import ConfigConstants
from .error_constants import ErrorConstants
from .file_constants import FileConstants
from .llm_constants import LLMConstants
from .qa_constants import QAConstants

__all__ = [
    "AnalysisConstants",
    "ConfigConstants",
    "ErrorConstants",
    "FileConstants",
    "LLMConstants",
    "QAConstants",
]
