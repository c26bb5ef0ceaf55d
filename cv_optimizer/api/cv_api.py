"""API endpoints for CV analysis, clarifying questions, CV generation and file parsing."""

import time
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from cv_optimizer import __version__
from cv_optimizer.agents.cv_analyzer_agent import CVAnalyzerAgent
from cv_optimizer.agents.cv_info_extractor_agent import CVInfoExtractorAgent
from cv_optimizer.agents.cv_writer_agent import CVWriterAgent
from cv_optimizer.agents.job_analyzer_agent import JobAnalyzerAgent
from cv_optimizer.agents.question_generator_agent import QuestionGeneratorAgent
from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.constants.file_constants import FileConstants
from cv_optimizer.core.container import get_container
from cv_optimizer.error_handling.exceptions import (
    ConfigurationError,
    CvOptimizerError,
    FileParsingError,
    ValidationError,
)
from cv_optimizer.models.qa_models import GenerateQuestionsResult
from cv_optimizer.services.connection_verifier import verify_connection
from cv_optimizer.services.file_parser_service import FileParserService

from .schemas import (
    AnalyzeRequest,
    AnalyzeResult,
    GenerateCVRequest,
    GenerateQuestionsRequest,
    HealthStatus,
    api_error,
    api_success,
)

router = APIRouter(tags=["CV Optimizer"])
logger = get_structured_logger(__name__)


# Dependencies resolved from the container
def get_job_analyzer() -> JobAnalyzerAgent:
    return get_container().job_analyzer_agent()


def get_cv_analyzer() -> CVAnalyzerAgent:
    return get_container().cv_analyzer_agent()


def get_cv_info_extractor() -> CVInfoExtractorAgent:
    return get_container().cv_info_extractor_agent()


def get_question_generator() -> QuestionGeneratorAgent:
    return get_container().question_generator_agent()


def get_cv_writer() -> CVWriterAgent:
    return get_container().cv_writer_agent()


def get_file_parser() -> FileParserService:
    return get_container().file_parser()


def _is_non_blank_string(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


def handle_api_error(error: Exception, context: str) -> JSONResponse:
    """Handle API errors consistently.

    Application errors carry the category-specific user message of their
    structured form in the envelope's ``message`` key.
    """
    if isinstance(error, CvOptimizerError):
        structured = error.with_context(component="api", operation=context).to_structured_error()
        logger.error(
            f"API error in {context}",
            error_type=type(error).__name__,
            error_id=structured.context.error_id,
            category=structured.category.value,
            error=error.message,
        )
        return api_error(
            error.message or f"Failed to {context}. Please try again.",
            500,
            message=structured.user_message,
        )

    logger.error(
        f"API error in {context}",
        error_type=type(error).__name__,
        error=str(error),
    )
    return api_error(str(error) or f"Failed to {context}. Please try again.", 500)


@router.post("/analyze")
async def analyze(
    request: AnalyzeRequest,
    job_analyzer: JobAnalyzerAgent = Depends(get_job_analyzer),
    cv_analyzer: CVAnalyzerAgent = Depends(get_cv_analyzer),
):
    """Analyze a job description and score the CV against it."""
    if not _is_non_blank_string(request.job_description):
        raise ValidationError(
            "Job description and CV content are required", field_name="jobDescription"
        )
    if not _is_non_blank_string(request.cv_content):
        raise ValidationError(
            "Job description and CV content are required", field_name="cvContent"
        )

    try:
        job_analysis = await job_analyzer.analyze(request.job_description)
        cv_match = await cv_analyzer.analyze_match(
            request.cv_content, request.job_description, job_analysis
        )
    except ConfigurationError:
        raise
    except Exception as e:  # pylint: disable=broad-exception-caught
        return handle_api_error(e, "analyze CV")

    return api_success(
        AnalyzeResult(job_analysis=job_analysis, cv_match=cv_match),
        message="Analysis completed successfully",
    )


@router.post("/generate-questions")
async def generate_questions(
    request: GenerateQuestionsRequest,
    question_generator: QuestionGeneratorAgent = Depends(get_question_generator),
    cv_info_extractor: CVInfoExtractorAgent = Depends(get_cv_info_extractor),
):
    """Generate questions for the information the CV is missing."""
    if request.job_analysis is None:
        raise ValidationError("Job analysis is required", field_name="jobAnalysis")

    extracted_cv_info = None
    if _is_non_blank_string(request.cv_content):
        try:
            extracted_cv_info = await cv_info_extractor.extract(request.cv_content)
        except ConfigurationError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Questions are still useful without the extracted info
            logger.warning("Failed to extract CV info", error=str(e))

    try:
        questions = await question_generator.generate(
            request.job_analysis, request.cv_match, extracted_cv_info
        )
    except ConfigurationError:
        raise
    except Exception as e:  # pylint: disable=broad-exception-caught
        return handle_api_error(e, "generate questions")

    return api_success(
        GenerateQuestionsResult(questions=questions, total_questions=len(questions)),
        message="Questions generated successfully",
    )


@router.post("/cv/generate")
async def generate_cv(
    request: GenerateCVRequest,
    cv_writer: CVWriterAgent = Depends(get_cv_writer),
):
    """Generate an optimized CV for the job description."""
    if not request.job_description or not isinstance(request.job_description, str):
        raise ValidationError(
            "Job description is required and must be a string", field_name="jobDescription"
        )
    if not request.cv_data or not isinstance(request.cv_data, str):
        raise ValidationError("CV data is required and must be a string", field_name="cvData")

    start_time = time.monotonic()
    try:
        optimized_cv = await cv_writer.generate_cv(
            request.job_description, request.cv_data, request.job_analysis
        )
    except ConfigurationError:
        raise
    except Exception as e:  # pylint: disable=broad-exception-caught
        return handle_api_error(e, "generate CV")

    logger.info(
        "CV generation completed",
        processing_time=round(time.monotonic() - start_time, 3),
        length=len(optimized_cv),
    )
    return api_success(optimized_cv, message="CV generated successfully")


@router.post("/cover-letter/generate")
async def generate_cover_letter():
    return api_error("Cover letter generation is currently disabled", 503)


@router.post("/parse-file")
async def parse_file(
    file: Optional[UploadFile] = File(None),
    file_parser: FileParserService = Depends(get_file_parser),
):
    """Extract text from an uploaded PDF, DOCX or TXT file."""
    if file is None:
        raise ValidationError(FileConstants.MSG_NO_FILE, field_name="file")

    try:
        file_parser.check_upload(file.filename, file.content_type, file.size)
        data = await file.read()
        text = file_parser.parse(file.filename, file.content_type, data)
    except FileParsingError as e:
        logger.warning(
            "File upload rejected",
            filename=file.filename,
            error_type=type(e).__name__,
            error=e.message,
        )
        return api_error(e.message, e.status_code, message=e.hint)

    return api_success(text, message="File parsed successfully")


@router.get("/verify")
async def verify():
    """Check the Hugging Face token and connectivity."""
    diagnostics = await verify_connection()
    message = (
        "Hugging Face connection verified successfully"
        if diagnostics.connected
        else "Hugging Face connection failed"
    )
    return api_success(diagnostics, message=message)


@router.get("/health")
async def health():
    return api_success(HealthStatus(version=__version__))
