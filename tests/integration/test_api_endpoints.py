"""Integration tests for the HTTP API with a mocked LLM service."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from cv_optimizer import __version__
from cv_optimizer.api.main import app
from cv_optimizer.constants.file_constants import FileConstants
from cv_optimizer.core.container import get_container
from cv_optimizer.error_handling.exceptions import (
    ModelFallbackExhaustedError,
    ModelUnavailableError,
)
from cv_optimizer.models.diagnostics_models import ConnectionDiagnostics
from cv_optimizer.services.file_parser_service import FileParserService

pytestmark = pytest.mark.integration

TOKEN_VARS = (
    "HUGGINGFACE_API_TOKEN",
    "NEXT_PUBLIC_HUGGINGFACE_API_TOKEN",
    "HF_TOKEN",
    "HF_API_TOKEN",
)

JOB_ANALYSIS = {
    "businessType": "Fintech startup",
    "industry": "Financial services",
    "candidateProfile": {
        "experienceLevel": "Senior",
        "keySkills": ["Python", "AWS", "Kubernetes"],
        "personalityTraits": ["Ownership"],
        "education": "Not specified",
    },
    "values": ["Speed"],
    "keyRequirements": ["5+ years of Python development experience"],
    "writingStyle": "Concise",
    "domainStandards": "Quantified impact",
    "missingInfo": [],
}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def llm(mock_llm_service):
    """Route every agent through the mocked LLM service."""
    container = get_container()
    container.llm_service.override(providers.Object(mock_llm_service))
    yield mock_llm_service
    container.llm_service.reset_override()


class TestAnalyzeEndpoint:
    """Test cases for POST /analyze."""

    def test_missing_fields(self, client, llm):
        response = client.post("/analyze", json={"jobDescription": "  ", "cvContent": "CV"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Job description and CV content are required",
        }
        llm.generate_text.assert_not_awaited()

    def test_non_string_field(self, client, llm):
        response = client.post("/analyze", json={"jobDescription": 42, "cvContent": "CV"})

        assert response.status_code == 400

    def test_analysis_and_match(self, client, llm, sample_job_description, sample_cv):
        """The job is analyzed first and the CV is scored against that analysis."""
        # Arrange
        llm.generate_text.side_effect = [
            json.dumps(JOB_ANALYSIS),
            json.dumps({"matchScore": 74, "matchedSkills": ["Python", "AWS"], "missingSkills": ["Kubernetes"]}),
        ]

        # Act
        response = client.post(
            "/analyze",
            json={"jobDescription": sample_job_description, "cvContent": sample_cv},
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Analysis completed successfully"
        assert body["data"]["jobAnalysis"]["businessType"] == "Fintech startup"
        assert body["data"]["jobAnalysis"]["candidateProfile"]["keySkills"] == [
            "Python",
            "AWS",
            "Kubernetes",
        ]
        assert body["data"]["cvMatch"]["matchScore"] == 74
        assert "error" not in body
        match_prompt = llm.generate_text.await_args_list[1].args[0]
        assert "Python, AWS, Kubernetes" in match_prompt

    def test_model_outage_still_answers(self, client, llm, sample_job_description, sample_cv):
        """Heuristic fallbacks keep /analyze working when every model fails."""
        llm.generate_text.side_effect = ModelFallbackExhaustedError(
            [("m", ModelUnavailableError("down"))]
        )

        response = client.post(
            "/analyze",
            json={"jobDescription": sample_job_description, "cvContent": sample_cv},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["jobAnalysis"]["candidateProfile"]["experienceLevel"] == "Senior"
        assert 0 <= data["cvMatch"]["matchScore"] <= 100
        assert "Kubernetes" in data["cvMatch"]["missingSkills"]

    def test_missing_token(self, client, monkeypatch, sample_job_description, sample_cv):
        """Without a token the request fails with the configuration message."""
        for name in TOKEN_VARS:
            monkeypatch.delenv(name, raising=False)

        response = client.post(
            "/analyze",
            json={"jobDescription": sample_job_description, "cvContent": sample_cv},
        )

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["error"].startswith("HUGGINGFACE_API_TOKEN is not set")
        assert response.json()["message"].startswith("Configuration error")

    def test_invalid_body(self, client, llm):
        response = client.post(
            "/analyze", content="not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")


class TestGenerateQuestionsEndpoint:
    """Test cases for POST /generate-questions."""

    def test_job_analysis_required(self, client, llm):
        response = client.post("/generate-questions", json={"cvContent": "CV"})

        assert response.status_code == 400
        assert response.json()["error"] == "Job analysis is required"

    def test_invalid_job_analysis(self, client, llm):
        response = client.post("/generate-questions", json={"jobAnalysis": "Senior role"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")

    @pytest.mark.parametrize("score", [[50], {"a": 1}])
    def test_malformed_match_score(self, client, llm, score):
        response = client.post(
            "/generate-questions",
            json={"jobAnalysis": JOB_ANALYSIS, "cvMatch": {"matchScore": score}},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["error"].startswith("Invalid request")
        llm.generate_text.assert_not_awaited()

    def test_overflowing_match_score(self, client, llm):
        """A number too large for a float is rejected as a bad request."""
        body = '{"jobAnalysis": %s, "cvMatch": {"matchScore": 1e999}}' % json.dumps(
            JOB_ANALYSIS
        )

        response = client.post(
            "/generate-questions",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")

    def test_questions_skip_known_personal_info(self, client, llm, sample_cv):
        # Arrange
        llm.generate_text.side_effect = [
            json.dumps(
                {
                    "personalInfo": {"fullName": "Jane Doe", "email": "jane.doe@example.com"},
                    "experience": [{"title": "Backend developer", "company": "Acme Corp"}],
                    "education": [{"degree": "BSc"}],
                    "skills": ["Python", "AWS"],
                }
            ),
            json.dumps(
                [
                    {"type": "personal_info", "question": "What's your email?", "priority": "high"},
                    {"type": "skills", "question": "How have you used Kubernetes?", "priority": "high"},
                ]
            ),
        ]

        # Act
        response = client.post(
            "/generate-questions",
            json={
                "jobAnalysis": JOB_ANALYSIS,
                "cvMatch": {"matchScore": 60, "missingSkills": ["Kubernetes"]},
                "cvContent": sample_cv,
            },
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert 10 <= data["totalQuestions"] <= 15
        assert data["totalQuestions"] == len(data["questions"])
        assert all(q["type"] != "personal_info" for q in data["questions"])
        assert data["questions"][0]["question"] == "How have you used Kubernetes?"

    def test_extraction_failure_is_not_fatal(self, client, llm):
        llm.generate_text.side_effect = ModelUnavailableError("down")

        response = client.post(
            "/generate-questions", json={"jobAnalysis": JOB_ANALYSIS, "cvContent": "CV"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Questions generated successfully"
        assert response.json()["data"]["totalQuestions"] == 10


class TestGenerateCVEndpoint:
    """Test cases for POST /cv/generate."""

    def test_job_description_required(self, client, llm):
        response = client.post("/cv/generate", json={"cvData": "CV"})

        assert response.status_code == 400
        assert response.json()["error"] == "Job description is required and must be a string"

    def test_cv_data_must_be_string(self, client, llm):
        response = client.post("/cv/generate", json={"jobDescription": "Job", "cvData": 123})

        assert response.status_code == 400
        assert response.json()["error"] == "CV data is required and must be a string"

    def test_generate_cv(self, client, llm, sample_cv):
        llm.generate_text.return_value = "# Jane Doe\nOptimized"

        response = client.post(
            "/cv/generate",
            json={"jobDescription": "Backend role", "cvData": sample_cv, "jobAnalysis": JOB_ANALYSIS},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": "# Jane Doe\nOptimized",
            "message": "CV generated successfully",
        }

    def test_generation_failure(self, client, llm, sample_cv):
        """Model failures surface as a 500 with the aggregated message."""
        llm.generate_text.side_effect = ModelFallbackExhaustedError(
            [("org/model", ModelUnavailableError("down"))]
        )

        response = client.post(
            "/cv/generate", json={"jobDescription": "Backend role", "cvData": sample_cv}
        )

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert "All models (including fallbacks) failed" in response.json()["error"]
        assert response.json()["message"] == (
            "The model is not available through any enabled inference provider."
        )


class TestCoverLetterEndpoint:
    def test_disabled(self, client):
        response = client.post("/cover-letter/generate", json={"jobDescription": "Job"})

        assert response.status_code == 503
        assert response.json() == {
            "success": False,
            "error": "Cover letter generation is currently disabled",
        }


class TestParseFileEndpoint:
    """Test cases for POST /parse-file."""

    def test_text_file(self, client):
        response = client.post(
            "/parse-file",
            files={"file": ("cv.txt", b"Jane Doe\nEngineer\n", "text/plain")},
        )

        assert response.status_code == 200
        assert response.json()["data"] == "Jane Doe\nEngineer"
        assert response.json()["message"] == "File parsed successfully"

    def test_no_file(self, client):
        response = client.post("/parse-file", data={"note": "no upload"})

        assert response.status_code == 400
        assert response.json()["error"] == "No file provided"

    def test_legacy_doc(self, client):
        response = client.post(
            "/parse-file",
            files={"file": ("cv.doc", b"binary", "application/msword")},
        )

        assert response.status_code == 400
        assert "Legacy .doc files are not supported" in response.json()["error"]
        assert response.json()["message"] == FileConstants.HINT_LEGACY_DOC

    def test_empty_file(self, client):
        response = client.post(
            "/parse-file", files={"file": ("cv.txt", b"   ", "text/plain")}
        )

        assert response.status_code == 400

    def test_too_large(self, client):
        container = get_container()
        container.file_parser.override(
            providers.Object(FileParserService(max_file_size_bytes=4))
        )

        response = client.post(
            "/parse-file", files={"file": ("cv.txt", b"12345", "text/plain")}
        )

        container.file_parser.reset_override()
        assert response.status_code == 400
        assert response.json()["error"].startswith("File is too large")
        assert response.json()["message"] == FileConstants.HINT_TOO_LARGE

    def test_oversized_upload_is_rejected_before_reading(self, client):
        """The reported upload size is checked before the body is read."""
        # Arrange
        container = get_container()
        container.file_parser.override(
            providers.Object(FileParserService(max_file_size_bytes=4))
        )

        # Act
        with patch(
            "starlette.datastructures.UploadFile.read", new_callable=AsyncMock
        ) as read:
            response = client.post(
                "/parse-file", files={"file": ("cv.txt", b"123456789", "text/plain")}
            )
        container.file_parser.reset_override()

        # Assert
        assert response.status_code == 400
        assert response.json()["error"].startswith("File is too large")
        read.assert_not_awaited()

    def test_corrupt_docx(self, client):
        response = client.post(
            "/parse-file",
            files={
                "file": (
                    "cv.docx",
                    b"not a zip",
                    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                )
            },
        )

        assert response.status_code == 500
        assert response.json()["error"].startswith("Failed to parse file")
        assert response.json()["message"] == FileConstants.MSG_PARSE_HINT

    def test_corrupt_pdf_mentions_password_protection(self, client):
        response = client.post(
            "/parse-file",
            files={"file": ("cv.pdf", b"garbage bytes", "application/pdf")},
        )

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Failed to parse file")
        assert "password-protected" in body["message"]

    def test_unsupported_type_hint(self, client):
        response = client.post(
            "/parse-file", files={"file": ("cv.odt", b"data", "application/vnd.oasis")}
        )

        assert response.status_code == 400
        assert response.json()["message"] == FileConstants.HINT_UNSUPPORTED


class TestDiagnosticsEndpoints:
    def test_verify_connected(self, client):
        diagnostics = ConnectionDiagnostics(
            connected=True, token_found=True, token_prefix="hf_abcdefg...", user="jane"
        )
        with patch(
            "cv_optimizer.api.cv_api.verify_connection", AsyncMock(return_value=diagnostics)
        ):
            response = client.get("/verify")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Hugging Face connection verified successfully"
        assert body["data"]["connected"] is True
        assert body["data"]["tokenPrefix"] == "hf_abcdefg..."

    def test_verify_failed(self, client):
        diagnostics = ConnectionDiagnostics(token_found=False, error="No token")
        with patch(
            "cv_optimizer.api.cv_api.verify_connection", AsyncMock(return_value=diagnostics)
        ):
            response = client.get("/verify")

        assert response.status_code == 200
        assert response.json()["message"] == "Hugging Face connection failed"
        assert response.json()["data"]["error"] == "No token"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["data"] == {"status": "ok", "version": __version__}
