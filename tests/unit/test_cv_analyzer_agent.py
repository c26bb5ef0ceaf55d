"""Tests for CVAnalyzerAgent."""

import pytest

from cv_optimizer.agents.cv_analyzer_agent import (
    CVAnalyzerAgent,
    calculate_basic_match,
    calculate_keyword_overlap,
    generate_recommendations,
)
from cv_optimizer.error_handling.exceptions import ConfigurationError, ModelUnavailableError
from cv_optimizer.models.job_models import CandidateProfile, JobAnalysis


def _job(skills, requirements):
    return JobAnalysis(
        candidate_profile=CandidateProfile(key_skills=skills),
        key_requirements=requirements,
    )


@pytest.fixture
def agent(mock_llm_service, template_manager):
    return CVAnalyzerAgent(llm_service=mock_llm_service, template_manager=template_manager)


class TestBasicMatch:
    """Test cases for the keyword fallback score."""

    def test_zero_overlap(self):
        """With nothing in common every skill and requirement is missing."""
        # Arrange
        job = _job(["Rust", "Haskell"], ["Deep expertise in compilers"])

        # Act
        match = calculate_basic_match(
            "Florist arranging bouquets", "Compiler engineer wanted", job
        )

        # Assert
        assert match.match_score == 0
        assert match.matched_skills == []
        assert match.missing_skills == ["Rust", "Haskell"]
        assert match.missing_requirements == ["Deep expertise in compilers"]
        assert match.semantic_gaps == ["Deep expertise in compilers"]
        assert match.recommendations == [
            "Highlight experience with: Rust, Haskell",
            "Address requirement: Deep expertise in compilers",
        ]

    def test_full_match(self):
        job = _job(["Python"], ["Python development experience"])

        match = calculate_basic_match(
            "Python development experience", "Python development experience", job
        )

        assert match.match_score == 100
        assert match.matched_requirements == ["Python development experience"]
        assert match.recommendations == [
            "CV looks well-matched! Consider adding more specific achievements."
        ]

    def test_detailed_cv_bonus(self):
        job = _job(["Python", "Go"], [])

        match = calculate_basic_match("python " * 100, "python golang", job)

        # 20 for skills, 0 for requirements, 10 for keywords, 5 bonus
        assert match.match_score == 35

    def test_keyword_overlap_ignores_short_words(self):
        assert calculate_keyword_overlap("make apis", "we make apis fast") == 0.0
        assert calculate_keyword_overlap("build apis", "we build apis fast") == 1.0
        assert calculate_keyword_overlap("", "") == 0.0

    def test_recommendations_cap_skills(self):
        recommendations = generate_recommendations(["A", "B", "C", "D"], [])

        assert recommendations == ["Highlight experience with: A, B, C"]


class TestCVAnalyzerAgent:
    """Test cases for CVAnalyzerAgent.analyze_match."""

    @pytest.mark.asyncio
    async def test_model_reply_is_used(self, agent, mock_llm_service, sample_cv):
        # Arrange
        mock_llm_service.generate_text.return_value = (
            '```json\n{"matchScore": 82, "matchedSkills": ["Python"], '
            '"missingSkills": ["Kubernetes"], "recommendations": ["Add metrics"]}\n```'
        )
        job = _job(["Python", "Kubernetes"], ["5+ years Python"])

        # Act
        match = await agent.analyze_match(sample_cv, "Backend role", job)

        # Assert
        assert match.match_score == 82
        assert match.missing_skills == ["Kubernetes"]
        prompt = mock_llm_service.generate_text.call_args.args[0]
        assert "Python, Kubernetes" in prompt
        assert sample_cv in prompt

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reply",
        [
            '{"matchScore": 150}',
            '{"matchScore": "80"}',
            '{"matchScore": true}',
            '{"matchedSkills": []}',
            "I think this CV is a strong match.",
        ],
    )
    async def test_invalid_reply_uses_fallback(self, agent, mock_llm_service, reply):
        """Replies without a numeric score in range fall back to keyword matching."""
        mock_llm_service.generate_text.return_value = reply
        job = _job(["Rust"], [])

        match = await agent.analyze_match("Gardener", "Rust developer", job)

        assert match == calculate_basic_match("Gardener", "Rust developer", job)

    @pytest.mark.asyncio
    async def test_model_failure_uses_fallback(self, agent, mock_llm_service):
        mock_llm_service.generate_text.side_effect = ModelUnavailableError("down")
        job = _job(["Rust"], [])

        match = await agent.analyze_match("Gardener", "Rust developer", job)

        assert match.missing_skills == ["Rust"]

    @pytest.mark.asyncio
    async def test_configuration_error_propagates(self, agent, mock_llm_service):
        mock_llm_service.generate_text.side_effect = ConfigurationError("token missing")

        with pytest.raises(ConfigurationError):
            await agent.analyze_match("CV", "Job", _job([], []))
