"""Constants for clarifying question generation."""

from typing import Final


class QAConstants:
    """Bounds and templates for generated question lists."""

    MIN_QUESTIONS: Final[int] = 10
    MAX_QUESTIONS: Final[int] = 15
    MAX_SKILLS_IN_QUESTION: Final[int] = 5
    MAX_MISSING_SKILLS_IN_QUESTION: Final[int] = 3
    MAX_SKILLS_IN_CONTEXT: Final[int] = 5

    PERSONAL_INFO_QUESTION: Final[str] = (
        "Let's start with the basics. What's your full name, email, and location?"
    )
    EXPERIENCE_QUESTION: Final[str] = (
        "Tell me about your most relevant work experience for a {experience_level} "
        "role in {industry}. What was your position and what did you accomplish?"
    )
    EXPERIENCE_DETAILS_QUESTION: Final[str] = (
        "I see you have work experience. Can you tell me about your biggest "
        "achievements and impact metrics? Include specific numbers if possible."
    )
    SKILLS_QUESTION: Final[str] = (
        "Which of these skills do you have experience with: {skills}? "
        "Can you give examples?"
    )
    SKILL_GAPS_QUESTION: Final[str] = (
        "I see you have some skills listed. Can you tell me about your "
        "experience with {skills}?"
    )
    EDUCATION_QUESTION: Final[str] = "What's your educational background?"
    EDUCATION_REQUIREMENT_SUFFIX: Final[str] = " The role requires: {education}"
    ACHIEVEMENTS_QUESTION: Final[str] = (
        "What are your biggest professional achievements? Include specific "
        "metrics if possible."
    )
    SUMMARY_QUESTION: Final[str] = (
        "Give me a brief professional summary that highlights why you're a "
        "great fit for this role."
    )
    PADDING_QUESTION: Final[str] = (
        "Tell me about another relevant experience or project that demonstrates "
        "your fit for this {business_type} role."
    )
