"""Constants for job and CV analysis heuristics."""

from typing import Final, Tuple


class AnalysisConstants:
    """Constants used by the deterministic analysis fallbacks."""

    # Defaults for fields the model did not provide
    UNKNOWN: Final[str] = "Unknown"
    DEFAULT_EXPERIENCE_LEVEL: Final[str] = "Mid"
    DEFAULT_EDUCATION: Final[str] = "Not specified"
    DEFAULT_WRITING_STYLE: Final[str] = "Professional"
    DEFAULT_DOMAIN_STANDARDS: Final[str] = "Standard professional CV format"

    # Experience level keywords, checked in order
    EXPERIENCE_LEVEL_KEYWORDS: Final[Tuple[Tuple[Tuple[str, ...], str], ...]] = (
        (("senior", "lead"), "Senior"),
        (("junior", "entry"), "Junior"),
        (("mid", "intermediate"), "Mid"),
        (("executive", "director"), "Executive"),
    )

    # Requirement extraction
    REQUIREMENT_KEYWORDS: Final[Tuple[str, ...]] = ("required", "must have")
    MIN_REQUIREMENT_LENGTH: Final[int] = 10
    MAX_REQUIREMENTS: Final[int] = 10

    # Skills looked for in job descriptions
    COMMON_JOB_SKILLS: Final[Tuple[str, ...]] = (
        "javascript",
        "python",
        "react",
        "node",
        "sql",
        "aws",
        "docker",
        "kubernetes",
        "agile",
        "scrum",
        "leadership",
        "communication",
        "project management",
        "data analysis",
        "machine learning",
    )

    # Skills looked for in CVs
    COMMON_CV_SKILLS: Final[Tuple[str, ...]] = (
        "javascript",
        "python",
        "react",
        "node",
        "typescript",
        "java",
        "c++",
        "sql",
        "aws",
        "docker",
        "kubernetes",
        "git",
        "agile",
        "scrum",
        "leadership",
        "project management",
        "data analysis",
        "machine learning",
        "ai",
    )
    EXPERIENCE_INDICATORS: Final[Tuple[str, ...]] = (
        "experience",
        "worked at",
        "employed",
        "position",
        "role",
        "job",
    )
    EDUCATION_INDICATORS: Final[Tuple[str, ...]] = (
        "university",
        "college",
        "degree",
        "bachelor",
        "master",
        "phd",
        "education",
    )
    EMAIL_PATTERN: Final[str] = r"[\w.-]+@[\w.-]+\.\w+"
    PHONE_PATTERN: Final[str] = (
        r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"
    )

    # Match score weighting
    SKILL_WEIGHT: Final[float] = 40.0
    REQUIREMENT_WEIGHT: Final[float] = 40.0
    KEYWORD_WEIGHT: Final[float] = 20.0
    SIGNIFICANT_WORD_LENGTH: Final[int] = 4
    DETAILED_CV_LENGTH: Final[int] = 500
    DETAILED_CV_BONUS: Final[int] = 5
    MIN_MATCH_SCORE: Final[int] = 0
    MAX_MATCH_SCORE: Final[int] = 100
    MAX_SEMANTIC_GAPS: Final[int] = 5
    MAX_RECOMMENDED_SKILLS: Final[int] = 3
    WELL_MATCHED_RECOMMENDATION: Final[str] = (
        "CV looks well-matched! Consider adding more specific achievements."
    )
