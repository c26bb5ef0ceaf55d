"""CV Optimizer: tailors CVs to job descriptions with Hugging Face models."""

__version__ = "0.1.0"
