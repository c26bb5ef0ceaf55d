"""Prompt template loading and rendering."""

from .content_templates import ContentTemplate, ContentTemplateManager

__all__ = ["ContentTemplate", "ContentTemplateManager"]
