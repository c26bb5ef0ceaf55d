"""Prompt templates loaded from markdown files with frontmatter."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.error_handling.exceptions import TemplateError, TemplateFormattingError

logger = get_structured_logger("content_templates")


@dataclass
class ContentTemplate:
    """Structured content template."""

    name: str
    template: str
    variables: List[str]


class ContentTemplateManager:
    """Loads prompt templates from disk and formats them."""

    def __init__(self, prompt_directory: str):
        """Initializes the ContentTemplateManager by loading templates from disk."""
        self.templates: Dict[str, ContentTemplate] = {}
        self._prompt_directory = Path(prompt_directory)
        self._load_templates_from_directory()

        logger.info(
            "ContentTemplateManager initialized",
            template_count=len(self.templates),
            source_directory=str(self._prompt_directory.resolve()),
        )

    def _load_templates_from_directory(self):
        """Scan the prompts directory and load all templates into the cache."""
        if not self._prompt_directory.is_dir():
            logger.warning(
                "Prompt directory not found, skipping template loading.",
                directory=str(self._prompt_directory.resolve()),
            )
            return

        for file_path in sorted(self._prompt_directory.glob("**/*.md")):
            if file_path.is_file():
                try:
                    self._load_template_file(file_path)
                except (IOError, OSError) as e:
                    logger.error(
                        "Failed to load template file",
                        file=str(file_path),
                        error=str(e),
                        exc_info=True,
                    )

    def _parse_frontmatter(self, content: str) -> Tuple[Dict[str, Any], str]:
        """Parses YAML-like frontmatter from a template file."""
        frontmatter = {}
        body = content
        match = re.match(r"---\s*\n(.*?)\n---\s*\n(.*)", content, re.DOTALL)
        if match:
            frontmatter_str, body = match.groups()
            # Simple key-value parsing
            for line in frontmatter_str.split("\n"):
                if ":" in line:
                    key, value = line.split(":", 1)
                    frontmatter[key.strip()] = value.strip()
        return frontmatter, body

    def _extract_variables(self, content: str) -> List[str]:
        """Extracts variable names from a template string (e.g., {variable})."""
        # Doubled braces are literal JSON, not placeholders
        unescaped = content.replace("{{", "").replace("}}", "")
        return list(dict.fromkeys(re.findall(r"\{(\w+)\}", unescaped)))

    def _load_template_file(self, file_path: Path):
        """Load a single template file and add it to the cache."""
        content = file_path.read_text(encoding="utf-8")
        metadata, template_content = self._parse_frontmatter(content)

        if not metadata:
            logger.warning("No frontmatter found, skipping", file=file_path.name)
            return

        template = ContentTemplate(
            name=metadata.get("name", file_path.stem),
            template=template_content.strip(),
            variables=self._extract_variables(template_content),
        )
        self.templates[template.name] = template
        logger.debug("Loaded template", name=template.name, file=file_path.name)

    def get_template(self, name: str) -> Optional[ContentTemplate]:
        return self.templates.get(name)

    def format_prompt(self, name: str, **variables: Any) -> str:
        """Render the named template.

        Raises:
            TemplateError: If no template with that name was loaded
            TemplateFormattingError: If a placeholder has no value
        """
        template = self.get_template(name)
        if template is None:
            raise TemplateError(
                f"Template '{name}' not found. Available: {', '.join(self.list_templates()) or 'none'}",
                template_name=name,
            )

        missing_vars = [var for var in template.variables if var not in variables]
        if missing_vars:
            raise TemplateFormattingError(
                f"Formatting failed for template '{name}': missing {', '.join(missing_vars)}",
                missing_keys=missing_vars,
                template_name=name,
            )

        try:
            return template.template.format(**variables)
        except (KeyError, IndexError) as e:
            raise TemplateFormattingError(
                f"Formatting failed for template '{name}' due to missing key: {e}",
                template_name=name,
            ) from e

    def list_templates(self) -> List[str]:
        return sorted(self.templates)
