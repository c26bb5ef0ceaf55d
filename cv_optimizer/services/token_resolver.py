"""Resolution of the Hugging Face API credential from the environment."""

import os
from typing import Mapping, Optional, Sequence

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.constants.config_constants import ConfigConstants
from cv_optimizer.constants.error_constants import ErrorConstants
from cv_optimizer.constants.llm_constants import LLMConstants
from cv_optimizer.error_handling.exceptions import ConfigurationError

logger = get_structured_logger(__name__)


def resolve_api_token(
    env: Optional[Mapping[str, str]] = None,
    env_vars: Sequence[str] = ConfigConstants.TOKEN_ENV_VARS,
) -> str:
    """Return the first non-empty token among the recognized variables.

    Args:
        env: Mapping to read from; defaults to ``os.environ``.
        env_vars: Variable names in precedence order.

    Returns:
        The token with surrounding whitespace removed.

    Raises:
        ConfigurationError: If none of the variables holds a value.
    """
    env = os.environ if env is None else env
    for name in env_vars:
        value = env.get(name)
        if value and value.strip():
            return value.strip()

    present = [name for name in env if "HUGGING" in name or name.startswith("HF")]
    logger.error(
        "No Hugging Face token found",
        checked_variables=list(env_vars),
        related_variables_present=present,
    )
    raise ConfigurationError(
        ErrorConstants.MSG_TOKEN_MISSING,
        config_key=ConfigConstants.PRIMARY_TOKEN_ENV_VAR,
    )


def mask_token(token: str) -> str:
    """Return a loggable prefix of the token."""
    if not token:
        return ""
    return f"{token[:LLMConstants.TOKEN_PREFIX_LENGTH]}..."
