"""Configuration schema and loading."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from promptmd.exceptions import ConfigurationError
from promptmd.lists import ListOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "promptmd.yaml"
CONFIG_SECTION = "promptmd"


class PromptConfig(BaseModel):
    """Project-wide builder defaults.

    Loaded from promptmd.yaml under the 'promptmd:' section. Options passed
    to a builder call override these field by field.
    """

    lists: ListOptions = Field(default_factory=ListOptions)


def load_config(path: Path | None = None) -> PromptConfig:
    """Load configuration from a YAML file.

    Args:
        path: Config file. Defaults to ./promptmd.yaml.

    Returns:
        PromptConfig with values from file or defaults

    Raises:
        ConfigurationError: If the file is not valid YAML or holds invalid values

    Example:
        config = load_config()
        md = P.configured(config)
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME

    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return PromptConfig()

    try:
        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", str(path)) from e

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError("Expected a mapping at the top level", str(path))

    section = raw_config.get(CONFIG_SECTION) or {}

    try:
        config = PromptConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid promptmd config: {e}", str(path)) from e

    logger.debug("Loaded config from %s", path)
    return config
