"""
Shell configuration.
"""

import json
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from .core.exceptions import ConfigurationError


class ShellConfig(BaseModel):
    log_level: str = Field("WARNING", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')
    currency_symbol: str = Field("$", min_length=1, max_length=5)
    clear_screen: bool = True
    pause_after_action: bool = True
    seed_demo_data: bool = False

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> ShellConfig:
    """Load a ``ShellConfig`` from a JSON file, then apply overrides.

    Without a path the defaults are used. Overrides whose value is None are
    skipped so unset command-line flags do not mask the file.
    """
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return ShellConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            error_code="invalid_config",
            details={"errors": e.errors()},
        )
