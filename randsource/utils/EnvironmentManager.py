"""Utility class for environment variable management."""

import logging
import os
from enum import Enum
from typing import Any, Optional, cast

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"


class EnvironmentVariables(Enum):
    """
    Enum of known environment variables used by the random number generator factory.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    RAND_SOURCE = ("RAND_SOURCE", "crypto", EnvVarType.STRING)
    RAND_SEED = ("RAND_SEED", None, EnvVarType.INT)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static utility class for environment variable management."""

    _env_file_loaded = False

    @staticmethod
    def load_env_file() -> None:
        """Load the .env file found from the working directory into the environment, once.

        Variables already set in the environment take precedence over the file.
        """
        if EnvironmentManager._env_file_loaded:
            return
        EnvironmentManager._env_file_loaded = True
        load_dotenv(find_dotenv(usecwd=True))

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Get a value from an environment variable with appropriate type conversion.

        Args:
            env_var: The environment variable to retrieve
            override_default: Optional value to override the default defined in the enum

        Returns:
            The value of the environment variable or the default with appropriate type
        """
        EnvironmentManager.load_env_file()
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None or value.strip() == "":
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value)
            except ValueError:
                logger.warning(
                    "Ignoring %s=%r, not an integer; using default %r",
                    env_var.env_name, value, default,
                )
                return default
        return value.strip()

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default=None) -> Optional[int]:
        """
        Get an integer value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            Optional[int]: The value of the environment variable or the default
        """
        return cast(Optional[int], EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default=None) -> str:
        """
        Get a string value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            str: The value of the environment variable or the default
        """
        return cast(str, EnvironmentManager.get_value(env_var, default))
