"""Utility modules for the random number generator sources."""

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables, EnvVarType

__all__ = ["EnvironmentManager", "EnvironmentVariables", "EnvVarType"]
