"""Utility modules for the translation chat services.

This package provides logging setup and string helpers used across the translation pipeline.
"""

from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

__all__: list[str] = ["LoggerUtils", "StringUtils"]
