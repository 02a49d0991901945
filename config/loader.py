"""Reads translation_chat.ini into typed ``Config`` sections.

Every failure surfaces as a ``ConfigLoaderError`` subclass so the CLI can report it in one place.
"""

from __future__ import annotations

import ast
import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from models.config_models import Config
from models.translation_models import AUTO_PROVIDER, PROVIDER_NAMES
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALLOWED_PREFERRED_PROVIDERS: list[str] = [AUTO_PROVIDER, *PROVIDER_NAMES]


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """INI file to ``Config`` conversion with validation.

    Keys missing from the file keep their dataclass defaults, so a file only needs the
    settings that differ from them.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messaging.
        **args: Command-line overrides (`debug`, `preferred_provider`).

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(self, *, config_filename: str, script_name: str, **args) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()

        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self._convert_settings(parser)
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        if args.get("preferred_provider") is not None:
            self.config.TRANSLATION.PREFERRED_PROVIDER = args["preferred_provider"]
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Section '%s' not present, using defaults", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue
                formatted_value = formatter.apply_format(section, key)
                setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate provider names, URLs and numeric limits.

        Raises:
            ConfigFormatError: If validation fails for any setting.
        """
        self._inspect_defined_item("TRANSLATION", "PREFERRED_PROVIDER", ALLOWED_PREFERRED_PROVIDERS)
        self._validate_url("MYMEMORY", "URL", required=True)
        self._validate_url("LIBRETRANSLATE", "URL", required=False)
        mirrors: Any = self.config.LIBRETRANSLATE.MIRRORS
        if not isinstance(mirrors, list) or not all(isinstance(m, str) for m in mirrors):
            msg: str = f"'LIBRETRANSLATE.MIRRORS' must be a list of URLs: {mirrors!r}"
            raise ConfigTypeError(msg)
        for section_name in ("MYMEMORY", "LIBRETRANSLATE"):
            self._validate_non_negative(section_name, "DAILY_LIMIT")
            self._validate_non_negative(section_name, "TIMEOUT")
        self._validate_non_negative("CACHE", "MAX_SIZE")
        self._validate_non_negative("CACHE", "MAX_AGE_HOURS")
        if self.config.CACHE.MAX_SIZE == 0:
            msg = "'CACHE.MAX_SIZE' must be at least 1"
            raise ConfigValueError(msg)

    def _inspect_defined_item(self, section_name: str, key_name: str, defined_list: list[str]) -> None:
        value: Any = getattr(getattr(self.config, section_name), key_name)
        field_name: str = f"{section_name}.{key_name}"
        if not isinstance(value, str):
            msg: str = f"Unsupported type used for '{field_name}': {type(value)}"
            raise ConfigTypeError(msg)
        if value.lower() not in defined_list:
            msg = f"Unknown value '{value}' is set for '{field_name}'. Allowed: {defined_list}"
            raise ConfigValueError(msg)
        setattr(getattr(self.config, section_name), key_name, value.lower())

    def _validate_url(self, section_name: str, key_name: str, *, required: bool) -> None:
        value: Any = getattr(getattr(self.config, section_name), key_name)
        field_name: str = f"{section_name}.{key_name}"
        if not isinstance(value, str):
            msg: str = f"Unsupported type used for '{field_name}': {type(value)}"
            raise ConfigTypeError(msg)
        if not value:
            if required:
                msg = f"'{field_name}' must not be empty"
                raise ConfigValueError(msg)
            return
        if not value.startswith(("http://", "https://")):
            msg = f"'{field_name}' is not an http(s) URL: {value}"
            raise ConfigValueError(msg)

    def _validate_non_negative(self, section_name: str, key_name: str) -> None:
        value: Any = getattr(getattr(self.config, section_name), key_name)
        if value < 0:
            msg: str = f"'{section_name}.{key_name}' must not be negative: {value}"
            raise ConfigValueError(msg)


class _ConfigFormatter:
    """Coerces raw INI strings to the type of the matching ``Config`` default.

    Scalars (bool, int, float, str) go through dedicated parsers. Anything else, such as the
    mirror list, is read as a Python literal.
    """

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser
        self._scalar_parsers: dict[type, Callable[[str, str], Any]] = {
            bool: self.parser.getboolean,
            int: lambda section, key: int(float(self._unquoted(section, key))),
            float: lambda section, key: float(self._unquoted(section, key)),
            str: self._unquoted,
        }

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Return the INI value of ``section.key`` converted to the type of its default.

        Raises:
            ConfigValueError: The value cannot be converted.
            ConfigTypeError: The converted value has an unusable type.
            ConfigFormatError: A literal value is syntactically broken.
        """
        section_name, key_name = section.name, key.name
        default: Any = getattr(getattr(self.config, section_name), key_name)
        scalar_parser: Callable[[str, str], Any] | None = self._scalar_parsers.get(type(default))
        if scalar_parser is not None:
            try:
                return scalar_parser(section_name, key_name)
            except ValueError as err:
                msg = f"Invalid value for {section_name}.{key_name}: {err}"
                raise ConfigValueError(msg) from err
            except TypeError as err:
                msg = f"Invalid value for {section_name}.{key_name}: {err}"
                raise ConfigTypeError(msg) from err
        return self._literal(section_name, key_name)

    def _literal(self, section_name: str, key_name: str) -> Any:
        text: str = self.parser.get(section_name, key_name)
        try:
            return ast.literal_eval(text)
        except ValueError as err:
            msg = f"{section_name}.{key_name} is not a literal value: {text}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"{section_name}.{key_name} cannot be parsed: {text}"
            raise ConfigFormatError(msg) from err

    def _unquoted(self, section_name: str, key_name: str) -> str:
        text: str = self.parser.get(section_name, key_name).strip()
        for quote in ("'", '"'):
            text = text.removeprefix(quote).removesuffix(quote)
        return text
