from __future__ import annotations

from textwrap import dedent
from typing import TYPE_CHECKING

import pytest

from config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
)
from models.config_models import DEFAULT_LIBRETRANSLATE_MIRRORS

if TYPE_CHECKING:
    from pathlib import Path


def _write_ini(tmp_path: Path, content: str) -> Path:
    ini_path: Path = tmp_path / "translation_chat.ini"
    ini_path.write_text(dedent(content), encoding="utf-8")
    return ini_path


def test_config_loader_raises_for_missing_file(tmp_path: Path) -> None:
    ini_path: Path = tmp_path / "missing.ini"
    with pytest.raises(ConfigFileNotFoundError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "")

    config = ConfigLoader(config_filename=str(ini_path), script_name="test").config

    assert config.TRANSLATION.PREFERRED_PROVIDER == "auto"
    assert config.MYMEMORY.DAILY_LIMIT == 1000
    assert config.LIBRETRANSLATE.DAILY_LIMIT == 100
    assert config.LIBRETRANSLATE.MIRRORS == DEFAULT_LIBRETRANSLATE_MIRRORS
    assert config.CACHE.MAX_SIZE == 2000


def test_values_are_coerced_to_field_types(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        DEBUG = yes
        STORAGE_PATH = "data/chat.db"

        [TRANSLATION]
        PREFERRED_PROVIDER = "MyMemory"
        CACHE_TRANSLATIONS = False

        [MYMEMORY]
        CONTACT_EMAIL = 'me@example.com'
        DAILY_LIMIT = 5000
        TIMEOUT = 4

        [LIBRETRANSLATE]
        URL = "https://translate.example.com/translate"
        MIRRORS = ["https://mirror.example.org/translate"]

        [CACHE]
        MAX_AGE_HOURS = 1.5
        """,
    )

    config = ConfigLoader(config_filename=str(ini_path), script_name="test").config

    assert config.GENERAL.DEBUG is True
    assert config.GENERAL.STORAGE_PATH == "data/chat.db"
    assert config.TRANSLATION.PREFERRED_PROVIDER == "mymemory"
    assert config.TRANSLATION.CACHE_TRANSLATIONS is False
    assert config.MYMEMORY.CONTACT_EMAIL == "me@example.com"
    assert config.MYMEMORY.DAILY_LIMIT == 5000
    assert config.MYMEMORY.TIMEOUT == pytest.approx(4.0)
    assert config.LIBRETRANSLATE.URL == "https://translate.example.com/translate"
    assert config.LIBRETRANSLATE.MIRRORS == ["https://mirror.example.org/translate"]
    assert config.CACHE.MAX_AGE_HOURS == pytest.approx(1.5)


def test_command_line_overrides(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        DEBUG = False

        [TRANSLATION]
        PREFERRED_PROVIDER = "auto"
        """,
    )

    config = ConfigLoader(
        config_filename=str(ini_path),
        script_name="test",
        debug=True,
        preferred_provider="offline",
    ).config

    assert config.GENERAL.DEBUG is True
    assert config.TRANSLATION.PREFERRED_PROVIDER == "offline"


def test_unknown_provider_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        PREFERRED_PROVIDER = "deepl"
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_invalid_boolean_value_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        FALLBACK_TO_OFFLINE = maybe
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_invalid_integer_value_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [MYMEMORY]
        DAILY_LIMIT = lots
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_negative_limit_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [LIBRETRANSLATE]
        DAILY_LIMIT = -1
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_zero_cache_size_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [CACHE]
        MAX_SIZE = 0
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_non_http_url_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [MYMEMORY]
        URL = "ftp://api.mymemory.translated.net/get"
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_mirrors_must_be_a_list(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [LIBRETRANSLATE]
        MIRRORS = "https://mirror.example.org/translate"
        """,
    )

    with pytest.raises(ConfigTypeError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_malformed_literal_raises_config_format_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [LIBRETRANSLATE]
        MIRRORS = ["https://mirror.example.org/translate"
        """,
    )

    with pytest.raises(ConfigFormatError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        VERSION = "1.0.0"
        DEBUG = True
        """,
    )

    config = ConfigLoader(config_filename=str(ini_path), script_name="test").config

    assert config.GENERAL.DEBUG is True
    assert not hasattr(config.GENERAL, "VERSION")
