from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from mobilemessage import Configuration, ConfigurationError, ContractVariant, ResponseFormat
from mobilemessage.logging_config import configure_logging


def test_defaults() -> None:
    config = Configuration()

    assert config.response_format is ResponseFormat.ENHANCED
    assert config.contract is ContractVariant.RESULTS
    assert config.base_url == "https://api.mobilemessage.com.au/v1/"
    assert (config.open_timeout, config.read_timeout) == (30, 60)
    assert config.auto_retry is True
    assert config.max_attempts == 3
    assert not config.is_sandbox


def test_configuration_is_immutable() -> None:
    config = Configuration(username="u")

    with pytest.raises(PydanticValidationError):
        config.username = "other"  # type: ignore[misc]


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOBILEMESSAGE_USERNAME", "env_user")
    monkeypatch.setenv("MOBILEMESSAGE_PASSWORD", "env_pass")
    monkeypatch.setenv("MOBILEMESSAGE_CONTRACT", "messages")
    monkeypatch.setenv("MOBILEMESSAGE_SANDBOX", "true")
    monkeypatch.setenv("MOBILEMESSAGE_MAX_RETRIES", "5")
    monkeypatch.setenv("MOBILEMESSAGE_MAX_RETRY_DELAY", "12.5")
    monkeypatch.setenv("MOBILEMESSAGE_RETRY_JITTER", "0")

    config = Configuration.from_env(default_from="Override")

    assert config.username == "env_user"
    assert config.contract is ContractVariant.MESSAGES
    assert config.is_sandbox
    assert config.max_retries == 5
    assert config.max_retry_delay == 12.5
    assert config.retry_jitter == 0
    assert config.default_from == "Override"


def test_from_env_reads_dotenv_without_overriding(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# credentials\n"
        "MOBILEMESSAGE_USERNAME=file_user\n"
        "MOBILEMESSAGE_PASSWORD='file_pass'\n"
        "MOBILEMESSAGE_DEFAULT_FROM=FileBrand\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("MOBILEMESSAGE_USERNAME", "shell_user")
    # load_env_file writes to os.environ; register the variable so it is removed afterwards
    monkeypatch.setenv("MOBILEMESSAGE_PASSWORD", "placeholder")
    monkeypatch.delenv("MOBILEMESSAGE_PASSWORD")
    monkeypatch.setenv("MOBILEMESSAGE_DEFAULT_FROM", "")

    config = Configuration.from_env(env_file)

    assert config.username == "shell_user"
    assert config.password == "file_pass"
    assert config.default_from is None


def test_from_env_missing_file_is_ignored(tmp_path: Path) -> None:
    assert Configuration.from_env(tmp_path / "missing.env").username is None


def test_invalid_values_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        Configuration.from_env(response_format="xml")
    with pytest.raises(ConfigurationError):
        Configuration().with_options(max_retries=0)


def test_with_options_returns_validated_copy() -> None:
    base = Configuration(username="u", password="p")

    updated = base.with_options(response_format="raw", auto_retry=False, unknown="x")

    assert updated is not base
    assert updated.response_format is ResponseFormat.RAW
    assert updated.max_attempts == 1
    assert base.response_format is ResponseFormat.ENHANCED
    assert base.with_options(unknown="x") is base


def test_validate_required() -> None:
    Configuration(username="u", password="p").validate_required()

    with pytest.raises(ConfigurationError, match="username"):
        Configuration(password="p").validate_required()
    with pytest.raises(ConfigurationError, match="password"):
        Configuration(username="u").validate_required()


def test_configuration_error_is_a_validation_error() -> None:
    from mobilemessage import ValidationError

    assert issubclass(ConfigurationError, ValidationError)
    assert issubclass(ConfigurationError, ValueError)


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    package_logger = logging.getLogger("mobilemessage")
    previous = package_logger.level
    monkeypatch.setenv("MOBILEMESSAGE_LOG_LEVEL", "debug")

    try:
        configure_logging()
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

        configure_logging(logging.ERROR)
        assert package_logger.level == logging.ERROR
    finally:
        package_logger.setLevel(previous)
