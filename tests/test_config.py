"""Tests for TranslationConfig."""

import pytest
from pydantic import ValidationError

from llm_translator_lib import ConfigurationError, TranslationConfig


def test_complete_config_passes(config):
    assert config.ensure_complete() is config


@pytest.mark.parametrize(
    "field", ["api_key", "api_url", "model", "temperature", "max_tokens"]
)
def test_missing_field_is_reported(config, field):
    values = config.model_dump()
    values[field] = None
    with pytest.raises(ConfigurationError, match=field):
        TranslationConfig(**values).ensure_complete()


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_string_counts_as_missing(config, value):
    values = config.model_dump()
    values["api_key"] = value
    with pytest.raises(ConfigurationError, match="api_key"):
        TranslationConfig(**values).ensure_complete()


def test_all_missing_fields_listed_at_once():
    with pytest.raises(ConfigurationError) as exc_info:
        TranslationConfig().ensure_complete()
    message = str(exc_info.value)
    for name in ["api_key", "api_url", "model", "temperature", "max_tokens"]:
        assert name in message


@pytest.mark.parametrize("max_tokens", [0, -5])
def test_non_positive_max_tokens_rejected(config, max_tokens):
    values = config.model_dump()
    values["max_tokens"] = max_tokens
    with pytest.raises(ConfigurationError, match="max_tokens"):
        TranslationConfig(**values).ensure_complete()


def test_zero_temperature_is_a_valid_value(config):
    values = config.model_dump()
    values["temperature"] = 0.0
    TranslationConfig(**values).ensure_complete()


def test_config_is_frozen(config):
    with pytest.raises(ValidationError):
        config.api_key = "other"


def test_from_mapping_keeps_numeric_types():
    config = TranslationConfig.from_mapping(
        {
            "api_key": "k",
            "api_url": "https://x",
            "model": "m",
            "temperature": 1,
            "max_tokens": 50,
            "unrelated": "ignored",
        }
    )
    assert isinstance(config.temperature, float)
    assert config.temperature == 1.0
    assert isinstance(config.max_tokens, int)


def test_from_mapping_wraps_type_errors():
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        TranslationConfig.from_mapping({"temperature": "hot"})


def test_from_env_reads_prefixed_variables():
    environ = {
        "LLM_TRANSLATOR_API_KEY": "sk-env",
        "LLM_TRANSLATOR_API_URL": "https://api.example.com",
        "LLM_TRANSLATOR_MODEL": "gpt-4o",
        "LLM_TRANSLATOR_TEMPERATURE": "0.7",
        "LLM_TRANSLATOR_MAX_TOKENS": "256",
    }
    config = TranslationConfig.from_env(environ=environ)
    assert config.api_key == "sk-env"
    assert config.temperature == 0.7
    assert config.max_tokens == 256
    config.ensure_complete()


def test_from_env_custom_prefix_and_empty_values():
    environ = {"TG_API_KEY": "", "TG_MODEL": "m"}
    config = TranslationConfig.from_env(prefix="TG_", environ=environ)
    assert config.api_key is None
    assert config.model == "m"
    assert "api_key" in config.missing_params()
