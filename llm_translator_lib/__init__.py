from llm_translator_lib.client import TranslationClient
from llm_translator_lib.data_models.config import TranslationConfig
from llm_translator_lib.data_models.translation import build_prompt
from llm_translator_lib.exceptions import (
    LLMTranslatorError,
    ConfigurationError,
    TransportError,
    TranslationFailed,
    MalformedResponse,
)

__all__ = [
    "TranslationClient",
    "TranslationConfig",
    "build_prompt",
    "LLMTranslatorError",
    "ConfigurationError",
    "TransportError",
    "TranslationFailed",
    "MalformedResponse",
]
