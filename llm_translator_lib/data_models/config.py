"""
Configuration model for the translation client.

``TranslationConfig`` carries the five values the hosting environment must
supply before a :class:`~llm_translator_lib.client.TranslationClient` can be
built.  The model is frozen, so a client never observes a configuration
change during its lifetime.  Every field is optional at the pydantic level;
completeness is checked by :meth:`TranslationConfig.ensure_complete`, which
reports all missing keys at once as a :class:`ConfigurationError`.
"""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from llm_translator_lib.exceptions import ConfigurationError
from llm_translator_lib.data_models.constants import (
    DEFAULT_ENV_PREFIX,
    MAX_TOKENS_PARAM,
    REQUIRED_CONFIG_PARAMS,
)


class TranslationConfig(BaseModel):
    """
    Connection and sampling settings of the completion endpoint.

    Attributes
    ----------
    api_key : str
        Bearer token sent in the ``Authorization`` header.
    api_url : str
        Absolute URL of the chat‑completion endpoint.
    model : str
        Provider model identifier.
    temperature : float
        Sampling temperature, provider defined range (typically 0.0–2.0).
    max_tokens : int
        Upper bound on generated tokens, must be positive.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    api_url: Optional[str] = None
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    def missing_params(self):
        missing = []
        for name in REQUIRED_CONFIG_PARAMS:
            value = getattr(self, name)
            if value is None:
                missing.append(name)
            elif isinstance(value, str) and not value.strip():
                missing.append(name)
        return missing

    def ensure_complete(self) -> "TranslationConfig":
        """
        Verify that every required value is present and non‑empty.

        Returns
        -------
        TranslationConfig
            ``self``, to allow chaining.

        Raises
        ------
        ConfigurationError
            When any value is missing/empty or ``max_tokens`` is not positive.
        """
        missing = self.missing_params()
        if missing:
            raise ConfigurationError(
                f"Missing required configuration values: {', '.join(missing)}"
            )
        if self.max_tokens <= 0:
            raise ConfigurationError(
                f"{MAX_TOKENS_PARAM} must be positive, got {self.max_tokens}"
            )
        return self

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "TranslationConfig":
        """
        Build a configuration from a mapping keyed by the configuration names
        (``api_key``, ``api_url``, ``model``, ``temperature``, ``max_tokens``).

        Unknown keys are ignored; values of the wrong type are reported as
        :class:`ConfigurationError`.
        """
        values: Dict[str, Any] = {
            name: mapping.get(name) for name in REQUIRED_CONFIG_PARAMS
        }
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "TranslationConfig":
        """
        Read the configuration from environment variables.

        Each value is looked up as ``prefix`` + upper‑cased name, e.g.
        ``LLM_TRANSLATOR_API_KEY``.  Empty variables are treated as missing.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in REQUIRED_CONFIG_PARAMS:
            raw = environ.get(f"{prefix}{name.upper()}", "").strip()
            values[name] = raw or None
        return cls.from_mapping(values)
