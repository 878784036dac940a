"""
Custom exception hierarchy for the LLM‑Translator library.

All public exceptions inherit from :class:`LLMTranslatorError`, allowing
callers to catch a single base class for any translation failure while still
being able to differentiate specific error conditions when needed.
"""

from typing import Any, Dict, Optional

TRANSLATION_FAILED_MESSAGE = "Translation failed"


class LLMTranslatorError(Exception):
    """Base exception for all LLM‑Translator‑specific errors."""

    pass


class ConfigurationError(LLMTranslatorError):
    """Raised when a required configuration value is missing or empty."""

    pass


class TransportError(LLMTranslatorError):
    """Raised when the HTTP request could not be sent or the connection failed."""

    pass


class TranslationFailed(LLMTranslatorError):
    """
    Raised when the provider reply contains an ``error`` field.

    Attributes
    ----------
    error : Any
        The provider's error payload, verbatim.
    status_code : Optional[int]
        HTTP status of the provider reply, when known.
    """

    def __init__(self, error: Any, status_code: Optional[int] = None) -> None:
        super().__init__(TRANSLATION_FAILED_MESSAGE)
        self.message = TRANSLATION_FAILED_MESSAGE
        self.error = error
        self.status_code = status_code

    def as_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "error": self.error}


class MalformedResponse(LLMTranslatorError):
    """Raised when the provider reply lacks the expected success shape."""

    def __init__(
        self,
        reason: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(reason)
        self.status_code = status_code
        self.body = body
