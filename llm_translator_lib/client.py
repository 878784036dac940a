import logging
from typing import Optional

import requests

from llm_translator_lib.utils.http import HttpRequester
from llm_translator_lib.exceptions import TranslationFailed
from llm_translator_lib.services.completion import ChatCompletionService
from llm_translator_lib.data_models.config import TranslationConfig
from llm_translator_lib.data_models.translation import (
    ChatCompletionPayload,
    ProviderErrorResponse,
    TranslationRequest,
    parse_provider_response,
)


class TranslationClient:
    """
    Translate text through a remote chat‑completion endpoint.

    Every ``translate`` call builds the instruction prompt, performs exactly
    one POST and extracts the first completion.  The client keeps no state
    besides its frozen configuration, so one instance may be shared between
    threads as long as the underlying session is.

    Parameters
    ----------
    config : TranslationConfig
        Endpoint, credentials and sampling parameters; validated here, before
        any HTTP machinery is created.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is used.
    session : Optional[requests.Session]
        Session to send requests with; a new one is created when omitted.

    Raises
    ------
    ConfigurationError
        If any configuration value is missing or empty.
    """

    def __init__(
        self,
        config: TranslationConfig,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config.ensure_complete()
        self.logger = logger or logging.getLogger(__name__)
        self.http = HttpRequester(
            token=self.config.api_key, session=session, logger=self.logger
        )

    # ------------------------------------------------------------------ #
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """
        Translate ``text`` from ``source_language`` to ``target_language``.

        The result is not deterministic: the remote model samples with the
        configured temperature, so identical inputs may yield different text.

        Raises
        ------
        ValueError
            If ``text`` is empty.
        TransportError
            If the request could not be sent.
        TranslationFailed
            If the provider reply carries an ``error`` field.
        MalformedResponse
            If the reply is not JSON or lacks ``choices[0].message.content``.
        """
        if not text:
            raise ValueError("Text to translate must not be empty")

        request = TranslationRequest(
            text=text,
            source_language=source_language,
            target_language=target_language,
        )
        payload = ChatCompletionPayload.for_prompt(
            request.prompt(),
            model=self.config.model,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

        self.logger.debug(
            "Translating %d chars %s -> %s with %s",
            len(text),
            source_language,
            target_language,
            self.config.model,
        )
        body, status_code = ChatCompletionService(
            self.http, self.config.api_url, self.logger
        ).call(payload)

        response = parse_provider_response(body, status_code=status_code)
        if isinstance(response, ProviderErrorResponse):
            self.logger.warning(
                "Provider returned an error (HTTP %s): %s",
                status_code,
                response.error,
            )
            raise TranslationFailed(response.error, status_code=status_code)
        return response.content
