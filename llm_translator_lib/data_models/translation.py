"""
Request and response models of a single translation call.

The outbound side is a chat‑completion body with exactly one user message.
The inbound side is parsed into a tagged result: either
:class:`ProviderErrorResponse` (the reply carries an ``error`` key) or
:class:`ProviderSuccessResponse` (the reply carries ``choices``).  Anything
else is reported as :class:`MalformedResponse` instead of failing on a
missing key.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from llm_translator_lib.exceptions import MalformedResponse
from llm_translator_lib.data_models.constants import TRANSLATION_PROMPT, USER_ROLE


def build_prompt(text: str, source_language: str, target_language: str) -> str:
    """Interpolate the three values verbatim into the translation instruction."""
    return (
        TRANSLATION_PROMPT.format(
            source_language=source_language, target_language=target_language
        )
        + text
    )


class TranslationRequest(BaseModel):
    """
    Text and language pair of one ``translate`` call.

    Language codes are expected to be ISO 639‑1 but are not validated; the
    remote model interprets them.
    """

    text: str
    source_language: str
    target_language: str

    def prompt(self) -> str:
        return build_prompt(self.text, self.source_language, self.target_language)


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatCompletionPayload(BaseModel):
    """
    JSON body posted to the completion endpoint.

    Attributes
    ----------
    model : str
        Provider model identifier.
    messages : List[ChatMessage]
        Always a single ``user`` message holding the prompt.
    temperature : float
        Sampling temperature, forwarded as a float.
    max_tokens : int
        Token limit, forwarded as an integer.
    """

    model: str
    messages: List[ChatMessage]
    temperature: float
    max_tokens: int

    @classmethod
    def for_prompt(
        cls, prompt: str, model: str, temperature: float, max_tokens: int
    ) -> "ChatCompletionPayload":
        return cls(
            model=model,
            messages=[ChatMessage(role=USER_ROLE, content=prompt)],
            temperature=temperature,
            max_tokens=max_tokens,
        )


# -------------------------------------------------------------------
# Provider reply
# -------------------------------------------------------------------
class Message(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: StrictStr


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: Message


class ProviderSuccessResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    choices: List[Choice]

    @property
    def content(self) -> str:
        # Only the first completion is consulted
        return self.choices[0].message.content


class ProviderErrorResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error: Any


ProviderResponse = Union[ProviderErrorResponse, ProviderSuccessResponse]


def parse_provider_response(
    data: Any, status_code: Optional[int] = None
) -> ProviderResponse:
    """
    Classify a decoded provider reply.

    Parameters
    ----------
    data : Any
        The JSON‑decoded response body.
    status_code : Optional[int]
        HTTP status of the reply, attached to raised errors for diagnostics.

    Returns
    -------
    ProviderErrorResponse | ProviderSuccessResponse
        The error shape when ``data`` has a non‑null ``error`` key (checked
        first), otherwise the success shape.

    Raises
    ------
    MalformedResponse
        If ``data`` is not an object or lacks ``choices[0].message.content``.
    """
    if not isinstance(data, dict):
        raise MalformedResponse(
            f"Expected a JSON object, got {type(data).__name__}",
            status_code=status_code,
        )

    # A null error counts as absent
    if data.get("error") is not None:
        return ProviderErrorResponse(error=data["error"])

    try:
        parsed = ProviderSuccessResponse.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(
            f"Unexpected response shape: {exc}", status_code=status_code
        ) from exc

    if not parsed.choices:
        raise MalformedResponse("Response contains no choices", status_code=status_code)
    return parsed
