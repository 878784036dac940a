"""Tests for prompt construction and provider reply parsing."""

import pytest

from llm_translator_lib import MalformedResponse, build_prompt
from llm_translator_lib.data_models.translation import (
    ChatCompletionPayload,
    ProviderErrorResponse,
    ProviderSuccessResponse,
    TranslationRequest,
    parse_provider_response,
)


def test_prompt_matches_fixed_template():
    assert build_prompt("Hello", "en", "ar") == (
        "Translate this text from en to ar and return only the translated "
        "text without additional comments or explanations: Hello"
    )


@pytest.mark.parametrize(
    "text", ["  padded  ", "with {braces} and {0}", "line one\nline two", "a%sb"]
)
def test_prompt_interpolates_text_verbatim(text):
    prompt = TranslationRequest(
        text=text, source_language="de", target_language="pl"
    ).prompt()
    assert prompt.endswith("explanations: " + text)
    assert prompt.startswith("Translate this text from de to pl and")


def test_language_codes_are_not_validated():
    prompt = build_prompt("x", "english", "{xx}")
    assert "from english to {xx} and" in prompt


def test_payload_has_single_user_message():
    payload = ChatCompletionPayload.for_prompt(
        "prompt", model="m", temperature=1, max_tokens=10
    ).model_dump()
    assert payload == {
        "model": "m",
        "messages": [{"role": "user", "content": "prompt"}],
        "temperature": 1.0,
        "max_tokens": 10,
    }
    assert isinstance(payload["temperature"], float)
    assert isinstance(payload["max_tokens"], int)


def test_parse_success():
    parsed = parse_provider_response(
        {
            "id": "cmpl-1",
            "choices": [
                {"index": 0, "message": {"role": "assistant", "content": "Hola"}},
                {"index": 1, "message": {"role": "assistant", "content": "Buenas"}},
            ],
        }
    )
    assert isinstance(parsed, ProviderSuccessResponse)
    assert parsed.content == "Hola"


def test_parse_error_takes_precedence_over_choices():
    parsed = parse_provider_response(
        {"error": {"message": "rate limited"}, "choices": []}
    )
    assert isinstance(parsed, ProviderErrorResponse)
    assert parsed.error == {"message": "rate limited"}


def test_parse_null_error_is_ignored():
    parsed = parse_provider_response(
        {"error": None, "choices": [{"message": {"content": "ok"}}]}
    )
    assert isinstance(parsed, ProviderSuccessResponse)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": None}}]},
        {"choices": [{"message": {"content": 42}}]},
        {"choices": "nope"},
        ["choices"],
        "text",
        None,
    ],
)
def test_parse_malformed(data):
    with pytest.raises(MalformedResponse):
        parse_provider_response(data, status_code=200)


def test_malformed_carries_status_code():
    with pytest.raises(MalformedResponse) as exc_info:
        parse_provider_response({"id": "x"}, status_code=502)
    assert exc_info.value.status_code == 502
