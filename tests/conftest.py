from unittest.mock import MagicMock, patch

import pytest
import requests

from llm_translator_lib import TranslationConfig

API_URL = "https://api.example.com/v1/chat/completions"


def make_response(body=None, status_code=200, text=""):
    """Build a fake ``requests.Response`` whose ``json()`` yields ``body``."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def config() -> TranslationConfig:
    return TranslationConfig(
        api_key="sk-test",
        api_url=API_URL,
        model="gpt-4o-mini",
        temperature=0.3,
        max_tokens=1000,
    )


@pytest.fixture
def mock_post():
    """Patch ``requests.Session.post`` so no request leaves the process."""
    with patch.object(requests.Session, "post") as mock:
        mock.return_value = make_response(
            {"choices": [{"message": {"role": "assistant", "content": "مرحبا"}}]}
        )
        yield mock
