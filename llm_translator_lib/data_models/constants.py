API_KEY_PARAM = "api_key"
API_URL_PARAM = "api_url"
MODEL_PARAM = "model"
TEMPERATURE_PARAM = "temperature"
MAX_TOKENS_PARAM = "max_tokens"

REQUIRED_CONFIG_PARAMS = [
    API_KEY_PARAM,
    API_URL_PARAM,
    MODEL_PARAM,
    TEMPERATURE_PARAM,
    MAX_TOKENS_PARAM,
]


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LLM_TRANSLATOR_"


DEFAULT_ENV_PREFIX = _DontChangeMe.MAIN_ENV_PREFIX

USER_ROLE = "user"

# The remote model's output depends on this exact wording
TRANSLATION_PROMPT = (
    "Translate this text from {source_language} to {target_language} "
    "and return only the translated text without additional comments "
    "or explanations: "
)
