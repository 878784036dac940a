"""
Service wrapper for the chat‑completion endpoint.

Binds :class:`BaseCompletionServiceInterface` to the
:class:`ChatCompletionPayload` request model.
"""

from llm_translator_lib.data_models.translation import ChatCompletionPayload
from llm_translator_lib.services.service_interface import (
    BaseCompletionServiceInterface,
)


class ChatCompletionService(BaseCompletionServiceInterface):
    model_cls = ChatCompletionPayload
