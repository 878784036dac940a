import abc
from typing import Any, Tuple, Type

from pydantic import BaseModel

from llm_translator_lib.utils.http import HttpRequester
from llm_translator_lib.exceptions import MalformedResponse


class BaseCompletionServiceInterface(abc.ABC):
    """
    Abstract base class for completion‑service wrappers.

    Sub‑classes must set the ``model_cls`` attribute (the Pydantic model used
    for the request body).  The class provides a reusable ``call`` method that
    performs the HTTP POST and returns the decoded JSON body, raising
    :class:`MalformedResponse` when the response is not JSON.
    """

    # Pydantic model class used to build the request payload.
    model_cls: Type[BaseModel] = None

    def __init__(self, http: HttpRequester, url: str, logger):
        """
        Initialise the service wrapper.

        Parameters
        ----------
        http : HttpRequester
            Helper object that knows how to perform HTTP requests.
        url : str
            Absolute URL of the endpoint.
        logger : logging.Logger
            Logger instance used for debugging and error reporting.
        """
        self.http = http
        self.url = url
        self.logger = logger

    def call(self, payload: Any) -> Tuple[Any, int]:
        """
        Send ``payload`` to the endpoint and return the decoded JSON body.

        Parameters
        ----------
        payload : Any
            Instance of ``self.model_cls`` or an already dumped dictionary.

        Returns
        -------
        tuple
            The decoded JSON body and the HTTP status code.

        Raises
        ------
        MalformedResponse
            If the response body cannot be decoded as JSON.
        """
        if isinstance(payload, BaseModel):
            payload = payload.model_dump()

        resp = self.http.post(self.url, json=payload)
        try:
            body = resp.json()
        except ValueError as exc:
            self.logger.error(
                "Non-JSON response (HTTP %s) from %s", resp.status_code, self.url
            )
            raise MalformedResponse(
                f"Invalid response format: {exc}",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc
        return body, resp.status_code
