"""
Thin wrapper around ``requests`` that adds logging and unified error handling.

The :class:`HttpRequester` class sends the single POST of a translation call
to the completion endpoint.  It centralises:

* automatic inclusion of a bearer token and the JSON content type,
* conversion of network‑level failures into :class:`TransportError`.

HTTP status codes are deliberately left untouched: providers report failures
inside the JSON body, and that body decides the outcome of a call.  There is
no retry policy; one call means one round trip.
"""

import logging
from typing import Any, Dict, Optional

import requests

from llm_translator_lib.exceptions import TransportError


class HttpRequester:
    """
    Helper for making authenticated JSON POST calls.

    Parameters
    ----------
    token : str
        Bearer token used for the ``Authorization`` header; if empty, no
        header is added.
    timeout : Optional[float], default ``None``
        Per‑request timeout in seconds; ``None`` keeps the transport default.
    session : Optional[requests.Session]
        Session to reuse; a new one is created when omitted.  Its own
        ``headers`` are left untouched, so one session can be shared by
        requesters holding different tokens.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        token: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

        # Per-request headers; the session's own headers stay untouched
        self.headers = {"Content-Type": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

        self.logger = logger or logging.getLogger(__name__)

    def post(
        self, url: str, json: Optional[Dict[str, Any]] = None, **kwargs
    ) -> requests.Response:
        """
        Perform a ``POST`` request with a JSON body.

        Parameters
        ----------
        url : str
            Absolute URL to post to.
        json : Optional[Dict[str, Any]]
            JSON‑serialisable payload sent as the request body.
        **kwargs
            Additional arguments forwarded to ``requests.Session.post``.

        Returns
        -------
        requests.Response
            The raw response, whatever its status code.

        Raises
        ------
        TransportError
            If the request could not be sent or the connection failed.
        """
        self.logger.debug("POST %s", url)
        try:
            return self.session.post(
                url, json=json, headers=self.headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            self.logger.warning("POST %s failed: %s", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc
