import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class SequenceClientError(Exception):
    """Base class for errors raised while publishing generated values."""


class APIError(SequenceClientError):
    """The endpoint answered, or failed to answer, with a non-2xx result."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional['APIResponse'] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


@dataclass
class APIResponse:
    status_code: Optional[int]
    body: Any

    @classmethod
    def from_http(cls, resp: requests.Response) -> 'APIResponse':
        # endpoints may answer with plain text, e.g. from a proxy
        try:
            body = resp.json()
        except ValueError:
            body = resp.text
        return cls(resp.status_code, body)

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class SequenceClient:
    """POSTs batches of generated values to a JSON endpoint."""

    def __init__(self, url: str, timeout: int = 10):
        self.url = url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def post_json(self, payload: Dict[str, Any]) -> APIResponse:
        try:
            resp = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            if exc.response is None:
                logger.debug("POST %s failed: %s", self.url, exc)
                return APIResponse(None, str(exc))
            resp = exc.response

        logger.debug("POST %s -> %s", self.url, resp.status_code)
        return APIResponse.from_http(resp)

    def publish(self, values: list) -> APIResponse:
        """Send one batch. Payload: {count, values: [ ... ]}"""
        return self.post_json({"count": len(values), "values": list(values)})

    @staticmethod
    def raise_for_status(response: APIResponse) -> APIResponse:
        if not response.is_success:
            raise APIError(
                f"publish failed with status {response.status_code}",
                status_code=response.status_code,
                response=response,
            )
        return response
