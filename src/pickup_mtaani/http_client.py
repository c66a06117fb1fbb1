"""HTTP transport for the Pickup Mtaani API.

Every outbound call goes through :class:`HttpClient`, which injects the API key,
applies the configured base URL and timeout, and turns every failure into a
:class:`~pickup_mtaani.errors.PickupMtaaniError` subclass.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from .config import ClientSettings
from .errors import (
    ConfigurationError,
    MissingDataError,
    NetworkError,
    PickupMtaaniError,
    RequestTimeoutError,
    error_for_status,
)

logger = logging.getLogger(__name__)

USER_AGENT = "pickup-mtaani-python"


def _serialize(value: Any) -> Any:
    """Dump pydantic models to their wire form, leaving plain values alone."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def _clean_params(params: Mapping[str, Any] | BaseModel | None) -> dict[str, Any] | None:
    """Drop unset filters so they never reach the query string."""
    if params is None:
        return None
    data = _serialize(params)
    cleaned = {key: value for key, value in data.items() if value is not None}
    return cleaned or None


class HttpClient:
    def __init__(
        self,
        settings: ClientSettings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not settings.api_key:
            raise ConfigurationError("API key is required")
        self.settings = settings
        self.base_url = settings.base_url
        self.timeout = settings.timeout
        self.debug = settings.debug

        event_hooks: dict[str, list] = {"request": [], "response": []}
        if self.debug:
            event_hooks["request"].append(self._log_request)
            event_hooks["response"].append(self._log_response)

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={
                "apiKey": settings.api_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            # httpx retries only failed connection attempts; responses are never replayed.
            transport=transport or httpx.HTTPTransport(retries=settings.retries),
            event_hooks=event_hooks,
        )

    def _log_request(self, request: httpx.Request) -> None:
        body = request.content.decode("utf-8", errors="replace") if request.content else None
        logger.debug(f"Request: {request.method} {request.url} body={body}")

    def _log_response(self, response: httpx.Response) -> None:
        # The body has not been read yet inside an event hook.
        response.read()
        logger.debug(
            f"Response: {response.status_code} {response.request.method} "
            f"{response.request.url} body={response.text}"
        )

    def _error_from_response(self, response: httpx.Response) -> PickupMtaaniError:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {}

        message = payload.get("message") or response.reason_phrase or "An error occurred"
        validation_errors = payload.get("validationErrors")
        if isinstance(validation_errors, str):
            validation_errors = [validation_errors]
        return error_for_status(response.status_code, str(message), validation_errors)

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | BaseModel | None = None,
    ) -> Any:
        """Perform one call and return the decoded JSON body.

        Raises:
            RequestTimeoutError: no response before the deadline.
            NetworkError: the request never produced a response.
            PickupMtaaniError: a non-2xx response, as the subclass its status maps to.
            MissingDataError: a 2xx response whose body is not JSON.
        """
        try:
            response = self._client.request(
                method,
                path,
                json=_serialize(json),
                params=_clean_params(params),
            )
        except httpx.TimeoutException as exc:
            if self.debug:
                logger.warning(f"Request error: {method} {path} timed out: {exc}")
            raise RequestTimeoutError(str(exc) or None) from exc
        except httpx.RequestError as exc:
            if self.debug:
                logger.warning(f"Request error: {method} {path} failed without a response: {exc}")
            raise NetworkError(str(exc) or None) from exc

        if not response.is_success:
            error = self._error_from_response(response)
            if self.debug:
                logger.warning(f"Response error: {method} {path} -> {error!r}")
            raise error

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise MissingDataError(
                f"Response to {method} {path} is not JSON (status {response.status_code})"
            ) from exc

    def get(self, path: str, params: Mapping[str, Any] | BaseModel | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: Any = None,
        params: Mapping[str, Any] | BaseModel | None = None,
    ) -> Any:
        return self.request("POST", path, json=json, params=params)

    def put(
        self,
        path: str,
        json: Any = None,
        params: Mapping[str, Any] | BaseModel | None = None,
    ) -> Any:
        return self.request("PUT", path, json=json, params=params)

    def delete(self, path: str, params: Mapping[str, Any] | BaseModel | None = None) -> Any:
        return self.request("DELETE", path, params=params)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
