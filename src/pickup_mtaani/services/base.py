"""Shared plumbing for the resource services."""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel

from ..errors import MissingDataError
from ..http_client import HttpClient
from ..schemas.common import PaginatedResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


def _payload(response: Any) -> Any:
    if isinstance(response, dict):
        return response.get("data")
    return None


class BaseService:
    """Binds one resource group to the shared transport.

    Services never catch transport errors; whatever ``HttpClient`` raises
    reaches the caller unchanged.
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    @staticmethod
    def _unwrap(response: Any, model: Type[ModelT], label: str) -> ModelT:
        """Return the envelope's ``data`` as ``model``.

        A missing ``data`` key, ``null`` and an empty object all raise
        ``MissingDataError``.
        """
        data = _payload(response)
        if not data:
            raise MissingDataError(f"No {label} data returned")
        return model.model_validate(data)

    @staticmethod
    def _items(response: Any, model: Type[ModelT]) -> list[ModelT]:
        return [model.model_validate(item) for item in _payload(response) or []]

    @staticmethod
    def _page(response: Any, model: Type[ModelT]) -> PaginatedResponse[ModelT]:
        return PaginatedResponse[model].model_validate(response)

    @staticmethod
    def _message(response: Any, default: str) -> str:
        if isinstance(response, dict) and response.get("message"):
            return str(response["message"])
        return default
