# This file defines the request-parameter source used to rebuild report URLs.
# It exists so links can reproduce the current request while changing a single parameter.
# Overrides are applied in place; `override_params` restores the exact ordered pairs, even on errors.
# The in-memory source can be built from a raw URL or from a FastAPI/Starlette request.

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Protocol

from starlette.datastructures import URL, QueryParams
from starlette.requests import Request


class RequestParams(Protocol):
    """Key-value request parameters that can also reconstruct the current URL."""

    def get(self, name: str) -> str | None: ...

    def get_all(self, name: str) -> list[str]: ...

    def set(self, name: str, value: str) -> None: ...

    def set_all(self, name: str, values: list[str]) -> None: ...

    def delete(self, name: str) -> None: ...

    def snapshot(self) -> list[tuple[str, str]]: ...

    def restore(self, snapshot: list[tuple[str, str]]) -> None: ...

    def url(self) -> str: ...


class QueryParamSource:
    """Mutable, ordered, multi-valued query parameters bound to a request path."""

    def __init__(self, *, path: str = "/", pairs: list[tuple[str, str]] | None = None) -> None:
        self.path = path or "/"
        self._pairs: list[tuple[str, str]] = list(pairs or [])

    @classmethod
    def from_url(cls, url: str) -> QueryParamSource:
        parsed = URL(url)
        return cls(path=parsed.path, pairs=QueryParams(parsed.query).multi_items())

    @classmethod
    def from_request(cls, request: Request) -> QueryParamSource:
        return cls(path=request.url.path, pairs=request.query_params.multi_items())

    def get(self, name: str) -> str | None:
        for key, value in self._pairs:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> list[str]:
        return [value for key, value in self._pairs if key == name]

    def set(self, name: str, value: str) -> None:
        self.set_all(name, [value])

    def set_all(self, name: str, values: list[str]) -> None:
        """Replace every value of `name`, keeping its original position when present."""

        position = next((idx for idx, (key, _) in enumerate(self._pairs) if key == name), None)
        remaining = [(key, value) for key, value in self._pairs if key != name]
        replacement = [(name, str(value)) for value in values]
        if position is None:
            self._pairs = remaining + replacement
            return
        self._pairs = remaining[:position] + replacement + remaining[position:]

    def delete(self, name: str) -> None:
        self._pairs = [(key, value) for key, value in self._pairs if key != name]

    def items(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def snapshot(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def restore(self, snapshot: list[tuple[str, str]]) -> None:
        """Put back every pair, in order, exactly as captured by `snapshot`."""

        self._pairs = list(snapshot)

    def url(self) -> str:
        """Absolute path plus query string, e.g. `/reports/people?page=2&sort=age,ASC`."""

        query = str(QueryParams(self._pairs))
        return str(URL(path=self.path, query=query))


@contextmanager
def override_params(
    params: RequestParams,
    overrides: Mapping[str, str | None],
) -> Iterator[RequestParams]:
    """Temporarily set (or delete, for `None`) parameters and restore them afterwards."""

    saved = params.snapshot()
    try:
        for name, value in overrides.items():
            if value is None:
                params.delete(name)
            else:
                params.set(name, value)
        yield params
    finally:
        params.restore(saved)
