from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Union

from stalewise._core._headers import Headers

AnyHeaders = Union[Headers, Mapping[str, str]]


def _as_headers(headers: Optional[AnyHeaders]) -> Headers:
    # Always take a private copy: snapshots must not change when the caller
    # keeps mutating the container it handed over.
    return Headers(headers)


@dataclass(frozen=True)
class Request:
    """
    What the cache needs to know about a request.

    Any mapping can be passed as ``headers``; it is copied into a
    case-insensitive ``Headers`` container, and the method is upper-cased.
    """

    method: str = "GET"
    url: Optional[str] = None
    headers: Headers = field(default_factory=Headers)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", _as_headers(self.headers))

    def keep_headers(self, names: Iterable[str]) -> "Request":
        """Returns a copy of this request that only carries the given headers."""
        kept = Headers()
        for name in names:
            values = self.headers.get_list(name)
            if values is not None:
                for value in values:
                    kept.add(name, value)
        return Request(method=self.method, url=self.url, headers=kept)


@dataclass(frozen=True)
class Response:
    """
    What the cache needs to know about a response: its status and headers.
    """

    status_code: int = 200
    headers: Headers = field(default_factory=Headers)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _as_headers(self.headers))
