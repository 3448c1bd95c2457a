from __future__ import annotations

from typing import Optional, Union, overload

import httpx
from typing_extensions import assert_never

from stalewise._core._headers import Headers
from stalewise._core._spec import CacheOptions, CachePolicy
from stalewise._core.models import Request, Response
from stalewise._utils import BaseClock


def _httpx_headers_to_internal(headers: httpx.Headers) -> Headers:
    # multi_items keeps repeated fields such as Set-Cookie apart
    converted = Headers()
    for key, value in headers.multi_items():
        converted.add(key, value)
    return converted


@overload
def httpx_to_internal(
    value: httpx.Request,
) -> Request: ...


@overload
def httpx_to_internal(
    value: httpx.Response,
) -> Response: ...


def httpx_to_internal(
    value: Union[httpx.Request, httpx.Response],
) -> Union[Request, Response]:
    """
    Convert httpx.Request/httpx.Response to internal Request/Response.

    Only the parts that matter for cache decisions are kept, bodies are never read.
    """
    if isinstance(value, httpx.Request):
        return Request(
            method=value.method,
            url=str(value.url),
            headers=_httpx_headers_to_internal(value.headers),
        )
    elif isinstance(value, httpx.Response):
        return Response(
            status_code=value.status_code,
            headers=_httpx_headers_to_internal(value.headers),
        )
    else:
        assert_never(value)
    raise RuntimeError("This line should never be reached, but is here to satisfy type checkers.")


def request_from_httpx(request: httpx.Request) -> Request:
    return httpx_to_internal(request)


def response_from_httpx(response: httpx.Response) -> Response:
    return httpx_to_internal(response)


def policy_from_httpx(
    response: httpx.Response,
    options: Optional[CacheOptions] = None,
    now: Optional[float] = None,
    clock: Optional[BaseClock] = None,
) -> CachePolicy:
    """
    Computes the cache policy of an httpx response, using the request it answers.

    Raises RuntimeError (from httpx) when the response is not attached to a request.
    """
    return CachePolicy(
        httpx_to_internal(response.request),
        httpx_to_internal(response),
        options,
        now=now,
        clock=clock,
    )
