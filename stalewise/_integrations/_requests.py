from __future__ import annotations

from typing import Optional, Union, overload

import requests
from typing_extensions import assert_never

from stalewise._core._headers import Headers
from stalewise._core._spec import CacheOptions, CachePolicy
from stalewise._core.models import Request, Response
from stalewise._utils import BaseClock


@overload
def requests_to_internal(
    model: requests.models.PreparedRequest,
) -> Request: ...


@overload
def requests_to_internal(
    model: requests.models.Response,
) -> Response: ...


def requests_to_internal(
    model: Union[requests.models.PreparedRequest, requests.models.Response],
) -> Union[Request, Response]:
    if isinstance(model, requests.models.PreparedRequest):
        assert model.method
        return Request(
            method=model.method,
            url=None if model.url is None else str(model.url),
            headers=Headers(model.headers),
        )
    elif isinstance(model, requests.models.Response):
        return Response(
            status_code=model.status_code,
            headers=Headers(model.headers),
        )
    else:
        assert_never(model)
    raise RuntimeError("This line should never be reached, but is here to satisfy type checkers.")


def request_from_requests(request: requests.models.PreparedRequest) -> Request:
    return requests_to_internal(request)


def response_from_requests(response: requests.models.Response) -> Response:
    return requests_to_internal(response)


def policy_from_requests(
    response: requests.models.Response,
    options: Optional[CacheOptions] = None,
    now: Optional[float] = None,
    clock: Optional[BaseClock] = None,
) -> CachePolicy:
    """
    Computes the cache policy of a requests response, using the prepared request it answers.
    """
    if response.request is None:
        raise ValueError("The response is not attached to a request, so its cache policy can not be computed.")

    return CachePolicy(
        requests_to_internal(response.request),
        requests_to_internal(response),
        options,
        now=now,
        clock=clock,
    )
