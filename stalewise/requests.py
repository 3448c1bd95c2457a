try:
    import requests  # noqa: F401
except ImportError:  # pragma: no cover
    raise ImportError(
        "The 'requests' library is required to use the requests integration. "
        "Install stalewise with 'pip install stalewise[requests]'."
    )

from ._integrations._requests import (
    policy_from_requests as policy_from_requests,
    request_from_requests as request_from_requests,
    requests_to_internal as requests_to_internal,
    response_from_requests as response_from_requests,
)

__all__ = (
    "policy_from_requests",
    "request_from_requests",
    "requests_to_internal",
    "response_from_requests",
)
