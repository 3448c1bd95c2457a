try:
    import httpx  # noqa: F401
except ImportError as e:
    raise ImportError(
        "httpx is required to use stalewise.httpx module. "
        "Please install stalewise with the 'httpx' extra, "
        "e.g., 'pip install stalewise[httpx]'."
    ) from e


from ._integrations._httpx import (
    httpx_to_internal as httpx_to_internal,
    policy_from_httpx as policy_from_httpx,
    request_from_httpx as request_from_httpx,
    response_from_httpx as response_from_httpx,
)

__all__ = (
    "httpx_to_internal",
    "policy_from_httpx",
    "request_from_httpx",
    "response_from_httpx",
)
