from stalewise._core._headers import (
    CacheDirectives as CacheDirectives,
    Headers as Headers,
    Vary as Vary,
    format_cache_control as format_cache_control,
    parse_cache_control as parse_cache_control,
)
from stalewise._core._packing import pack_policy as pack_policy, unpack_policy as unpack_policy
from stalewise._core._spec import (
    CacheOptions as CacheOptions,
    CachePolicy as CachePolicy,
    FromCache as FromCache,
    NeedRevalidation as NeedRevalidation,
    RevalidatedPolicy as RevalidatedPolicy,
    compute_policy as compute_policy,
)
from stalewise._core.models import Request as Request, Response as Response

__all__ = (
    "CacheDirectives",
    "CacheOptions",
    "CachePolicy",
    "FromCache",
    "Headers",
    "NeedRevalidation",
    "Request",
    "Response",
    "RevalidatedPolicy",
    "Vary",
    "compute_policy",
    "format_cache_control",
    "pack_policy",
    "parse_cache_control",
    "unpack_policy",
)
