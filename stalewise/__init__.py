__version__ = "0.1.0"

from stalewise._core._headers import (
    CacheDirectives as CacheDirectives,
    Headers as Headers,
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
from stalewise._exceptions import (
    CachePolicyError as CachePolicyError,
    InvalidOptions as InvalidOptions,
    InvalidSnapshot as InvalidSnapshot,
)
from stalewise._utils import BaseClock as BaseClock, Clock as Clock, FrozenClock as FrozenClock

__all__ = (
    ## Policy
    "CacheOptions",
    "CachePolicy",
    "compute_policy",
    ## Outcomes
    "FromCache",
    "NeedRevalidation",
    "RevalidatedPolicy",
    ## Models
    "Request",
    "Response",
    ## Headers
    "Headers",
    "CacheDirectives",
    "parse_cache_control",
    ## Persistence
    "pack_policy",
    "unpack_policy",
    ## Clocks
    "BaseClock",
    "Clock",
    "FrozenClock",
    ## Errors
    "CachePolicyError",
    "InvalidOptions",
    "InvalidSnapshot",
)
