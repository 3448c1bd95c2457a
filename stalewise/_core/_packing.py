from __future__ import annotations

from typing import Optional

import msgpack
from msgpack.exceptions import UnpackException
from typing_extensions import cast

from stalewise._core._spec import CachePolicy
from stalewise._exceptions import InvalidSnapshot
from stalewise._utils import BaseClock


def pack_policy(policy: CachePolicy) -> bytes:
    """
    Packs a policy into bytes suitable for any key-value store.
    """
    return cast(bytes, msgpack.packb(policy.to_snapshot()))


def unpack_policy(value: bytes, clock: Optional[BaseClock] = None) -> CachePolicy:
    """
    Restores a policy packed with ``pack_policy``.

    Raises InvalidSnapshot when the bytes are not a packed policy.
    """
    try:
        data = msgpack.unpackb(value)
    except (UnpackException, ValueError, TypeError) as exc:
        raise InvalidSnapshot(f"Invalid serialization: {exc!r}") from exc
    return CachePolicy.from_snapshot(data, clock=clock)
