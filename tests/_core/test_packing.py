from __future__ import annotations

import msgpack
import pytest

from stalewise import (
    CacheOptions,
    CachePolicy,
    FrozenClock,
    InvalidSnapshot,
    Request,
    Response,
    pack_policy,
    unpack_policy,
)
from stalewise._core._headers import Headers

NOW = 1704067200


def create_policy() -> CachePolicy:
    response_headers = Headers(
        {
            "Date": "Mon, 01 Jan 2024 00:00:00 GMT",
            "Cache-Control": "max-age=3600",
            "Vary": "Accept-Language",
            "ETag": '"abc"',
        }
    )
    response_headers.add("Set-Cookie", "a=1")
    response_headers.add("Set-Cookie", "b=2")

    return CachePolicy(
        Request(
            url="https://example.com/resource",
            headers={"Host": "example.com", "Accept-Language": "en"},
        ),
        Response(status_code=200, headers=response_headers),
        CacheOptions(shared=False, cache_heuristic=0.25, immutable_min_time_to_live=60),
        now=NOW + 0.5,
    )


def test_snapshot_is_flat() -> None:
    snapshot = create_policy().to_snapshot()

    assert snapshot["v"] == "1"
    assert snapshot["url"] == "https://example.com/resource"
    assert snapshot["req:accept-language"] == "en"
    assert snapshot["res:set-cookie"] == "a=1\nb=2"
    assert all(isinstance(key, str) and isinstance(value, str) for key, value in snapshot.items())


def test_restored_policy_makes_the_same_decisions() -> None:
    policy = create_policy()

    restored = CachePolicy.from_snapshot(policy.to_snapshot())

    assert restored.options == policy.options
    assert restored.response_time == policy.response_time
    assert restored.request.headers == policy.request.headers
    assert restored.response.headers.get_list("set-cookie") == ["a=1", "b=2"]
    assert restored.max_age() == policy.max_age()
    assert restored.time_to_live(now=NOW + 100) == policy.time_to_live(now=NOW + 100)
    assert restored.to_snapshot() == policy.to_snapshot()


def test_policy_without_url() -> None:
    policy = CachePolicy(Request(), Response(), now=NOW)

    snapshot = policy.to_snapshot()

    assert "url" not in snapshot
    assert CachePolicy.from_snapshot(snapshot).request.url is None


def test_clock_is_not_persisted() -> None:
    restored = CachePolicy.from_snapshot(create_policy().to_snapshot(), clock=FrozenClock(NOW + 100.5))

    assert restored.age() == 100


def test_pack_and_unpack() -> None:
    policy = create_policy()

    restored = unpack_policy(pack_policy(policy))

    assert restored.to_snapshot() == policy.to_snapshot()


@pytest.mark.parametrize(
    "snapshot",
    [
        {},
        {"v": "2"},
        {"v": "1", "t": "0"},
        {
            "v": "1",
            "t": "not a number",
            "shared": "1",
            "ignore_cargo_cult": "0",
            "trust_server_date": "1",
            "cache_heuristic": "0.1",
            "immutable_min_ttl": "86400",
            "status": "200",
            "method": "GET",
        },
        {
            "v": "1",
            "t": "0",
            "shared": "yes",
            "ignore_cargo_cult": "0",
            "trust_server_date": "1",
            "cache_heuristic": "0.1",
            "immutable_min_ttl": "86400",
            "status": "200",
            "method": "GET",
        },
        {
            "v": "1",
            "t": "0",
            "shared": "1",
            "ignore_cargo_cult": "0",
            "trust_server_date": "1",
            "cache_heuristic": "-1",
            "immutable_min_ttl": "86400",
            "status": "200",
            "method": "GET",
        },
    ],
)
def test_invalid_snapshots(snapshot: dict) -> None:
    with pytest.raises(InvalidSnapshot):
        CachePolicy.from_snapshot(snapshot)


@pytest.mark.parametrize("value", [b"\xc1", b"\x92\x01", msgpack.packb(5), msgpack.packb(["v", "1"])])
def test_invalid_packed_values(value: bytes) -> None:
    with pytest.raises(InvalidSnapshot):
        unpack_policy(value)


@pytest.mark.parametrize(
    "garbled",
    [
        {"method": 5},
        {"method": None},
        {"url": 5},
        {"url": ["https://example.com/"]},
        {1: "x"},
    ],
)
def test_garbled_fields_in_packed_policy(garbled: dict) -> None:
    snapshot = {**create_policy().to_snapshot(), **garbled}

    with pytest.raises(InvalidSnapshot):
        unpack_policy(msgpack.packb(snapshot))
