import httpx
import pytest

from domain.errors import ForbiddenError, NotFoundError, UpstreamError
from infrastructure.api import (
    Forbidden,
    NotFound,
    OtherFailure,
    RateLimited,
    Success,
    classify_response,
)
from infrastructure.api.outcomes import parse_retry_after, raise_for_outcome


@pytest.mark.parametrize("response, expected", [
    (httpx.Response(200, json={"a": 1}), Success({"a": 1})),
    (httpx.Response(204), Success(None)),
    (httpx.Response(404), NotFound()),
    (httpx.Response(403), Forbidden()),
    (httpx.Response(429, headers={"Retry-After": "5"}), RateLimited(5)),
    (httpx.Response(429), RateLimited(2)),
    (httpx.Response(502, text="bad gateway"), OtherFailure(502, "bad gateway")),
])
def test_classify_response(response, expected):
    assert classify_response(response) == expected


@pytest.mark.parametrize("value, expected", [(None, 2), ("3", 3), (" 10 ", 10), ("soon", 2), ("-1", 2)])
def test_parse_retry_after(value, expected):
    assert parse_retry_after(value, 2) == expected


@pytest.mark.parametrize("outcome, error", [
    (NotFound(), NotFoundError),
    (Forbidden(), ForbiddenError),
    (OtherFailure(500, "boom"), UpstreamError),
])
def test_raise_for_outcome(outcome, error):
    with pytest.raises(error) as info:
        raise_for_outcome(outcome, "https://example.test/x")
    assert info.value.url == "https://example.test/x"


def test_success_does_not_raise():
    raise_for_outcome(Success([]), "https://example.test/x")
