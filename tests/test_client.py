import httpx
import pytest

from redditfeed.client import (
    FeedFetchError,
    FeedUnavailableError,
    MalformedFeedError,
    build_feed_url,
    extract_children,
    fetch_feed_page,
    format_subreddit,
)
from redditfeed.config import FeedConfig, FeedType


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_format_subreddit_joins_lists() -> None:
    assert format_subreddit(["pics", "earthporn"]) == "pics+earthporn"
    assert format_subreddit("pics") == "pics"


def test_build_feed_url_for_subreddit() -> None:
    config = FeedConfig(subreddit=["pics", "aww"], feed_type=FeedType.TOP, count=25)
    assert build_feed_url(config) == "https://www.reddit.com/r/pics+aww/top/.json?raw_json=1&limit=25"


def test_build_feed_url_for_frontpage() -> None:
    assert build_feed_url(FeedConfig(subreddit="frontpage")) == "https://www.reddit.com/hot/.json?raw_json=1&limit=10"
    assert build_feed_url(FeedConfig(subreddit="")) == "https://www.reddit.com/hot/.json?raw_json=1&limit=10"


def test_extract_children_requires_listing_shape() -> None:
    assert extract_children({"data": {"children": [{"kind": "t3"}]}}) == [{"kind": "t3"}]

    for body in [{}, {"data": {}}, {"data": {"children": None}}, [], "oops"]:
        with pytest.raises(MalformedFeedError):
            extract_children(body)


def test_fetch_feed_page_returns_decoded_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/r/pics/hot/.json"
        assert request.url.params["limit"] == "10"
        return httpx.Response(200, json={"data": {"children": []}})

    with _client(handler) as client:
        body = fetch_feed_page(FeedConfig(subreddit="pics"), client=client)

    assert body == {"data": {"children": []}}


def test_fetch_feed_page_reports_status_code() -> None:
    with _client(lambda request: httpx.Response(404)) as client:
        with pytest.raises(FeedUnavailableError) as exc_info:
            fetch_feed_page(FeedConfig(), client=client)

    assert exc_info.value.status_code == 404


def test_fetch_feed_page_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(FeedUnavailableError) as exc_info:
            fetch_feed_page(FeedConfig(), client=client)

    assert exc_info.value.status_code is None


def test_fetch_feed_page_rejects_non_json() -> None:
    with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(FeedFetchError) as exc_info:
            fetch_feed_page(FeedConfig(), client=client)

    assert not isinstance(exc_info.value, MalformedFeedError)
