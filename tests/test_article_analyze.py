"""Tests for the Article API request builder: Analyze params, execute, error handling."""

from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import HTTPError

from article.analyze import Analyze, request_timeout
from article.models import Article
from common.exceptions import DiffbotError


def make_response(payload: dict, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = HTTPError(f"{status_code} Error")
    return response


def test_params_minimal():
    request = Analyze("http://example.com/story", token="tok")
    assert request.params() == {"token": "tok", "url": "http://example.com/story"}


def test_params_with_options():
    request = (
        Analyze("http://example.com/story", token="tok")
        .with_fields(["tags", "meta", "querystring"])
        .with_timeout(5000)
        .with_comments()
        .with_html()
        .dont_strip_ads()
    )
    assert request.params() == {
        "token": "tok",
        "url": "http://example.com/story",
        "fields": "tags,meta,querystring",
        "timeout": "5000",
        "comments": "true",
        "html": "true",
        "dontStripAds": "true",
    }


def test_with_fields_string():
    request = Analyze("http://example.com", token="tok").with_fields("tags,links")
    assert request.params()["fields"] == "tags,links"


def test_with_timeout_rejects_non_positive():
    with pytest.raises(ValueError):
        Analyze("http://example.com", token="tok").with_timeout(0)


def test_execute_returns_article():
    session = MagicMock()
    session.get.return_value = make_response(
        {"url": "http://example.com/story", "title": "Hello", "type": "article", "tags": ["x"]}
    )
    article = Analyze("http://example.com/story", token="tok", session=session, base_url="http://api.test/v2/").execute()

    assert isinstance(article, Article)
    assert article.title == "Hello"
    assert article.tags == ["x"]
    args, kwargs = session.get.call_args
    assert args[0] == "http://api.test/v2/article"
    assert kwargs["params"]["url"] == "http://example.com/story"
    assert kwargs["params"]["token"] == "tok"


@patch("article.analyze.requests.get")
def test_fetch_raw_uses_requests_without_session(mock_get):
    mock_get.return_value = make_response({"url": "http://example.com", "extra": 1})
    data = Analyze("http://example.com", token="tok").fetch_raw()
    assert data == {"url": "http://example.com", "extra": 1}
    mock_get.assert_called_once()


def test_missing_token_raises_before_request(monkeypatch):
    monkeypatch.setattr("article.analyze.API_TOKEN", None)
    session = MagicMock()
    with pytest.raises(DiffbotError):
        Analyze("http://example.com", session=session).fetch_raw()
    session.get.assert_not_called()


def test_error_payload_raises():
    session = MagicMock()
    session.get.return_value = make_response({"error": "Could not download page", "errorCode": 404})
    with pytest.raises(DiffbotError) as excinfo:
        Analyze("http://example.com", token="tok", session=session).execute()
    assert excinfo.value.code == 404
    assert str(excinfo.value) == "Could not download page (errorCode=404)"


@pytest.mark.parametrize("status_code", [401, 429, 500])
def test_http_error_status_raises(status_code):
    session = MagicMock()
    session.get.return_value = make_response({}, status_code=status_code)
    with pytest.raises(DiffbotError) as excinfo:
        Analyze("http://example.com", token="tok", session=session).fetch_raw()
    assert excinfo.value.code == status_code


def test_diffbot_error_without_code():
    assert str(DiffbotError("boom")) == "boom"


def test_request_timeout_from_env(monkeypatch):
    monkeypatch.setenv("DIFFBOT_TIMEOUT_SECONDS", "30.5")
    session = MagicMock()
    session.get.return_value = make_response({"url": "http://example.com"})
    Analyze("http://example.com", token="tok", session=session).fetch_raw()
    assert session.get.call_args.kwargs["timeout"] == 30.5


def test_request_timeout_default(monkeypatch):
    monkeypatch.delenv("DIFFBOT_TIMEOUT_SECONDS", raising=False)
    assert request_timeout() == 30.0
