"""
Diffbot Article API – request builder.

Builds GET {base}/article with token, url and the optional parameters
(fields selection, timeout, comments, html, dontStripAds), and parses
the JSON response into an Article.

API Endpoint: GET http://api.diffbot.com/v2/article?token=...&url=...
"""

import logging
import os
from typing import Any, cast

import requests
from dotenv import load_dotenv
from requests.exceptions import HTTPError

from article.models import Article
from common.exceptions import DiffbotError

load_dotenv()
API_TOKEN = os.getenv("DIFFBOT_TOKEN")
BASE_URL = os.getenv("DIFFBOT_BASE_URL", "http://api.diffbot.com/v2")

logger = logging.getLogger(__name__)


def request_timeout() -> float:
    """HTTP timeout in seconds, from DIFFBOT_TIMEOUT_SECONDS (default 30)."""
    return float(os.getenv("DIFFBOT_TIMEOUT_SECONDS", "30"))


class Analyze:
    """
    One Article API call, configured with chained with_* methods.

    Example:
        article = Analyze("http://example.com/story").with_fields("tags,meta").execute()
    """

    def __init__(
        self,
        url: str,
        token: str | None = None,
        session: requests.Session | None = None,
        base_url: str = BASE_URL,
    ):
        self.url = url
        self.token = token or API_TOKEN
        self.session = session
        self.base_url = base_url.rstrip("/")
        self._options: dict[str, str] = {}

    def with_fields(self, fields: str | list[str]) -> "Analyze":
        """Ask for optional fields (e.g. "tags,meta,querystring")."""
        if not isinstance(fields, str):
            fields = ",".join(fields)
        self._options["fields"] = fields
        return self

    def with_timeout(self, timeout_ms: int) -> "Analyze":
        """Server-side extraction timeout in milliseconds."""
        if timeout_ms <= 0:
            raise ValueError(f"timeout must be positive, got {timeout_ms}")
        self._options["timeout"] = str(timeout_ms)
        return self

    def with_comments(self) -> "Analyze":
        self._options["comments"] = "true"
        return self

    def with_html(self) -> "Analyze":
        self._options["html"] = "true"
        return self

    def dont_strip_ads(self) -> "Analyze":
        self._options["dontStripAds"] = "true"
        return self

    def params(self) -> dict[str, str]:
        """Query parameters for the request (token first, then url, then options)."""
        params = {"token": self.token or "", "url": self.url}
        params.update(self._options)
        return params

    def fetch_raw(self) -> dict[str, Any]:
        """
        Run the request and return the raw JSON response.

        Raises:
            DiffbotError: missing token, non-2xx status, or an error payload.
            requests.RequestException: network failure.
        """
        if not self.token:
            raise DiffbotError("Set DIFFBOT_TOKEN in your .env file.")

        endpoint = f"{self.base_url}/article"
        http = self.session or requests
        logger.info("Requesting %s for %s", endpoint, self.url)
        response = http.get(endpoint, params=self.params(), timeout=request_timeout())

        if response.status_code == 401:
            raise DiffbotError("Unauthorized. Check that your token is valid.", 401)
        if response.status_code == 429:
            raise DiffbotError("Rate limit exceeded. Wait before retrying.", 429)
        try:
            response.raise_for_status()
        except HTTPError as e:
            raise DiffbotError(f"HTTP {response.status_code}: {e}", response.status_code) from e

        data = cast(dict[str, Any], response.json())
        if "error" in data:
            logger.warning("Diffbot error for %s: %s", self.url, data["error"])
            raise DiffbotError(str(data["error"]), data.get("errorCode"))
        return data

    def execute(self) -> Article:
        """Run the request and decode the response into an Article."""
        article = Article.model_validate(self.fetch_raw())
        logger.info("Extracted %s", article)
        return article
