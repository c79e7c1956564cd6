"""HTTP client for the game's API and the routes of its front end."""

from __future__ import annotations

import enum
import json
import os

import httpx

from ebobo.shared import AUTH_HEADER, Choice, Fighter, Index

_DEFAULT_URL = "http://localhost:8000"


def default_url() -> str:
    """Return the API URL, taken from $EBOBO_API_URL when set."""
    return os.environ.get("EBOBO_API_URL", _DEFAULT_URL)


class AppRoute(enum.Enum):
    INDEX = ""
    ARENA = "/arena"
    NOT_FOUND = None


def resolve_route(path: str) -> AppRoute:
    """Map a location path to the page that shows it."""
    path = path.split("#", 1)[0].split("?", 1)[0].strip("/")
    if not path:
        return AppRoute.INDEX
    if path == "arena":
        return AppRoute.ARENA
    return AppRoute.NOT_FOUND


class ApiClient:
    """Talks to the game server on behalf of one device fingerprint."""

    def __init__(
        self,
        fingerprint: str,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.fingerprint = fingerprint
        self.base_url = (base_url or default_url()).rstrip("/")
        self._http = httpx.Client(transport=transport, headers={AUTH_HEADER: fingerprint})

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _get(self, path: str) -> httpx.Response:
        response = self._http.get(f"{self.base_url}{path}")
        response.raise_for_status()
        return response

    def index(self) -> Index:
        return Index.from_dict(self._get("/").json())

    def available(self) -> list[Fighter]:
        return [Fighter.from_json(item) for item in self._get("/available").json()]

    def choose(self, fighter: str) -> None:
        response = self._http.post(
            f"{self.base_url}/choose",
            content=json.dumps(Choice(fighter).to_json()),
        )
        response.raise_for_status()