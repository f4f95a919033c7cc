"""Stand-ins for the remote recommendation and login services."""

from typing import Any, Callable

import httpx


RECOMMEND_URL = "http://recommend.test/prod/recommend"
AUTH_URL = "http://auth.test/login"


Handler = Callable[[httpx.Request], httpx.Response]


TAGGED_RECIPES: list[dict[str, Any]] = [
    {
        "id": {"S": "1"},
        "name": {"S": "Garlic Butter Pasta"},
        "ingredients": {"S": "pasta, garlic, butter"},
        "instructions": {"S": "Boil the pasta. Melt butter with garlic. Toss together"},
        "tags": {"S": "quick, italian"},
    },
    {
        "id": "2",
        "name": "Ginger Tea",
        "ingredients": ["ginger", "water"],
        "instructions": ["Slice ginger", "Simmer in water"],
        "tags": ["drink"],
    },
]


def unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def timed_out(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("Timed out", request=request)


def respond(status_code: int = 200, **kwargs: Any) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **kwargs)

    return handler


class FakeRemote:
    """Both remote services, picked by host."""

    def __init__(self) -> None:
        self.recommend: Handler = respond(json=TAGGED_RECIPES)
        self.auth: Handler = respond(
            json={
                "success": True,
                "token": "remote-token",
                "user": {"id": "u-1", "name": "Alice", "username": "alice"},
            }
        )
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "recommend.test":
            return self.recommend(request)
        return self.auth(request)

    def down(self) -> None:
        self.recommend = unreachable
        self.auth = unreachable

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))
