from typing import Iterator

import pytest
from starlette.testclient import TestClient

from app.app import create_app
from app.config import Config, Env

from fakes import AUTH_URL, RECOMMEND_URL, FakeRemote


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def cfg() -> Config:
    return Config(
        env=Env.prod,
        ping_message="ping",
        recommend_url=RECOMMEND_URL,
        auth_url=AUTH_URL,
        remote_timeout=10.0,
    )


@pytest.fixture
def client(cfg: Config, remote: FakeRemote) -> Iterator[TestClient]:
    with TestClient(create_app(cfg, http_client=remote.client())) as c:
        yield c
