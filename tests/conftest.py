"""Shared fixtures: a fake OpenF1 API built on httpx.MockTransport."""
from typing import Any, Callable, Dict, List

import httpx
import pytest

from config.service_config import ServiceConfig
from utils.openf1_client import OpenF1Client


def collection_of(request: httpx.Request) -> str:
    return request.url.path.rstrip("/").rsplit("/", 1)[-1]


def make_transport(routes: Dict[str, Any], calls: List[httpx.Request] = None) -> httpx.MockTransport:
    """
    Build a transport answering GET /<collection> from `routes`.

    A route value may be a JSON payload, an httpx.Response, an exception
    instance to raise, or a callable taking the request.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        route = routes.get(collection_of(request))
        if callable(route):
            route = route(request)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return httpx.Response(200, json=route)

    return httpx.MockTransport(handler)


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(
        openf1_base_url="https://openf1.test/v1",
        ai_service_url="https://ai.test",
        ai_service_secret="s3cret",
    )


@pytest.fixture
def make_client(service_config) -> Callable[..., OpenF1Client]:
    def _make(routes: Dict[str, Any], calls: List[httpx.Request] = None) -> OpenF1Client:
        return OpenF1Client(service_config, transport=make_transport(routes, calls))
    return _make
