"""Tests for the HTTP surface of the registry."""
# ruff: noqa: S101

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from conftest import StubFetcher
from fastapi_pagecache.app import create_app
from fastapi_pagecache.controllers import PaginationRegistry
from fastapi_pagecache.renderers import RecordingRenderer

HEADING = {"is_heading": True, "cells": ["Topic", "Replies"]}


@pytest.fixture
def client(fetcher: StubFetcher) -> TestClient:
    registry = PaginationRegistry(fetcher=fetcher, renderer=RecordingRenderer())
    return TestClient(create_app(registry))


def initialize(client: TestClient, **overrides) -> dict:
    body = {
        "target_id": "forum-posts",
        "cache_type": "tabular",
        "items": [f"row-1-{index}" for index in range(5)],
        "heading": HEADING,
        "total_items": 42,
        "items_per_page": 5,
    }
    body.update(overrides)
    response = client.post("/api/v1/targets", json=body)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_initialize_renders_first_page(client: TestClient) -> None:
    payload = initialize(client)

    data = payload["data"]
    assert data["current_page"] == 1
    assert data["total_pages"] == 9
    assert data["items"][0] == HEADING
    assert len(data["items"]) == 6
    assert data["nav"]["entries"][0]["is_active"] is True


def test_navigate_fetches_and_caches(client: TestClient, fetcher: StubFetcher) -> None:
    initialize(client)

    response = client.post("/api/v1/targets/forum-posts/pages/3")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["current_page"] == 3
    assert data["items"][1] == "row-3-0"

    client.post("/api/v1/targets/forum-posts/pages/1")
    payload = client.post("/api/v1/targets/forum-posts/pages/3").json()
    assert payload["meta"]["cached_pages"] == 2
    assert [request[1] for request in fetcher.requests] == [3]


def test_navigate_out_of_range_is_ignored(client: TestClient) -> None:
    initialize(client)

    data = client.post("/api/v1/targets/forum-posts/pages/99").json()["data"]
    assert data["current_page"] == 1


def test_failed_fetch_returns_error_member(client: TestClient, fetcher: StubFetcher) -> None:
    initialize(client)
    fetcher.failures.add(2)

    payload = client.post("/api/v1/targets/forum-posts/pages/2").json()
    assert payload["errors"][0]["code"] == "FETCH_FAILED"
    assert payload["data"]["items"] == []


def test_initialize_from_link_header(client: TestClient) -> None:
    link = '<https://x.org/p?page=1&pagesize=4>; rel="first", <https://x.org/p?page=3&pagesize=4>; rel="last"'
    data = initialize(client, total_items=None, items_per_page=None, link_header=link)["data"]

    assert data["items_per_page"] == 4
    assert data["total_pages"] == 3


def test_unknown_target_is_404(client: TestClient) -> None:
    response = client.get("/api/v1/targets/missing")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["errors"][0]["code"] == "TARGET_NOT_FOUND"


def test_duplicate_target_is_409(client: TestClient) -> None:
    initialize(client)
    response = client.post(
        "/api/v1/targets", json={"target_id": "forum-posts", "items": [], "total_items": 0}
    )

    assert response.status_code == status.HTTP_409_CONFLICT


def test_heading_on_generic_target_is_400(client: TestClient) -> None:
    response = client.post(
        "/api/v1/targets",
        json={"target_id": "news", "cache_type": "generic", "heading": "h", "total_items": 30},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_remove_target(client: TestClient) -> None:
    initialize(client)

    response = client.delete("/api/v1/targets/forum-posts")
    assert response.json() == {"meta": {"target": "forum-posts", "removed": True}}
    assert client.get("/api/v1/targets/forum-posts").status_code == status.HTTP_404_NOT_FOUND
