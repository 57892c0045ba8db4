"""Tests for error objects and target documents."""
# ruff: noqa: S101

import pytest

from fastapi_pagecache.core import PageDocumentBuilder, PageErrorBuilder, TargetNotFoundError
from fastapi_pagecache.pagination import build_nav_bar
from fastapi_pagecache.schemas import CacheType, Failure, PaginationState


def test_error_object_requires_a_field() -> None:
    with pytest.raises(ValueError):
        PageErrorBuilder().error_object()


def test_error_from_failure() -> None:
    failure = Failure(status="404", title="No results found.")
    error = PageErrorBuilder().from_failure(failure, target_id="forum-posts", page=3)

    assert error == {
        "status": "404",
        "code": "FETCH_FAILED",
        "title": "No results found.",
        "meta": {"target_id": "forum-posts", "page": 3},
    }


def test_error_location_merges_into_meta() -> None:
    error = PageErrorBuilder().error_object(detail="timed out", page=2, meta={"attempt": 1})

    assert error == {"detail": "timed out", "meta": {"attempt": 1, "page": 2}}


def test_error_location_alone_is_a_valid_object() -> None:
    assert PageErrorBuilder().error_object(page=4) == {"meta": {"page": 4}}


def test_error_object_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError):
        PageErrorBuilder().error_object(source="link header")


def test_error_from_exception() -> None:
    error = PageErrorBuilder().from_exception(TargetNotFoundError("forum-posts"))

    assert error["status"] == "404"
    assert error["code"] == "TARGET_NOT_FOUND"
    assert "forum-posts" in error["detail"]
    assert error["meta"] == {"target_id": "forum-posts"}


def test_target_document() -> None:
    state = PaginationState(
        target_id="forum-posts", cache_type=CacheType.LISTING, total_pages=4, items_per_page=3
    )
    document = PageDocumentBuilder().build_target(
        state, items=["a"], nav=build_nav_bar(4, 1), meta={"status": "idle"}
    )

    assert document["data"]["cache_type"] == "listing"
    assert document["data"]["items"] == ["a"]
    assert document["data"]["nav"]["total_pages"] == 4
    assert document["meta"] == {"status": "idle"}
    assert "errors" not in document


def test_state_rejects_out_of_range_page() -> None:
    state = PaginationState(target_id="t", total_pages=2, items_per_page=5)

    with pytest.raises(ValueError):
        state.current_page = 3
    with pytest.raises(ValueError):
        PaginationState(target_id="t", current_page=4, total_pages=2, items_per_page=5)
