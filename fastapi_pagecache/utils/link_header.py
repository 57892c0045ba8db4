"""Parse pagination ``Link`` headers into relation sets and metadata."""

from __future__ import annotations

import re

from loguru import logger

from fastapi_pagecache.schemas.pagination import LinkRelationSet, PaginationMetadata
from fastapi_pagecache.utils.query_params import extract_int_param, extract_param

_URL_PATTERN = re.compile(r"<(.*)>")
_REL_PATTERN = re.compile(r'rel="(.*)"')

PAGE_PARAM = "page"
PAGE_SIZE_PARAMS = ("pagesize", "size")


def _split_segments(value: str) -> list[str]:
    return [part for part in value.split(",") if part.strip()]


def _strip_pattern(pattern: re.Pattern[str], value: str) -> str:
    match = pattern.search(value)
    return (match.group(1) if match else value).strip()


def parse_link_header(header: str | None) -> LinkRelationSet:
    """Parse ``<url>; rel="name", ...`` into a :class:`LinkRelationSet`.

    Malformed segments are skipped. A missing header gives an empty set.
    """
    if not header:
        return LinkRelationSet()

    relations: dict[str, str] = {}
    for segment in _split_segments(header.replace("&amp;", "&")):
        sections = segment.split(";")
        if len(sections) < 2:
            logger.debug("Skipping malformed link segment: {}", segment.strip())
            continue
        url = _strip_pattern(_URL_PATTERN, sections[0])
        name = _strip_pattern(_REL_PATTERN, sections[1])
        if not url or not name:
            logger.debug("Skipping link segment without url or rel: {}", segment.strip())
            continue
        relations[name] = url
    return LinkRelationSet(relations=relations)


class LinkRelationParser:
    """Read last page and page size from a pagination ``Link`` header."""

    def __init__(self, header: str | None) -> None:
        """Parse the header once; the relation set is immutable afterwards."""
        self.links = parse_link_header(header)

    def last_page(self) -> int:
        """Return the ``page`` parameter of the ``last`` relation, or 0."""
        if self.links.last is None:
            return 0
        return extract_int_param(self.links.last, PAGE_PARAM)

    def page_size(self) -> int:
        """Return the page size advertised by the ``first`` relation, or 0.

        ``size`` is only consulted when ``pagesize`` is absent from the URL.
        """
        if self.links.first is None:
            return 0
        for name in PAGE_SIZE_PARAMS:
            if extract_param(self.links.first, name) is not None:
                return extract_int_param(self.links.first, name)
        return 0

    def metadata(self) -> PaginationMetadata:
        """Return last page and page size as :class:`PaginationMetadata`."""
        return PaginationMetadata(last_page=self.last_page(), page_size=self.page_size())
