"""Windowed page-number planning for navigation bars."""

from __future__ import annotations

from fastapi_pagecache.schemas.pagination import NavBar, NavBarEntry, PageWindow

WINDOW_SIZE = 9
WINDOW_HALF = WINDOW_SIZE // 2
ELLIPSIS_TEXT = "..."


def plan_window(total_pages: int, current_page: int) -> PageWindow:
    """Return the page numbers to display around ``current_page``.

    Up to nine pages are shown in full. Beyond that the window stays nine
    pages wide: pinned to the start while the current page is within the
    first five, pinned to the end within the last five, centered otherwise.
    """
    if total_pages < 1:
        raise ValueError("total_pages must be at least 1.")
    if not 1 <= current_page <= total_pages:
        raise ValueError(f"current_page must be within [1, {total_pages}].")

    min_page, max_page = 1, total_pages
    if total_pages > WINDOW_SIZE:
        if current_page <= WINDOW_HALF + 1:
            min_page, max_page = 1, WINDOW_SIZE
        elif current_page >= total_pages - WINDOW_HALF:
            min_page, max_page = total_pages - WINDOW_SIZE + 1, total_pages
        else:
            min_page, max_page = current_page - WINDOW_HALF, current_page + WINDOW_HALF

    return PageWindow(
        pages=list(range(min_page, max_page + 1)),
        show_leading_ellipsis=min_page > 1,
        show_trailing_ellipsis=max_page < total_pages,
        show_first_prev=current_page != 1,
        show_next_last=current_page < total_pages,
    )


def _link(label: str, title_piece: str, page: int, text: str | None = None) -> NavBarEntry:
    return NavBarEntry(
        label=label,
        text=str(page) if text is None else text,
        title=f"Go to {title_piece}",
        page_number=page,
    )


def _ellipsis() -> NavBarEntry:
    return NavBarEntry(label="Ellipsis", text=ELLIPSIS_TEXT, is_ellipsis=True)


def build_nav_bar(total_pages: int, current_page: int) -> NavBar:
    """Build the ordered navigation bar entries for ``current_page``."""
    window = plan_window(total_pages, current_page)
    entries: list[NavBarEntry] = []

    if window.show_first_prev:
        entries.append(_link("First", "first page", 1, "<< first"))
        entries.append(_link("Previous", "previous page", current_page - 1, "< previous"))
    if window.show_leading_ellipsis:
        entries.append(_ellipsis())

    for page in window.pages:
        entry = _link(f"Page {page}", f"page {page}", page)
        entry.is_active = page == current_page
        entries.append(entry)

    if window.show_trailing_ellipsis:
        entries.append(_ellipsis())
    if window.show_next_last:
        entries.append(_link("Next", "next page", current_page + 1, "next >"))
        entries.append(_link("Last", "last page", total_pages, "last >>"))

    return NavBar(current_page=current_page, total_pages=total_pages, entries=entries)
