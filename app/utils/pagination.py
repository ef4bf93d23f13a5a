"""Pagination helpers for list endpoints."""

from __future__ import annotations


def page_offset(page: int, limit: int) -> int:
    """Rows to skip for a 1-based ``page``."""
    return max(page - 1, 0) * limit


def build_page_links(path: str, page: int, limit: int) -> tuple[str, str | None]:
    """Return ``(next, prev)`` links for ``path``.

    ``next`` is always present; ``prev`` is ``None`` on the first page.

    Example: ``build_page_links("/api/season", 2, 10)`` returns
    ``("/api/season?page=3&limit=10", "/api/season?page=1&limit=10")``.
    """
    next_link = f"{path}?page={page + 1}&limit={limit}"
    prev_link = f"{path}?page={page - 1}&limit={limit}" if page - 1 > 0 else None
    return next_link, prev_link
