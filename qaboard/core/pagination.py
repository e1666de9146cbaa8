"""Page arithmetic shared by the listing endpoints."""

import math


def page_offset(page: int, limit: int) -> int:
    """Rows to skip for a 1-based page."""
    return (page - 1) * limit


def page_count(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items ``limit`` at a time."""
    return math.ceil(total / limit) if limit else 0
