import math

from models.page import Page


def paginate(items, page, page_size):
    """
    Slices a sequence down to one page.

    There is always at least one page, even for an empty sequence. Requests
    outside [1, page_count] are clamped instead of rejected, so the returned
    `page` must be read back to detect clamping.

    Args:
        items (Sequence): The full, already ordered sequence.
        page (int): Requested 1-based page number.
        page_size (int): Items per page; values below 1 are treated as 1.

    Returns:
        models.Page: The items of the served page plus page, page_count and total.
    """
    page_size = max(1, int(page_size))
    total = len(items)
    page_count = max(1, math.ceil(total / page_size))
    safe_page = min(max(int(page), 1), page_count)
    start = (safe_page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=safe_page,
        page_count=page_count,
        total=total,
    )
