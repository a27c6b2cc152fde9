from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """
    One page of a paginated sequence.

    `page` is the clamped page number actually served, which may differ from
    the page that was requested; callers compare the two to detect clamping.
    """
    items: list
    page: int
    page_count: int
    total: int

    def to_dict(self, serialize_item=None):
        """
        Args:
            serialize_item (callable, optional): Applied to every item (e.g. `lambda i: i.to_dict()`).
        Returns:
            dict: {'items', 'page', 'pageCount', 'total'}.
        """
        items = [serialize_item(item) for item in self.items] if serialize_item else list(self.items)
        return {
            'items': items,
            'page': self.page,
            'pageCount': self.page_count,
            'total': self.total,
        }
