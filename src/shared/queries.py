"""Helpers over protean query sets."""

BATCH_SIZE = 100


def fetch_all(queryset, batch_size=BATCH_SIZE):
    """Return every record matched by ``queryset``, reading it page by page."""
    records = []
    offset = 0
    while True:
        batch = queryset.offset(offset).limit(batch_size).all().items
        records.extend(batch)
        if len(batch) < batch_size:
            return records
        offset += batch_size


def paginate(queryset, page):
    """Apply a ``shared.api.pagination.Page`` and return ``(items, total)``."""
    result = queryset.offset(page.skip).limit(page.take).all()
    return result.items, result.total
