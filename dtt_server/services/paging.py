import math
from typing import Sequence


def page_meta(page: int, page_size: int, total: int) -> dict:
    return {
        "page": page,
        "pageSize": page_size,
        "total": total,
        "totalPages": math.ceil(total / page_size) if page_size else 0,
    }


def slice_page(items: Sequence, page: int, page_size: int) -> list:
    start = (page - 1) * page_size
    return list(items[start:start + page_size])
