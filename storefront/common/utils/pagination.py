from typing import Optional, Tuple


def normalize_paging(page: Optional[int], page_size: Optional[int], max_page_size: int = 100, default_size: int = 20) -> Tuple[int, int]:
    p = page if page and page > 0 else 1
    ps = page_size if page_size and page_size > 0 else default_size
    ps = min(ps, max_page_size)
    return p, ps


def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size
