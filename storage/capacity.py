"""Page capacity planning.

Sizes a fixed-size page for an index structure: how many child slots (the
order) fit in a page of a given size, how large a page must be for a given
order, and how much space a layout wastes compared to a reference layout.

All sizes are in bytes. A page of order d spends

    used_space(d) = key_size*(d-1) + file_offset_size*d + page_offset_size*d

bytes after its header, and a layout is valid while used_space(d) fits in
page_size - header_size.

Every function is pure and validates its inputs before computing anything.
"""

from exceptions import InvalidParameters
from log import logger
from models.layout import EfficiencyReport, PageCapacity


def _validate_sizes(**sizes: int) -> None:
    for name, v in sizes.items():
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidParameters(f"{name} must be an integer, got {v!r}")
        if v < 0:
            raise InvalidParameters(f"{name} must be non-negative, got {v}")


def used_space(order: int, key_size: int, file_offset_size: int, page_offset_size: int) -> int:
    """Bytes taken by the keys and pointers of a page of the given order."""
    return key_size * (order - 1) + file_offset_size * order + page_offset_size * order


def plan_page(
    page_size: int,
    header_size: int,
    key_size: int,
    file_offset_size: int,
    page_offset_size: int,
) -> PageCapacity:
    """Find the maximal order for a page and report how its space is spent.

    Raises:
        InvalidParameters: If a size is negative, the key and pointer sizes
            are all zero, the header fills the page, or the page cannot hold
            a single entry.
    """
    _validate_sizes(
        page_size=page_size,
        header_size=header_size,
        key_size=key_size,
        file_offset_size=file_offset_size,
        page_offset_size=page_offset_size,
    )

    element_size = key_size + file_offset_size + page_offset_size
    if element_size == 0:
        raise InvalidParameters("Key and pointer sizes cannot all be zero")
    if header_size >= page_size:
        raise InvalidParameters(f"Header size {header_size} leaves no room in a {page_size} byte page")

    usable_space = page_size - header_size

    def used(d: int) -> int:
        return used_space(d, key_size, file_offset_size, page_offset_size)

    if used(1) > usable_space:
        raise InvalidParameters(f"A {page_size} byte page with a {header_size} byte header cannot hold one entry")

    # Get the number down to a realm where the calculations are quicker.
    d = max(1, ((page_size // element_size) // 4) * 3)

    # A large header can put the seed far past the answer. No order above
    # usable_space // element_size + 1 fits, so start no higher than that.
    d = min(d, usable_space // element_size + 1)

    # Order 1 fits, so this stops.
    while used(d) > usable_space:
        d -= 1

    # used() grows by element_size per step, so the first overflow is not far off
    while used(d + 1) <= usable_space:
        d += 1

    capacity = PageCapacity(
        usable_space=usable_space,
        used_space=used(d),
        order=d,
        unusable_space=usable_space - used(d),
        element_size=element_size,
    )
    logger.debug(capacity.format())
    return capacity


def compute_max_order(
    page_size: int,
    header_size: int,
    key_size: int,
    file_offset_size: int,
    page_offset_size: int,
) -> int:
    """Largest order whose keys and pointers fit in page_size - header_size.

    The returned order d satisfies used_space(d) <= page_size - header_size
    while d + 1 does not.
    """
    return plan_page(page_size, header_size, key_size, file_offset_size, page_offset_size).order


def compute_page_size(
    order: int,
    header_size: int,
    key_size: int,
    file_offset_size: int,
    page_offset_size: int,
) -> int:
    """Page size needed to hold exactly order child slots plus the header."""
    _validate_sizes(
        order=order,
        header_size=header_size,
        key_size=key_size,
        file_offset_size=file_offset_size,
        page_offset_size=page_offset_size,
    )
    if order < 1:
        raise InvalidParameters(f"order must be at least 1, got {order}")

    return used_space(order, key_size, file_offset_size, page_offset_size) + header_size


def compute_efficiency(page_size: int, optimum_page_size: int, value: int, records: int) -> EfficiencyReport:
    """Estimate the space a layout takes for records, and how much of it is waste.

    page_size is compared against optimum_page_size, normally the same layout
    without page-offset pointers. value is the number of records packed into
    each page. Waste is never reported below zero, even when page_size
    exceeds the optimum.
    """
    for name, v in (
        ("page_size", page_size),
        ("optimum_page_size", optimum_page_size),
        ("value", value),
        ("records", records),
    ):
        if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
            raise InvalidParameters(f"{name} must be a positive integer, got {v!r}")

    fill_ratio = page_size / optimum_page_size
    num_pages = records / value
    total_space = num_pages * page_size
    wasted_space = max(0.0, (1.0 - fill_ratio) * total_space)

    report = EfficiencyReport(
        records=records,
        fill_ratio=fill_ratio,
        num_pages=num_pages,
        total_space=total_space,
        wasted_space=wasted_space,
    )
    logger.debug(report.format())
    return report
