"""Page layout and capacity report models.

A page holds a fixed header followed by up to `order` child slots. Every slot
carries a file-offset pointer and a page-offset pointer, and every slot but
the first is separated by a fixed-width key:

    [header][ptr 0][key 1][ptr 1] ... [key d-1][ptr d-1][unusable]

so a page of order d uses key_size*(d-1) + (file_offset_size + page_offset_size)*d
bytes after its header.
"""

from typing import ClassVar

from pydantic import BaseModel, field_validator

# Reference configuration the capacity reports compare against
MAX_ORDER = 4096
MAX_PAGE_SIZE = 8192
DEFAULT_HEADER_SIZE = 64
DEFAULT_KEY_SIZE = 16

# Bytes per gigabyte in the efficiency reports
GB = 1024 * 1024 * 1024


class PageLayout(BaseModel):
    """Field sizes of a fixed-size storage page, all in bytes.

    A pointer size of zero means that kind of pointer is unused.
    """

    page_size: int = MAX_PAGE_SIZE
    header_size: int = DEFAULT_HEADER_SIZE
    key_size: int = DEFAULT_KEY_SIZE
    file_offset_size: int = 0
    page_offset_size: int = 0

    @field_validator("page_size", "header_size", "key_size", "file_offset_size", "page_offset_size")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Layout sizes must be non-negative, got {v}")
        return v

    @property
    def element_size(self) -> int:
        """Bytes taken by one key and its two pointers."""
        return self.key_size + self.file_offset_size + self.page_offset_size

    @property
    def usable_space(self) -> int:
        """Bytes left for keys and pointers after the header."""
        return self.page_size - self.header_size

    def used_space(self, order: int) -> int:
        """Bytes the keys and pointers of a page of this order take."""
        from storage.capacity import used_space

        return used_space(order, self.key_size, self.file_offset_size, self.page_offset_size)

    def max_order(self) -> int:
        """Largest order that fits this layout. Raises InvalidParameters if none does."""
        from storage.capacity import compute_max_order

        return compute_max_order(
            self.page_size,
            self.header_size,
            self.key_size,
            self.file_offset_size,
            self.page_offset_size,
        )

    def page_size_for(self, order: int) -> int:
        """Page size this layout needs to hold order child slots."""
        from storage.capacity import compute_page_size

        return compute_page_size(
            order,
            self.header_size,
            self.key_size,
            self.file_offset_size,
            self.page_offset_size,
        )

    def without_page_offsets(self) -> "PageLayout":
        """The same layout with page-offset pointers removed.

        Capacity reports treat this as the optimum a layout is measured against.
        """
        return self.model_copy(update={"page_offset_size": 0})


class PageCapacity(BaseModel):
    """Breakdown of how a page of maximal order spends its usable space."""

    usable_space: int
    used_space: int
    order: int
    unusable_space: int
    element_size: int

    def format(self) -> str:
        return (
            f"Space Available: {self.usable_space}, "
            f"Space Used: {self.used_space}, "
            f"Elements Possible: {self.order}, "
            f"Unusable Space: {self.unusable_space}, "
            f"Total Element Size: {self.element_size}"
        )


class EfficiencyReport(BaseModel):
    """Projected storage cost of a layout for a given number of records.

    Space figures are in bytes. The estimate assumes records pack uniformly
    into pages, so treat it as a heuristic rather than exact accounting.
    """

    BYTES_PER_GB: ClassVar[int] = GB

    records: int
    fill_ratio: float
    num_pages: float
    total_space: float
    wasted_space: float

    @property
    def total_space_gb(self) -> float:
        return self.total_space / self.BYTES_PER_GB

    @property
    def wasted_space_gb(self) -> float:
        return self.wasted_space / self.BYTES_PER_GB

    def format(self) -> str:
        return (
            f"# Records: {self.records:,}, "
            f"Total: {self.total_space_gb:.2f} GB, "
            f"Wasted: {self.wasted_space_gb:.2f} GB, "
            f"Efficiency: {self.fill_ratio:.2f}"
        )
