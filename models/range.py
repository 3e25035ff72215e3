"""Key range model used to bound store scans."""

from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Range(BaseModel):
    """Bounds for a scan over byte-string keys.

    A bound of None is unbounded on that side. The default bounds are
    half-open: start is included, end is excluded.

    Examples:
        Range(start=b"a", end=b"c")        a <= key < c
        Range(start=b"a", end_inclusive=True, end=b"c")
        Range.prefix(b"user/")             every key starting with user/
        Range.all()                        every key
    """

    # arbitrary_types_allowed permits bytes fields without Pydantic coercion
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    start: bytes | None = None
    end: bytes | None = None
    start_inclusive: bool = True
    end_inclusive: bool = False

    @field_validator("start", "end", mode="before")
    @classmethod
    def ensure_bytes(cls, v: bytes | str | None) -> bytes | None:
        if isinstance(v, str):
            return v.encode("utf-8")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError(f"Range start {self.start!r} is greater than end {self.end!r}")
        return self

    @classmethod
    def all(cls) -> "Range":
        """Range covering every key."""
        return cls()

    @classmethod
    def prefix(cls, prefix: bytes | str) -> "Range":
        """Range covering every key that starts with prefix."""
        if isinstance(prefix, str):
            prefix = prefix.encode("utf-8")

        # Smallest key greater than every key with this prefix
        end = bytearray(prefix)
        while end and end[-1] == 0xFF:
            end.pop()
        if not end:
            return cls(start=prefix)
        end[-1] += 1
        return cls(start=prefix, end=bytes(end))

    def contains(self, key: bytes) -> bool:
        """Check whether key falls within both bounds."""
        if self.start is not None:
            if key < self.start or (key == self.start and not self.start_inclusive):
                return False
        if self.end is not None:
            if key > self.end or (key == self.end and not self.end_inclusive):
                return False
        return True
