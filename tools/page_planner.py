#!/usr/bin/env python3
"""Page capacity planning tool.

Usage:
    uv run python tools/page_planner.py --page-size 8192 --file-offset-size 4
    uv run python tools/page_planner.py --page-size 8192 --file-offset-size 4 --page-offset-size 2 --records 100000000
    uv run python tools/page_planner.py --order 4096 --file-offset-size 4 --page-offset-size 4
    uv run python tools/page_planner.py --presets
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from log import LOG_FORMAT
from models.layout import (
    DEFAULT_HEADER_SIZE,
    DEFAULT_KEY_SIZE,
    MAX_ORDER,
    MAX_PAGE_SIZE,
    EfficiencyReport,
    PageLayout,
)
from storage.capacity import compute_efficiency, plan_page

DEFAULT_RECORDS = (100_000_000, 1_000_000_000, 10_000_000_000)
DEFAULT_VALUE = 4096


def print_capacity(layout: PageLayout) -> None:
    """Print how a page of maximal order spends its space."""
    capacity = plan_page(**layout.model_dump())
    print(f"=== Page Capacity ({layout.page_size} bytes) ===")
    print(f"  Header Size: {layout.header_size}")
    print(f"  Key Size: {layout.key_size}")
    print(f"  File Offset Size: {layout.file_offset_size}")
    print(f"  Page Offset Size: {layout.page_offset_size}")
    print(f"  {capacity.format()}")
    print()


def print_page_size(order: int, layout: PageLayout) -> None:
    """Print the page size needed for an order."""
    print(f"=== Page Size (order {order}) ===")
    print(f"  Page Size: {layout.page_size_for(order)} bytes")
    print()


def print_efficiency(actual: int, optimum: int, value: int, records: list[int]) -> None:
    """Print one efficiency line per record count."""
    for count in records:
        report = compute_efficiency(actual, optimum, value, count)
        print(f"  {report.format()}")


def layout_efficiency(layout: PageLayout, value: int, records: list[int]) -> list[EfficiencyReport]:
    """Efficiency of a layout's page against the pointer-free optimum, in bytes.

    Pages of this layout hold fewer entries than pages without page offsets.
    The reference size is the page this layout would need to match the
    optimum's order, so the fill ratio is the share of that size it gets.
    """
    optimum_order = layout.without_page_offsets().max_order()
    needed = layout.page_size_for(optimum_order)
    return [compute_efficiency(layout.page_size, needed, value, count) for count in records]


def print_presets(value: int) -> None:
    """Compare the reference pointer layouts against the pointer-free optimum."""
    base = PageLayout(page_size=MAX_PAGE_SIZE, header_size=DEFAULT_HEADER_SIZE, key_size=DEFAULT_KEY_SIZE)
    optimum = base.model_copy(update={"file_offset_size": 4}).max_order()

    presets = [
        ("Minimum", 4, 2, DEFAULT_RECORDS),
        ("Minimum2", 4, 3, DEFAULT_RECORDS + (100_000_000_000,)),
        ("Maximum", 8, 4, DEFAULT_RECORDS),
        ("Maximum2", 8, 2, DEFAULT_RECORDS),
    ]
    for name, file_offset_size, page_offset_size, records in presets:
        layout = base.model_copy(update={"file_offset_size": file_offset_size, "page_offset_size": page_offset_size})
        order = layout.max_order()
        print(f"{name}: order {order} of {optimum}")
        print_efficiency(order, optimum, value, list(records))

    page_size = base.model_copy(update={"file_offset_size": 4, "page_offset_size": 4}).page_size_for(MAX_ORDER)
    optimum_page_size = base.model_copy(update={"file_offset_size": 8}).page_size_for(MAX_ORDER)
    print(f"Page Size: {page_size}")
    print("Efficiency:")
    print_efficiency(page_size, optimum_page_size, value, list(DEFAULT_RECORDS))


def main() -> None:
    parser = argparse.ArgumentParser(description="Plan page layouts for pagekv index pages")
    parser.add_argument("--page-size", type=int, default=MAX_PAGE_SIZE, help="Bytes per page")
    parser.add_argument("--header-size", type=int, default=DEFAULT_HEADER_SIZE, help="Bytes of page header")
    parser.add_argument("--key-size", type=int, default=DEFAULT_KEY_SIZE, help="Bytes per key")
    parser.add_argument("--file-offset-size", type=int, default=0, help="Bytes per file-offset pointer")
    parser.add_argument("--page-offset-size", type=int, default=0, help="Bytes per page-offset pointer")
    parser.add_argument("--order", type=int, help="Compute the page size for this order instead")
    parser.add_argument("--records", type=int, nargs="+", help="Report efficiency for these record counts")
    parser.add_argument("--value", type=int, default=DEFAULT_VALUE, help="Records per page in efficiency reports")
    parser.add_argument("--presets", action="store_true", help="Show the reference layout comparison")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log calculation details")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        if args.presets:
            print_presets(args.value)
            return

        layout = PageLayout(
            page_size=args.page_size,
            header_size=args.header_size,
            key_size=args.key_size,
            file_offset_size=args.file_offset_size,
            page_offset_size=args.page_offset_size,
        )
        optimum = layout.without_page_offsets()

        if args.order is not None:
            print_page_size(args.order, layout)
            if args.records:
                print("=== Efficiency vs. no page offsets ===")
                print_efficiency(layout.page_size_for(args.order), optimum.page_size_for(args.order), args.value, args.records)
        else:
            print_capacity(layout)
            if args.records:
                print("=== Efficiency vs. no page offsets ===")
                for report in layout_efficiency(layout, args.value, args.records):
                    print(f"  {report.format()}")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
