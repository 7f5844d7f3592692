"""CLI printing the grid layout computed for a container width.

Examples::

    responsive-grid --width 375 --items 12
    responsive-grid --width 300 --columns xs=1,sm=2 --padding 8 --json

Exit code 0 on success, 2 when the configuration is rejected.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from responsive_grid.layout import ConfigurationError, GridConfiguration, GridLayoutEngine

logger = logging.getLogger(__name__)


def _parse_columns(text: str) -> Dict[str, int]:
    columns: Dict[str, int] = {}
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        bp_id, sep, value = part.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected BREAKPOINT=COUNT, got '{part}'")
        try:
            columns[bp_id.strip()] = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Column count must be an integer: '{part}'") from None
    return columns


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Compute a responsive grid layout")
    p.add_argument("--width", type=float, required=True, help="Container width in points")
    p.add_argument("--items", type=int, default=0, help="Number of items to place")
    p.add_argument("--columns", type=_parse_columns, help="Column overrides, e.g. xs=2,sm=3")
    p.add_argument("--padding", type=float, help="Outer padding")
    p.add_argument("--column-spacing", type=float, help="Gap between columns")
    p.add_argument("--row-spacing", type=float, help="Gap between rows")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _build_config(args: argparse.Namespace) -> GridConfiguration:
    data: Dict[str, object] = {}
    if args.columns is not None:
        data["columns"] = args.columns
    if args.padding is not None:
        data["padding"] = args.padding
    if args.column_spacing is not None:
        data["column_spacing"] = args.column_spacing
    if args.row_spacing is not None:
        data["row_spacing"] = args.row_spacing
    return GridConfiguration.from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.items < 0:
        print("error: --items must be non-negative", file=sys.stderr)
        return 2
    try:
        config = _build_config(args)
        result = GridLayoutEngine().layout(args.items, args.width, config)
    except ConfigurationError as exc:
        logger.debug("configuration rejected: %s", exc.context)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    summary = {
        "width": args.width,
        "breakpoint": result.breakpoint.value,
        "column_count": result.column_count,
        "cell_width": result.cell_width,
        "item_count": result.item_count,
        "row_count": result.row_count,
        "config": config.to_dict(),
    }
    if args.json:
        print(json.dumps(summary, indent=2, sort_keys=True))
    else:
        print(f"breakpoint:   {summary['breakpoint']}")
        print(f"columns:      {summary['column_count']}")
        print(f"cell width:   {result.cell_width:g}")
        print(f"items / rows: {result.item_count} / {result.row_count}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
