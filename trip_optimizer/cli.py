"""trip-optimizer CLI 入口 — 从 POI JSON 文件生成多日行程"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from trip_optimizer.config.settings import load_config
from trip_optimizer.domain.enums import TourStrategy, TripCategory
from trip_optimizer.domain.exceptions import DomainError
from trip_optimizer.domain.models import OptimizationResult
from trip_optimizer.planner.core import optimize_itinerary

_LOGGER = logging.getLogger("trip-optimizer.cli")


def _load_pois(path: Path) -> list[Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("pois", [])
    if not isinstance(data, list):
        raise ValueError("POI file must hold a list or an object with a 'pois' list")
    return data


def _format_itinerary(result: OptimizationResult) -> str:
    """将优化结果格式化为可读的文本行程单"""
    meta = result.metadata
    lines: list[str] = []
    lines.append(f"{meta.trip_category} trip, {len(result.daily_itineraries)} day(s), {meta.total_pois} POI(s)")
    lines.append("=" * 50)
    if meta.starting_point:
        lines.append(f"Start: {meta.starting_point}")

    for number, bucket in enumerate(result.daily_itineraries, start=1):
        hours = meta.day_hours[number - 1] if number <= len(meta.day_hours) else 0.0
        lines.append(f"\nDay {number}  |  {hours:.1f}h")
        lines.append("-" * 50)
        if not bucket:
            lines.append("  Free day")
            continue
        for idx, poi in enumerate(bucket):
            lines.append(f"  {poi.name}  (rating {poi.rating:.1f}, visit {poi.visit_duration:g}h)")
            if idx < len(bucket) - 1 and poi.travel_time_to_next:
                lines.append(f"     travel ~{poi.travel_time_to_next * 60:.0f} min")

    lines.append("\n" + "=" * 50)
    lines.append(meta.optimization_method)
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Order POIs into a multi-day itinerary")
    parser.add_argument("pois", help="JSON file with a list of POIs (or {\"pois\": [...]})")
    parser.add_argument("--days", type=int, required=True)
    parser.add_argument(
        "--category",
        default=TripCategory.HISTORICAL.value,
        help="Historical, Adventure, Religious, Nature or Romantic",
    )
    parser.add_argument("--strategy", default=None, choices=[s.value for s in TourStrategy])
    parser.add_argument("--speed", type=float, default=None, help="Average travel speed in km/h")
    parser.add_argument("--json", action="store_true", help="Print the raw payload instead of a summary")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    try:
        pois = _load_pois(Path(args.pois))
        config = load_config(speed_kmh=args.speed)
        result = optimize_itinerary(pois, args.days, args.category, strategy=args.strategy, config=config)
    except ValidationError as exc:
        _LOGGER.debug("POI validation failed: %s", exc.errors())
        print(f"error: invalid POI data: {exc}", file=sys.stderr)
        return 2
    except (OSError, ValueError, DomainError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))
    else:
        print(_format_itinerary(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
