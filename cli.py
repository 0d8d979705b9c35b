#!/usr/bin/env python
"""
Command-line interface for TransitBuilder OSM ingestion

Usage:
    python cli.py query --bbox 52.51,13.40,52.52,13.41
    python cli.py load --bbox 52.51,13.40,52.52,13.41 --output berlin.geojson
    python cli.py nearby --bbox 52.51,13.40,52.52,13.41 --lat 52.515 --lng 13.405
"""

import os
import sys
import json
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from loguru import logger
from transitbuilder.config import load_env_config
from transitbuilder.collectors.osm import OverpassQueryBuilder
from transitbuilder.models import BBox
from transitbuilder.pipeline import MapSession


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def bbox_arg(value: str) -> BBox:
    """argparse type for "south,west,north,east" """
    try:
        return BBox.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _session(args) -> MapSession:
    config = load_env_config()
    if args.cache_dir:
        config.cache_dir = args.cache_dir
    if args.no_area_limit:
        config.overpass.max_area_deg2 = None
    return MapSession(config=config)


def cmd_query(args):
    """Print the Overpass query for a bounding box"""
    setup_logging(args.verbose)
    config = load_env_config()
    print(OverpassQueryBuilder(config.overpass).build(args.bbox), end="")
    return 0


def cmd_load(args):
    """Load one or more bounding boxes and export them as GeoJSON"""
    setup_logging(args.verbose)
    session = _session(args)

    failed = 0
    for bbox in args.bbox:
        logger.info(f"Loading {bbox.key}")
        result = session.load_viewport(bbox)
        if result.ok:
            logger.info(f"  ✓ {len(result.roads)} roads, {len(result.railways)} railways, "
                        f"{len(result.stops)} stops{' (cached)' if result.cached else ''}")
        else:
            logger.error(f"  ✗ Failed: {result.error}")
            failed += 1

    if args.output:
        session.save(args.output)

    stats = session.area_cache.stats()
    logger.info(f"Total: {stats.road_count} roads, {stats.railway_count} railways, "
                f"{stats.stop_count} stops from {stats.fetched_region_count} regions")

    if args.summary:
        summary = {
            "roads": stats.road_count,
            "railways": stats.railway_count,
            "stops": stats.stop_count,
            "regions": stats.fetched_region_count,
            "failed": failed,
        }
        print(json.dumps(summary, indent=2))

    return 0 if failed == 0 else 1


def cmd_nearby(args):
    """Load an area and list stops near a point"""
    setup_logging(args.verbose)
    session = _session(args)

    result = session.load_viewport(args.bbox)
    if not result.ok:
        logger.error(f"Failed to load {args.bbox.key}: {result.error}")
        return 1

    stops = session.nearby_stops(args.lat, args.lng, args.radius)
    logger.info(f"{len(stops)} stops within {args.radius}m of ({args.lat}, {args.lng})")
    print(json.dumps([stop.to_feature() for stop in stops], indent=2, ensure_ascii=False))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="TransitBuilder OSM data CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Show the Overpass query:
    python cli.py query --bbox 52.51,13.40,52.52,13.41

  Load two neighbouring areas into one file:
    python cli.py load --bbox 52.51,13.40,52.52,13.41 --bbox 52.51,13.41,52.52,13.42 -o berlin.geojson

  Stops within 200m:
    python cli.py nearby --bbox 52.51,13.40,52.52,13.41 --lat 52.515 --lng 13.405 --radius 200
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--cache-dir", help="Directory for raw Overpass responses")
    parser.add_argument("--no-area-limit", action="store_true", help="Disable the maximum area check")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    query_parser = subparsers.add_parser("query", help="Print the Overpass query for a bbox")
    query_parser.add_argument("--bbox", type=bbox_arg, required=True, help="south,west,north,east")
    query_parser.set_defaults(func=cmd_query)

    load_parser = subparsers.add_parser("load", help="Load areas and export GeoJSON")
    load_parser.add_argument("--bbox", type=bbox_arg, action="append", required=True,
                             help="south,west,north,east (repeatable)")
    load_parser.add_argument("--output", "-o", help="Output GeoJSON file")
    load_parser.add_argument("--summary", "-s", action="store_true", help="Print summary to stdout")
    load_parser.set_defaults(func=cmd_load)

    nearby_parser = subparsers.add_parser("nearby", help="List stops near a point")
    nearby_parser.add_argument("--bbox", type=bbox_arg, required=True, help="south,west,north,east")
    nearby_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    nearby_parser.add_argument("--lng", type=float, required=True, help="Longitude")
    nearby_parser.add_argument("--radius", "-r", type=float, default=100, help="Radius in meters")
    nearby_parser.set_defaults(func=cmd_nearby)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
