#!/usr/bin/env python3
"""
Generate TypeQL Queries Script

Thin wrapper around the STIX insert generator.

Usage:
    python scripts/generate_queries.py data/enterprise-attack.json
    python scripts/generate_queries.py data/enterprise-attack.json --ignore-deprecated
    python scripts/generate_queries.py data/enterprise-attack.json --output queries.tql
    python scripts/generate_queries.py data/enterprise-attack.json --config stix_kg.toml
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from stix_kg.config import GeneratorConfig
from stix_kg.ingestion import generate_insert_queries, load_bundle

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate TypeQL insert queries from a STIX bundle"
    )
    parser.add_argument("input", type=Path, help="Path to STIX bundle (JSON)")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write queries to this file, one per line (default: stdout)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML configuration file (default: environment only)",
    )
    parser.add_argument(
        "--ignore-deprecated",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Skip x_mitre_deprecated objects (default: from IGNORE_DEPRECATED)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = GeneratorConfig.from_file(args.config) if args.config else GeneratorConfig.from_env()
    if args.ignore_deprecated is not None:
        config = config.with_overrides(ignore_deprecated=args.ignore_deprecated)

    start = time.time()
    objects = load_bundle(args.input)
    batch = generate_insert_queries(objects, config=config)
    queries = batch.ordered_queries()

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text("\n".join(queries) + "\n", encoding="utf-8")
    else:
        for query in queries:
            print(query)

    total = time.time() - start
    print("\nGeneration complete", file=sys.stderr)
    print(f"  STIX objects: {len(objects)}", file=sys.stderr)
    print(f"  Referenced entities: {len(batch.referenced_queries)}", file=sys.stderr)
    print(f"  Statement markings: {len(batch.marking_queries)}", file=sys.stderr)
    print(f"  Entities: {len(batch.entity_queries)}", file=sys.stderr)
    print(f"  Marking relations: {len(batch.marking_relation_queries)}", file=sys.stderr)
    print(f"  Duration: {total:.2f}s", file=sys.stderr)


if __name__ == "__main__":
    main()
