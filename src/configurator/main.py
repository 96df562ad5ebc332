"""CLI entry point for the configurator module.

Usage:
    python -m src.configurator.main --build builds/gaming.yaml
    python -m src.configurator.main --build builds/gaming.yaml --output data/gaming.json
    python -m src.configurator.main --components cpu-ryzen-7-7800x3d gpu-rtx-4070

Build file format:
    components:
      - cpu-ryzen-7-7800x3d
      - gpu-rtx-4070
"""

from __future__ import annotations

import argparse
import json
import logging

import yaml

from ..catalog.loader import ComponentCatalog
from ..common.logging import setup_logging
from .builder import ConfigurationBuilder

setup_logging()
logger = logging.getLogger(__name__)


def _read_build_file(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return [str(cid) for cid in data.get("components", [])]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="PC Configurator — Build Summary")
    parser.add_argument(
        "--build",
        type=str,
        help="Build YAML file listing component ids",
    )
    parser.add_argument(
        "--components",
        nargs="+",
        help="Component ids to include (alternative to --build)",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        help="Path to component catalog YAML (default: config/components.yaml)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output JSON file path",
    )

    args = parser.parse_args(argv)

    if not args.build and not args.components:
        parser.error("Either --build or --components is required")

    component_ids = _read_build_file(args.build) if args.build else args.components

    catalog = ComponentCatalog(args.catalog)
    builder = ConfigurationBuilder()
    for component_id in component_ids:
        try:
            builder.select(catalog.get(component_id))
        except (KeyError, ValueError) as e:
            raise SystemExit(f"Error: {e}") from e

    summary = builder.summarize()

    for category, component in summary.components.items():
        logger.info("  %-12s %s (%s EUR)", category, component.name, component.price)
    for issue in summary.compatibility_issues:
        logger.warning("  [%s] %s", issue.severity, issue.message)

    output_data = summary.to_dict()
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(output_data, f, ensure_ascii=False, indent=2)
        logger.info("Output written to %s", args.output)
    else:
        print(json.dumps(output_data, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
