# text_transformation/cli.py
"""
Inspection CLI for the text transformation engine.

Usage:
    python -m text_transformation param subscriptionId
    python -m text_transformation title "get a list of the items"
    python -m text_transformation describe "Lists the items eg blobs"
    python -m text_transformation filename aks get-cluster annotations
    python -m text_transformation main-filename aks
    python -m text_transformation service aks
    python -m text_transformation check-services aks storage keyvault --brand-prefix Azure

Every command accepts --config PATH (default: TRANSFORMATION_CONFIG_PATH).

Exit codes: 0 success, 1 configuration error, 2 new service mappings needed.
"""

import argparse
import json
import sys
from typing import List, Optional

import structlog

from text_transformation.core.domain.exceptions import TransformationConfigError
from text_transformation.core.domain.models import TITLE_CASE_CONTEXT
from text_transformation.core.use_cases.validate_service_mappings import build_coverage_report
from text_transformation.shared.config import settings
from text_transformation.shared.container import build_container
from text_transformation.shared.logging_config import configure_logging
from text_transformation.shared.telemetry import setup_telemetry

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_MAPPINGS_NEEDED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-transform",
        description="Inspect lexicon-driven text and filename transformations.",
    )
    parser.add_argument("--config", default=None, help="Path to the transformation config JSON.")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("param", help="Natural-language form of a parameter name")
    p.add_argument("identifier")

    p = sub.add_parser("title", help="Title-case a phrase")
    p.add_argument("text")
    p.add_argument("--context", default=TITLE_CASE_CONTEXT)

    p = sub.add_parser("describe", help="Transform a description")
    p.add_argument("text")

    p = sub.add_parser("filename", help="Filename for an area/operation/type")
    p.add_argument("area")
    p.add_argument("operation", nargs="?", default="")
    p.add_argument("type", nargs="?", default="")

    p = sub.add_parser("main-filename", help="Landing page filename for a service")
    p.add_argument("area")

    p = sub.add_parser("service", help="Display name, short name and filenames of a service")
    p.add_argument("area")

    p = sub.add_parser("check-services", help="Report namespaces without a service mapping")
    p.add_argument("namespaces", nargs="+")
    p.add_argument("--brand-prefix", default="")

    return parser


def run(args: argparse.Namespace) -> int:
    container = build_container(args.config)
    engine = container.transformation_engine()

    if args.command == "param":
        print(engine.normalize_parameter(args.identifier))
    elif args.command == "title":
        print(engine.to_title_case(args.text, args.context))
    elif args.command == "describe":
        print(engine.transform_description(args.text))
    elif args.command == "filename":
        print(engine.generate_filename(args.area, args.operation, args.type))
    elif args.command == "main-filename":
        print(engine.generate_main_service_filename(args.area))
    elif args.command == "service":
        print(json.dumps({
            "displayName": engine.get_service_display_name(args.area),
            "shortName": engine.get_service_short_name(args.area),
            "mainFilename": engine.generate_main_service_filename(args.area),
        }, indent=2))
    elif args.command == "check-services":
        report = build_coverage_report(
            engine.config,
            args.namespaces,
            normalizer=engine.text_normalizer,
            brand_prefix=args.brand_prefix,
        )
        print(report.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        if not report.complete:
            return EXIT_MAPPINGS_NEEDED

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings)
    setup_telemetry(settings)

    try:
        return run(args)
    except TransformationConfigError as e:
        logger.error("cli_config_error", command=args.command, error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
