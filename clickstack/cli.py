"""
Command line entry point.

    clickstack-setup CATALINA_BASE --metadata metadata.json
"""

import argparse
import sys

from clickstack.config import load_generator_config
from clickstack.core.exceptions import ClickstackError
from clickstack.logger import init_logger
from clickstack.metadata import load_metadata
from clickstack.tomcat import ContextXmlBuilder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickstack-setup",
        description="Generate Tomcat context.xml and server.xml from deployment metadata"
    )
    parser.add_argument("catalina_base", help="Tomcat catalina.base directory holding conf/")
    parser.add_argument("--metadata", "-m", required=True, help="Metadata file (JSON or YAML)")
    parser.add_argument("--config-dir", "-c", help="Directory holding system.yaml")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_generator_config(args.config_dir)
    except ClickstackError as e:
        parser.exit(1, f"{parser.prog}: {e}\n")
    if args.debug:
        config.debug = True
    if args.json_logs:
        config.json_logs = True

    logger = init_logger(config).bind(component="cli")

    try:
        metadata = load_metadata(args.metadata)
        builder = ContextXmlBuilder(metadata, config)
        builder.build_tomcat_configuration_files(args.catalina_base)
    except ClickstackError as e:
        logger.error("Tomcat configuration failed", error=str(e), error_type=type(e).__name__)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
