"""Command line entry point.

Usage:
    python -m schema2script schema.json --dialect mysql
    python -m schema2script schema.xml --dialect oracle --output out/schema.sql
"""

import argparse
import sys
from typing import List, Optional

from schema2script.config import get_config
from schema2script.controller import ConsoleView, SchemaController
from schema2script.model import FileScriptSink, JsonFileSchemaStore
from schema2script.utils.logging import get_logger, setup_logging
from schema2script.utils.storage_config import get_storage_config

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    formats = get_config("formats")
    parser = argparse.ArgumentParser(
        prog="schema2script",
        description="Generate SQL DDL from a JSON or XML schema description.",
    )
    parser.add_argument("schema_file", help="Schema description (.json or .xml)")
    parser.add_argument(
        "--dialect",
        default=formats.get("default_dialect", "mysql"),
        help="Output dialect: mysql or oracle (default: %(default)s)",
    )
    parser.add_argument("--output", help="Where to write the generated script")
    parser.add_argument("--store", help="Where to keep the write-through schema copy")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging_config = get_config("logging")
    setup_logging(
        level=args.log_level or logging_config.get("level", "INFO"),
        format_type=logging_config.get("format_type", "detailed"),
        log_to_file=bool(logging_config.get("log_to_file", False)),
        log_file=logging_config.get("log_file"),
    )

    storage = get_storage_config()
    controller = SchemaController(
        view=ConsoleView(),
        store=JsonFileSchemaStore(args.store or storage.schema_store_path),
        script_sink=FileScriptSink(args.output or storage.script_output_path),
    )

    if not controller.upload(args.schema_file):
        return 1

    controller.generate_script(args.dialect)
    logger.info(f"Generated {args.dialect} script from {args.schema_file}")
    if controller.schema_model.last_error is not None:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
