# main.py
import argparse
import logging
import sys

from anyparams.core.config import SimpleConfigLoader
from anyparams.core.exceptions import AnyParamsError, ConfigurationError
from anyparams.core.logging_setup import LOG_LEVEL_STRINGS, setup_logging
from anyparams.params.method_desc import parse_method_descs

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load and validate method parameters")
    parser.add_argument(
        "--config", type=str, default=None, help="Path to a YAML configuration file with a 'methods' section."
    )
    parser.add_argument(
        "--method", dest="methods", action="append", default=[],
        help="Method description '<method>[:<name>=<value>,...]'. May be repeated."
    )
    parser.add_argument(
        "--log-level", type=str, choices=sorted(LOG_LEVEL_STRINGS, key=LOG_LEVEL_STRINGS.get),
        help="Override the log level defined in the config file."
    )
    parser.add_argument(
        "--log-file", type=str, default=None, help="Also write log output to this (rotating) file."
    )
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config_loader = None
    if args.config:
        try:
            config_loader = SimpleConfigLoader(config_file_path=args.config)
        except ConfigurationError as e:
            print(f"CRITICAL: Config error - {e}. Path: {args.config}", file=sys.stderr)
            return 1

    setup_logging(config_loader, args.log_level, log_file=args.log_file)
    logger.debug("Configuration loaded and logging system configured.")

    try:
        methods = config_loader.get_method_params() if config_loader else []
        methods.extend(parse_method_descs(args.methods))
    except AnyParamsError as e:
        logger.critical(f"Invalid method parameters: {e}")
        return 1

    if not methods:
        logger.warning("No methods specified (use --config or --method).")

    for method_name, param_set in methods:
        print(f"{method_name}: {' '.join(param_set.to_tokens())}".rstrip())

    return 0


if __name__ == "__main__":
    sys.exit(main())
