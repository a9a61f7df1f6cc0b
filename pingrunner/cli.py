"""Ejecuta una operacion registrada N veces, en secuencia, e imprime cada Outcome.

    pingrunner-run GET_Request --iterations 5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .src.config import Config
from .src.dispatcher import ApiDispatcher, build_dispatcher
from .src.errors import AuthError, ConfigError, DispatchError

logger = logging.getLogger(__name__)

EXIT_FAILED = 1
EXIT_UNKNOWN_OPERATION = 2
EXIT_AUTH = 3


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a token-authenticated API operation")
    parser.add_argument("operation", nargs="?", default=Config.DEFAULT_OPERATION)
    parser.add_argument("--iterations", type=int, default=1)
    parser.add_argument("--log-level", default="DEBUG" if Config.DEBUG else "INFO")
    args = parser.parse_args(argv)
    if args.iterations < 1:
        parser.error("--iterations must be >= 1")
    return args


def run(dispatcher: ApiDispatcher, operation: str, iterations: int = 1, out=None) -> int:
    if out is None:
        out = sys.stdout
    all_passed = True
    for _ in range(iterations):
        try:
            outcome = dispatcher.dispatch(operation)
        except DispatchError as e:
            logger.error("%s", e)
            return EXIT_UNKNOWN_OPERATION
        except AuthError as e:
            logger.error("Auth failed: %s", e)
            return EXIT_AUTH
        out.write(json.dumps(outcome.to_dict()) + "\n")
        all_passed = all_passed and outcome.passed
    return 0 if all_passed else EXIT_FAILED


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        dispatcher = build_dispatcher()
    except ConfigError as e:
        logger.error("%s", e)
        raise SystemExit(EXIT_FAILED)
    raise SystemExit(run(dispatcher, args.operation, args.iterations))


if __name__ == "__main__":
    main()
