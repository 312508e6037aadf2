"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


async def _run(argv: list[str]) -> int:
    # Lazy imports keep --help fast and logging configured first
    from application.services import get_data_service
    from domain.errors import ConfigurationError
    from presentation.cli import LookupCommand, describe_error

    try:
        data_service = get_data_service(settings)
    except ConfigurationError as exc:
        print(f"Error: {describe_error(exc).message}", file=sys.stderr)
        return 2
    try:
        return await LookupCommand(data_service).run(argv)
    finally:
        await data_service.aclose()


def main(argv: list[str] | None = None) -> int:
    bootstrap_logging(
        service="riot-stats",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="riot-stats.jsonl",
    )
    try:
        return asyncio.run(_run(sys.argv[1:] if argv is None else argv))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
