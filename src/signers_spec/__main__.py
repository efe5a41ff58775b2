"""
Signer slot registry CLI entry point.

Open (or create) the registry database, optionally apply a slot assignment
file as the network's boot principal, and serve the registry over HTTP.

Usage::

    python -m signers_spec --db signers.db
    python -m signers_spec --db signers.db --slots-file slots.yaml
    python -m signers_spec --network testnet --slots-file slots.yaml --no-api
    python -m signers_spec --api-url http://localhost:20443

Options:
    --db            Path to the SQLite registry database (default: signers.db)
    --network       Network whose boot principal may write (mainnet or testnet)
    --slots-file    YAML slot assignment file to apply before serving
    --api-url       Fetch the slot list from a running node, log it, and exit
    --host          Address the API server binds to (default: 0.0.0.0)
    --port          Port the API server listens on (default: 20443)
    --no-api        Apply the slot file and exit without serving
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from signers_spec.subspecs.api import (
    ApiServer,
    ApiServerConfig,
    RegistrySyncError,
    fetch_signer_slots,
)
from signers_spec.subspecs.chain.config import BOOT_ADDRESSES, DEFAULT_NETWORK
from signers_spec.subspecs.principal import StandardPrincipal
from signers_spec.subspecs.signers import (
    Err,
    GuardedSlotRegistry,
    Result,
    SlotAssignmentFile,
    SlotRegistry,
    allow_only,
)
from signers_spec.subspecs.storage import Database, SQLiteDatabase

DEFAULT_DB_PATH = Path("signers.db")
"""Registry database used when `--db` is not given."""

_DEFAULT_API = ApiServerConfig()

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for terminal output."""

    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format a record as `<time> <level> <logger>: <message>` in color."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"{timestamp} {levelname} {name}: {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure the root logger, with colors unless `no_color` is set."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def boot_principal(network: str) -> StandardPrincipal:
    """
    Return the boot-code principal of `network`.

    Raises:
        ValueError: If the network is unknown.
    """
    try:
        return StandardPrincipal.from_address(BOOT_ADDRESSES[network])
    except KeyError:
        raise ValueError(
            f"Unknown network {network!r}, expected one of {sorted(BOOT_ADDRESSES)}"
        ) from None


def open_registry(database: Database, network: str) -> GuardedSlotRegistry:
    """Load the registry from `database`, writable only by the network's boot principal."""
    registry = SlotRegistry.from_database(database)
    return GuardedSlotRegistry(registry, allow_only(boot_principal(network)))


def apply_slot_file(guarded: GuardedSlotRegistry, path: Path, network: str) -> Result[None]:
    """
    Apply a slot assignment file as the boot principal of `network`.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file is not a valid assignment.
    """
    logger.info("Loading slot assignments from %s", path)
    assignment = SlotAssignmentFile.from_yaml_file(path)

    result = guarded.set_signer_slots(
        boot_principal(network),
        assignment.signer_slots,
        assignment.reward_cycle,
    )
    if isinstance(result, Err):
        logger.error("Slot assignment from %s not applied: %s", path, result.error)
    return result


async def show_remote_slots(url: str) -> None:
    """Fetch the slot list from a running node and log each entry."""
    slots = await fetch_signer_slots(url)
    for entry in slots:
        logger.info("%s: %s slot(s)", entry.signer, entry.num_slots)
    logger.info("%d signers hold %d slots", len(slots), slots.total_slots)


async def run_server(registry: SlotRegistry, config: ApiServerConfig) -> None:
    """Serve `registry` until interrupted."""
    server = ApiServer(config=config, registry_getter=lambda: registry)
    await server.run()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        description="Signer slot registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"Path to the SQLite registry database (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--network",
        choices=sorted(BOOT_ADDRESSES),
        default=DEFAULT_NETWORK,
        help=f"Network whose boot principal may write (default: {DEFAULT_NETWORK})",
    )
    parser.add_argument(
        "--slots-file",
        type=Path,
        default=None,
        help="YAML slot assignment file to apply before serving",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Fetch the slot list from a running node (e.g., http://localhost:20443) and exit",
    )
    parser.add_argument(
        "--host",
        default=_DEFAULT_API.host,
        help=f"Address the API server binds to (default: {_DEFAULT_API.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=_DEFAULT_API.port,
        help=f"Port the API server listens on (default: {_DEFAULT_API.port})",
    )
    parser.add_argument(
        "--no-api",
        action="store_true",
        help="Apply the slot file and exit without serving",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    if args.api_url is not None:
        try:
            asyncio.run(show_remote_slots(args.api_url))
        except RegistrySyncError as e:
            logger.error("Could not fetch signer slots: %s", e)
            return 1
        return 0

    with SQLiteDatabase(args.db) as database:
        guarded = open_registry(database, args.network)

        if args.slots_file is not None:
            if apply_slot_file(guarded, args.slots_file, args.network).is_err():
                return 1

        if args.no_api:
            return 0

        config = ApiServerConfig(host=args.host, port=args.port)
        try:
            asyncio.run(run_server(guarded.registry, config))
        except KeyboardInterrupt:
            logger.info("Shutting down...")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
