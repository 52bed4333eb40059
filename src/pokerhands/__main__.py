"""CLI entry point.

    python -m pokerhands serve [-c pokerhands.yaml] [--host H] [--port P] [--no-store]
    python -m pokerhands eval "s1, s10, s11, s12, s13" "h2, d2, c5, s9, h11"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from pokerhands.config import AppConfig, load_config
from pokerhands.core.judge import HandJudge, Judgement
from pokerhands.core.mongo_store import MongoHandStore
from pokerhands.server import make_server

logger = logging.getLogger("pokerhands")


def _serve(config: AppConfig, no_store: bool) -> None:
    store = None
    if no_store:
        logger.info("Storage disabled by --no-store")
    elif config.storage.uri:
        store = MongoHandStore(
            config.storage.uri,
            config.storage.db_name,
            collection=config.storage.collection,
        )
    else:
        logger.warning("No MongoDB URI configured, hands will not be stored")

    judge = HandJudge(
        store,
        request_id_prefix=config.request_id_prefix,
        language=config.language,
    )
    server = make_server(judge, config.server.host, config.server.port)
    host, port = server.server_address[:2]
    logger.info("Serving POST /results on http://%s:%d", host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down.")
    finally:
        server.server_close()
        if store is not None:
            store.close()


def _render(judgement: Judgement, console: Console) -> None:
    payload = judgement.to_dict()

    table = Table(title="Hands")
    table.add_column("Request ID")
    table.add_column("Hand")
    table.add_column("Category")
    table.add_column("Strongest", justify="center")
    for row in payload["results"]:
        table.add_row(
            row["requestId"],
            row["hand"],
            row["yaku"],
            "[bold green]*[/bold green]" if row["strongest"] else "",
        )
    console.print(table)

    if payload["errors"]:
        errors = Table(title="Errors")
        errors.add_column("Request ID")
        errors.add_column("Hand")
        errors.add_column("Error", style="red")
        for row in payload["errors"]:
            errors.add_row(row["requestId"], repr(row["hand"]), row["errorMessage"])
        console.print(errors)


def _eval(config: AppConfig, hands: list[str]) -> None:
    judge = HandJudge(
        request_id_prefix=config.request_id_prefix,
        language=config.language,
    )
    _render(judge.judge(hands), Console())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pokerhands",
        description="Classify five-card poker hands and pick the strongest",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (optional)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load environment variables from this .env file (default: ./.env)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", default=None, help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Bind port")
    serve.add_argument(
        "--no-store",
        action="store_true",
        default=False,
        help="Do not persist evaluated hands",
    )

    evaluate = sub.add_parser("eval", help="Judge hands given on the command line")
    evaluate.add_argument("hands", nargs="+", help='Hands like "s1, s10, s11, s12, s13"')

    args = parser.parse_args(argv)

    load_dotenv(args.env_file or Path.cwd() / ".env")

    if args.config is not None and not args.config.exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        if args.host:
            config.server.host = args.host
        if args.port is not None:
            config.server.port = args.port
        _serve(config, args.no_store)
    else:
        _eval(config, args.hands)


if __name__ == "__main__":
    main()
