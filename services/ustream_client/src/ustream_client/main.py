"""Console entrypoint: send one prompt or probe backend health."""
import argparse
import asyncio
import sys

from shared.logging import configure_logging

from ustream_client.client import ChatClient
from ustream_client.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ustream-chat", description=__doc__)
    parser.add_argument("prompt", nargs="?", default=None, help="Text to send to the chat backend")
    parser.add_argument("--health", action="store_true", help="Only check backend liveness")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.prompt is None and not args.health:
        parser.error("a prompt or --health is required")
    return args


async def run(args: argparse.Namespace, client: ChatClient) -> int:
    if args.health:
        outcome = await client.health_check()
        if outcome.ok:
            print("Server is available")
            return 0
    else:
        outcome = await client.send_message(args.prompt)
        if outcome.ok:
            print(outcome.value)
            return 0
    print(str(outcome.error), file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(json_logs=settings.json_logs, level=settings.log_level)
    client = ChatClient(settings)
    sys.exit(asyncio.run(run(args, client)))


if __name__ == "__main__":
    main()
