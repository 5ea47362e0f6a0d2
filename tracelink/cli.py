from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from tracelink.client import TracelinkClient
from tracelink.config import get_settings
from tracelink.errors import TracelinkError

logger = logging.getLogger("tracelink.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="POST a raw request to the Tracelink REST API.")
    parser.add_argument("endpoint", help="Endpoint path, e.g. /company or /tracelink/order/list")
    parser.add_argument("--body", default="{}", help="JSON request body (default: {})")
    parser.add_argument("--idempotency-key", default=None)
    parser.add_argument("--format", choices=["json", "xml"], default=None)
    parser.add_argument("--charset", choices=["UTF-8", "CP850"], default=None)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    level = logging.DEBUG if args.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        body = json.loads(args.body)
    except json.JSONDecodeError as exc:
        print(f"invalid --body: {exc}", file=sys.stderr)
        return 2
    if not isinstance(body, dict):
        print("invalid --body: expected a JSON object", file=sys.stderr)
        return 2

    overrides = {}
    if args.format:
        overrides["format"] = args.format
    if args.charset:
        overrides["charset"] = args.charset
    try:
        client = TracelinkClient.from_settings(settings.model_copy(update=overrides))
    except ValidationError as exc:
        print(f"configuration error: {exc.errors()[0]['msg']}", file=sys.stderr)
        return 2

    try:
        envelope = client.request(args.endpoint, body, {"idempotency_key": args.idempotency_key})
    except TracelinkError as exc:
        logger.error("request failed endpoint=%s code=%s", args.endpoint, exc.code)
        print(json.dumps({"error": exc.message, "code": exc.code}), file=sys.stderr)
        return 1

    print(json.dumps(envelope, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
