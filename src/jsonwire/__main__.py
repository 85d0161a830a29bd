"""Entry point: query a JSON Wire server's status."""

import argparse
import json
import logging
import sys

from .config import Settings


def main(argv=None) -> int:
    """Main entry point."""
    from .core.exceptions import JsonWireError
    from .core.session import RemoteSession

    parser = argparse.ArgumentParser(prog="jsonwire", description=__doc__)
    parser.add_argument("--executor", help="Server URL (default: JSONWIRE_EXECUTOR_URL)")
    parser.add_argument("--trace", action="store_true", help="Dump HTTP requests and replies")
    args = parser.parse_args(argv)

    settings = Settings()
    if args.trace:
        settings.trace = True
        settings.log_level = "DEBUG"

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        with RemoteSession(executor=args.executor, settings=settings) as session:
            status = session.status()
        print(json.dumps(status.model_dump(exclude_none=True), indent=2))
        return 0
    except JsonWireError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
