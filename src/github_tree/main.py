from __future__ import annotations
import logging
import sys
from github_tree.domain.exceptions import ConfigurationError
from github_tree.infrastructure.config import get_config
from github_tree.interface.cli import build_parser, run

def main(argv: list[str] | None = None) -> None:
    """Parse flags, configure logging and print the tree."""
    args = build_parser().parse_args(argv)
    try:
        config = get_config()
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(
        level="DEBUG" if args.verbose else config.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    sys.exit(run(args, config))


if __name__ == "__main__":
    main()
