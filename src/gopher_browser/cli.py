"""Command-line interface for the Gopher browser."""

import argparse
import logging
import sys
from dataclasses import replace

from .browser import Browser
from .config import Config, load_config
from .core import NavigationController, PageRenderer, parse_gopher_url
from .transport import SocketTransport


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gopher Browser - Browse Gopher menus from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Open the configured start page
  %(prog)s gopher://sdf.org                  # Open a specific server
  %(prog)s gopher://gopher.floodgap.com/0/gopher/proxy  # Open a document
  %(prog)s -c config.yaml                    # Use specific config file
  %(prog)s --dump sdf.org                    # Print one page and exit
""",
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Gopher URL or host[:port] to open",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        help="Socket timeout in seconds",
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the page and exit instead of browsing interactively",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config file {args.config}: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.timeout is not None:
        config = replace(config, timeout_seconds=args.timeout)

    start = None
    if args.url:
        try:
            start = parse_gopher_url(args.url)
        except ValueError as e:
            logger.error(str(e))
            return 1

    # Create components
    transport = SocketTransport(
        timeout=config.timeout_seconds,
        max_response_size=config.max_response_size,
    )
    try:
        controller = NavigationController(transport, max_history=config.max_history)
    except ValueError as e:
        logger.error(f"Invalid history setting: {e}")
        return 1
    browser = Browser(controller, config, renderer=PageRenderer())

    if args.dump:
        location = start or browser.home_location()
        print(browser.open_location(location))
        return 0 if controller.page is not None else 1

    logger.debug(f"Start page: {config.start_host}:{config.start_port} {config.start_selector!r}")

    browser.run(start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
