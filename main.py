#!/usr/bin/env python3
"""
Portfolio Site - Main CLI entrypoint

Builds the portfolio page as a static site, prints the pinned repositories
shown in the work section, or starts the live server.

Usage:
    python main.py build                     # Write dist/index.html
    python main.py build --output public     # Custom output directory
    python main.py repos                     # Print pinned repositories
    python main.py serve --port 8080         # Live server
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from models.config_models import Config
from portfolio.renderer import PageRenderer
from portfolio.showcase import RepositoryShowcase, showcase_from_config
from utils.config_loader import load_config
from utils.logger import setup_logger

logger = setup_logger()


def load_showcase(config: Config) -> RepositoryShowcase:
    """
    Mount a showcase, run its single fetch and unmount it.

    Args:
        config: Config object with credentials

    Returns:
        RepositoryShowcase: Showcase in "loaded" or "failed" state
    """
    showcase = showcase_from_config(config)
    token = showcase.mount()
    try:
        asyncio.run(showcase.initialize(token))
    finally:
        showcase.unmount()
    return showcase


def build_site(config: Config, output_dir: Path) -> bool:
    """
    Render the portfolio page and write it to ``output_dir``.

    Writes:
    - index.html: the rendered page
    - repositories.json: the showcase state used for the work section

    A failed fetch still writes the page (with an empty work section) but
    reports failure so deploy scripts can stop.

    Args:
        config: Config object with credentials and site metadata
        output_dir: Directory to write into (created if missing)

    Returns:
        bool: True if the repositories were fetched, False otherwise
    """
    logger.info(f"Building site for {config.credentials.github_username} into {output_dir}")

    showcase = load_showcase(config)
    html = PageRenderer(config).render(showcase)

    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "index.html").write_text(html, encoding="utf-8")
    (output_dir / "repositories.json").write_text(
        json.dumps(showcase.state.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )

    if showcase.state.status != "loaded":
        logger.error(f"Built site without repositories: {showcase.state.error}")
        return False

    logger.info(f"✓ Built site with {len(showcase.cards)} repository cards")
    return True


def show_repositories(config: Config) -> bool:
    """
    Print the pinned repositories shown in the work section.

    Returns:
        bool: True if the repositories were fetched, False otherwise
    """
    showcase = load_showcase(config)
    if showcase.state.status != "loaded":
        logger.error(f"Failed to fetch pinned repositories: {showcase.state.error}")
        return False

    cards = showcase.cards
    if not cards:
        print(f"{config.credentials.github_username} has no pinned repositories")
        return True

    for card in cards:
        language = card.language_name or "-"
        print(f"{card.name_with_owner:<40} ★ {card.star_count:<6} ⑂ {card.fork_count:<6} {language}")
        if card.description:
            print(f"    {card.description}")
    return True


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Portfolio Site - personal page with pinned GitHub repositories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build the static site into dist/
  python main.py build

  # Print pinned repositories
  python main.py repos

  # Run the live server
  python main.py serve --port 8080
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Build command
    build_parser = subparsers.add_parser(
        "build",
        help="Render the site into an output directory"
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=Path("dist"),
        help="Output directory (default: dist)"
    )

    subparsers.add_parser(
        "repos",
        help="Print the pinned repositories"
    )

    # Serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the live site server"
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the server on (default: 8000)"
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )

    args = parser.parse_args()

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = load_config()
    setup_logger(config.log_level)

    if args.command == "build":
        success = build_site(config, args.output)
        sys.exit(0 if success else 1)

    elif args.command == "repos":
        success = show_repositories(config)
        sys.exit(0 if success else 1)

    elif args.command == "serve":
        logger.info("=" * 80)
        logger.info("Starting Portfolio Site Server")
        logger.info("=" * 80)
        logger.info(f"Site will be available at: http://{args.host}:{args.port}")
        logger.info("Press Ctrl+C to stop the server")
        logger.info("=" * 80)

        # Start uvicorn server
        import uvicorn
        uvicorn.run(
            "backend.app:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            log_level="info"
        )
        sys.exit(0)


if __name__ == "__main__":
    main()
