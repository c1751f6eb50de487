#!/usr/bin/env python3
"""
Uvicorn launcher for the portfolio site.

    python backend/server.py --port 8080 --no-reload
    uvicorn backend.app:create_app --factory --reload
"""

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Portfolio Site Server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    return parser


def main(argv=None):
    """Parse arguments and hand the app factory to uvicorn."""
    args = build_parser().parse_args(argv)

    print(f"Portfolio site on http://{args.host}:{args.port} (JSON at /api/repositories)")

    import uvicorn
    uvicorn.run(
        "backend.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
