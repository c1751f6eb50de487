"""Tests for the uvicorn launcher."""

from unittest.mock import patch

from backend.server import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.host == "127.0.0.1"
    assert args.port == 8000
    assert args.no_reload is False


def test_main_runs_app_factory():
    with patch("uvicorn.run") as mock_run:
        main(["--port", "9000", "--no-reload"])

    mock_run.assert_called_once()
    assert mock_run.call_args[0][0] == "backend.app:create_app"
    assert mock_run.call_args[1]["factory"] is True
    assert mock_run.call_args[1]["port"] == 9000
    assert mock_run.call_args[1]["reload"] is False
