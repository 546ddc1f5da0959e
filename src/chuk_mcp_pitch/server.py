#!/usr/bin/env python3
"""
Entry point for the CHUK Pitch MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http). It also selects the
project directory whose `pitch.yaml` configures tuning and spelling,
and can write a starter settings file there.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_pitch.constants import PROJECT_PATH_ENV
from chuk_mcp_pitch.models import Accidentals, PitchSettings
from chuk_mcp_pitch.settings import SettingsLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Pitch MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--project",
        type=Path,
        default=None,
        help="Project directory holding pitch.yaml (default: current directory)",
    )
    parser.add_argument(
        "--init-settings",
        action="store_true",
        help="Write pitch.yaml into the project directory and exit",
    )
    parser.add_argument(
        "--reference",
        type=float,
        default=None,
        help="A4 frequency in Hz for --init-settings (default: 440)",
    )
    parser.add_argument(
        "--accidentals",
        choices=[a.value for a in Accidentals],
        default=None,
        help="Spelling of derived notes for --init-settings (default: flats)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def init_settings(project: Path, reference: float | None, accidentals: str | None) -> Path:
    """
    Write a pitch.yaml, keeping any values the project already has.

    Args:
        project: Project directory
        reference: A4 frequency to store (None keeps the current value)
        accidentals: 'flats' or 'sharps' (None keeps the current value)

    Returns:
        Path of the written file
    """
    loader = SettingsLoader(project)
    current = loader.load()
    settings = PitchSettings(
        reference_frequency=reference if reference is not None else current.reference_frequency,
        accidentals=Accidentals(accidentals) if accidentals else current.accidentals,
        cache_enabled=current.cache_enabled,
    )
    return loader.save(settings)


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    project = (args.project or Path.cwd()).resolve()

    if args.init_settings:
        path = init_settings(project, args.reference, args.accidentals)
        logger.info(f"Wrote settings to {path}")
        return

    # The server module reads its project directory at import time
    os.environ[PROJECT_PATH_ENV] = str(project)
    from chuk_mcp_pitch.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Pitch MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Pitch MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
