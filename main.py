#!/usr/bin/env python3
"""
Poem Viewer - Main Entry Point
Full-screen terminal viewer for a folder of short text files

Usage:
    python main.py                     # Show poems from ./poems
    python main.py --poems-dir PATH    # Show poems from another folder
    python main.py --debug             # Write debug detail to the diagnostic log
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

# Ensure we can import from project root
sys.path.insert(0, str(Path(__file__).parent))

import config
from core.logger import (
    setup_logging,
    set_console_logging,
    log_startup_banner,
    log_config,
    log_info,
    log_warning,
    log_error,
    log_success,
)
from core.documents import load_documents
from interface.terminal import TerminalError
from interface.viewer import DocumentViewer


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description=f"{config.PROJECT_NAME} - browse text files in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Keys: Left/Right switch poems, Q or Esc quits",
    )
    parser.add_argument(
        "--poems-dir", "-p",
        type=Path,
        default=config.POEMS_DIR,
        help=f"Directory containing *{config.DOCUMENT_EXTENSION} files (default: {config.POEMS_DIR})"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Log debug detail to the diagnostic log"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{config.PROJECT_NAME} {config.VERSION}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        log_file_path=config.DIAGNOSTIC_LOG_PATH,
        level="DEBUG" if args.debug else config.LOG_LEVEL,
        log_to_file=config.LOG_TO_FILE,
        log_to_console=config.LOG_TO_CONSOLE
    )
    log_startup_banner(config.VERSION, config.PROJECT_NAME)
    log_config("Poems", args.poems_dir)
    if config.LOG_TO_FILE:
        log_config("Diagnostic Log", config.DIAGNOSTIC_LOG_PATH)

    documents = load_documents(args.poems_dir)
    if documents:
        log_info(f"Loaded {len(documents)} poem(s)")
    else:
        log_warning(f"No poems found in {args.poems_dir}")

    viewer = DocumentViewer(documents)

    # The viewer owns the whole screen from here on
    set_console_logging(False)
    try:
        viewer.run()
    except TerminalError as e:
        set_console_logging(True)
        log_error(f"Terminal error: {e}")
        return 1
    except KeyboardInterrupt:
        set_console_logging(True)
        log_warning("Interrupted")
        return 130

    # Console output stays off after a clean quit
    log_success(f"{config.PROJECT_NAME} closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
