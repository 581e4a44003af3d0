#!/usr/bin/env python

"""
WorkTime - Main Entry Point

A personal work-hours tracker: start and stop work, take breaks, edit the
recorded entries and export them as CSV or PDF.

Usage:
    python main.py

Requirements:
    - Python 3.11+
    - See pyproject.toml for dependencies
"""

import sys
import logging
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.infra.config import get_settings
from app.ui import WorkTimeApp


def main():
    """Main entry point"""
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = WorkTimeApp()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
