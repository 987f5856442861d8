#!/usr/bin/env python3
"""
Astronaut Daily Schedule - Main entry point.
"""

import sys

from astro_schedule.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
