#!/usr/bin/env python3
"""
Box Scores Launcher

USE: Runs the scoreboard CLI from a source checkout
HOW IT WORKS: Puts the project root on sys.path and calls scoreboard.cli.main
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scoreboard.cli import main

if __name__ == '__main__':
    main()
