#!/usr/bin/env python3
"""
Practice Kit Entry Point

Runs one of the console exercises: divide, read-file or bank-demo.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from practice_kit.cli import main


if __name__ == "__main__":
    sys.exit(main())
