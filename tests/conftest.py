"""
Pytest configuration file for the fluent sequence tests.

This file ensures that the parent directory is in the Python path
so that test files can import fluent, combinators, models and utils.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))
