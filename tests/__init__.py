"""
Task Tracker Test Suite

Tests for the task tracker service including:
- TaskStore operations and concurrency
- Request handlers and strict body decoding
- HTTP API end-to-end behaviour
- Logging setup

Author: jetgause
Created: 2025-12-12
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
test_dir = Path(__file__).parent
project_root = test_dir.parent
sys.path.insert(0, str(project_root))

__version__ = "1.0.0"
__all__ = []
