#!/usr/bin/env python3
"""
Validate JSONL files in the data folder for Gemini fine-tuning.

Usage: ./scripts/validate_jsonl.py [file.jsonl ...]
  If no file is specified, validates all .jsonl files in the data/ folder.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.cli import main


if __name__ == "__main__":
    sys.exit(main())
