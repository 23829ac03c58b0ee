#!/usr/bin/env python3
"""
Wildmark - chat message formatter

Simple usage:
    python run_wildmark.py reply.txt              # Outputs reply-formatted.html
    python run_wildmark.py /folder/path -f md     # Formats every message in a folder
    cat reply.txt | python run_wildmark.py -      # Formats stdin to stdout
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from wildmark.cli import app

if __name__ == "__main__":
    app()
