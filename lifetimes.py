#!/usr/bin/env python3
"""
Lifetime SVG - draw lifetime brackets for annotated code snippets

Simple usage:
    python lifetimes.py snippet.rs > snippet.svg      # Outputs SVG on stdout
    python lifetimes.py snippet.rs -o snippet.svg     # Writes snippet.svg
    cat snippet.rs | python lifetimes.py              # Reads standard input
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from lifetime_svg.cli import app

if __name__ == "__main__":
    app()
