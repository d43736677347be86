#!/usr/bin/env python3
import os
import sys

# Make src importable without installing the package
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)

from wppages.cli import app

if __name__ == "__main__":
    app(["edit-page", *sys.argv[1:]])
