# conftest.py
import sys
import os

# Put the repository root on sys.path so that "import core..." works
repo_root = os.path.dirname(os.path.abspath(__file__))

if repo_root not in sys.path:
    sys.path.insert(0, repo_root)
