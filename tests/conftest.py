"""tests/conftest.py"""
import os

# Keep test runs from writing rotating log files into the working tree.
os.environ.setdefault("SOOTH_LOG_DIR", "")
