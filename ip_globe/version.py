#!/usr/bin/env python3
# ip_globe/version.py
"""
Version and build metadata for the IP globe.
"""

__version__ = "1.0.0"
__build__ = "2026-10-18"
__license__ = "MIT"

def version_info() -> str:
    """Return human-readable version string."""
    return f"IP Globe v{__version__} (build {__build__})"
