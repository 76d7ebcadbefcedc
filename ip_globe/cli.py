#!/usr/bin/env python3
# ip_globe/cli.py
"""
Entry point for the IP globe TUI.
Loads configuration and runs IpGlobeApp.
"""

import sys, os
from ip_globe.ui.app import IpGlobeApp

def main():
    if os.name == "nt" and not sys.stdout.isatty():
        print("No Windows console detected. Run from cmd, PowerShell, or Windows Terminal.")
        raise SystemExit(1)
    app = IpGlobeApp()
    app.run()

if __name__ == "__main__":
    main()
