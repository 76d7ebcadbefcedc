#!/usr/bin/env python3
# ip_globe/actions.py
"""
Shared action functions used by the key bindings.
Each action posts a command to the SessionController; the controller decides
what actually happens (a refresh during a fetch is ignored).
"""

from __future__ import annotations
from ip_globe.session import Command, SessionController


def refresh(controller: SessionController) -> None:
    controller.submit(Command.REFRESH)


def quit_app(controller: SessionController) -> None:
    controller.submit(Command.QUIT)
