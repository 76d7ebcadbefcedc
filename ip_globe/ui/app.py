#!/usr/bin/env python3
# ip_globe/ui/app.py
"""Compose the prompt_toolkit application for the IP globe."""

import asyncio
import logging

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window

from ip_globe import actions
from ip_globe.config import Config
from ip_globe.geo import GeoProjector
from ip_globe.locate import LocationClient
from ip_globe.logging_conf import setup_logging
from ip_globe.rendering.renderer import Renderer
from ip_globe.session import Command, SessionController
from ip_globe.styles import make_style
from ip_globe.ui.map_control import FrameControl
from ip_globe.ui.statusbar import StatusBar

log = logging.getLogger(__name__)


class IpGlobeApp:
    def __init__(self, cfg: Config = None):
        self.cfg = cfg or Config.load()
        setup_logging(self.cfg)

        m = self.cfg["map"]
        n = self.cfg["network"]
        self.projector = GeoProjector(
            rows=m["rows"],
            cols=m["cols"],
            grid_lat_step=m["grid_lat_step"],
            grid_lon_step=m["grid_lon_step"],
            marker_char=m["marker_char"],
            land_char=m["land_char"],
            grid_char=m["grid_char"],
        )
        self.client = LocationClient(
            endpoint=n["endpoint"],
            timeout=n["timeout_s"],
            user_agent=n["user_agent"],
        )
        self.controller = SessionController(self.client.fetch_async, on_change=self._on_change)
        self.renderer = Renderer(
            self.projector,
            use_color=self.cfg["ui"]["color"],
            show_label=m["show_label"],
            title=self.cfg["app"]["title"],
        )
        self.frame_control = FrameControl(
            self.renderer,
            lambda: self.controller.state,
            tick_s=self.cfg["app"]["refresh_interval_s"],
        )
        self.status = StatusBar(self.frame_control)

        self.map_window = Window(content=self.frame_control, wrap_lines=False)
        self.root = HSplit([
            self.map_window,
            self.status,
        ])

        self.kb = self._build_key_bindings()
        self.app = Application(
            layout=Layout(self.root, focused_element=self.map_window),
            key_bindings=self.kb,
            full_screen=True,
            style=make_style(self.cfg),
            refresh_interval=self.cfg["app"]["refresh_interval_s"],
        )

    def _build_key_bindings(self):
        kb = KeyBindings()

        @kb.add("q")
        @kb.add("escape", eager=True)
        @kb.add("c-c")
        def _(event):
            actions.quit_app(self.controller)

        @kb.add("r")
        def _(event):
            actions.refresh(self.controller)

        return kb

    def _on_change(self, state) -> None:
        if self.app.is_running:
            self.app.invalidate()

    async def run_async(self) -> None:
        """Run the UI and the session loop together until either stops."""
        session_task = asyncio.ensure_future(self.controller.run())
        ui_task = asyncio.ensure_future(self.app.run_async())
        done, _ = await asyncio.wait(
            {session_task, ui_task}, return_when=asyncio.FIRST_COMPLETED
        )

        if ui_task not in done:
            if self.app.is_running:
                self.app.exit()
                await ui_task
            else:
                ui_task.cancel()
        if session_task not in done:
            self.controller.submit(Command.QUIT)
            await session_task

        for task in done:
            task.result()
        log.info("Session ended")

    def run(self) -> None:
        try:
            asyncio.run(self.run_async())
        finally:
            self.client.close()
