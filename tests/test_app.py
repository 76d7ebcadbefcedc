"""Tests for the prompt_toolkit wiring: key bindings and actions."""

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from ip_globe import actions
from ip_globe.config import Config, _validate
from ip_globe.session import Command
from ip_globe.styles import make_style
from ip_globe.ui.app import IpGlobeApp
from ip_globe.version import version_info


@pytest.fixture
def app(tmp_path, root_logger):
    cfg = Config(_validate({"map": {"rows": 12, "cols": 48}}), str(tmp_path / "cfg.json"))
    with create_pipe_input() as inp:
        with create_app_session(input=inp, output=DummyOutput()):
            yield IpGlobeApp(cfg)


class RecordingController:
    def __init__(self):
        self.events = []

    def submit(self, event):
        self.events.append(event)


class TestKeyBindings:
    """Keys map onto session commands."""

    def _press(self, app, *keys):
        bindings = app.kb.get_bindings_for_keys(keys)
        assert bindings, f"no binding for {keys}"
        bindings[-1].handler(None)

    @pytest.mark.parametrize("keys,expected", [
        (("r",), Command.REFRESH),
        (("q",), Command.QUIT),
        ((Keys.Escape,), Command.QUIT),
        ((Keys.ControlC,), Command.QUIT),
    ])
    def test_key_submits_command(self, app, keys, expected):
        recorder = RecordingController()
        app.controller = recorder
        self._press(app, *keys)
        assert recorder.events == [expected]

    def test_projector_uses_config(self, app):
        assert (app.projector.rows, app.projector.cols) == (12, 48)
        assert app.client.endpoint == "http://ip-api.com/json/"

    def test_title_and_label_from_config(self, app):
        assert app.renderer.title == "GPS Globe"
        assert app.renderer.show_label is True

    def test_status_bar_shows_version(self, app):
        text = app.status._text()
        assert version_info() in text
        assert "q/Esc Quit" in text


class TestActions:
    def test_refresh_and_quit(self):
        recorder = RecordingController()
        actions.refresh(recorder)
        actions.quit_app(recorder)
        assert recorder.events == [Command.REFRESH, Command.QUIT]


class TestStyles:
    def test_themes(self, tmp_path):
        cfg = Config(_validate({"ui": {"theme": "light"}}), str(tmp_path / "c.json"))
        style = make_style(cfg)
        assert ("map.marker", "#d70000 bold") in style.style_rules
        assert ("map.label", "#875f00") in style.style_rules
