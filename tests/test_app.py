import json

from dyngraph.app import create_app
from dyngraph.clientside import RENDER_PATCH
from dyngraph.settings import CLIENT_CONFIG


class TestApp:
    def test_create_app(self, data_dir):
        app = create_app(data_dir)
        assert app.server is not None
        assert app.layout is not None

    def test_clientside_script_carries_config(self):
        assert json.dumps(CLIENT_CONFIG) in RENDER_PATCH
        assert "%s" not in RENDER_PATCH
        assert "forceSimulation" in RENDER_PATCH
        assert 'set_props("node-click"' in RENDER_PATCH
