import logging

from dash import ctx
from dash.dependencies import ALL, Input, Output, State
from dash_extensions.enrich import DashProxy, Trigger, TriggerTransform

from .clientside import EXTERNAL_SCRIPTS, RENDER_PATCH
from .handlers import dispatch
from .layout import BUTTON_TYPE, build_layout

external_stylesheets = [
    "https://fonts.googleapis.com/css2?family=Roboto:wght@400;700&display=swap"
]


def create_app(source=None):
    """
    Build the Dash app.

    `source` is the directory or http(s) base URL graph files are read from;
    None uses the JSON files shipped in the package assets.
    """
    app = DashProxy(__name__,
                    title="Dynamic Graph",
                    external_scripts=EXTERNAL_SCRIPTS,
                    external_stylesheets=external_stylesheets,
                    transforms=[TriggerTransform()])
    app.layout = build_layout()

    # ---------- Server callback ----------
    @app.callback(
        Output("title", "children"),
        Output("description", "children"),
        Output("buttons", "children"),
        Output("session-store", "data"),
        Output("view-patch-store", "data"),
        Input("url", "hash"),
        Input({"type": BUTTON_TYPE, "name": ALL}, "n_clicks"),
        Input("node-click", "data"),
        Trigger("clear-highlight-btn", "n_clicks"),
        State("session-store", "data"),
    )
    def update_graph(url_hash, toggle_clicks, node_click, session_data):
        triggered = ctx.triggered[0] if ctx.triggered else {}
        return dispatch(ctx.triggered_id, triggered.get("value"), url_hash, session_data, source)

    # ---------- Clientside callback ----------
    app.clientside_callback(
        RENDER_PATCH,
        Output("render-status", "children"),
        Input("view-patch-store", "data"),
    )

    return app


app = create_app()
server = app.server

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    app.run(debug=True)
