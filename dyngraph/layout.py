from dash import dcc, html

from .settings import DEFAULT_DESCRIPTION, DEFAULT_TITLE, HEADER_HEIGHT

BUTTON_TYPE = "custom-node-btn"

page_style = {
    "margin": "0",
    "backgroundColor": "#111",
    "color": "#fafafa",
    "fontFamily": "Roboto, sans-serif",
    "height": "100vh",
    "overflow": "hidden",
}

header_style = {
    "height": f"{HEADER_HEIGHT}px",
    "boxSizing": "border-box",
    "padding": "10px 20px",
    "borderBottom": "1px solid #333",
}

button_style = {
    "backgroundColor": "#007BFF",
    "color": "white",
    "border": "none",
    "padding": "6px 14px",
    "marginRight": "8px",
    "borderRadius": "6px",
    "cursor": "pointer",
    "fontWeight": "bold",
    "fontSize": "14px",
    "boxShadow": "0 2px 4px rgba(0,0,0,0.2)",
}

active_button_style = {**button_style, "backgroundColor": "#ffcc00", "color": "#111"}

clear_button_style = {**button_style, "backgroundColor": "#555"}

chart_style = {
    "width": "100vw",
    "height": f"calc(100vh - {HEADER_HEIGHT}px)",
    "overflow": "hidden",
}


def custom_node_buttons(catalog, registry=()):
    """One toggle button per catalog entry, highlighted while its node is shown."""
    return [
        html.Button(
            name,
            id={"type": BUTTON_TYPE, "name": name},
            n_clicks=0,
            className="custom-node-btn active" if name in registry else "custom-node-btn",
            style=active_button_style if name in registry else button_style,
        )
        for name in catalog
    ]


def build_layout():
    return html.Div([
        dcc.Location(id="url", refresh=False),

        html.Header([
            html.H2(DEFAULT_TITLE, id="title", style={"margin": "0 0 4px 0"}),
            html.P(DEFAULT_DESCRIPTION, id="description", style={"margin": "0 0 8px 0", "color": "#a1a1aa"}),
            html.Div([
                html.Div(id="buttons", style={"display": "inline-block"}),
                html.Button("Clear highlight", id="clear-highlight-btn", n_clicks=0, style=clear_button_style),
            ]),
        ], style=header_style),

        html.Div(id="chart", style=chart_style),

        html.Div(id="render-status", style={"display": "none"}),

        dcc.Store(id="session-store", storage_type="memory"),
        dcc.Store(id="view-patch-store"),
        dcc.Store(id="node-click"),
    ], style=page_style)
