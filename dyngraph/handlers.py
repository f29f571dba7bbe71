"""
Event handlers behind the page's single server callback.

Each handler gets the rebuilt session and the one entity the event concerns,
and returns the callback outputs:
(title, description, buttons, session data, view patch).
"""

import logging

from dash import no_update

from .errors import LoadError
from .layout import BUTTON_TYPE, custom_node_buttons
from .loader import load_session
from .session import GraphSession
from .settings import DEFAULT_DESCRIPTION, DEFAULT_TITLE
from .view import ViewPatch

logger = logging.getLogger(__name__)

NO_CHANGE = (no_update,) * 5


def on_load(url_hash, source=None):
    try:
        session = load_session(url_hash, source)
    except LoadError as e:
        logger.error(f"Failed to load graph: {e}")
        # nothing from a previous graph may stay on screen
        return DEFAULT_TITLE, DEFAULT_DESCRIPTION, [], None, ViewPatch(kind="reset", restart=True).to_dict()

    patch = session.binder.sync(session.store, kind="reset")
    return (
        session.title,
        session.description,
        custom_node_buttons(session.catalog, session.registry),
        session.to_dict(),
        patch.to_dict(),
    )


def on_toggle(session, name):
    patch = session.controller.toggle_custom_node(name)
    if patch is None:
        return NO_CHANGE
    return (
        no_update,
        no_update,
        custom_node_buttons(session.catalog, session.registry),
        session.to_dict(),
        patch.to_dict(),
    )


def on_node_click(session, node_id):
    patch = session.controller.highlight_connections(node_id)
    return no_update, no_update, no_update, session.to_dict(), patch.to_dict()


def on_clear(session, _=None):
    patch = session.controller.clear_highlight()
    return no_update, no_update, no_update, session.to_dict(), patch.to_dict()


EVENT_HANDLERS = {
    "toggle": on_toggle,
    "node-click": on_node_click,
    "clear": on_clear,
}


def event_for(trigger, value):
    """Name the event behind a callback trigger, or None when it should be ignored."""
    if trigger is None or trigger == "url":
        return "load"
    if isinstance(trigger, dict) and trigger.get("type") == BUTTON_TYPE:
        # freshly rendered buttons fire with n_clicks == 0
        return "toggle" if value else None
    if trigger == "node-click":
        return "node-click" if value else None
    if trigger == "clear-highlight-btn":
        return "clear" if value else None
    return None


def entity_for(event, trigger, value):
    if event == "toggle":
        return trigger["name"]
    if event == "node-click":
        return value["id"]
    return None


def dispatch(trigger, value, url_hash, session_data, source=None):
    event = event_for(trigger, value)
    if event is None:
        return NO_CHANGE
    if event == "load":
        return on_load(url_hash, source)
    if not session_data:
        logger.warning(f"Ignoring {event} event: no graph loaded.")
        return NO_CHANGE

    session = GraphSession.from_dict(session_data)
    return EVENT_HANDLERS[event](session, entity_for(event, trigger, value))
