"""
Loads a graph description and builds a fresh session from it.

The URL fragment names the resource: "#network" loads "<source>/network.json",
an empty fragment loads the default. `source` is either a local directory or
an http(s) base URL.
"""

import json
import logging
import re
from pathlib import Path
from urllib.parse import unquote

import requests
from pydantic import ValidationError

from .errors import LoadError, ParseError
from .schema import GraphDescription
from .session import GraphSession
from .settings import DATA_DIR, DEFAULT_DESCRIPTION, DEFAULT_RESOURCE, DEFAULT_TITLE, FETCH_TIMEOUT

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def resource_name(url_hash):
    name = unquote((url_hash or "").lstrip("#")).strip()
    if not name:
        return DEFAULT_RESOURCE
    if not _NAME_RE.match(name) or ".." in name:
        raise LoadError(f"Invalid graph name: {name!r}")
    return name


def _is_url(source):
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def resource_location(name, source=None):
    source = DATA_DIR if source is None else source
    if _is_url(source):
        return f"{source.rstrip('/')}/{name}.json"
    return Path(source) / f"{name}.json"


def fetch_description(name, source=None):
    """Fetch the raw JSON document for `name`."""
    location = resource_location(name, source)

    if isinstance(location, str):
        try:
            response = requests.get(location, timeout=FETCH_TIMEOUT)
        except requests.RequestException as e:
            raise LoadError(f"Failed to load JSON: {location}") from e
        if not response.ok:
            raise LoadError(f"Failed to load JSON: {location} (status {response.status_code})")
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Malformed JSON in {location}: {e}") from e

    if not location.is_file():
        raise LoadError(f"Failed to load JSON: {location}")
    try:
        data = location.read_bytes()
    except OSError as e:
        raise LoadError(f"Failed to load JSON: {location}") from e
    try:
        return json.loads(data.decode("utf-8"))
    except ValueError as e:
        raise ParseError(f"Malformed JSON in {location}: {e}") from e


def parse_description(raw) -> GraphDescription:
    try:
        return GraphDescription.model_validate(raw)
    except ValidationError as e:
        raise ParseError(f"Unexpected graph structure: {e}") from e


def header_text(header):
    return (
        header.title or DEFAULT_TITLE,
        header.description or DEFAULT_DESCRIPTION,
    )


def build_session(name, description: GraphDescription) -> GraphSession:
    title, text = header_text(description.header)
    session = GraphSession(name, title=title, description=text, catalog=description.custom_nodes)
    for node in description.nodes:
        session.store.add_node(node)
    return session


def load_session(url_hash, source=None) -> GraphSession:
    name = resource_name(url_hash)
    raw = fetch_description(name, source)
    session = build_session(name, parse_description(raw))
    logger.info(f"Loaded JSON file: {resource_location(name, source)}")
    return session
