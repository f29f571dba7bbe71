"""
Keeps the rendered visuals congruent with a GraphStore.

Every node is drawn as a circle plus a label and keyed by its id; every link
is drawn as a line keyed by "<source>-<target>". `sync` reconciles the
rendered set against the store in three phases (enter, update, exit) and
returns a ViewPatch the browser applies to its d3 selections.
"""

import logging
from dataclasses import asdict, dataclass, field

from .settings import NODE_RADIUS
from .styles import link_key, link_style_for, style_for

logger = logging.getLogger(__name__)


@dataclass
class ViewPatch:
    kind: str  # "reset", "sync" or "highlight"
    nodes: list = field(default_factory=list)
    links: list = field(default_factory=list)
    entered_nodes: list = field(default_factory=list)
    exited_nodes: list = field(default_factory=list)
    entered_links: list = field(default_factory=list)
    exited_links: list = field(default_factory=list)
    focus: str | None = None
    restart: bool = False

    @property
    def changed(self):
        return bool(self.entered_nodes or self.exited_nodes or self.entered_links or self.exited_links)

    def to_dict(self):
        return asdict(self)


class ViewBinder:
    def __init__(self):
        self._node_visuals = {}  # node id -> visual
        self._link_visuals = {}  # (source, target) -> visual
        self.highlighted = None

    @property
    def node_visuals(self):
        return list(self._node_visuals.values())

    @property
    def link_visuals(self):
        return list(self._link_visuals.values())

    # ---------- reconciliation ----------

    def sync(self, store, kind="sync") -> ViewPatch:
        if self.highlighted is not None and not store.has_node(self.highlighted):
            self.highlighted = None
        connected = store.connected(self.highlighted) if self.highlighted is not None else frozenset()

        # Nodes
        nodes = store.nodes()
        present = {node.id for node in nodes}
        exited_nodes = [key for key in self._node_visuals if key not in present]
        entered_nodes = []
        node_visuals = {}
        for node in nodes:
            visual = self._node_visuals.get(node.id)
            if visual is None:
                visual = _enter_node(node)
                entered_nodes.append(node.id)
            visual.update(style_for(node, connected))
            node_visuals[node.id] = visual
        self._node_visuals = node_visuals
        logger.debug(f"Updating nodes: {len(node_visuals)}")

        # Links
        links = store.links()
        present = set(links)
        exited_links = [link_key(*pair) for pair in self._link_visuals if pair not in present]
        entered_links = []
        link_visuals = {}
        for pair in links:
            visual = self._link_visuals.get(pair)
            if visual is None:
                visual = _enter_link(*pair)
                entered_links.append(visual["key"])
            visual.update(link_style_for(*pair, self.highlighted))
            link_visuals[pair] = visual
        self._link_visuals = link_visuals
        logger.debug(f"Updating links: {len(link_visuals)}")

        return ViewPatch(
            kind=kind,
            nodes=self.node_visuals,
            links=self.link_visuals,
            entered_nodes=entered_nodes,
            exited_nodes=exited_nodes,
            entered_links=entered_links,
            exited_links=exited_links,
            restart=True,
        )

    def highlight(self, store, node_id) -> ViewPatch:
        """Restyle every visual around `node_id`; None clears the highlight."""
        if node_id is not None and not store.has_node(node_id):
            logger.warning(f'Cannot highlight unknown node "{node_id}".')
            node_id = None
        self.highlighted = node_id

        connected = store.connected(node_id) if node_id is not None else frozenset()
        for key, visual in self._node_visuals.items():
            node = store.get_node(key)
            if node is not None:
                visual.update(style_for(node, connected))
        for pair, visual in self._link_visuals.items():
            visual.update(link_style_for(*pair, node_id))

        return ViewPatch(
            kind="highlight",
            nodes=self.node_visuals,
            links=self.link_visuals,
            focus=node_id,
        )

    # ---------- plain data ----------

    def to_dict(self):
        return {
            "nodes": self.node_visuals,
            "links": self.link_visuals,
            "highlighted": self.highlighted,
        }

    @classmethod
    def from_dict(cls, data):
        binder = cls()
        data = data or {}
        binder._node_visuals = {v["id"]: dict(v) for v in data.get("nodes", [])}
        binder._link_visuals = {(v["source"], v["target"]): dict(v) for v in data.get("links", [])}
        binder.highlighted = data.get("highlighted")
        return binder


def _enter_node(node):
    return {
        "key": node.id,
        "id": node.id,
        "label": node.id,
        "group": node.group,
        "link": node.link,
        "radius": NODE_RADIUS,
    }


def _enter_link(source, target):
    return {
        "key": link_key(source, target),
        "source": source,
        "target": target,
    }
