"""
In-memory graph backing a page session.

Nodes keep their insertion order. A link exists for every (node, target)
pair whose endpoints are both present; a target that is not in the store yet
stays pending on the node and turns into a link once that node is added.
Links are plain (source_id, target_id) tuples.
"""

import itertools
import logging

import networkx as nx

from .schema import Node

logger = logging.getLogger(__name__)


class GraphStore:
    def __init__(self):
        self._graph = nx.DiGraph()
        self._seq = itertools.count()

    def __len__(self):
        return self._graph.number_of_nodes()

    # ---------- mutation ----------

    def add_node(self, node: Node) -> bool:
        if node.id in self._graph:
            logger.warning(f'Node "{node.id}" already exists.')
            return False

        self._graph.add_node(node.id, node=node)
        for target in node.targets:
            if target in self._graph:
                self._link(node.id, target)

        # links from existing nodes that were waiting for this one
        for other_id, data in self._graph.nodes(data=True):
            if other_id != node.id and node.id in data["node"].targets:
                self._link(other_id, node.id)
        return True

    def remove_node(self, node_id: str) -> bool:
        if node_id not in self._graph:
            return False
        # drops every incident edge as well
        self._graph.remove_node(node_id)
        return True

    def _link(self, source, target):
        if not self._graph.has_edge(source, target):
            self._graph.add_edge(source, target, seq=next(self._seq))

    # ---------- queries ----------

    def has_node(self, node_id):
        return node_id in self._graph

    def get_node(self, node_id):
        if node_id not in self._graph:
            return None
        return self._graph.nodes[node_id]["node"]

    def nodes(self):
        return [data["node"] for _, data in self._graph.nodes(data=True)]

    def links(self):
        edges = sorted(self._graph.edges(data="seq"), key=lambda e: e[2])
        return [(u, v) for u, v, _ in edges]

    def connected(self, node_id):
        """The node itself plus everything joined to it by a link in either direction."""
        if node_id not in self._graph:
            return frozenset()
        return frozenset(
            {node_id, *self._graph.predecessors(node_id), *self._graph.successors(node_id)}
        )

    # ---------- plain data ----------

    def to_list(self):
        return [node.model_dump() for node in self.nodes()]

    @classmethod
    def from_list(cls, items):
        store = cls()
        for item in items or []:
            store.add_node(Node.model_validate(item))
        return store
