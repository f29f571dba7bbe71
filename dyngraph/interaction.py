import logging

from .schema import Node
from .settings import CUSTOM_GROUP

logger = logging.getLogger(__name__)


class InteractionController:
    """
    Turns user actions into store mutations and view patches.

    Custom nodes come from the catalog loaded with the graph. Each one is
    either absent or present; `toggle_custom_node` is the only thing that
    flips it. Methods that change the graph shape return the patch produced
    by `ViewBinder.sync`, or None when nothing happened.
    """

    def __init__(self, store, binder, catalog=None, registry=None):
        self.store = store
        self.binder = binder
        self.catalog = dict(catalog or {})
        self.registry = set(registry or ())

    def is_active(self, name):
        return name in self.registry

    def toggle_custom_node(self, name):
        if self.is_active(name):
            return self.remove_custom_node(name)
        return self.create_custom_node(name)

    def create_custom_node(self, name):
        targets = self.catalog.get(name)
        if targets is None:
            logger.error(f"No linked nodes found for custom node: {name}")
            return None
        if self.store.has_node(name):
            logger.warning(f'Custom node "{name}" already exists.')
            return None

        self.store.add_node(Node(id=name, group=CUSTOM_GROUP, targets=list(targets)))
        self.registry.add(name)
        logger.info(f'Created custom node "{name}".')
        return self.binder.sync(self.store)

    def remove_custom_node(self, name):
        self.store.remove_node(name)
        self.registry.discard(name)
        logger.info(f'Removed custom node "{name}".')
        return self.binder.sync(self.store)

    def highlight_connections(self, node_id):
        logger.info(f'Highlighting connections for node "{node_id}".')
        return self.binder.highlight(self.store, node_id)

    def clear_highlight(self):
        return self.binder.highlight(self.store, None)
