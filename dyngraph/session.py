from .interaction import InteractionController
from .settings import DEFAULT_DESCRIPTION, DEFAULT_TITLE
from .store import GraphStore
from .view import ViewBinder


class GraphSession:
    """
    Everything one page load owns: the store, the rendered view and the
    controller wired to both.

    Dash callbacks are stateless, so the session travels through a
    browser-memory dcc.Store as plain data and is rebuilt on every event.
    """

    def __init__(self, resource, title=DEFAULT_TITLE, description=DEFAULT_DESCRIPTION,
                 store=None, binder=None, catalog=None, registry=None):
        self.resource = resource
        self.title = title
        self.description = description
        self.store = store if store is not None else GraphStore()
        self.binder = binder if binder is not None else ViewBinder()
        self.controller = InteractionController(self.store, self.binder, catalog, registry)

    @property
    def catalog(self):
        return self.controller.catalog

    @property
    def registry(self):
        return self.controller.registry

    def to_dict(self):
        return {
            "resource": self.resource,
            "header": {"title": self.title, "description": self.description},
            "nodes": self.store.to_list(),
            "catalog": self.catalog,
            # keep catalog order so buttons keep theirs
            "registry": [name for name in self.catalog if self.controller.is_active(name)],
            "view": self.binder.to_dict(),
        }

    @classmethod
    def from_dict(cls, data):
        header = data.get("header") or {}
        return cls(
            data.get("resource"),
            title=header.get("title", DEFAULT_TITLE),
            description=header.get("description", DEFAULT_DESCRIPTION),
            store=GraphStore.from_list(data.get("nodes")),
            binder=ViewBinder.from_dict(data.get("view")),
            catalog=data.get("catalog"),
            registry=data.get("registry"),
        )
