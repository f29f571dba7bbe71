from dyngraph.session import GraphSession


class TestGraphSession:
    def test_round_trip(self, session):
        session.binder.sync(session.store)
        session.controller.toggle_custom_node("x")
        session.controller.highlight_connections("a")

        copy = GraphSession.from_dict(session.to_dict())

        assert copy.resource == "simple"
        assert (copy.title, copy.description) == ("Simple", "Three nodes in a row")
        assert [n.id for n in copy.store.nodes()] == ["a", "b", "c", "x"]
        assert copy.store.links() == session.store.links()
        assert copy.registry == {"x"}
        assert copy.catalog == session.catalog
        assert copy.binder.highlighted == "a"
        assert not copy.binder.sync(copy.store).changed

    def test_round_trip_then_toggle_off(self, session):
        session.binder.sync(session.store)
        session.controller.toggle_custom_node("x")

        copy = GraphSession.from_dict(session.to_dict())
        patch = copy.controller.toggle_custom_node("x")

        assert patch.exited_nodes == ["x"]
        assert [n.id for n in copy.store.nodes()] == ["a", "b", "c"]

    def test_to_dict_is_plain_data(self, session):
        data = session.to_dict()
        assert data["nodes"][0] == {"id": "a", "group": 1, "targets": ["b"], "link": None}
        assert data["registry"] == []
