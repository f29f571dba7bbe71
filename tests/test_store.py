"""Unit tests for the in-memory graph store."""

import random

from dyngraph.store import GraphStore


class TestAddNode:
    def test_links_follow_targets(self, store):
        assert [n.id for n in store.nodes()] == ["a", "b", "c"]
        assert store.links() == [("a", "b"), ("b", "c")]

    def test_duplicate_is_noop(self, store, make_node, caplog):
        assert store.add_node(make_node("a", targets=["c"])) is False
        assert len(store) == 3
        assert ("a", "c") not in store.links()
        assert 'Node "a" already exists.' in caplog.text

    def test_pending_link_becomes_visible(self, make_node):
        store = GraphStore()
        store.add_node(make_node("a", targets=["z"]))
        assert store.links() == []

        store.add_node(make_node("z"))
        assert store.links() == [("a", "z")]

    def test_duplicate_targets_give_one_link(self, make_node):
        store = GraphStore()
        store.add_node(make_node("b"))
        store.add_node(make_node("a", targets=["b", "b"]))
        assert store.links() == [("a", "b")]


class TestRemoveNode:
    def test_removes_incident_links(self, store):
        assert store.remove_node("b") is True
        assert [n.id for n in store.nodes()] == ["a", "c"]
        assert store.links() == []

    def test_absent_is_noop(self, store):
        before = (store.nodes(), store.links())
        assert store.remove_node("nope") is False
        assert (store.nodes(), store.links()) == before

    def test_readding_restores_links(self, store, make_node):
        node = store.get_node("c")
        store.remove_node("c")
        store.add_node(node)
        assert set(store.links()) == {("a", "b"), ("b", "c")}


class TestQueries:
    def test_connected_both_directions(self, store):
        assert store.connected("b") == {"a", "b", "c"}
        assert store.connected("a") == {"a", "b"}

    def test_connected_unknown(self, store):
        assert store.connected("zzz") == frozenset()

    def test_plain_data_round_trip(self, store):
        copy = GraphStore.from_list(store.to_list())
        assert [n.id for n in copy.nodes()] == [n.id for n in store.nodes()]
        assert copy.links() == store.links()


class TestInvariants:
    def test_random_mutations_keep_ids_unique_and_links_valid(self, make_node):
        rng = random.Random(7)
        ids = [f"n{i}" for i in range(12)]
        store = GraphStore()

        for _ in range(300):
            node_id = rng.choice(ids)
            if rng.random() < 0.6:
                targets = rng.sample(ids, rng.randint(0, 4))
                store.add_node(make_node(node_id, targets=targets))
            else:
                store.remove_node(node_id)

            present = [n.id for n in store.nodes()]
            assert len(present) == len(set(present))
            for source, target in store.links():
                assert source in present
                assert target in present
