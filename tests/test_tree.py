"""Tests for the diagnostic move tree."""

from winprob.tree import MoveTree


class TestMoveTree:
    def test_record_and_lookup(self) -> None:
        tree = MoveTree()
        tree.record("fen-a", "e4", 0.3)
        tree.record("fen-a", "d4", 0.2)
        tree.record("fen-b", "Nf3", 0.5)

        assert len(tree) == 3
        assert "fen-a" in tree
        assert tree.lookup("fen-a") == {"e4": 0.3, "d4": 0.2}
        assert sorted(tree.positions()) == ["fen-a", "fen-b"]

    def test_first_write_wins(self) -> None:
        tree = MoveTree()
        tree.record("fen-a", "e4", 0.3)
        tree.record("fen-a", "e4", -7.0)
        assert tree.lookup("fen-a") == {"e4": 0.3}
        assert len(tree) == 1

    def test_unknown_position(self) -> None:
        tree = MoveTree()
        assert tree.lookup("nowhere") == {}
        assert "nowhere" not in tree

    def test_lookup_returns_a_copy(self) -> None:
        tree = MoveTree()
        tree.record("fen-a", "e4", 0.3)
        tree.lookup("fen-a")["e4"] = 9.0
        assert tree.as_dict() == {"fen-a": {"e4": 0.3}}

    def test_clear(self) -> None:
        tree = MoveTree()
        tree.record("fen-a", "e4", 0.3)
        tree.clear()
        assert len(tree) == 0
        assert tree.as_dict() == {}
