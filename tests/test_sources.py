"""Tests for sources.py."""

import pytest
from secretlayer.sources import CompositeSecretSource, SecretLayer


class TestSecretLayer:
    """Tests for SecretLayer."""

    def test_mapping_behaviour(self):
        """Behaves as a read-only mapping."""
        layer = SecretLayer("secret/orders", {"db.password": "hunter2", "port": 5432})

        assert layer["db.password"] == "hunter2"
        assert layer["port"] == 5432
        assert len(layer) == 2
        assert set(layer) == {"db.password", "port"}
        with pytest.raises(TypeError):
            layer["new"] = "value"  # type: ignore[index]

    def test_copies_input(self):
        """Later changes to the source dict are not visible."""
        data = {"a": "1"}
        layer = SecretLayer("ctx", data)
        data["a"] = "2"

        assert layer["a"] == "1"

    def test_repr_hides_values(self):
        """Repr shows keys but never values."""
        layer = SecretLayer("ctx", {"password": "hunter2"})

        assert "hunter2" not in repr(layer)
        assert "password" in repr(layer)


class TestCompositeSecretSource:
    """Tests for CompositeSecretSource."""

    def test_first_layer_wins(self):
        """Earlier layers take precedence on key collisions."""
        composite = CompositeSecretSource("aws-secrets-manager")
        composite.add_layer(SecretLayer("c1", {"k": "from-c1"}))
        composite.add_layer(SecretLayer("c2", {"k": "from-c2", "other": "x"}))

        assert composite.get("k") == "from-c1"
        assert composite.get("other") == "x"

    def test_get_default(self):
        """Returns default when no layer has the key."""
        composite = CompositeSecretSource("s")
        composite.add_layer(SecretLayer("c1", {"a": "1"}))

        assert composite.get("missing") is None
        assert composite.get("missing", "fallback") == "fallback"

    def test_contains(self):
        """Membership checks all layers."""
        composite = CompositeSecretSource("s")
        composite.add_layer(SecretLayer("c1", {"a": "1"}))
        composite.add_layer(SecretLayer("c2", {"b": "2"}))

        assert "a" in composite
        assert "b" in composite
        assert "c" not in composite

    def test_find_layer(self):
        """Reports which layer supplies a key."""
        composite = CompositeSecretSource("s")
        composite.add_layer(SecretLayer("c1", {"a": "1"}))
        composite.add_layer(SecretLayer("c2", {"a": "2", "b": "2"}))

        assert composite.find_layer("a").name == "c1"
        assert composite.find_layer("b").name == "c2"
        assert composite.find_layer("z") is None

    def test_property_names_and_to_dict(self):
        """Flattened view keeps first-seen order and precedence."""
        composite = CompositeSecretSource("s")
        composite.add_layer(SecretLayer("c1", {"b": "1"}))
        composite.add_layer(SecretLayer("c2", {"a": "2", "b": "2"}))

        assert composite.property_names() == ["b", "a"]
        assert composite.to_dict() == {"b": "1", "a": "2"}

    def test_layers_are_ordered(self):
        """Layers are kept in insertion order."""
        composite = CompositeSecretSource("s")
        composite.add_layer(SecretLayer("c1"))
        composite.add_layer(SecretLayer("c2"))

        assert [layer.name for layer in composite.layers] == ["c1", "c2"]
        assert len(composite) == 2

    def test_empty(self):
        """Empty source has no keys."""
        composite = CompositeSecretSource("s")

        assert len(composite) == 0
        assert composite.to_dict() == {}
