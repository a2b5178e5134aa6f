import pytest

from httpadapter.models import ParameterStore


class TestParameterStore:
    def test_empty_store(self):
        store = ParameterStore()

        assert len(store) == 0
        assert "missing" not in store
        assert store.get("missing") is None

    def test_initial_values(self):
        store = ParameterStore({"trace": "abc", "attempt": 2})

        assert store["trace"] == "abc"
        assert store["attempt"] == 2
        assert sorted(store) == ["attempt", "trace"]

    def test_set_and_delete(self):
        store = ParameterStore()
        store["key"] = "value"
        assert store["key"] == "value"

        del store["key"]
        assert "key" not in store

    def test_rejects_non_string_keys(self):
        store = ParameterStore()

        with pytest.raises(TypeError):
            store[1] = "value"

    def test_copy_is_independent(self):
        store = ParameterStore({"key": "value"})
        copied = store.copy()

        copied["key"] = "changed"
        copied["other"] = 1

        assert store["key"] == "value"
        assert "other" not in store
