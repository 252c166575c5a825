"""
Tests for remembered calculator inputs

- InMemoryStore / JsonFileStore get/set
- InputSnapshotRepository merge over defaults, validation on save,
  fallback to defaults on invalid stored snapshots
"""

import json
import logging

import pytest
from jsonschema import ValidationError

from fintoolkit.storage import (
    SNAPSHOT_KEY_PREFIX,
    InMemoryStore,
    InputSnapshotRepository,
    JsonFileStore,
)

LOAN_DEFAULTS = {"principal": 10_000_000, "annual_rate_pct": 2.1, "years": 30, "grace_years": 0}


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def repo(store):
    return InputSnapshotRepository(store)


# =============================================================================
# STORES
# =============================================================================


class TestInMemoryStore:
    def test_get_missing(self, store):
        assert store.get("nope") is None

    def test_set_get(self, store):
        store.set("k", {"a": 1})
        assert store.get("k") == {"a": 1}

    def test_initial_data_copied(self):
        initial = {"k": 1}
        store = InMemoryStore(initial)
        store.set("k", 2)
        assert initial == {"k": 1}


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path):
        assert JsonFileStore(tmp_path / "inputs.json").get("k") is None

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "inputs.json"
        JsonFileStore(path).set("v3_dca", {"years": 20})
        JsonFileStore(path).set("v3_loan", {"years": 30})

        reopened = JsonFileStore(path)
        assert reopened.get("v3_dca") == {"years": 20}
        assert reopened.get("v3_loan") == {"years": 30}

    def test_file_is_plain_json(self, tmp_path):
        path = tmp_path / "inputs.json"
        JsonFileStore(path).set("k", [1, 2])
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": [1, 2]}

    def test_non_object_file(self, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            JsonFileStore(path).get("k")


# =============================================================================
# REPOSITORY
# =============================================================================


class TestInputSnapshotRepository:
    def test_defaults_when_nothing_stored(self, repo):
        loaded = repo.load("loan", LOAN_DEFAULTS)
        assert loaded == LOAN_DEFAULTS
        assert loaded is not LOAN_DEFAULTS

    def test_save_then_load(self, repo):
        repo.save("loan", {"principal": 8_000_000, "years": 20})
        loaded = repo.load("loan", LOAN_DEFAULTS)

        assert loaded["principal"] == 8_000_000
        assert loaded["years"] == 20
        assert loaded["annual_rate_pct"] == 2.1

    def test_key_prefix(self, store, repo):
        repo.save("dca", {"years": 5})
        assert store.get(f"{SNAPSHOT_KEY_PREFIX}dca") == {"years": 5}

    def test_custom_prefix(self, store):
        InputSnapshotRepository(store, prefix="v4_").save("dca", {"years": 5})
        assert store.get("v4_dca") == {"years": 5}
        assert store.get("v3_dca") is None

    def test_save_rejects_invalid(self, store, repo):
        with pytest.raises(ValidationError):
            repo.save("loan", {"principal": -5})
        assert store.get("v3_loan") is None

    def test_invalid_stored_snapshot_falls_back(self, store, repo, caplog):
        store.set("v3_loan", {"principal": "lots", "years": 20})

        with caplog.at_level(logging.WARNING, logger="fintoolkit.storage.sticky_store"):
            loaded = repo.load("loan", LOAN_DEFAULTS)

        assert loaded == LOAN_DEFAULTS
        assert "v3_loan" in caplog.text

    def test_non_object_snapshot_falls_back(self, store, repo):
        store.set("v3_dca", [1, 2, 3])
        assert repo.load("dca", {"years": 10}) == {"years": 10}

    def test_unknown_calculator(self, repo):
        with pytest.raises(ValueError):
            repo.load("mortgage", {})
        with pytest.raises(ValueError):
            repo.save("mortgage", {})

    def test_with_json_file_store(self, tmp_path):
        path = tmp_path / "inputs.json"
        InputSnapshotRepository(JsonFileStore(path)).save(
            "fcn", {"strike_pct": 85, "observation_mode": "terminal_only"}
        )

        loaded = InputSnapshotRepository(JsonFileStore(path)).load("fcn", {"ki_pct": 65})
        assert loaded == {"ki_pct": 65, "strike_pct": 85, "observation_mode": "terminal_only"}
