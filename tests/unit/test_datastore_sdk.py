"""Unit tests for the public SDK surface."""

from __future__ import annotations

from dataclasses import replace

import pytest

import datastore
from core.config import DataStoreConfig


def test_create_store_uses_configured_policy() -> None:
    """create_store should wire the configured identifier strategy."""
    config = replace(DataStoreConfig(), identifier_strategy="sequence", sequence_start=3)
    store = datastore.create_store(config)

    identifier = store.store({"name": "no id"})

    assert identifier == 3


def test_array_store_satisfies_data_store_contract() -> None:
    """ArrayStore is usable wherever the DataStore protocol is expected."""
    store: datastore.DataStore = datastore.ArrayStore()
    store.store({"a": {"b": 1}}, "key")

    with pytest.raises(datastore.NotFound):
        store.find_one_by("a.b", 2)

    assert store.find_one_by("a.b", "1") == {"a": {"b": 1}}
