"""Shared fixtures for unit and integration tests."""

from __future__ import annotations

import pytest

from seeker.store import MetadataStore


@pytest.fixture()
def store() -> MetadataStore:
    return MetadataStore()


@pytest.fixture()
def populated_store(store: MetadataStore) -> MetadataStore:
    store.add("ryjl3-tyaaa-aaaaa-aaaba-cai", "ICP Ledger")
    store.add("rdmx6-jaaaa-aaaaa-aaadq-cai", "Internet Identity")
    store.add("qoctq-giaaa-aaaaa-aaaea-cai", "NNS Dapp")
    return store
