"""Chain registry tests."""

import json

import pytest
from pydantic import ValidationError as ModelValidationError

from conftest import TEST_CHAINS
from gateway.errors import ChainNotSupported
from src.services.chain_configs import (
    ChainRegistry,
    get_chain_configs,
    load_chain_registry,
    resolve_rpc_url,
)


def test_lookup_returns_same_object(registry):
    first = registry.lookup(1)
    assert registry.lookup(1) is first
    assert first.native_currency.symbol == "ETH"


def test_lookup_unknown_chain_raises(registry):
    with pytest.raises(ChainNotSupported) as exc_info:
        registry.lookup(999999)
    assert exc_info.value.chain_id == 999999
    assert exc_info.value.status_code == 404
    assert "999999" in exc_info.value.message


def test_list_keeps_registration_order(registry):
    assert [c.chain_id for c in registry.list()] == [1, 100]
    assert len(registry) == 2
    assert 100 in registry
    assert 5 not in registry


def test_duplicate_chain_ids_rejected():
    with pytest.raises(ValueError, match="Duplicate chainId"):
        ChainRegistry.from_dicts([TEST_CHAINS[0], dict(TEST_CHAINS[0], name="Copy")])


def test_invalid_chain_entry_rejected():
    bad = dict(TEST_CHAINS[0], rpcUrl="")
    with pytest.raises(ModelValidationError):
        ChainRegistry.from_dicts([bad])


@pytest.mark.parametrize("field, value", [
    ("explorerBaseUrl", "not a url"),
    ("explorerBaseUrl", "/api"),
    ("rpcUrl", "ftp://rpc.test/node"),
    ("rpcUrl", "https://"),
])
def test_non_http_backend_urls_rejected(field, value):
    bad = dict(TEST_CHAINS[0], **{field: value})
    with pytest.raises(ModelValidationError):
        ChainRegistry.from_dicts([bad])


def test_api_key_template_url_accepted():
    registry = ChainRegistry.from_dicts([dict(TEST_CHAINS[0], rpcUrl="http://node.test/%API_KEY%")])
    assert registry.lookup(1).rpc_url == "http://node.test/%API_KEY%"


def test_chain_config_is_immutable(registry):
    chain = registry.lookup(1)
    with pytest.raises(ModelValidationError):
        chain.rpc_url = "https://evil.test"


def test_list_returns_tuple(registry):
    chains = registry.list()
    assert isinstance(chains, tuple)


def test_public_dict_uses_camel_case(registry):
    data = registry.lookup(1).to_public_dict()
    assert data == TEST_CHAINS[0]


def test_static_table_is_valid_and_unique():
    registry = ChainRegistry.from_dicts(get_chain_configs())
    ids = [c.chain_id for c in registry.list()]
    assert len(ids) == len(set(ids))
    assert ids[0] == 1


def test_load_chain_registry_from_file(tmp_path):
    path = tmp_path / "chains.json"
    path.write_text(json.dumps(TEST_CHAINS[::-1]), encoding="utf-8")

    registry = load_chain_registry(str(path))

    assert [c.chain_id for c in registry.list()] == [100, 1]


def test_resolve_rpc_url_substitutes_api_key(registry):
    assert resolve_rpc_url(registry.lookup(1), "abc123") == "https://rpc.test/v3/abc123"
    assert resolve_rpc_url(registry.lookup(100), "abc123") == "https://rpc.test/gnosis"


def test_listing_keeps_api_key_placeholder(registry):
    assert registry.lookup(1).to_public_dict()["rpcUrl"].endswith("%API_KEY%")
