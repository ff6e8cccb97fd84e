import pytest

from blockchainreward.misc.retriable_value_error import RetriableValueError
from ethereumreward.service.blockchain_queries import EthBlockchainQueries
from tests.conftest import (
    BLOCK_HASH,
    BLOCK_NUMBER,
    MINER,
    TX1,
    TX2,
    UNCLE1,
    UNCLE2,
    UNCLE_MINER1,
    UNCLE_MINER2,
    make_hash,
)


def test_block_by_hash(provider):
    block = EthBlockchainQueries(provider).block_by_hash(BLOCK_HASH)

    assert block.number == BLOCK_NUMBER
    assert block.hash == BLOCK_HASH
    assert block.miner == MINER
    assert block.extra_data == "0x6d696e6572"
    assert block.difficulty == 10
    assert block.total_difficulty == 1000
    assert block.state_root == make_hash("5")
    assert [tx.hash for tx in block.transactions] == [TX1, TX2]
    assert [tx.gas_price for tx in block.transactions] == [2, 3]
    assert block.uncles == [UNCLE1, UNCLE2]
    assert block.ommer_count == 2


def test_block_lookup_is_a_single_request(provider):
    queries = EthBlockchainQueries(provider)
    queries.block_by_hash(BLOCK_HASH)
    queries.block_by_number(BLOCK_NUMBER)

    assert provider.methods == ["eth_getBlockByHash", "eth_getBlockByNumber"]


def test_block_by_hash_not_found(provider):
    assert EthBlockchainQueries(provider).block_by_hash(make_hash("e")) is None


def test_block_by_number(provider):
    queries = EthBlockchainQueries(provider)
    assert queries.block_by_number(BLOCK_NUMBER).hash == BLOCK_HASH
    assert queries.block_by_number("latest").hash == BLOCK_HASH
    assert queries.block_by_number(BLOCK_NUMBER + 1) is None


def test_transaction_receipts_gas_used(provider):
    gas_used = EthBlockchainQueries(provider).transaction_receipts_gas_used(
        [TX1, TX2]
    )
    assert gas_used == {TX1: 100, TX2: None}


def test_transaction_receipts_of_empty_block(provider):
    assert EthBlockchainQueries(provider).transaction_receipts_gas_used([]) == {}
    assert provider.requests == []


def test_ommers_by_number(provider):
    ommers = EthBlockchainQueries(provider).ommers_by_number(BLOCK_NUMBER)
    assert ommers == [(UNCLE1, UNCLE_MINER1), (UNCLE2, UNCLE_MINER2)]


def test_ommers_by_number_without_canonical_block(provider):
    assert EthBlockchainQueries(provider).ommers_by_number(1) is None


def test_is_world_state_available(provider):
    queries = EthBlockchainQueries(provider)
    block = queries.block_by_hash(BLOCK_HASH)
    assert queries.is_world_state_available(block) is True

    provider.pruned_blocks.add(BLOCK_HASH)
    assert queries.is_world_state_available(block) is False


def test_world_state_check_propagates_other_errors(provider):
    queries = EthBlockchainQueries(provider)
    block = queries.block_by_hash(BLOCK_HASH)
    provider.errors["eth_getBalance"] = {"code": -32603, "message": "boom"}

    with pytest.raises(RetriableValueError):
        queries.is_world_state_available(block)


def test_node_error_raises(provider):
    provider.errors["eth_getBlockByHash"] = {"code": -32602, "message": "bad hash"}

    with pytest.raises(ValueError):
        EthBlockchainQueries(provider).block_by_hash(BLOCK_HASH)
