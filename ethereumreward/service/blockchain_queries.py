import json
import logging
from typing import Dict, List, Optional, Tuple, Union, Any, Iterable

from blockchainreward.utils import (
    rpc_response_batch_to_results,
    rpc_response_to_result,
    rpc_error_message,
    hex_to_dec,
)
from ethereumreward.domain.block import EthBlock
from ethereumreward.json_rpc_requests import (
    generate_get_balance_json_rpc,
    generate_get_block_by_hash_json_rpc,
    generate_get_block_by_number_json_rpc,
    generate_get_receipt_json_rpc,
    generate_get_uncle_by_block_number_and_index_json_rpc,
)
from ethereumreward.mappers.block_mapper import EthBlockMapper
from ethereumreward.mappers.uncle_block_mapper import EthUncleBlockMapper

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x" + "0" * 40

# error messages the clients return when the state of a block is pruned
WORLD_STATE_UNAVAILABLE_ERRORS = (
    "missing trie node",  # geth
    "historical state",  # geth path scheme, erigon
    "state not available",
    "world state unavailable",  # besu
    "state is not available",  # nethermind
    "header not found",
)


class EthBlockchainQueries(object):
    """Read-only chain queries over a JSON-RPC batch provider."""

    def __init__(self, batch_web3_provider):
        self.batch_web3_provider = batch_web3_provider
        self.block_mapper = EthBlockMapper()
        self.uncle_block_mapper = EthUncleBlockMapper()

    def block_by_hash(self, block_hash: str) -> Optional[EthBlock]:
        result = self._make_request(
            generate_get_block_by_hash_json_rpc(block_hash, True)
        )
        if result is None:
            return None
        return self.block_mapper.json_dict_to_block(result)

    def block_by_number(self, block_number: Union[int, str]) -> Optional[EthBlock]:
        result = self._make_request(
            generate_get_block_by_number_json_rpc(block_number, True)
        )
        if result is None:
            return None
        return self.block_mapper.json_dict_to_block(result)

    def transaction_receipts_gas_used(
        self, transaction_hashes: Iterable[str]
    ) -> Dict[str, Optional[int]]:
        transaction_hashes = list(transaction_hashes)
        if len(transaction_hashes) == 0:
            return {}

        receipts_rpc = list(generate_get_receipt_json_rpc(transaction_hashes))
        gas_used: Dict[str, Optional[int]] = {}
        for tx_hash, receipt in zip(
            transaction_hashes, self._make_batch_request(receipts_rpc)
        ):
            if receipt is None:
                gas_used[tx_hash] = None
            else:
                gas_used[tx_hash] = hex_to_dec(receipt.get("gasUsed"))
        return gas_used

    def ommers_by_number(self, block_number: int) -> Optional[List[Tuple[str, str]]]:
        """The (hash, miner) of the uncles in the canonical block at this height."""
        result = self._make_request(
            generate_get_block_by_number_json_rpc(block_number, False)
        )
        if result is None:
            return None

        uncle_count = len(result.get("uncles") or [])
        if uncle_count == 0:
            return []

        uncles_rpc = list(
            generate_get_uncle_by_block_number_and_index_json_rpc(
                block_number, uncle_count
            )
        )
        ommers = []
        for result in self._make_batch_request(uncles_rpc):
            if result is None:
                continue
            uncle = self.uncle_block_mapper.json_dict_to_block(result)
            ommers.append((uncle.hash, uncle.miner))
        return ommers

    def is_world_state_available(self, block: EthBlock) -> bool:
        request = generate_get_balance_json_rpc(
            block.miner or ZERO_ADDRESS, block.hash
        )
        response = self.batch_web3_provider.make_batch_request(json.dumps(request))
        message = rpc_error_message(response)
        if message is not None and _is_world_state_unavailable(message):
            logger.info(
                f"world state of block {block.number} is unavailable: {message}"
            )
            return False

        rpc_response_to_result(response)
        return True

    def _make_request(self, request: Dict[str, Any]) -> Optional[Dict]:
        response = self.batch_web3_provider.make_batch_request(json.dumps(request))
        return rpc_response_to_result(response, allow_null=True)

    def _make_batch_request(self, requests: List[Dict[str, Any]]) -> List[Any]:
        response = self.batch_web3_provider.make_batch_request(json.dumps(requests))
        return list(rpc_response_batch_to_results(response, allow_null=True))


def _is_world_state_unavailable(message: str) -> bool:
    message = message.lower()
    return any(e in message for e in WORLD_STATE_UNAVAILABLE_ERRORS)
