from typing import Dict, Any, Optional

from blockchainreward.utils import hex_to_dec
from ethereumreward.domain.block import EthBlock
from ethereumreward.mappers.transaction_mapper import EthTransactionMapper
from ethereumreward.utils import to_normalized_address


class EthBlockMapper(object):
    def __init__(self, transaction_mapper: Optional[EthTransactionMapper] = None):
        if transaction_mapper is None:
            transaction_mapper = EthTransactionMapper()
        self.transaction_mapper = transaction_mapper

    def json_dict_to_block(self, json_dict: Dict[str, Any]) -> EthBlock:
        block = EthBlock()
        block.number = hex_to_dec(json_dict.get("number"))
        block.hash = json_dict.get("hash")
        block.state_root = json_dict.get("stateRoot")
        block.miner = to_normalized_address(json_dict.get("miner"))
        block.difficulty = hex_to_dec(json_dict.get("difficulty"))
        # removed from the geth response after the merge
        block.total_difficulty = hex_to_dec(json_dict.get("totalDifficulty"))
        block.extra_data = json_dict.get("extraData")

        if "transactions" in json_dict:
            block.transactions = [
                self.transaction_mapper.json_dict_to_transaction(tx)
                for tx in json_dict["transactions"]
                # only full transactions carry the gas price
                if isinstance(tx, dict)
            ]

        block.uncles = list(json_dict.get("uncles") or [])

        return block
