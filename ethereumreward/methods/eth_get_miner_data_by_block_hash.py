from typing import Any, List

from ethereumreward.domain.miner_data import MinerDataLookup
from ethereumreward.methods.abstract_miner_data_method import AbstractMinerDataMethod
from ethereumreward.methods.base_method import InvalidParamsError
from ethereumreward.utils import is_valid_block_hash


class EthGetMinerDataByBlockHash(AbstractMinerDataMethod):
    name = "eth_getMinerDataByBlockHash"

    def _lookup(self, params: List[Any]) -> MinerDataLookup:
        block_hash = self.required_parameter(params, 0)
        if not is_valid_block_hash(block_hash):
            raise InvalidParamsError(f"invalid block hash: {block_hash}")
        return self.miner_data_service.get_miner_data_by_hash(block_hash.lower())
