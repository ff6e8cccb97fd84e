from typing import Any, List

from ethereumreward.domain.miner_data import MinerDataLookup
from ethereumreward.methods.abstract_miner_data_method import AbstractMinerDataMethod
from ethereumreward.methods.base_method import InvalidParamsError
from ethereumreward.utils import parse_block_parameter


class EthGetMinerDataByBlockNumber(AbstractMinerDataMethod):
    name = "eth_getMinerDataByBlockNumber"

    def _lookup(self, params: List[Any]) -> MinerDataLookup:
        block_parameter = self.required_parameter(params, 0)
        try:
            block_number = parse_block_parameter(block_parameter)
        except ValueError as e:
            raise InvalidParamsError(str(e)) from e
        return self.miner_data_service.get_miner_data_by_number(block_number)
