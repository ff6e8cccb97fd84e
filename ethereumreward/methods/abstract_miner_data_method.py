from typing import Dict, Any, List

from ethereumreward.domain.miner_data import LookupStatus, MinerDataLookup
from ethereumreward.mappers.miner_data_mapper import EthMinerDataMapper
from ethereumreward.methods.base_method import (
    JsonRpcMethod,
    RequestId,
    success_response,
    error_response,
)
from ethereumreward.methods.errors import WORLD_STATE_UNAVAILABLE
from ethereumreward.service.miner_data_service import EthMinerDataService


class AbstractMinerDataMethod(JsonRpcMethod):
    def __init__(self, miner_data_service: EthMinerDataService):
        self.miner_data_service = miner_data_service
        self.miner_data_mapper = EthMinerDataMapper()

    def _response(self, request_id: RequestId, params: List[Any]) -> Dict[str, Any]:
        lookup = self._lookup(params)

        if lookup.status == LookupStatus.WORLD_STATE_UNAVAILABLE:
            return error_response(request_id, WORLD_STATE_UNAVAILABLE)

        # an unknown block is not an error, the answer is just null
        if lookup.status == LookupStatus.NOT_FOUND:
            return success_response(request_id, None)

        return success_response(
            request_id, self.miner_data_mapper.miner_data_to_dict(lookup.result)
        )

    def _lookup(self, params: List[Any]) -> MinerDataLookup:
        raise NotImplementedError()
