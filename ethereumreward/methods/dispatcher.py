import logging
from typing import Dict, Any, List, Union

from ethereumreward.methods.base_method import JsonRpcMethod, error_response
from ethereumreward.methods.errors import INVALID_REQUEST, METHOD_NOT_FOUND
from ethereumreward.methods.eth_get_miner_data_by_block_hash import (
    EthGetMinerDataByBlockHash,
)
from ethereumreward.methods.eth_get_miner_data_by_block_number import (
    EthGetMinerDataByBlockNumber,
)
from ethereumreward.service.miner_data_service import EthMinerDataService

logger = logging.getLogger(__name__)

Request = Union[Dict[str, Any], List[Dict[str, Any]]]


class JsonRpcDispatcher(object):
    def __init__(self, methods: List[JsonRpcMethod]):
        self.methods = {method.name: method for method in methods}

    @classmethod
    def for_miner_data(cls, miner_data_service: EthMinerDataService):
        return cls(
            [
                EthGetMinerDataByBlockHash(miner_data_service),
                EthGetMinerDataByBlockNumber(miner_data_service),
            ]
        )

    def handle(self, request: Request) -> Request:
        if isinstance(request, list):
            if len(request) == 0:
                return error_response(None, INVALID_REQUEST)
            return [self._handle_one(r) for r in request]
        return self._handle_one(request)

    def _handle_one(self, request) -> Dict[str, Any]:
        if not isinstance(request, dict) or request.get("jsonrpc") != "2.0":
            return error_response(None, INVALID_REQUEST)

        if not isinstance(request.get("method"), str):
            return error_response(request.get("id"), INVALID_REQUEST)

        method = self.methods.get(request.get("method"))
        if method is None:
            logger.info(f"method not found: {request.get('method')}")
            return error_response(request.get("id"), METHOD_NOT_FOUND)
        return method.response(request)
