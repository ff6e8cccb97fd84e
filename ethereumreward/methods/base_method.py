import logging
from typing import Dict, Any, List, Union

from ethereumreward.methods.errors import (
    JsonRpcError,
    INVALID_PARAMS,
    INTERNAL_ERROR,
    TRANSACTION_RECEIPT_UNAVAILABLE,
)
from ethereumreward.service.block_reward_calculator import MissingReceiptError

logger = logging.getLogger(__name__)

RequestId = Union[int, str, None]


class InvalidParamsError(ValueError):
    pass


def success_response(request_id: RequestId, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def error_response(request_id: RequestId, error: JsonRpcError) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": error.to_dict()}


class JsonRpcMethod(object):
    name: str = ""

    def response(self, request: Dict[str, Any]) -> Dict[str, Any]:
        request_id = request.get("id")
        try:
            return self._response(request_id, self._params(request))
        except InvalidParamsError as e:
            logger.info(f"{self.name} invalid params: {e}")
            return error_response(request_id, INVALID_PARAMS)
        except MissingReceiptError as e:
            logger.warning(f"{self.name} failed: {e}")
            return error_response(request_id, TRANSACTION_RECEIPT_UNAVAILABLE)
        except Exception:
            logger.exception(f"{self.name} failed with request {request}")
            return error_response(request_id, INTERNAL_ERROR)

    def _response(self, request_id: RequestId, params: List[Any]) -> Dict[str, Any]:
        raise NotImplementedError()

    def _params(self, request: Dict[str, Any]) -> List[Any]:
        params = request.get("params")
        if params is None:
            return []
        if not isinstance(params, list):
            raise InvalidParamsError(f"params must be a list, got {params}")
        return params

    @staticmethod
    def required_parameter(params: List[Any], index: int) -> Any:
        if len(params) <= index:
            raise InvalidParamsError(f"missing required parameter at index {index}")
        return params[index]
