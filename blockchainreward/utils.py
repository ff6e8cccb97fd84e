# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


import logging
from typing import Optional, Dict, List, Generator, Union, Any

from blockchainreward.misc.retriable_value_error import RetriableValueError

logger = logging.getLogger(__name__)


def hex_to_dec(
    hex_string: Optional[str], ignore_error=True
) -> Optional[Union[str, int]]:
    if hex_string is None:
        return None
    try:
        return int(hex_string, 16)
    except ValueError:
        msg = f"Not a hex string '{hex_string}'"
        if ignore_error is False:
            raise ValueError(msg)
        else:
            logging.warning(msg)
        return hex_string


def rpc_response_batch_to_results(
    response: Union[Dict, List[Dict]],
    allow_null: bool = False,
) -> Generator[Any, None, None]:
    if isinstance(response, dict):
        response = [response]

    # batch responses may come back in any order
    for response_item in sorted(response, key=_response_sort_key):
        yield rpc_response_to_result(response_item, allow_null)


def _response_sort_key(response: Dict):
    id = response.get("id")
    return (0, id, "") if isinstance(id, int) else (1, 0, str(id))


def rpc_response_to_result(response: Dict, allow_null: bool = False) -> Any:
    result = response.get("result")
    error = response.get("error")

    if result is None:
        # a null result without error is how the node says "not found"
        if error is None and allow_null is True:
            return None

        error_message = "result is None in response {}".format(response)
        is_retriable = False
        if error is None:
            error_message = error_message + " Make sure the full node is synchronized."
            # When nodes are behind a load balancer,
            # it makes sense to retry the request in hopes it will go to other, synced node
            is_retriable = True
        elif is_retriable_error(error.get("code")):
            is_retriable = True

        if is_retriable:
            raise RetriableValueError(error_message)
        else:
            raise ValueError(error_message)

    return result


def rpc_error_message(response: Dict) -> Optional[str]:
    error = response.get("error")
    if error is None:
        return None
    return str(error.get("message", ""))


def is_retriable_error(error_code):
    if error_code is None:
        return False

    if not isinstance(error_code, int):
        return False

    # https://www.jsonrpc.org/specification#error_object
    if error_code == -32603 or (-32000 >= error_code >= -32099):
        return True

    return False
