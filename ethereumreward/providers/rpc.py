# The MIT License (MIT)
#
# Copyright (c) 2016 Piper Merriam
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


import json
from typing import Any, Dict, List, Union

from web3 import HTTPProvider
from web3._utils.request import make_post_request

BatchResponse = Union[Dict[str, Any], List[Dict[str, Any]]]


class BatchHTTPProvider(HTTPProvider):
    """HTTPProvider that posts a JSON-RPC call or a batch of calls as one request.

    web3.py has no batch support, see https://github.com/ethereum/web3.py/issues/832
    """

    def make_batch_request(self, text: str) -> BatchResponse:
        request = json.loads(text)
        methods = request_methods(request)
        self.logger.debug(
            f"Making request HTTP. URI: {self.endpoint_uri}, "
            f"{len(methods)} calls: {sorted(set(methods))}"
        )
        raw_response = make_post_request(
            self.endpoint_uri, text.encode("utf-8"), **self.get_request_kwargs()
        )
        response = self.decode_rpc_response(raw_response)

        if isinstance(request, list) and isinstance(response, dict):
            # the node rejected the batch as a whole, e.g. over its batch limit
            raise ValueError(
                f"batch of {len(request)} calls rejected by {self.endpoint_uri}: "
                f"{response.get('error')}"
            )
        if not isinstance(response, (dict, list)):
            raise ValueError(
                f"unexpected JSON-RPC response from {self.endpoint_uri}: {response}"
            )
        return response


def request_methods(request: BatchResponse) -> List[str]:
    if isinstance(request, list):
        return [r.get("method") for r in request]
    return [request.get("method")]
