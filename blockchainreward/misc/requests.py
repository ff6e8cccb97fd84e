from requests import Session
from requests.sessions import HTTPAdapter
from urllib3.util.retry import Retry

from blockchainreward import env

DEFAULT_TIMEOUT = env.REQUEST_TIMEOUT_SECONDS


# copy from https://findwork.dev/blog/advanced-usage-python-requests-timeouts-retries-hooks/
class TimeoutHTTPAdapter(HTTPAdapter):
    def __init__(self, *args, **kwargs):
        self.timeout = DEFAULT_TIMEOUT
        if "timeout" in kwargs:
            self.timeout = kwargs["timeout"]
            del kwargs["timeout"]
        super().__init__(*args, **kwargs)

    def send(self, request, **kwargs):
        timeout = kwargs.get("timeout")
        if timeout is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def make_retryable_session(
    pool_connections=10,
    pool_maxsize=10,
    retry_total=env.RPC_RETRY_TOTAL,
    timeout=DEFAULT_TIMEOUT,
) -> Session:
    # ref: https://stackoverflow.com/a/35504626/2298986
    session = Session()

    # backoff 1, 2, 4, 8, ... seconds
    retries = Retry(
        total=retry_total,
        backoff_factor=1,
        status_forcelist=[500, 502, 503, 504],
        allowed_methods=["POST", "GET"],
        respect_retry_after_header=False,
    )

    # JSONRPC is in POST request
    # By default the `method_whitelist` includes all HTTP methods except POST
    adapter = TimeoutHTTPAdapter(
        pool_connections, pool_maxsize, max_retries=retries, timeout=timeout
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
