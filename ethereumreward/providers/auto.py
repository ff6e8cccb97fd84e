from urllib.parse import urlparse

from blockchainreward import env
from blockchainreward.misc.requests import make_retryable_session
from ethereumreward.providers.rpc import BatchHTTPProvider

DEFAULT_TIMEOUT = env.REQUEST_TIMEOUT_SECONDS


def get_provider_from_uri(uri_string, timeout=DEFAULT_TIMEOUT) -> BatchHTTPProvider:
    uri = urlparse(uri_string)
    if uri.scheme == "http" or uri.scheme == "https":
        # requests.Session is not thread safe, don't use across threads.
        request_kwargs = {"timeout": timeout}
        return BatchHTTPProvider(
            uri_string,
            request_kwargs=request_kwargs,
            session=make_retryable_session(timeout=timeout),
        )
    else:
        raise ValueError("Unknown uri scheme {}".format(uri_string))
