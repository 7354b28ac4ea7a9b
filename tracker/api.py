import requests

from tracker import config


class FetchError(Exception):
    """Base class for failures while fetching a remote JSON resource."""

    def __init__(self, url, message):
        super().__init__(f"{url}: {message}")
        self.url = url


class TransportError(FetchError):
    """The resource could not be reached at all."""

    def __init__(self, url, cause):
        super().__init__(url, f"transport error: {cause}")
        self.cause = cause


class StatusError(FetchError):
    """The server answered with a non-success status."""

    def __init__(self, url, status, body):
        super().__init__(url, f"http error: {status}")
        self.status = status
        self.body = body


class DecodeError(FetchError):
    """The response body was not the JSON we expected."""

    def __init__(self, url, cause):
        super().__init__(url, f"decode error: {cause}")
        self.cause = cause


def fetch_json(url):
    """
    GET a JSON resource and return the decoded payload.
    Raises StatusError for anything but 200, TransportError when the request
    itself fails, and DecodeError when the body is not valid JSON.
    """
    try:
        resp = requests.get(url, headers=config.REQUEST_HEADERS, timeout=config.FETCH_TIMEOUT)
    except requests.exceptions.RequestException as e:
        raise TransportError(url, e) from e

    if resp.status_code != 200:
        raise StatusError(url, resp.status_code, resp.text)

    try:
        return resp.json()
    except ValueError as e:
        raise DecodeError(url, e) from e
