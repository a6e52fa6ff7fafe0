""" Utility functions to be reused throughout the application. """
# Meta imports
from __future__ import annotations
from typing import TYPE_CHECKING
# Built-in imports
from json import loads as json_loads
from sys import version_info as version
from urllib.parse import urlsplit
from weakref import WeakSet
# Project imports
from blazeclient.constants import ERROR_STATUS_MIN
from blazeclient.constants import HTTPS_SCHEME
from blazeclient.exceptions import InternalFailure

if TYPE_CHECKING:
    # pylint: disable = ungrouped-imports
    from requests.models import Response
    from typing import Any
    from typing import Union


def is_error_status(status_code:int) -> bool:
    """ Checks if an HTTP status code signals a failed request. """
    return status_code >= ERROR_STATUS_MIN


def is_https(url:str) -> bool:
    """ Checks if the URL uses the https scheme (case-insensitive). """
    return urlsplit(url).scheme.lower() == HTTPS_SCHEME


def json_decode(raw:Union[bytes, str]) -> Any:
    """
    Decodes a JSON document. Bytes are decoded as UTF-8/16/32, as detected by the json module.

    :raises ValueError: If the document is not valid JSON or not valid text.
    """
    return json_loads(raw)


def python_version_string() -> str:
    """ Gets the python version in the format X.Y.Z. """
    return f'{version.major}.{version.minor}.{version.micro}'


# Responses whose body was handed out, the marker lives as long as the response
_consumed_responses = WeakSet()


def read_body_once(response:Response) -> bytes:
    """
    Reads the whole body of a response. Transport bodies are single-read streams, so the body of
    a given response is handed out exactly once and any later attempt fails fast.

    :raises InternalFailure: If the body was already read, here or by draining its stream.
    :raises OSError: If the transport fails while reading the body.
    """
    if response in _consumed_responses:
        raise InternalFailure('Response body was already consumed')
    _consumed_responses.add(response)
    try:
        return response.content
    except RuntimeError as error:
        # requests raises a bare RuntimeError when the stream was drained through iter_content()
        raise InternalFailure(f'Response body was already consumed ({error})') from error


def is_consumed(response:Response) -> bool:
    """ Checks if the body of the response was already read by :func:`read_body_once`. """
    return response in _consumed_responses
