"""
Conversion of raw failures into :class:`~blazeclient.exceptions.ClientError` values.

Every function here is a one-shot conversion that keeps the original exception as the ``cause``
of the wrapping error. Nothing is retried or recovered.
"""
# Meta imports
from __future__ import annotations
from typing import TYPE_CHECKING
# Built-in imports
from contextlib import contextmanager
from logging import getLogger
# Third-party imports
from requests.exceptions import ChunkedEncodingError
from requests.exceptions import ContentDecodingError
from requests.exceptions import InvalidSchema
from requests.exceptions import InvalidURL
from requests.exceptions import JSONDecodeError
from requests.exceptions import MissingSchema
from requests.exceptions import RequestException
from requests.exceptions import StreamConsumedError
from requests.exceptions import URLRequired
# Project imports
from blazeclient.exceptions import ClientError
from blazeclient.exceptions import DecodeFailure
from blazeclient.exceptions import InternalFailure
from blazeclient.exceptions import IOFailure
from blazeclient.exceptions import ServiceFailure
from blazeclient.exceptions import TransportFailure
from blazeclient.models import ServiceErrorBody
from blazeclient.utils import read_body_once

if TYPE_CHECKING:
    # pylint: disable = ungrouped-imports
    from requests.models import Response
    from typing import Iterator
    from typing import Union


logger = getLogger(__name__)

URL_ERRORS = (InvalidURL, InvalidSchema, MissingSchema, URLRequired,)
BODY_ERRORS = (ChunkedEncodingError, ContentDecodingError,)
# json.loads raises RecursionError on deeply nested documents
DECODE_ERRORS = (ValueError, RecursionError,)
# Exceptions converted by converted_errors(), anything else propagates untouched
CONVERTIBLE = (RequestException, OSError, ValueError,)


def from_transport_error(error:RequestException) -> TransportFailure:
    """ Wraps a connection, DNS, TLS or timeout failure. """
    return TransportFailure(error)


def from_uri_parse_error(error:ValueError) -> TransportFailure:
    """
    Wraps a malformed URL error. A request to a malformed URL can never be sent, so it is
    reported the same way as a connection failure.
    """
    return TransportFailure(error)


def from_io_error(error:OSError) -> IOFailure:
    """ Wraps a failure while reading or writing a request or response body. """
    return IOFailure(error)


def from_decode_error(error:Union[ValueError, RecursionError]) -> DecodeFailure:
    """ Wraps a JSON decoding failure. """
    return DecodeFailure(error)


def from_http_response(response:Response) -> ClientError:
    """
    Builds the error for a response the caller already identified as failed.
    The body is read exactly once, so it must not be read again afterwards.

    :param response: The failed response. Its status code is used as-is, even when the error body
                     reports a different status.
    :returns: A ServiceFailure if the body decodes as a B2 error object, a DecodeFailure if it
              does not (the original service error is lost in that case), an IOFailure if the
              body could not be read, or an InternalFailure if the body was already consumed.
    """
    status = response.status_code
    try:
        raw = read_body_once(response)
    except InternalFailure as failure:
        return failure
    except RequestException as error:
        return classify(error)
    except OSError as error:
        return from_io_error(error)
    try:
        body = ServiceErrorBody.decode(raw)
    except DECODE_ERRORS as error:
        logger.warning('Undecodable error body for HTTP %s response: %s', status, error)
        return from_decode_error(error)
    logger.debug('B2 service error %s (%s): %s', status, body.code, body.message)
    return ServiceFailure(status, body)


def classify(error:BaseException) -> ClientError:
    """
    Converts any exception raised by the transport or codec into its ClientError variant.
    Order matters: several requests exceptions are also ValueError or OSError subclasses.

    :param error: The exception to be classified.
    :returns: The matching ClientError. ClientErrors are returned unchanged, and exceptions of
              unknown origin become an InternalFailure.
    """
    if isinstance(error, ClientError):
        return error
    if isinstance(error, JSONDecodeError):
        classified = from_decode_error(error)
    elif isinstance(error, URL_ERRORS):
        classified = from_uri_parse_error(error)
    elif isinstance(error, BODY_ERRORS):
        classified = from_io_error(error)
    elif isinstance(error, StreamConsumedError):
        classified = InternalFailure(f'Response body was already consumed ({error})')
    elif isinstance(error, RequestException):
        classified = from_transport_error(error)
    elif isinstance(error, ValueError):
        classified = from_decode_error(error)
    elif isinstance(error, OSError):
        classified = from_io_error(error)
    else:
        classified = InternalFailure(f'Unexpected {error.__class__.__name__}: {error}')
    logger.debug('Classified %s as %s', error.__class__.__name__, classified.kind.value)
    return classified


@contextmanager
def converted_errors() -> Iterator[None]:
    """
    Context manager that re-raises transport, I/O and codec exceptions as ClientErrors, chained
    to the original exception.

    :example:

    >>> with converted_errors():
    >>>     response = requests.get(url)
    >>>     data = response.json()

    """
    try:
        yield
    except CONVERTIBLE as error:
        raise classify(error) from error
