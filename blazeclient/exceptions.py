"""
Module containing all errors raised by the library.

Every failure of the client surface is a :class:`ClientError`, and every :class:`ClientError` is
exactly one of the five variants defined here. Use ``error.kind`` to branch on the variant, or
catch the variant class directly.
"""
# Meta imports
from __future__ import annotations
from typing import TYPE_CHECKING
# Project imports
from blazeclient.enums import ErrorKind

if TYPE_CHECKING:
    # pylint: disable = ungrouped-imports
    from blazeclient.models import ServiceErrorBody


class BlazeError(Exception):
    """ Base class for all blazeclient exceptions. """


class SchemaError(ValueError):
    """ Exception raised when a JSON document does not have the expected structure. """


class ClientError(BlazeError):
    """
    Base class of the closed family of client errors. Not instantiated directly.

    :cvar kind: The :class:`~blazeclient.enums.ErrorKind` tag of the variant.
    """

    kind: ErrorKind

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}:{self.kind.value}> {self}'


class _WrappingError(ClientError):
    """ A client error whose message is delegated to the exception it wraps. """

    def __init__(self, cause:BaseException):
        super().__init__(cause)
        self._cause = cause

    def __str__(self) -> str:
        # Always a single line, even for multi-line causes
        return ' '.join(str(self._cause).split()) or self._cause.__class__.__name__

    @property
    def cause(self) -> BaseException:
        """ The original exception, preserved as-is. """
        return self._cause


class TransportFailure(_WrappingError):
    """ Exception raised when no response could be obtained, including malformed URLs. """

    kind = ErrorKind.transport


class IOFailure(_WrappingError):
    """ Exception raised when reading or writing a request or response body fails. """

    kind = ErrorKind.io


class DecodeFailure(_WrappingError):
    """ Exception raised when a body expected to be JSON fails to decode. """

    kind = ErrorKind.decode


class ServiceFailure(ClientError):
    """
    Exception raised when the B2 service returns an error status with a decodable error body.

    :ivar status: The HTTP status observed by the transport. Authoritative over ``body.status``.
    :ivar body: The decoded error body.
    """

    kind = ErrorKind.service

    def __init__(self, status:int, body:ServiceErrorBody):
        super().__init__(status, body)
        self._status = status
        self._body = body

    def __str__(self) -> str:
        return f'{self._status} ({self._body.code}): {self._body.message}'

    @property
    def status(self) -> int:
        return self._status

    @property
    def body(self) -> ServiceErrorBody:
        return self._body

    @property
    def code(self) -> str:
        """ Shortcut for the machine-readable error code of the body. """
        return self._body.code


class InternalFailure(ClientError):
    """ Exception raised for conditions internal to the library. """

    kind = ErrorKind.internal

    def __init__(self, message:str):
        super().__init__(message)
        self._message = message

    def __str__(self) -> str:
        return self._message

    @property
    def message(self) -> str:
        return self._message


# Every concrete variant, one per ErrorKind
VARIANTS = (TransportFailure, IOFailure, DecodeFailure, ServiceFailure, InternalFailure,)
