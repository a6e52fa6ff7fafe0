""" Module with enums describing the failure modes of the B2 client. """
from enum import Enum


class ErrorKind(Enum):
    """
    Enum tagging each variant of :class:`~blazeclient.exceptions.ClientError`.

    :cvar transport: No response was obtained (connection, DNS, TLS, timeout or malformed URL).
    :cvar io: Reading or writing a request or response body failed.
    :cvar decode: A body expected to be JSON could not be decoded.
    :cvar service: The B2 service answered with an error status and a decodable error body.
    :cvar internal: A condition internal to the library itself.
    """

    transport = 'transport'
    io = 'io'  # pylint: disable = invalid-name
    decode = 'decode'
    service = 'service'
    internal = 'internal'
