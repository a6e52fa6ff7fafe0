""" Module with the data models decoded from BackBlaze B2 responses. """
# Meta imports
from __future__ import annotations
from typing import TYPE_CHECKING
# Built-in imports
from dataclasses import dataclass
# Project imports
from blazeclient.exceptions import SchemaError
from blazeclient.utils import json_decode

if TYPE_CHECKING:
    # pylint: disable = ungrouped-imports
    from typing import Any
    from typing import Union
    from blazeclient.meta import Json


def _required(data:Json, name:str, kind:type) -> Any:
    """
    Gets a required field from a decoded JSON object.

    :raises SchemaError: If the field is missing or is not of the expected type.
    """
    if name not in data:
        raise SchemaError(f'missing field `{name}`')
    value = data[name]
    # bool is a subclass of int, but true/false is not a valid status
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SchemaError(
            f'invalid type for field `{name}`: expected {kind.__name__}, '
            f'got {type(value).__name__}')
    return value


@dataclass(frozen=True)
class ServiceErrorBody:
    """
    The JSON object returned by the B2 service when a call fails.
    `Reference <https://www.backblaze.com/b2/docs/calling.html#error_handling>`_.

    :ivar code: Short machine-readable error category, such as ``bad_request``.
    :ivar message: Human-readable description of the error.
    :ivar status: The HTTP status as reported by the server. Informational only.
    """

    code: str
    message: str
    status: int

    @classmethod
    def from_json(cls, data:Any) -> ServiceErrorBody:
        """
        Builds the model from an already-decoded JSON document. Unknown keys are ignored.

        :raises SchemaError: If the document is not an object, a field is missing or mistyped, or
                             the status is negative.
        """
        if not isinstance(data, dict):
            raise SchemaError(f'expected a JSON object, got {type(data).__name__}')
        status = _required(data, 'status', int)
        if status < 0:
            raise SchemaError(f'invalid value for field `status`: {status} is negative')
        return cls(code=_required(data, 'code', str),
                   message=_required(data, 'message', str),
                   status=status)

    @classmethod
    def decode(cls, raw:Union[bytes, str]) -> ServiceErrorBody:
        """
        Decodes a raw response body.

        :raises ValueError: If the body is not valid JSON (JSONDecodeError, UnicodeDecodeError)
                            or does not match the model (SchemaError).
        """
        return cls.from_json(json_decode(raw))
