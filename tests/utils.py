""" Module with helpful functions to make testing easier. """
# Built-in imports
from enum import Enum
from json import loads as json_loads
from pathlib import Path
from unittest.mock import MagicMock
from unittest.mock import PropertyMock
from typing import Tuple
from typing import Union
# Project imports
from blazeclient.meta import Json


RESPONSES_PATH = Path(__file__).parent / 'b2_responses'


class Response:
    """
    Class for simulating the body returned by the BackBlazeB2 service.

    :ivar string: The raw json-encoded response.
    :ivar dict: The response parsed as a python dict object.
    """

    def __init__(self, path:Path):
        with open(path, 'r', encoding='utf8') as file_handle:
            self.string = file_handle.read().strip()
            self.dict = json_loads(self.string)


class Responses(Enum):
    """ Enum listing the mock bodies returned by the BackBlazeB2 service. """

    bad_auth_token = Response(RESPONSES_PATH / 'bad_auth_token.json')
    bad_request = Response(RESPONSES_PATH / 'bad_request.json')
    list_buckets = Response(RESPONSES_PATH / 'list_buckets.json')
    missing_fields = Response(RESPONSES_PATH / 'missing_fields.json')
    stale_status = Response(RESPONSES_PATH / 'stale_status.json')

    @property
    def json(self) -> Json:
        return self.value.dict

    @property
    def bytes(self) -> bytes:
        return self.value.string.encode('utf8')


def mock_response(status_code:int, body:Union[bytes, str, Exception]=b''
                  ) -> Tuple[MagicMock, PropertyMock]:
    """
    Creates a mock of requests.Response whose ``content`` property is tracked.

    :param status_code: The HTTP status of the response.
    :param body: The raw body, or an exception to be raised when the body is read.
    :returns: A 2-tuple containing (response mock, content property mock).
    """
    response = MagicMock()
    response.status_code = status_code
    if isinstance(body, str):
        body = body.encode('utf8')
    content = PropertyMock(side_effect=body) if isinstance(body, Exception) \
        else PropertyMock(return_value=body)
    type(response).content = content
    return response, content
