""" Defines the basic class for making HTTP requests to the B2 service. """
# Meta imports
from __future__ import annotations
from typing import TYPE_CHECKING
# Built-in imports
from logging import getLogger
# Third-party imports
from requests import get as _http_get
from requests import post as _http_post
from requests.exceptions import InvalidSchema
# Project imports
from blazeclient import __project__
from blazeclient import __version__
from blazeclient.classifier import DECODE_ERRORS
from blazeclient.classifier import converted_errors
from blazeclient.classifier import from_decode_error
from blazeclient.classifier import from_http_response
from blazeclient.constants import DEFAULT_TIMEOUT
from blazeclient.exceptions import DecodeFailure
from blazeclient.exceptions import SchemaError
from blazeclient.utils import is_error_status
from blazeclient.utils import is_https
from blazeclient.utils import json_decode
from blazeclient.utils import python_version_string
from blazeclient.utils import read_body_once

if TYPE_CHECKING:
    # pylint: disable = ungrouped-imports
    from requests.models import Response
    from typing import Callable
    from typing import Dict
    from typing import Optional
    from blazeclient.meta import Json


logger = getLogger(__name__)


class Http:
    """
    Class for making HTTP requests using default configuration settings, such as timeout.
    Every failure is raised as a :class:`~blazeclient.exceptions.ClientError`.

    :ivar timeout: The default timeout, in seconds, for the HTTP requests.
    :ivar require_https: True to refuse plain-http URLs. The B2 API only accepts https.
    :ivar _auth_token: The B2 authorization token sent in the Authorization header, if any.
    :ivar _useragent: The User-Agent header sent in HTTP requests.
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(self, timeout:float=DEFAULT_TIMEOUT, auth_token:Optional[str]=None,
                 user_agent:Optional[str]=None, require_https:bool=True):
        self.timeout = timeout  # in seconds
        self.require_https = require_https
        self._auth_token = auth_token
        self._useragent = user_agent or \
            f'{__project__}/{__version__}+python/{python_version_string()}'

    @property
    def auth_token(self) -> Optional[str]:
        return self._auth_token

    @property
    def user_agent(self) -> str:
        return self._useragent

    def set_auth_token(self, auth_token:Optional[str]):
        """ Sets the token sent in the Authorization header. Set to None to stop sending it. """
        self._auth_token = auth_token

    def set_user_agent(self, user_agent:str):
        """ Sets the user agent for the requests. A default user agent is set at initialization. """
        self._useragent = user_agent

    def headers(self) -> Dict[str, str]:
        """
        Gets the default header dict. B2 expects the bare token in the Authorization header.

        :returns: A dict with the 'User-Agent' header and, if a token is set, 'Authorization'.
        """
        headers = {'User-Agent': self._useragent}
        if self._auth_token:
            headers['Authorization'] = self._auth_token
        return headers

    def _check_url(self, url:str):
        """
        :raises InvalidSchema: If https is required and the url does not use it.
        """
        if self.require_https and not is_https(url):
            raise InvalidSchema(f'The B2 API requires https, refusing to request {url!r}')

    def _do_request(self, method:Callable, url:str, *args, **kwargs) -> Response:
        """
        Makes an arbitrary HTTP request and checks for errors.

        :raises TransportFailure: If the request could not be sent or no response was received.
        :raises IOFailure: If the request or response body could not be transferred.
        :raises ServiceFailure: If the service returned an error status and error body.
        :raises DecodeFailure: If the service returned an error status and an undecodable body.
        """
        kwargs.setdefault('timeout', self.timeout)
        kwargs['headers'] = {**self.headers(), **(kwargs.get('headers') or {})}
        with converted_errors():
            self._check_url(url)
            logger.debug('Requesting %s', url)
            response = method(url, *args, **kwargs)
        if is_error_status(response.status_code):
            raise from_http_response(response)
        return response

    def get(self, url:str, *args, **kwargs) -> Response:
        """
        Makes a HTTP GET request and checks for errors.

        :raises ClientError: If the request failed, see :func:`Http._do_request`.
        """
        return self._do_request(_http_get, url, *args, **kwargs)

    def post(self, url:str, *args, **kwargs) -> Response:
        """
        Makes a HTTP POST request and checks for errors.

        :raises ClientError: If the request failed, see :func:`Http._do_request`.
        """
        return self._do_request(_http_post, url, *args, **kwargs)

    def get_json(self, url:str, *args, **kwargs) -> Json:
        """ Same as :func:`Http.get`, returning the decoded JSON object of the response. """
        return self.decode(self.get(url, *args, **kwargs))

    def post_json(self, url:str, *args, **kwargs) -> Json:
        """ Same as :func:`Http.post`, returning the decoded JSON object of the response. """
        return self.decode(self.post(url, *args, **kwargs))

    @staticmethod
    def decode(response:Response) -> Json:
        """
        Decodes a successful response body, reading it once.

        :raises DecodeFailure: If the body is not a JSON object.
        :raises IOFailure: If the body could not be read.
        :raises InternalFailure: If the body was already consumed.
        """
        with converted_errors():
            raw = read_body_once(response)
        try:
            data = json_decode(raw)
        except DECODE_ERRORS as error:
            raise from_decode_error(error) from error
        if not isinstance(data, dict):
            raise DecodeFailure(SchemaError(f'expected a JSON object, got {type(data).__name__}'))
        return data
