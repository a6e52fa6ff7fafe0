""" Initialization module for the backblaze client error model. """
__author__ = 'dreiq'
__copyright__ = 'Copyright 2020 dreiq'
__description__ = 'Error model and request wrapper for the Backblaze B2 API'
__email__ = 'admin@vgjounal.net'
__license__ = 'MIT'
__maintainer__ = __author__
__project__ = 'blazeclient'
__status__ = 'Development'  # "Prototype", "Development", "Production"
__url__ = 'https://github.com/vgjournal/blazeclient'
__version__ = '2020.11.02.000001'

from logging import NullHandler
from logging import getLogger

getLogger(__name__).addHandler(NullHandler())

# pylint: disable = wrong-import-position
from .classifier import classify
from .classifier import converted_errors
from .classifier import from_http_response
from .enums import ErrorKind
from .exceptions import BlazeError
from .exceptions import ClientError
from .exceptions import DecodeFailure
from .exceptions import InternalFailure
from .exceptions import IOFailure
from .exceptions import ServiceFailure
from .exceptions import TransportFailure
from .http import Http
from .models import ServiceErrorBody
