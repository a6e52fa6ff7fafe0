""" Module with meta values, such as custom type annotation classes. """
from typing import Any
from typing import Dict


Json = Dict[str, Any]
