""" Tests the blazeclient.models package. """
# Built-in imports
from dataclasses import FrozenInstanceError
from json import JSONDecodeError
from unittest import TestCase
# Project imports
from blazeclient.exceptions import SchemaError
from blazeclient.models import ServiceErrorBody
from tests.utils import Responses


class ServiceErrorBodyTests(TestCase):

    # region ServiceErrorBody.from_json() tests
    def test_from_json__valid_object__success(self):
        """ All three fields are read from the object. """
        body = ServiceErrorBody.from_json(Responses.bad_auth_token.json)
        self.assertEqual(body.code, 'bad_auth_token')
        self.assertEqual(body.message,
                         'Invalid authorization token. Server could not verify token.')
        self.assertEqual(body.status, 401)

    def test_from_json__extra_keys__ignored(self):
        data = dict(Responses.bad_request.json, retryAfter=10)
        self.assertEqual(ServiceErrorBody.from_json(data),
                         ServiceErrorBody('bad_request', 'invalid field', 400))

    def test_from_json__missing_field__raises_schema_error(self):
        """ Every field is required. """
        for field in ('code', 'message', 'status'):
            data = dict(Responses.bad_request.json)
            del data[field]
            with self.assertRaisesRegex(SchemaError, field):
                ServiceErrorBody.from_json(data)

    def test_from_json__wrong_type__raises_schema_error(self):
        """ Fields must have the JSON type of the model. """
        invalid = [
            {'code': 1, 'message': 'm', 'status': 400},
            {'code': 'c', 'message': None, 'status': 400},
            {'code': 'c', 'message': 'm', 'status': '400'},
            {'code': 'c', 'message': 'm', 'status': True},
        ]
        for data in invalid:
            self.assertRaises(SchemaError, ServiceErrorBody.from_json, data)

    def test_from_json__negative_status__raises_schema_error(self):
        """ HTTP statuses are never negative. """
        data = dict(Responses.bad_request.json, status=-400)
        with self.assertRaisesRegex(SchemaError, 'status'):
            ServiceErrorBody.from_json(data)

    def test_from_json__zero_status__accepted(self):
        data = dict(Responses.bad_request.json, status=0)
        self.assertEqual(ServiceErrorBody.from_json(data).status, 0)

    def test_from_json__not_an_object__raises_schema_error(self):
        for data in ([], 'bad_request', 400, None):
            self.assertRaises(SchemaError, ServiceErrorBody.from_json, data)
    # endregion

    # region ServiceErrorBody.decode() tests
    def test_decode__bytes__success(self):
        body = ServiceErrorBody.decode(Responses.bad_request.bytes)
        self.assertEqual(body, ServiceErrorBody('bad_request', 'invalid field', 400))

    def test_decode__invalid_json__raises_value_error(self):
        """ Malformed documents raise the json module's own error. """
        self.assertRaises(JSONDecodeError, ServiceErrorBody.decode, b'<html>Bad Gateway</html>')
        self.assertRaises(ValueError, ServiceErrorBody.decode, b'')

    def test_decode__missing_fields__raises_schema_error(self):
        self.assertRaises(SchemaError, ServiceErrorBody.decode, Responses.missing_fields.bytes)
    # endregion

    def test_body__is_immutable(self):
        body = ServiceErrorBody('bad_request', 'invalid field', 400)
        with self.assertRaises(FrozenInstanceError):
            body.code = 'other'
