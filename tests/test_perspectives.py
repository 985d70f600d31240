import unittest
from unittest.mock import patch, MagicMock

import requests
from pydantic import ValidationError

from cloudhealth_client.api.client import CloudHealthClient
from cloudhealth_client.api.errors import (
    AuthenticationError,
    ConflictError,
    ErrorKind,
    PerspectiveNotFoundError,
    UnexpectedStatusError,
    UnparseableResponseError,
)
from cloudhealth_client.models.perspective import Perspective, PerspectiveMap, PerspectiveStatus, Schema


def make_response(status_code, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = text
    return response


class TestPerspectiveService(unittest.TestCase):
    """Test case for perspective operations."""

    def setUp(self):
        self.base_url = "https://chapi.example.com/"
        self.client = CloudHealthClient(api_key="apiKey", base_url=self.base_url)
        self.service = self.client.perspectives
        self.perspective_id = "1234567839263"
        self.perspective = Perspective(schema=Schema(name="test", include_in_reports="true"))

    @patch('cloudhealth_client.api.client.requests.request')
    def test_get_perspective_ok(self, mock_request):
        mock_request.return_value = make_response(200, self.perspective.to_payload())

        result = self.service.get(self.perspective_id)

        self.assertEqual(result, self.perspective)
        call_args = mock_request.call_args
        self.assertEqual(call_args[1]['method'], 'GET')
        self.assertEqual(call_args[1]['url'], f"{self.base_url}perspective_schemas/{self.perspective_id}")

    @patch('cloudhealth_client.api.client.requests.request')
    def test_get_perspective_doesnt_exist(self, mock_request):
        # Body content doesn't matter
        mock_request.return_value = make_response(404, self.perspective.to_payload())

        with self.assertRaises(PerspectiveNotFoundError) as ctx:
            self.service.get(self.perspective_id)
        self.assertIs(ctx.exception.kind, ErrorKind.PERSPECTIVE_NOT_FOUND)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_get_perspective_unauthorized(self, mock_request):
        mock_request.return_value = make_response(401, {"error": "Bad API key"})

        with self.assertRaises(AuthenticationError):
            self.service.get(self.perspective_id)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_get_perspective_unexpected_status(self, mock_request):
        mock_request.return_value = make_response(500, text="oops")

        with self.assertRaises(UnexpectedStatusError) as ctx:
            self.service.get(self.perspective_id)
        self.assertEqual(ctx.exception.status_code, 500)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_list_perspectives_ok(self, mock_request):
        payload = {
            self.perspective_id: {"name": "test", "active": True},
            "206158430239": {"name": "other", "active": False},
        }
        mock_request.return_value = make_response(200, payload)

        result = self.service.list()

        expected = PerspectiveMap({
            self.perspective_id: PerspectiveStatus(name="test", active=True),
            "206158430239": PerspectiveStatus(name="other", active=False),
        })
        self.assertEqual(result, expected)
        self.assertEqual(len(result), 2)
        self.assertTrue(result[self.perspective_id].active)
        call_args = mock_request.call_args
        self.assertEqual(call_args[1]['url'], f"{self.base_url}perspective_schemas")
        self.assertEqual(call_args[1]['params'], {"api_key": "apiKey"})
        mock_request.assert_called_once()

    @patch('cloudhealth_client.api.client.requests.request')
    def test_list_perspectives_not_found_is_unexpected(self, mock_request):
        mock_request.return_value = make_response(404)

        with self.assertRaises(UnexpectedStatusError) as ctx:
            self.service.list()
        self.assertNotIsInstance(ctx.exception, PerspectiveNotFoundError)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_list_perspectives_unauthorized(self, mock_request):
        mock_request.return_value = make_response(401)

        with self.assertRaises(AuthenticationError):
            self.service.list()

    @patch('cloudhealth_client.api.client.requests.request')
    def test_create_perspective_ok(self, mock_request):
        mock_request.return_value = make_response(201, text=f"Perspective {self.perspective_id} created\n")

        returned_id = self.service.create(self.perspective)

        self.assertEqual(returned_id, self.perspective_id)
        call_args = mock_request.call_args
        self.assertEqual(call_args[1]['method'], 'POST')
        self.assertEqual(call_args[1]['url'], f"{self.base_url}perspective_schemas/")
        self.assertEqual(call_args[1]['headers']['Content-Type'], 'application/json')
        self.assertEqual(call_args[1]['json']['schema']['name'], "test")

    @patch('cloudhealth_client.api.client.requests.request')
    def test_create_perspective_accepts_200(self, mock_request):
        mock_request.return_value = make_response(200, text=f"Perspective {self.perspective_id} created")

        self.assertEqual(self.service.create(self.perspective), self.perspective_id)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_create_perspective_unparseable_response(self, mock_request):
        mock_request.return_value = make_response(201, text="Perspective created\n")

        with self.assertRaises(UnparseableResponseError) as ctx:
            self.service.create(self.perspective)
        self.assertIs(ctx.exception.kind, ErrorKind.UNPARSEABLE_RESPONSE)
        self.assertEqual(ctx.exception.status_code, 201)
        self.assertEqual(ctx.exception.body, "Perspective created\n")

    @patch('cloudhealth_client.api.client.requests.request')
    def test_create_perspective_name_conflict(self, mock_request):
        mock_request.return_value = make_response(422, text="")

        with self.assertRaises(ConflictError) as ctx:
            self.service.create(self.perspective)
        self.assertEqual(ctx.exception.name, "test")
        self.assertIn("`test`", str(ctx.exception))

    @patch('cloudhealth_client.api.client.requests.request')
    def test_create_perspective_unauthorized(self, mock_request):
        mock_request.return_value = make_response(401)

        with self.assertRaises(AuthenticationError):
            self.service.create(self.perspective)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_update_perspective_trusts_server_response(self, mock_request):
        submitted = Perspective(schema=Schema(name="test", include_in_reports="true"))
        stored = Perspective(schema=Schema(name="test", include_in_reports="false"))
        mock_request.return_value = make_response(200, stored.to_payload())

        result = self.service.update(self.perspective_id, submitted)

        self.assertEqual(result.schema_.name, "test")
        self.assertEqual(result.schema_.include_in_reports, "false")
        call_args = mock_request.call_args
        self.assertEqual(call_args[1]['method'], 'PUT')
        self.assertEqual(call_args[1]['url'], f"{self.base_url}perspective_schemas/{self.perspective_id}")
        self.assertEqual(call_args[1]['json']['schema']['include_in_reports'], "true")

    @patch('cloudhealth_client.api.client.requests.request')
    def test_update_perspective_doesnt_exist(self, mock_request):
        mock_request.return_value = make_response(404)

        with self.assertRaises(PerspectiveNotFoundError):
            self.service.update(self.perspective_id, self.perspective)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_update_perspective_name_conflict(self, mock_request):
        mock_request.return_value = make_response(422)

        with self.assertRaises(ConflictError) as ctx:
            self.service.update(self.perspective_id, self.perspective)
        self.assertEqual(ctx.exception.name, "test")

    @patch('cloudhealth_client.api.client.requests.request')
    def test_delete_perspective_ok(self, mock_request):
        for status_code in (200, 204):
            mock_request.reset_mock()
            mock_request.return_value = make_response(status_code)

            self.assertIsNone(self.service.delete(self.perspective_id))

            call_args = mock_request.call_args
            self.assertEqual(call_args[1]['method'], 'DELETE')
            self.assertEqual(call_args[1]['url'], f"{self.base_url}perspective_schemas/{self.perspective_id}")

    @patch('cloudhealth_client.api.client.requests.request')
    def test_delete_perspective_doesnt_exist(self, mock_request):
        mock_request.return_value = make_response(404)

        with self.assertRaises(PerspectiveNotFoundError):
            self.service.delete(self.perspective_id)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_delete_perspective_unauthorized(self, mock_request):
        mock_request.return_value = make_response(401)

        with self.assertRaises(AuthenticationError):
            self.service.delete(self.perspective_id)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_get_perspective_invalid_json(self, mock_request):
        response = make_response(200, text="not json")
        decode_error = requests.exceptions.JSONDecodeError("Expecting value", "not json", 0)
        response.json.side_effect = decode_error
        mock_request.return_value = response

        with self.assertRaises(requests.exceptions.JSONDecodeError) as ctx:
            self.service.get(self.perspective_id)
        self.assertIs(ctx.exception, decode_error)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_list_perspectives_invalid_json(self, mock_request):
        response = make_response(200, text="not json")
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "not json", 0)
        mock_request.return_value = response

        with self.assertRaises(requests.exceptions.JSONDecodeError):
            self.service.list()

    @patch('cloudhealth_client.api.client.requests.request')
    def test_get_perspective_wrongly_shaped_body(self, mock_request):
        mock_request.return_value = make_response(200, {"schema": "x"})

        with self.assertRaises(ValidationError):
            self.service.get(self.perspective_id)

    @patch('cloudhealth_client.api.client.requests.request')
    def test_list_perspectives_wrongly_shaped_body(self, mock_request):
        mock_request.return_value = make_response(200, {self.perspective_id: "x"})

        with self.assertRaises(ValidationError):
            self.service.list()


if __name__ == "__main__":
    unittest.main()
