import unittest
from collections import OrderedDict
from rest_framework import status
from apps.api.utils import error_payload, error_response, status_for_code


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "Product not found", {"id": "1"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": "1"})

    def test_unauthorized_maps_to_401(self):
        resp = error_response("unauthorized", "Old password does not match")
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(resp.data["error"]["code"], "UNAUTHORIZED")
        self.assertNotIn("details", resp.data["error"])

    def test_unknown_code_defaults_to_bad_request(self):
        self.assertEqual(status_for_code("SOMETHING_ELSE"), status.HTTP_400_BAD_REQUEST)

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"]["message"], "oops")

    def test_error_payload_matches_response_body(self):
        body, status_code = error_payload("not_found", "Resource not found")
        self.assertEqual(status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(
            body,
            {"error": {"code": "NOT_FOUND", "message": "Resource not found", "status": 404}},
        )
        self.assertEqual(error_response("not_found", "Resource not found").data, body)

    def test_mapping_details_become_plain_dict(self):
        resp = error_response(
            "VALIDATION_ERROR", "Validation failed", OrderedDict(price=["bad"])
        )
        self.assertEqual(type(resp.data["error"]["details"]), dict)
        self.assertEqual(resp.data["error"]["details"], {"price": ["bad"]})

    def test_blank_message_rejected(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "   ")

    def test_out_of_range_status_rejected(self):
        with self.assertRaises(ValueError):
            error_payload("NOT_FOUND", "missing", http_status=700)
