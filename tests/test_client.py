"""
Unit tests for the gateway HTTP client.
"""
import requests

from gateway.codes import TRANSPORT_FAILURE

from .conftest import http_response


class TestSendRequest:
    def test_posts_json_with_timeout(self, client_with_session, session):
        session.post.return_value = http_response({"result": 100, "trackId": 555})

        client_with_session.send_request("https://gateway.example.test/v1/request", {"amount": 1000})

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "https://gateway.example.test/v1/request"
        assert kwargs["json"] == {"amount": 1000}
        assert kwargs["timeout"] == 30

    def test_decodes_initiation_reply(self, client_with_session, session):
        session.post.return_value = http_response({"result": 100, "trackId": 15966442233311})

        response = client_with_session.send_request("https://x", {})

        assert response.ok
        assert response.result == 100
        assert response.track_id == "15966442233311"

    def test_decodes_verification_reply(self, client_with_session, session):
        session.post.return_value = http_response(
            {"result": 100, "refNumber": 9876, "amount": 1500000, "message": "success"}
        )

        response = client_with_session.send_request("https://x", {})

        assert response.ok
        assert response.ref_number == "9876"
        assert response.amount == 1500000
        assert response.raw["message"] == "success"

    def test_non_finite_amount_is_dropped(self, client_with_session, session):
        session.post.return_value = http_response({"result": 100, "refNumber": 1, "amount": float("nan")})

        response = client_with_session.send_request("https://x", {})

        assert response.ok
        assert response.amount is None

    def test_gateway_error_code_is_passed_through(self, client_with_session, session):
        session.post.return_value = http_response({"result": 103, "message": "merchant invalid"})

        response = client_with_session.send_request("https://x", {})

        assert not response.ok
        assert response.result == 103
        assert not response.transport_failed

    def test_non_2xx_with_result_code_is_still_decoded(self, client_with_session, session):
        session.post.return_value = http_response({"result": 106}, status_code=400)

        response = client_with_session.send_request("https://x", {})

        assert response.result == 106


class TestTransportFailures:
    def test_connection_error(self, client_with_session, session):
        session.post.side_effect = requests.ConnectionError("Name or service not known")

        response = client_with_session.send_request("https://x", {})

        assert response.result == TRANSPORT_FAILURE
        assert response.transport_failed

    def test_timeout(self, client_with_session, session):
        session.post.side_effect = requests.Timeout("read timed out")

        response = client_with_session.send_request("https://x", {})

        assert response.result == TRANSPORT_FAILURE

    def test_ssl_error(self, client_with_session, session):
        session.post.side_effect = requests.exceptions.SSLError("certificate verify failed")

        assert client_with_session.send_request("https://x", {}).result == TRANSPORT_FAILURE

    def test_unparsable_body(self, client_with_session, session):
        session.post.return_value = http_response(status_code=502, json_error=True)

        response = client_with_session.send_request("https://x", {})

        assert response.result == TRANSPORT_FAILURE
        assert "502" in response.message

    def test_body_without_result(self, client_with_session, session):
        session.post.return_value = http_response({"error": "oops"}, status_code=500)

        assert client_with_session.send_request("https://x", {}).result == TRANSPORT_FAILURE

    def test_body_that_is_not_an_object(self, client_with_session, session):
        session.post.return_value = http_response(["unexpected"])

        assert client_with_session.send_request("https://x", {}).result == TRANSPORT_FAILURE

    def test_non_finite_result(self, client_with_session, session):
        session.post.return_value = http_response({"result": float("inf")})

        assert client_with_session.send_request("https://x", {}).result == TRANSPORT_FAILURE

    def test_failure_is_logged(self, client_with_session, session, caplog):
        session.post.side_effect = requests.ConnectionError("refused")

        with caplog.at_level("ERROR", logger="gateway.client"):
            client_with_session.send_request("https://x", {})

        assert "refused" in caplog.text


class TestEndpoints:
    def test_request_payment_uses_request_url(self, client_with_session, session):
        session.post.return_value = http_response({"result": 100, "trackId": "t"})

        client_with_session.request_payment({"merchant": "m"})

        assert session.post.call_args[0][0] == "https://gateway.example.test/v1/request"

    def test_verify_sends_merchant_and_track_id(self, client_with_session, session):
        session.post.return_value = http_response({"result": 100, "refNumber": "r"})

        client_with_session.verify(12345)

        args, kwargs = session.post.call_args
        assert args[0] == "https://gateway.example.test/v1/verify"
        assert kwargs["json"] == {"merchant": "merchant-123", "trackId": 12345}
