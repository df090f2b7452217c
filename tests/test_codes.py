"""
Tests for the gateway result-code table.
"""
import pytest

from gateway.codes import MESSAGES, TRANSPORT_FAILURE, translate_code


class TestTranslateCode:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (100, "Payment was successful."),
            (102, "Merchant is inactive."),
            (103, "Invalid Merchant ID."),
            (104, "Amount is greater than the allowed limit."),
            (105, "Amount is less than the allowed minimum."),
            (106, "Invalid callback URL."),
            (113, "Transaction amount and verified amount are not equal."),
            (201, "This transaction has already been verified."),
            (202, "Order is unpaid or the payment was unsuccessful."),
            (203, "Invalid trackId."),
            (-999, "Error connecting to the server."),
        ],
    )
    def test_known_codes(self, code, expected):
        assert translate_code(code) == expected

    def test_transport_failure_is_in_table(self):
        assert TRANSPORT_FAILURE == -999
        assert TRANSPORT_FAILURE in MESSAGES

    @pytest.mark.parametrize("code", [0, 1, 99, 101, 150, 999, -1, 123456])
    def test_unknown_code_includes_raw_value(self, code):
        message = translate_code(code)
        assert "Undefined error" in message
        assert str(code) in message

    def test_numeric_strings_are_looked_up(self):
        assert translate_code("103") == "Invalid Merchant ID."

    @pytest.mark.parametrize("code", [None, "abc", "", 1.5e400, [1], {}])
    def test_never_raises(self, code):
        message = translate_code(code)
        assert message.startswith("Undefined error")
