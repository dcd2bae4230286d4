import pytest

from condofee.models import format_vnd, parse_amount


class TestFormatVnd:
    @pytest.mark.parametrize(
        "amount, expected",
        [(0, "0 ₫"), (5000, "5.000 ₫"), (2470000, "2.470.000 ₫")],
    )
    def test_format(self, amount, expected):
        assert format_vnd(amount) == expected


class TestParseAmount:
    @pytest.mark.parametrize(
        "text, expected",
        [("1200000", 1200000), ("1.200.000", 1200000), ("1,200,000", 1200000), (" 70 000 ", 70000)],
    )
    def test_valid(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "-5", "12.5k"])
    def test_invalid(self, text):
        assert parse_amount(text) is None
