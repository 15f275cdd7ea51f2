import re

import pytest

from validstring_utils import (
    EMAIL_MAX_LENGTH,
    PATTERN_VALID_CHINESE,
    PATTERN_VALID_IPV4,
    PATTERN_VALID_IPV6,
    PATTERN_VALID_PHONE,
    valid_chinese,
    valid_email,
    valid_id_card,
    valid_ipv4,
    valid_ipv6,
    valid_length,
    valid_pattern,
    valid_phone,
    valid_qq,
)
from tests.strategies import NON_ASCII_DIGITS, VALID_ID_NUMBERS


class TestPatternConstants:
    """The published pattern strings are a compatibility contract."""

    def test_phone_pattern(self) -> None:
        assert PATTERN_VALID_PHONE == "^1\\d{10}$"

    def test_chinese_pattern_range(self) -> None:
        assert PATTERN_VALID_CHINESE == "^[\\u4e00-\\u9fa5]+$"

    def test_ipv6_pattern(self) -> None:
        assert PATTERN_VALID_IPV6 == "^([\\dA-Fa-f]{1,4}:){7}[\\dA-Fa-f]{1,4}$"

    def test_ipv4_pattern_compiles(self) -> None:
        assert re.compile(PATTERN_VALID_IPV4).pattern.startswith("^(1\\d{2}|")

    def test_email_max_length(self) -> None:
        assert EMAIL_MAX_LENGTH == 64


class TestValidPattern:
    def test_full_match_required(self) -> None:
        assert valid_pattern("abc", "b") is False
        assert valid_pattern("abc", "abc") is True

    def test_compiled_pattern(self) -> None:
        assert valid_pattern("2024", re.compile(r"\d{4}")) is True

    def test_non_string_content(self) -> None:
        assert valid_pattern(None, ".*") is False
        assert valid_pattern(123, r"\d+") is False

    def test_bad_pattern_does_not_raise(self) -> None:
        assert valid_pattern("abc", "(") is False


class TestValidPhone:
    @pytest.mark.parametrize("phone", ["13800138000", "19999999999", "10000000000"])
    def test_valid(self, phone: str) -> None:
        assert valid_phone(phone) is True

    @pytest.mark.parametrize(
        "phone",
        [
            "23800138000",  # wrong leading digit
            "1234",  # too short
            "138001380001",  # too long
            "1380013800a",
            " 13800138000",
            "13800138000\n",
            "",
        ],
    )
    def test_invalid(self, phone: str) -> None:
        assert valid_phone(phone) is False

    @pytest.mark.parametrize("digit", NON_ASCII_DIGITS)
    def test_non_ascii_digits_rejected(self, digit: str) -> None:
        assert valid_phone("1380013800" + digit) is False

    def test_none(self) -> None:
        assert valid_phone(None) is False


class TestValidQQ:
    @pytest.mark.parametrize("qq", ["12345", "123456789", "1234567890123", "00000"])
    def test_valid(self, qq: str) -> None:
        assert valid_qq(qq) is True

    @pytest.mark.parametrize("qq", ["1234", "12345678901234", "12a45", "", "12345 "])
    def test_invalid(self, qq: str) -> None:
        assert valid_qq(qq) is False


class TestValidEmail:
    @pytest.mark.parametrize(
        "email",
        ["a@b.com", "first_last@mail.example.org", "user-1@host-2.co.uk", "a@b.c"],
    )
    def test_valid(self, email: str) -> None:
        assert valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "   ",
            "a@b",  # no dot in domain
            "@b.com",
            "a@.com",
            "a.b@c.com",  # dot not allowed in local part
            "a@b.com.",
            "a b@c.com",
            "a@b.com\n",
        ],
    )
    def test_invalid(self, email: str) -> None:
        assert valid_email(email) is False

    def test_length_limit(self) -> None:
        at_limit = "a" * 52 + "@example.com"
        assert len(at_limit) == 64
        assert valid_email(at_limit) is True

        over_limit = "a" * 53 + "@example.com"
        assert valid_email(over_limit) is False

    def test_long_pattern_shaped_rejected(self) -> None:
        assert valid_email("x" * 40 + "@" + "y" * 30 + ".com") is False

    def test_none(self) -> None:
        assert valid_email(None) is False


class TestValidChinese:
    @pytest.mark.parametrize("text", ["这是中文", "繁体字龍", "偏僻字嵾寤", "一", "龥"])
    def test_valid(self, text: str) -> None:
        assert valid_chinese(text) is True

    @pytest.mark.parametrize("text", ["", "有标点符号。", "中文abc", "中 文", "〇"])
    def test_invalid(self, text: str) -> None:
        assert valid_chinese(text) is False


class TestValidIpv4:
    @pytest.mark.parametrize(
        "ip",
        ["255.255.255.255", "1.2.3.255", "1.0.0.0", "192.168.1.1", "10.0.0.1", "249.250.199.99"],
    )
    def test_valid(self, ip: str) -> None:
        assert valid_ipv4(ip) is True

    @pytest.mark.parametrize(
        "ip",
        [
            "",
            "255.256.255.255",
            "255.235.20.2.2",
            "0.0.0.0",  # first octet must be 1-255
            "01.1.1.1",
            "1.01.1.1",
            "1.2.3",
            "1.2.3.4.",
            "1.2.3.4\n",
            "a.b.c.d",
        ],
    )
    def test_invalid(self, ip: str) -> None:
        assert valid_ipv4(ip) is False


class TestValidIpv6:
    @pytest.mark.parametrize(
        "ip",
        [
            "0:0:0:0:0:0:0:1",
            "FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:1",
            "fe80:0:0:0:202:b3ff:fe1e:8329",
            "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
        ],
    )
    def test_valid(self, ip: str) -> None:
        assert valid_ipv6(ip) is True

    @pytest.mark.parametrize(
        "ip",
        [
            "",
            "FFFG:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:1",
            "FFFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:1",
            "0:0:0:0:0:0:1",  # 7 groups
            "0:0:0:0:0:0:0:0:1",  # 9 groups
            "::1",  # zero compression is not supported
            "fe80::1",
            "0:0:0:0:0:0:0:1:",
        ],
    )
    def test_invalid(self, ip: str) -> None:
        assert valid_ipv6(ip) is False


class TestValidLength:
    def test_within_bounds(self) -> None:
        assert valid_length("abc", 1, 5) is True
        assert valid_length("abc", 3, 3) is True

    def test_out_of_bounds(self) -> None:
        assert valid_length("abc", 4, 5) is False
        assert valid_length("abcdef", 1, 5) is False

    def test_none_counts_as_empty(self) -> None:
        assert valid_length(None, 0, 5) is True
        assert valid_length(None, 1, 5) is False

    def test_counts_characters_not_bytes(self) -> None:
        assert valid_length("中文", 2, 2) is True

    def test_non_string(self) -> None:
        assert valid_length(12345, 1, 10) is False


class TestValidIdCard:
    @pytest.mark.parametrize("id_number", VALID_ID_NUMBERS)
    def test_valid(self, id_number: str) -> None:
        assert valid_id_card(id_number) is True

    def test_lowercase_x(self) -> None:
        assert valid_id_card("11010519491231002x") is True

    @pytest.mark.parametrize(
        "id_number", ["", "110105194912310021", "1101051949123100", None, 11010519491231002]
    )
    def test_invalid(self, id_number) -> None:
        assert valid_id_card(id_number) is False

    def test_uses_default_checker(self) -> None:
        from validstring_utils import set_default_id_checker

        class AcceptAll:
            name = "accept_all"

            def is_valid(self, value: str) -> bool:
                return True

        set_default_id_checker(AcceptAll())
        assert valid_id_card("anything") is True


class TestNeverRaises:
    @pytest.mark.parametrize(
        "check",
        [valid_phone, valid_qq, valid_email, valid_chinese, valid_ipv4, valid_ipv6, valid_id_card],
    )
    @pytest.mark.parametrize("value", [None, 0, 1.5, b"13800138000", [], object()])
    def test_bad_input_is_false(self, check, value) -> None:
        assert check(value) is False
