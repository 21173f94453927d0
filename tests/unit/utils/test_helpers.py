"""
Tests unitaires pour les fonctions utilitaires.

Verifie la conversion d'entiers independante de la locale et
la normalisation du schema des URLs.
"""

import pytest

from seasonart.utils.helpers import parse_invariant_int, upgrade_to_https


class TestParseInvariantInt:
    """Tests pour parse_invariant_int."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("12", 12),
            ("007", 7),
            ("+5", 5),
            ("-3", -3),
            (" 42 ", 42),
            ("\t8\n", 8),
            ("2147483647", 2147483647),
            ("-2147483648", -2147483648),
        ],
    )
    def test_valid_values(self, text: str, expected: int) -> None:
        assert parse_invariant_int(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "   ",
            "abc",
            "all",
            "1,000",
            "1.000",
            "1 000",
            "1\u00a0000",
            "1_000",
            "1e3",
            "1.5",
            "١٢",
            "１２",
            "+",
            "--1",
            "2147483648",
            "-2147483649",
        ],
    )
    def test_invalid_values_return_none(self, text) -> None:
        """Les formats dependants de la locale sont rejetes, sans exception."""
        assert parse_invariant_int(text) is None


class TestUpgradeToHttps:
    """Tests pour upgrade_to_https."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("http://a/b.jpg", "https://a/b.jpg"),
            ("HTTP://a/b.jpg", "https://a/b.jpg"),
            ("https://a/b.jpg", "https://a/b.jpg"),
            ("ftp://a/b.jpg", "ftp://a/b.jpg"),
            ("", ""),
        ],
    )
    def test_scheme(self, url: str, expected: str) -> None:
        assert upgrade_to_https(url) == expected

    def test_only_scheme_is_rewritten(self) -> None:
        url = "http://a/redirect?to=http://b/c.jpg"
        assert upgrade_to_https(url) == "https://a/redirect?to=http://b/c.jpg"
