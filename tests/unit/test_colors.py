"""Unit tests for deterministic plugin colors."""

import re

import pytest

from analyzerflow.colors import VIRIDIS_STOPS, color_for, name_code


class TestColorFor:
    def test_hex_format(self):
        assert re.fullmatch(r"#[0-9a-f]{6}", color_for("js-sbom"))

    def test_deterministic(self):
        assert color_for("js-vuln-finder") == color_for("js-vuln-finder")

    def test_name_code(self):
        # ord("A") == 65
        assert name_code("A") == 5
        assert name_code("") == 0

    def test_name_code_counts_utf16_units(self):
        # U+1F600 is the surrogate pair 0xD83D 0xDE00: 55357 + 56832
        assert name_code("\U0001F600") == 9
        assert name_code("\u00e9") == 233 % 10

    @pytest.mark.parametrize("name", ["", "\n"])  # codes 0 and 10 % 10 == 0
    def test_below_domain_clamps_to_first_color(self, name):
        assert color_for(name) == VIRIDIS_STOPS[0]

    def test_domain_start_is_first_color(self):
        # ord("\x01") == 1
        assert color_for("\x01") == VIRIDIS_STOPS[0]

    def test_names_with_same_code_share_color(self):
        # "AB" and "BA" have the same character sum
        assert color_for("AB") == color_for("BA")

    def test_different_codes_differ(self):
        colors = {color_for(chr(code)) for code in range(1, 10)}

        assert len(colors) == 9
