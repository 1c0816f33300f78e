"""
Unit tests for the individual pipeline stages.

Normalizer → Trimming → Grouping → Triplet speller, plus the Lexicon
builders that feed all of them.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from vn_speller.exceptions import FormatError, NumberFormatError
from vn_speller.grouping import group_triplets, pad_to_triplets, spell_part
from vn_speller.lexicon import Lexicon, build_lexicon, default_lexicon, env_overrides, lexicon_from_env
from vn_speller.models import Magnitude, NumberData
from vn_speller.normalizer import (
    clean_input_number,
    describe_input,
    expand_scientific,
    normalize_number_string,
)
from vn_speller.trimming import parse_number_data, trim_left, trim_redundant_zeros, trim_right
from vn_speller.triplet import spell_triplet, units_word


# ═══════════════════════════════════════════════════════════════════════
# NORMALIZER
# ═══════════════════════════════════════════════════════════════════════


class TestNormalizeNumberString:
    def test_strips_spaces(self):
        assert normalize_number_string("  123  ") == "123"
        assert normalize_number_string("1 2 3") == "123"

    def test_strips_non_breaking_spaces(self):
        assert normalize_number_string("1\u00a02\u00a03") == "123"

    def test_dashes_become_minus(self):
        assert normalize_number_string("1–2") == "1-2"
        assert normalize_number_string("1—2") == "1-2"

    def test_removes_thousand_separators(self):
        assert normalize_number_string("1,234,567") == "1234567"
        assert normalize_number_string("1.234.567", thousand_sign=".") == "1234567"

    def test_keeps_decimal_point(self):
        assert normalize_number_string("1,234.56") == "1234.56"


class TestCleanInputNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (123, "123"),
            ("123", "123"),
            (-123, "-123"),
            ("-123", "-123"),
            (123.456, "123.456"),
            ("123.456", "123.456"),
            (0, "0"),
            ("0", "0"),
            (9007199254740991, "9007199254740991"),
            (123456789012345678901234567890, "123456789012345678901234567890"),
            (Decimal("1E+3"), "1000"),
        ],
    )
    def test_accepted_inputs(self, lexicon, value, expected):
        assert clean_input_number(value, lexicon) == expected

    def test_float_exponent_expanded(self, lexicon):
        assert clean_input_number(1.23e5, lexicon) == "123000"
        assert clean_input_number(1.23e-5, lexicon) == "0.0000123"

    def test_int_longer_than_str_digit_limit(self, lexicon):
        assert clean_input_number(10**5000, lexicon) == "1" + "0" * 5000
        assert clean_input_number(-(10**5000), lexicon) == "-1" + "0" * 5000

    def test_negative_zero_float_loses_sign(self, lexicon):
        assert clean_input_number(-0.0, lexicon) == "0"

    def test_describe_huge_int(self):
        assert describe_input(10**5000) == "1" + "0" * 5000
        assert describe_input("abc") == "'abc'"

    def test_text_exponent_rejected(self, lexicon):
        with pytest.raises(NumberFormatError, match="Invalid number format"):
            clean_input_number("1.23e5", lexicon)

    def test_thousand_separators(self, lexicon):
        assert clean_input_number("1,234,567", lexicon) == "1234567"
        assert clean_input_number("1,234,567.89", lexicon) == "1234567.89"

    def test_custom_marks(self):
        spaced = build_lexicon({"thousand_sign": " "})
        assert clean_input_number("1 234 567", spaced) == "1234567"

        european = build_lexicon({"thousand_sign": ".", "decimal_point": ","})
        assert clean_input_number("1.234.567,89", european) == "1234567,89"

    def test_non_ascii_digits_rejected(self, lexicon):
        with pytest.raises(NumberFormatError):
            clean_input_number("١٢٣", lexicon)

    @pytest.mark.parametrize("raw", ["abc", "123abc", "123..456", "..456", "123..", "-", ".5", "   "])
    def test_malformed(self, lexicon, raw):
        with pytest.raises(NumberFormatError):
            clean_input_number(raw, lexicon)

    def test_absent(self, lexicon):
        with pytest.raises(FormatError, match="Input cannot be null or undefined"):
            clean_input_number(None, lexicon)

    def test_non_finite(self, lexicon):
        with pytest.raises(FormatError, match="Input must be a finite number"):
            clean_input_number(float("nan"), lexicon)
        with pytest.raises(FormatError, match="Input must be a finite number"):
            clean_input_number(float("inf"), lexicon)


class TestExpandScientific:
    def test_positive_exponent(self):
        assert expand_scientific("1e+16") == "10000000000000000"

    def test_exponent_inside_coefficient(self):
        assert expand_scientific("1.2345e2") == "123.45"

    def test_negative_exponent_keeps_sign(self):
        assert expand_scientific("-2.5e-3") == "-0.0025"

    def test_zero_exponent(self):
        assert expand_scientific("4.5e0") == "4.5"

    def test_plain_text_unchanged(self):
        assert expand_scientific("123.5") == "123.5"


# ═══════════════════════════════════════════════════════════════════════
# TRIMMING AND PARSING
# ═══════════════════════════════════════════════════════════════════════


class TestTrimHelpers:
    def test_trim_left(self):
        assert trim_left("00123") == "123"
        assert trim_left("xxyzz", "x") == "yzz"
        assert trim_left("0000") == "0"
        assert trim_left("123") == "123"

    def test_trim_right(self):
        assert trim_right("12300") == "123"
        assert trim_right("xyzxx", "x") == "xyz"
        assert trim_right("0000") == ""
        assert trim_right("0000", keep_one=True) == "0"
        assert trim_right("123") == "123"

    @pytest.mark.parametrize("raw", ["00123", "0", "000", "120", "007"])
    def test_trimming_is_idempotent(self, raw):
        once = trim_left(raw)
        assert trim_left(once) == once
        once = trim_right(raw)
        assert trim_right(once) == once


class TestTrimRedundantZeros:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0", "0"),
            ("00123", "123"),
            ("00010", "10"),
            ("123.4560", "123.456"),
            ("00123.4560", "123.456"),
            ("0.0", "0."),
            ("000.000", "0."),
            ("00.00100", "0.001"),
            ("00.123", "0.123"),
        ],
    )
    def test_default_policy(self, lexicon, raw, expected):
        assert trim_redundant_zeros(raw, lexicon) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("123.4560", "123.456"),
            ("00.00100", "0.001"),
            ("0.0", "0.0"),
            ("000.000", "0.0"),
            ("123.0000", "123.0"),
        ],
    )
    def test_keep_one_zero(self, raw, expected):
        config = build_lexicon({"keep_one_zero_when_all_zeros": True})
        assert trim_redundant_zeros(raw, config) == expected

    def test_exported_from_package(self, lexicon):
        import vn_speller

        assert "trim_redundant_zeros" in vn_speller.__all__
        assert vn_speller.trim_redundant_zeros("00.100", lexicon) == "0.1"


class TestParseNumberData:
    def test_sign_and_parts(self, lexicon):
        data = parse_number_data("-00123.4500", lexicon)
        assert data == NumberData(is_negative=True, integral_part="123", fractional_part="45")

    def test_integral_never_empty(self, lexicon):
        assert parse_number_data("000", lexicon).integral_part == "0"

    def test_all_zero_fraction_dropped(self, lexicon):
        data = parse_number_data("7.000", lexicon)
        assert data.fractional_part == ""
        assert not data.has_fraction

    def test_all_zero_fraction_kept_as_one_zero(self):
        config = build_lexicon({"keep_one_zero_when_all_zeros": True})
        assert parse_number_data("7.000", config).fractional_part == "0"

    def test_leading_fraction_zeros_kept(self, lexicon):
        assert parse_number_data("0.0010", lexicon).fractional_part == "001"

    def test_model_rejects_non_digits(self):
        with pytest.raises(ValidationError):
            NumberData(integral_part="12a")
        with pytest.raises(ValidationError):
            NumberData(integral_part="")


# ═══════════════════════════════════════════════════════════════════════
# GROUPING
# ═══════════════════════════════════════════════════════════════════════


class TestGrouping:
    def test_padding(self):
        assert pad_to_triplets("1") == "001"
        assert pad_to_triplets("1234") == "001234"
        assert pad_to_triplets("123") == "123"

    def test_last_triplet_is_units_slot(self):
        groups = group_triplets("1234567890")
        assert groups == [
            [(Magnitude.THOUSAND, "001")],
            [
                (Magnitude.BILLION, "234"),
                (Magnitude.MILLION, "567"),
                (Magnitude.THOUSAND, "890"),
            ],
        ]

    def test_partial_first_group(self):
        groups = group_triplets("12345")
        assert groups == [[(Magnitude.MILLION, "012"), (Magnitude.THOUSAND, "345")]]

    def test_empty_part(self, lexicon):
        assert spell_part("", lexicon) == []

    def test_all_zeros(self, lexicon):
        assert spell_part("000000", lexicon) == ["không"]

    def test_no_boundary_word_before_first_digit(self, lexicon):
        assert spell_part("000000000001", lexicon) == ["một"]

    def test_boundary_word_between_super_groups(self, lexicon):
        assert spell_part("5000000000", lexicon) == ["năm", "tỷ"]


# ═══════════════════════════════════════════════════════════════════════
# TRIPLET SPELLER
# ═══════════════════════════════════════════════════════════════════════


class TestTriplet:
    def test_odd_word(self, lexicon):
        tokens: list[str] = []
        still_leading = spell_triplet(tokens, lexicon, "105", Magnitude.THOUSAND, True)
        assert tokens == ["một", "trăm", "lẻ", "năm"]
        assert still_leading is False

    def test_leading_zero_triplet_says_nothing(self, lexicon):
        tokens: list[str] = []
        assert spell_triplet(tokens, lexicon, "000", Magnitude.MILLION, True) is True
        assert tokens == []

    def test_zero_triplet_inside_number_says_nothing(self, lexicon):
        tokens: list[str] = []
        assert spell_triplet(tokens, lexicon, "000", Magnitude.MILLION, False) is False
        assert tokens == []

    def test_leading_suppresses_zero_hundreds(self, lexicon):
        tokens: list[str] = []
        spell_triplet(tokens, lexicon, "021", Magnitude.THOUSAND, True)
        assert tokens == ["hai", "mươi", "mốt"]

    def test_zero_hundreds_spoken_mid_number(self, lexicon):
        tokens: list[str] = []
        spell_triplet(tokens, lexicon, "021", Magnitude.BILLION, False)
        assert tokens == ["không", "trăm", "hai", "mươi", "mốt", "triệu"]

    def test_zero_units_still_gets_group_word(self, lexicon):
        tokens: list[str] = []
        spell_triplet(tokens, lexicon, "500", Magnitude.MILLION, True)
        assert tokens == ["năm", "trăm", "nghìn"]

    def test_units_slot_has_no_group_word(self, lexicon):
        tokens: list[str] = []
        spell_triplet(tokens, lexicon, "500", Magnitude.THOUSAND, False)
        assert tokens == ["năm", "trăm"]

    @pytest.mark.parametrize(
        ("tens", "units", "expected"),
        [
            ("0", "1", "một"),
            ("1", "1", "một"),
            ("2", "1", "mốt"),
            ("0", "4", "bốn"),
            ("1", "4", "bốn"),
            ("9", "4", "tư"),
            ("0", "5", "năm"),
            ("1", "5", "lăm"),
            ("7", "5", "lăm"),
            ("3", "7", "bảy"),
        ],
    )
    def test_tone_shift_table(self, lexicon, tens, units, expected):
        assert units_word(lexicon, tens, units) == expected


# ═══════════════════════════════════════════════════════════════════════
# LEXICON
# ═══════════════════════════════════════════════════════════════════════


class TestLexicon:
    def test_default_is_fresh_each_call(self):
        assert default_lexicon() is not default_lexicon()
        assert default_lexicon() == default_lexicon()

    def test_frozen(self, lexicon):
        with pytest.raises(ValidationError):
            lexicon.separator = "-"

    def test_overrides_do_not_touch_defaults(self):
        build_lexicon({"digit_names": {"4": "tư"}, "separator": "-"})
        fresh = default_lexicon()
        assert fresh.digit("4") == "bốn"
        assert fresh.separator == " "

    def test_partial_mapping_merge(self):
        config = build_lexicon({"unit_names": {"THOUSAND": "ngàn", "0": "tỉ"}})
        assert config.unit(Magnitude.THOUSAND) == "ngàn"
        assert config.unit(Magnitude.BILLION) == "tỉ"
        assert config.unit(Magnitude.MILLION) == "triệu"

    def test_build_passes_lexicon_through(self, lexicon):
        assert build_lexicon(lexicon) is lexicon

    def test_incomplete_digits_rejected(self):
        with pytest.raises(ValidationError):
            Lexicon(digit_names={"0": "không"})

    def test_unknown_magnitude_rejected(self):
        with pytest.raises(ValidationError):
            build_lexicon({"unit_names": {"9": "x"}})

    def test_clashing_marks_rejected(self):
        with pytest.raises(ValidationError):
            build_lexicon({"decimal_point": ","})

    def test_multi_char_decimal_point_rejected(self):
        with pytest.raises(ValidationError):
            build_lexicon({"decimal_point": ".."})

    def test_env_overrides(self):
        env = {
            "VN_SPELLER_SEPARATOR": "_",
            "VN_SPELLER_CAPITALIZE_INITIAL": "yes",
            "VN_SPELLER_KEEP_ONE_ZERO": "0",
            "UNRELATED": "ignored",
        }
        assert env_overrides(env) == {
            "separator": "_",
            "capitalize_initial": True,
            "keep_one_zero_when_all_zeros": False,
        }

    def test_lexicon_from_env(self):
        config = lexicon_from_env({"VN_SPELLER_CURRENCY_UNIT": "đồng"})
        assert config.currency_unit == "đồng"
        assert config.point_text == "chấm"
