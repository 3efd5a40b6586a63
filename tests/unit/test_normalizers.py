"""
Unit tests for the value normalizers.

Includes property-based testing with hypothesis for currency and string handling.
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sales_ingest.core.errors import ParseError
from sales_ingest.core.models import default_configuration
from sales_ingest.core.models.transform_config import DEFAULT_DATE_FORMATS, DEFAULT_NULL_VALUES
from sales_ingest.core.normalizers import (
    capitalize_words,
    clean_string,
    format_minor_units,
    format_timestamp,
    map_country,
    map_region,
    normalize_null,
    normalize_product_name,
    parse_currency,
    parse_date,
    parse_quantity,
    strip_currency,
    title_case,
)

UTC = timezone.utc


@pytest.mark.unit
class TestParseCurrency:
    """Tests for parse_currency"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("$1,234.56", 123456),
            ("€999.99", 99999),
            ("£50", 5000),
            ("¥1,500", 150000),
            ("  12.5 ", 1250),
            ("10%", 1000),
            ("0", 0),
        ],
    )
    def test_symbols_and_separators_are_stripped(self, raw, expected):
        """Test currency symbols, separators and spaces are removed before scaling"""
        assert parse_currency(raw) == expected

    def test_iso_codes_are_stripped(self):
        """Test configured ISO codes are removed case-insensitively"""
        codes = ["USD", "EUR"]
        assert parse_currency("USD 12.50", currency_codes=codes) == 1250
        assert parse_currency("12.50 eur", currency_codes=codes) == 1250

    def test_result_is_truncated_not_rounded(self):
        """Test sub-cent amounts truncate toward zero"""
        assert parse_currency("12.349") == 1234
        assert parse_currency("-12.349") == -1234

    def test_numeric_values_use_decimal_path(self):
        """Test float and int inputs avoid binary rounding"""
        assert parse_currency(19.99) == 1999
        assert parse_currency(0.29) == 29
        assert parse_currency(5) == 500

    def test_custom_multiplier(self):
        """Test the multiplier scales the amount"""
        assert parse_currency("1.2345", multiplier=10000) == 12345
        assert parse_currency("7", multiplier=1) == 7

    @pytest.mark.parametrize("raw", ["abc", "", "$", "12.3.4", "1e", None, True])
    def test_non_numeric_raises(self, raw):
        """Test non-numeric residue raises ParseError"""
        with pytest.raises(ParseError) as exc_info:
            parse_currency(raw)

        assert exc_info.value.field_name == "price"

    def test_strip_currency_keeps_sign_and_decimal_point(self):
        assert strip_currency("-$1,000.50") == "-1000.50"

    @given(st.integers(min_value=0, max_value=10**9))
    def test_property_formatted_cents_parse_back(self, cents):
        """Property test: a rendered amount parses back to the same minor units"""
        text = f"${cents // 100:,}.{cents % 100:02d}"
        assert parse_currency(text) == cents

    @given(st.integers(min_value=-(10**9), max_value=10**9))
    def test_property_format_minor_units_round_trip(self, cents):
        """Property test: format_minor_units output parses to the input"""
        assert parse_currency(format_minor_units(cents)) == cents


@pytest.mark.unit
class TestParseDate:
    """Tests for parse_date"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("2024-03-15", datetime(2024, 3, 15, tzinfo=UTC)),
            ("2024-03-15T10:30:45Z", datetime(2024, 3, 15, 10, 30, 45, tzinfo=UTC)),
            ("2024-03-15 10:30:45", datetime(2024, 3, 15, 10, 30, 45, tzinfo=UTC)),
            ("03/15/2024", datetime(2024, 3, 15, tzinfo=UTC)),
            ("15-03-2024", datetime(2024, 3, 15, tzinfo=UTC)),
            ("2024/03/15", datetime(2024, 3, 15, tzinfo=UTC)),
            ("Mar 15, 2024", datetime(2024, 3, 15, tzinfo=UTC)),
            ("15 Mar 2024", datetime(2024, 3, 15, tzinfo=UTC)),
        ],
    )
    def test_configured_patterns(self, raw, expected):
        """Test every default pattern parses to UTC"""
        assert parse_date(raw, DEFAULT_DATE_FORMATS) == expected

    def test_offset_is_converted_to_utc(self):
        """Test aware inputs are converted rather than relabelled"""
        parsed = parse_date("2024-03-15T10:30:45+02:00", DEFAULT_DATE_FORMATS)
        assert parsed == datetime(2024, 3, 15, 8, 30, 45, tzinfo=UTC)
        assert parsed.utcoffset() == timedelta(0)

    def test_fallback_patterns_follow_configured_ones(self):
        """Test fallback patterns apply even with no configured pattern"""
        assert parse_date("March 15, 2024") == datetime(2024, 3, 15, tzinfo=UTC)
        assert parse_date("2024-03-15T10:30:45.250Z") == datetime(2024, 3, 15, 10, 30, 45, 250000, tzinfo=UTC)

    def test_configured_order_decides_ambiguous_dates(self):
        """Test the first matching pattern wins"""
        assert parse_date("03/04/2024", ["%m/%d/%Y"]) == datetime(2024, 3, 4, tzinfo=UTC)
        assert parse_date("03/04/2024", ["%d/%m/%Y"]) == datetime(2024, 4, 3, tzinfo=UTC)

    def test_epoch_seconds(self):
        """Test integer strings are read as Unix seconds"""
        assert parse_date("1710498645") == datetime.fromtimestamp(1710498645, tz=UTC)
        assert parse_date(1710498645) == datetime.fromtimestamp(1710498645, tz=UTC)

    def test_epoch_milliseconds_above_threshold(self):
        """Test values above 10^10 are read as milliseconds"""
        parsed = parse_date("1710498645123")
        assert parsed == datetime.fromtimestamp(1710498645, tz=UTC).replace(microsecond=123000)

    def test_date_scalars_are_accepted(self):
        """Test YAML date and datetime values bypass string parsing"""
        assert parse_date(date(2024, 3, 15)) == datetime(2024, 3, 15, tzinfo=UTC)
        assert parse_date(datetime(2024, 3, 15, 10, 0)) == datetime(2024, 3, 15, 10, 0, tzinfo=UTC)

    @pytest.mark.parametrize("raw", ["someday", "", "2024-13-45", "12.5.x", None])
    def test_unparseable_raises(self, raw):
        """Test unknown formats raise ParseError"""
        with pytest.raises(ParseError) as exc_info:
            parse_date(raw, DEFAULT_DATE_FORMATS)

        assert exc_info.value.field_name == "transaction_date"

    def test_format_timestamp(self):
        assert format_timestamp(datetime(2024, 3, 15, 10, 30, 45, tzinfo=UTC)) == "2024-03-15T10:30:45Z"
        assert format_timestamp(None) == ""


@pytest.mark.unit
class TestParseQuantity:
    """Tests for parse_quantity"""

    @pytest.mark.parametrize("raw, expected", [("3", 3), (" 12 ", 12), ("1,000", 1000), (3.0, 3), (7, 7), ("4.0", 4)])
    def test_whole_numbers(self, raw, expected):
        assert parse_quantity(raw) == expected

    @pytest.mark.parametrize("raw", ["2.5", "abc", "", 1.5, None])
    def test_fractional_or_text_raises(self, raw):
        with pytest.raises(ParseError):
            parse_quantity(raw)


@pytest.mark.unit
class TestStringNormalizers:
    """Tests for null handling, cleaning and title-casing"""

    def test_null_tokens_become_empty(self):
        assert normalize_null("  N/A ", DEFAULT_NULL_VALUES) == ""
        assert normalize_null("undefined", DEFAULT_NULL_VALUES) == ""
        assert normalize_null("  value ", DEFAULT_NULL_VALUES) == "value"

    def test_clean_string_collapses_whitespace(self):
        assert clean_string("  hello \t\n  world  ") == "hello world"

    def test_clean_string_drops_control_and_symbol_characters(self):
        """Test characters outside letters, numbers, punctuation and separators are removed"""
        assert clean_string("Widget\x00A") == "WidgetA"
        assert clean_string("emoji 😀 ok") == "emoji ok"
        assert clean_string("São Paulo - Zone #1") == "São Paulo - Zone #1"

    @given(st.text())
    def test_property_clean_string_is_idempotent(self, value):
        """Property test: cleaning twice equals cleaning once"""
        once = clean_string(value)
        assert clean_string(once) == once

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("guinea-bissau", "Guinea-Bissau"),
            ("o'neil", "O'Neil"),
            ("NEW YORK", "New York"),
            ("3rd street", "3rd Street"),
            ("snake_case", "Snake_case"),
        ],
    )
    def test_title_case_is_naive(self, raw, expected):
        """Test letters after non-word characters are capitalized"""
        assert title_case(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("straße", "Straße"),
            ("ßpack", "ßpack"),
            ("\ufb01ji", "\ufb01ji"),
            ("ΣΑΣ", "Σασ"),
        ],
    )
    def test_title_case_maps_one_character_to_one(self, raw, expected):
        """Test characters whose upper case is several letters are left as they are"""
        assert title_case(raw) == expected

    @given(st.text())
    def test_property_title_case_is_idempotent(self, value):
        assert title_case(title_case(value)) == title_case(value)

    def test_capitalize_words(self):
        assert capitalize_words("  widget   SET ") == "Widget Set"
        assert capitalize_words("ßpack \ufb01lter") == "ßpack \ufb01lter"

    @given(st.text())
    def test_property_capitalize_words_is_idempotent(self, value):
        once = capitalize_words(value)
        assert capitalize_words(once) == once


@pytest.mark.unit
class TestGeography:
    """Tests for country and region mapping"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("USA", "United States"),
            (" us ", "United States"),
            ("united states of america", "United States"),
            ("England", "United Kingdom"),
            ("uae", "United Arab Emirates"),
            ("germany", "Germany"),
            ("straße", "Straße"),
            ("straÃe", "StraÃe"),
            ("", ""),
        ],
    )
    def test_map_country(self, default_config, raw, expected):
        assert map_country(raw, default_config) == expected

    def test_custom_country_mapping_wins(self):
        """Test config mappings are consulted before built-in aliases"""
        config = default_configuration(custom_mappings={"deutschland": "Germany", "uae": "Emirates"})
        assert map_country("Deutschland", config) == "Germany"
        assert map_country("UAE", config) == "Emirates"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("N", "North"),
            ("sw", "Southwest"),
            ("central", "Central"),
            ("south", "South"),
            ("new england", "New England"),
            ("\u017f", "South"),
        ],
    )
    def test_map_region(self, default_config, raw, expected):
        assert map_region(raw, default_config) == expected

    def test_custom_region_mapping_uses_prefix(self):
        config = default_configuration(custom_mappings={"region_emea": "Europe, Middle East and Africa"})
        assert map_region("EMEA", config) == "Europe, Middle East and Africa"
        # Bare keys are country mappings only
        assert map_region("usa", config) == "Usa"


@pytest.mark.unit
class TestProductNames:
    """Tests for normalize_product_name"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("widget a", "Widget A"),
            ("super GADGET", "Super Gadget"),
            ("  tool kit ", "Tool Kit"),
            ("", ""),
        ],
    )
    def test_keywords_and_capitalization(self, default_config, raw, expected):
        assert normalize_product_name(raw, default_config) == expected

    def test_custom_product_mapping(self):
        config = default_configuration(custom_mappings={"product_wdg-1": "Widget One"})
        assert normalize_product_name("WDG-1", config) == "Widget One"
