"""
Tests for the public conversion API: laws that hold for every language,
option handling, magnitude limits, ordinals, configuration and logging.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from number_words import NumberConverter, convert, to_ordinal
from number_words.config import configure_logging, load_settings
from number_words.exceptions import (
    InvalidInputType,
    InvalidNumberFormat,
    MagnitudeOutOfRange,
    NumberWordsError,
    OrdinalDomainError,
    UnsupportedLanguage,
    UnsupportedOption,
)
from number_words.languages import LANGUAGES, get_language
from number_words.models import Gender, GenderedOptions

SAMPLES = [1, 7, 12, 21, 100, 101, 999, 1000, 1001, 2002, 21_000, 1_234_567, 10**12 + 5]


# ═══════════════════════════════════════════════════════════════════════
# LAWS FOR EVERY LANGUAGE
# ═══════════════════════════════════════════════════════════════════════


class TestUniversalLaws:
    def test_zero_is_the_zero_word(self):
        for code, language in LANGUAGES.items():
            words = convert(0, code)
            assert words == language.zero_word
            assert words not in ("", "0")

    def test_negative_zero_is_zero(self):
        for code, language in LANGUAGES.items():
            assert convert("-0", code) == language.zero_word

    def test_sign_law(self):
        for code, language in LANGUAGES.items():
            for n in SAMPLES:
                expected = f"{language.negative_word}{language.joiner}{convert(n, code)}"
                assert convert(-n, code) == expected, (code, n)

    def test_deterministic(self):
        for code in LANGUAGES:
            for n in SAMPLES:
                assert convert(n, code) == convert(n, code)

    def test_every_sample_produces_words(self):
        for code in LANGUAGES:
            for n in SAMPLES:
                words = convert(n, code)
                assert words and words == words.strip()
                assert not any(ch.isdigit() and ch.isascii() for ch in words)

    def test_input_forms_agree(self):
        for code in LANGUAGES:
            assert convert(1234, code) == convert("1234", code) == convert(Decimal("1234"), code)
            assert convert(1234.0, code) == convert(1234, code)


class TestDecimals:
    def test_leading_zeros_are_spoken(self):
        assert convert("0.05") == "zero point zero five"

    def test_all_zero_fraction(self):
        assert convert("1.00") == "one point zero zero"

    def test_trailing_zeros_kept_in_group(self):
        assert convert("1.50") == "one point fifty"

    def test_overlong_fraction_read_per_digit(self):
        fraction = "1" * 70
        words = convert("0." + fraction)
        assert words == "zero point " + " ".join(["one"] * 70)

    def test_scientific_string(self):
        assert convert("1e21") == "one sextillion"
        assert convert("1.5e-3") == "zero point zero zero fifteen"


# ═══════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:
    def test_bad_type(self):
        with pytest.raises(InvalidInputType):
            convert([1, 2])  # type: ignore[arg-type]

    def test_bool_rejected(self):
        with pytest.raises(InvalidInputType):
            convert(False)

    def test_bad_format(self):
        with pytest.raises(InvalidNumberFormat):
            convert("12abc")

    def test_nan(self):
        with pytest.raises(InvalidNumberFormat):
            convert(float("nan"), "ru")

    def test_magnitude_limit(self):
        language = get_language("en")
        convert(10**language.digit_limit - 1)
        with pytest.raises(MagnitudeOutOfRange) as info:
            convert(10**language.digit_limit)
        assert info.value.details["max_digits"] == language.digit_limit

    def test_every_language_has_a_limit(self):
        for code, language in LANGUAGES.items():
            with pytest.raises(MagnitudeOutOfRange):
                convert("9" * (language.digit_limit + 1), code)

    def test_largest_value_converts(self):
        for code, language in LANGUAGES.items():
            assert convert("9" * language.digit_limit, code)

    def test_magnitude_error_is_value_error(self):
        with pytest.raises(ValueError):
            convert(10**100)

    def test_oversized_int_is_magnitude_error(self):
        with pytest.raises(MagnitudeOutOfRange):
            convert(10**5000)
        with pytest.raises(MagnitudeOutOfRange):
            to_ordinal(-(10**5000))

    def test_oversized_exponent_is_magnitude_error(self):
        for text in ("1e5000", "1e300000000", "-1e300000000", "1e-300000000"):
            with pytest.raises(MagnitudeOutOfRange):
                convert(text)

    def test_zero_with_huge_exponent(self):
        assert convert("0e999999999") == "zero"

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguage):
            convert(1, "xx")


class TestOptions:
    def test_mapping_and_keywords(self):
        assert convert(2, "ru", {"gender": "feminine"}) == "две"
        assert convert(2, "ru", gender="feminine") == "две"

    def test_options_model(self):
        assert convert(2, "ru", GenderedOptions(gender=Gender.FEMININE)) == "две"

    def test_keywords_override_mapping(self):
        assert convert(2, "ru", {"gender": "masculine"}, gender="feminine") == "две"

    def test_unknown_keys_ignored(self):
        assert convert(2, "ru", {"colour": "blue"}) == "два"
        assert convert(101, "en", gender="feminine") == "one hundred one"

    def test_invalid_value(self):
        with pytest.raises(UnsupportedOption) as info:
            convert(2, "pl", gender="plural")
        assert info.value.code == "UNSUPPORTED_OPTION"
        assert info.value.details["errors"][0]["field"] == "gender"

    def test_non_mapping_options(self):
        with pytest.raises(UnsupportedOption):
            convert(2, "ru", 5)  # type: ignore[arg-type]


# ═══════════════════════════════════════════════════════════════════════
# ORDINALS
# ═══════════════════════════════════════════════════════════════════════


class TestOrdinals:
    def test_whole_fraction_accepted(self):
        assert to_ordinal("2.0") == "second"

    def test_zero_rejected(self):
        with pytest.raises(OrdinalDomainError):
            to_ordinal(0)

    def test_negative_rejected(self):
        with pytest.raises(OrdinalDomainError):
            to_ordinal(-3)

    def test_fraction_rejected(self):
        with pytest.raises(OrdinalDomainError):
            to_ordinal("1.5")

    def test_bad_input_still_a_type_error(self):
        with pytest.raises(InvalidInputType):
            to_ordinal(None)  # type: ignore[arg-type]

    def test_language_without_ordinals(self):
        with pytest.raises(UnsupportedLanguage):
            to_ordinal(1, "ru")

    def test_languages_with_ordinals(self):
        codes = {code for code, language in LANGUAGES.items() if language.supports_ordinals}
        assert codes == {"en", "tr", "ko", "zh", "uk", "pl", "lv", "lt", "he", "hi"}

    def test_every_ordinal_language_spells_samples(self):
        for code, language in LANGUAGES.items():
            if not language.supports_ordinals:
                continue
            for n in SAMPLES:
                if len(str(n)) > language.ordinal_digit_limit:
                    continue
                words = to_ordinal(n, code)
                assert words and words == words.strip(), (code, n)

    def test_ordinal_limit_below_cardinal_limit(self):
        language = get_language("he")
        assert language.ordinal_digit_limit == 9 < language.digit_limit
        assert convert(10**9, "he")
        with pytest.raises(MagnitudeOutOfRange) as info:
            to_ordinal(10**9, "he")
        assert info.value.details["max_digits"] == 9


# ═══════════════════════════════════════════════════════════════════════
# CONVERTER, CONFIG, LOGGING
# ═══════════════════════════════════════════════════════════════════════


class TestNumberConverter:
    def test_bound_language(self):
        converter = NumberConverter("pl-PL")
        assert converter.language.code == "pl"
        assert converter.convert(1000) == "tysiąc"

    def test_accepts_language_record(self):
        assert NumberConverter(get_language("tr")).convert(1000) == "bin"

    def test_repr(self):
        assert repr(NumberConverter("uk")) == "NumberConverter('uk')"

    def test_ordinal_method(self):
        assert NumberConverter().ordinal(3) == "third"

    def test_all_errors_share_base(self):
        with pytest.raises(NumberWordsError):
            NumberConverter("en").convert("nope")


class TestSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.default_lang == "en"
        assert settings.log_level == "WARNING"

    def test_default_language_from_env(self, monkeypatch):
        monkeypatch.setenv("NUMBER_WORDS_DEFAULT_LANG", "ru")
        assert convert(1) == "один"
        assert convert(1, "en") == "one"

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("NUMBER_WORDS_LOG_LEVEL", "debug")
        configure_logging()
        assert logging.getLogger("number_words").level == logging.DEBUG

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("NUMBER_WORDS_LOG_LEVEL", "chatty")
        configure_logging()
        assert logging.getLogger("number_words").level == logging.WARNING


class TestLogging:
    def test_rejection_logged_at_info(self, caplog):
        caplog.set_level(logging.INFO, logger="number_words")
        with pytest.raises(InvalidNumberFormat):
            convert("1..2")
        assert any("INVALID_NUMBER_FORMAT" in r.getMessage() for r in caplog.records)

    def test_conversion_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="number_words")
        convert(42)
        assert any("forty-two" in r.getMessage() for r in caplog.records)

    def test_oversized_rejection_logged_safely(self, caplog):
        caplog.set_level(logging.INFO, logger="number_words")
        with pytest.raises(MagnitudeOutOfRange):
            convert(10**5000)
        messages = [r.getMessage() for r in caplog.records]
        assert any("MAGNITUDE_OUT_OF_RANGE" in m and "<int of" in m for m in messages)


class TestConcurrency:
    def test_shared_converter_matches_serial_results(self):
        converter = NumberConverter("ru")
        jobs = [
            (value, gender)
            for value in [*range(0, 3000, 7), 21_001, -1_234_567, "2.5", 10**12 + 2]
            for gender in ("masculine", "feminine")
        ]

        def spell(job):
            value, gender = job
            return converter.convert(value, gender=gender)

        serial = [spell(job) for job in jobs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(spell, jobs))
        assert parallel == serial
        assert converter.convert(2, gender="feminine") == "две"
        assert converter.convert(2) == "два"
