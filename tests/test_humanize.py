"""Tests for human-readable interval rendering.

This module tests the token pipeline of IntervalFormatter: tokenizing,
dropping unknown tokens, removing empty values, adding unit words and
reassembling with a separator.
"""

import pytest

from dateinterval import (
    CatalogTranslationProvider,
    FormatOptions,
    IdentityTranslationProvider,
    IntervalFormatter,
    IntervalValue,
    Plurality,
    TranslationError,
    TranslationProvider,
    ValidationError,
    render,
)
from dateinterval.format.humanize import (
    TOKEN_UNITS,
    filter_tokens,
    normalize_overrides,
    tokenize,
)


class RecordingProvider:
    """Provider that records calls and tags the returned words."""

    def __init__(self):
        self.calls = []

    def translate(self, text, language_code, context):
        self.calls.append((text, language_code, context))
        return f"<{text}>"


class FailingProvider:
    """Provider whose lookups always fail."""

    def translate(self, text, language_code, context):
        raise RuntimeError("catalog unavailable")


ALL_TOKENS = "%y %m %d %s"


# =============================================================================
# End-to-End Scenarios
# =============================================================================


class TestRenderScenarios:
    """End-to-end rendering of a typical interval."""

    def test_units_with_empty_values_removed(self, formatter, sample_interval):
        """Test default rendering drops zero components and adds units."""
        result = formatter.render(
            sample_interval, ALL_TOKENS, show_units=True, separator=" ", remove_empty_values=True
        )
        assert result == "1 year 4 days 39 seconds"

    def test_bare_numbers_with_separator(self, formatter, sample_interval):
        """Test rendering without units and a custom separator."""
        result = formatter.render(
            sample_interval, ALL_TOKENS, show_units=False, separator="-", language_code="en"
        )
        assert result == "1-4-39"

    def test_units_keeping_empty_values(self, formatter, sample_interval):
        """Test zero components are kept and pluralized when requested."""
        result = formatter.render(
            sample_interval, ALL_TOKENS, separator=", ", remove_empty_values=False
        )
        assert result == "1 year, 0 months, 4 days, 39 seconds"

    def test_custom_units(self, formatter, sample_interval):
        """Test per-token unit overrides."""
        result = formatter.render(
            sample_interval,
            ALL_TOKENS,
            show_units={
                "%y": {Plurality.SINGULAR: "y", Plurality.PLURAL: "ys"},
                "%m": {Plurality.SINGULAR: "m", Plurality.PLURAL: "mths"},
                "%d": {Plurality.SINGULAR: "d", Plurality.PLURAL: "d"},
                "%s": {Plurality.SINGULAR: "s", Plurality.PLURAL: "s"},
            },
            separator=", ",
            remove_empty_values=False,
        )
        assert result == "1 y, 0 mths, 4 d, 39 s"

    def test_empty_fallback(self, formatter):
        """Test an empty interval returns the fallback verbatim."""
        iv = IntervalValue.from_text("random string")
        result = formatter.render(iv, ALL_TOKENS, empty_fallback="Empty period provided!")
        assert result == "Empty period provided!"

    def test_empty_fallback_ignored_when_not_empty(self, formatter, sample_interval):
        """Test the fallback only applies to empty intervals."""
        result = formatter.render(sample_interval, ALL_TOKENS, empty_fallback="nothing")
        assert result == "1 year 4 days 39 seconds"

    def test_module_level_render(self, sample_interval):
        """Test the one-off render() function."""
        assert render(sample_interval, ALL_TOKENS) == "1 year 4 days 39 seconds"

    def test_time_components(self, formatter):
        """Test hour and minute tokens."""
        iv = IntervalValue(hours=1, minutes=30)
        assert formatter.render(iv, "%h %i %s") == "1 hour 30 minutes"

    def test_upper_case_tokens_pad(self, formatter):
        """Test upper-case tokens read the same component, zero-padded."""
        iv = IntervalValue(hours=1, minutes=5)
        assert formatter.render(iv, "%H %I", show_units=False, separator=":") == "01:05"


# =============================================================================
# Empty-Value Removal
# =============================================================================


class TestEmptyValueRemoval:
    """Tests for dropping zero components."""

    def test_all_zero_renders_empty(self, formatter):
        """Test a fully empty interval drops every piece."""
        assert formatter.render(IntervalValue(), "%y %m %d %h %i %s") == ""

    def test_all_zero_with_separator_renders_empty(self, formatter):
        """Test no separator remains when every piece is dropped."""
        assert formatter.render(IntervalValue(), "%y %d", separator="-") == ""

    def test_microseconds_only_is_not_empty_but_renders_nothing(self, formatter):
        """Test microseconds count for emptiness but have no token."""
        iv = IntervalValue(microseconds=10)
        assert not iv.is_empty
        assert formatter.render(iv, ALL_TOKENS, empty_fallback="none") == ""

    def test_keep_zero_values(self, formatter):
        """Test zero components are kept without removal."""
        result = formatter.render(IntervalValue(), "%y %d", show_units=False, remove_empty_values=False)
        assert result == "0 0"

    def test_duplicate_tokens_evaluated_each_time(self, formatter):
        """Test repeated tokens are filtered independently."""
        iv = IntervalValue(days=2)
        assert formatter.render(iv, "%d %m %d", show_units=False) == "2 2"


# =============================================================================
# Pluralization
# =============================================================================


class TestPluralization:
    """Tests for the singular/plural boundary."""

    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, "0 days"),
            (1, "1 day"),
            (2, "2 days"),
            (11, "11 days"),
            (21, "21 days"),
        ],
    )
    def test_boundary(self, formatter, count, expected):
        """Test exactly one is singular and everything else plural."""
        iv = IntervalValue(days=count)
        assert formatter.render(iv, "%d", remove_empty_values=False) == expected

    @pytest.mark.parametrize(
        "token,component,singular",
        [
            ("%y", "years", "year"),
            ("%m", "months", "month"),
            ("%d", "days", "day"),
            ("%h", "hours", "hour"),
            ("%i", "minutes", "minute"),
            ("%s", "seconds", "second"),
        ],
    )
    def test_every_unit(self, formatter, token, component, singular):
        """Test singular and plural words for every unit."""
        assert formatter.render(IntervalValue(**{component: 1}), token) == f"1 {singular}"
        assert formatter.render(IntervalValue(**{component: 3}), token) == f"3 {singular}s"


# =============================================================================
# Unit Overrides
# =============================================================================


class TestUnitOverrides:
    """Tests for caller-supplied unit words."""

    def test_override_beats_provider(self, provider):
        """Test an override wins over the provider's translation."""
        formatter = IntervalFormatter(provider, language_code="nl")
        iv = IntervalValue(days=4, hours=2)
        result = formatter.render(iv, "%d %h", show_units={"%d": ("dg", "dgn")})
        assert result == "4 dgn 2 uur"

    def test_tokens_missing_from_overrides_use_defaults(self, formatter, sample_interval):
        """Test tokens absent from the map still get default words."""
        result = formatter.render(sample_interval, ALL_TOKENS, show_units={"%d": ["d", "d"]})
        assert result == "1 year 4 d 39 seconds"

    def test_missing_plurality_falls_back(self, formatter):
        """Test a missing plural form falls back to the default word."""
        iv = IntervalValue(days=4)
        assert formatter.render(iv, "%d", show_units={"%d": ["dy"]}) == "4 days"
        assert formatter.render(IntervalValue(days=1), "%d", show_units={"%d": ["dy"]}) == "1 dy"

    def test_override_keyed_by_name_or_index(self, formatter):
        """Test override keys by name and by legacy index."""
        iv = IntervalValue(days=4)
        assert formatter.render(iv, "%d", show_units={"%d": {"plural": "dd"}}) == "4 dd"
        assert formatter.render(iv, "%d", show_units={"%d": {1: "dd"}}) == "4 dd"

    def test_override_single_string(self, formatter):
        """Test one string serves both forms."""
        iv = IntervalValue(days=1, hours=3)
        assert formatter.render(iv, "%d %h", show_units={"%d": "d", "%h": "h"}) == "1 d 3 h"

    def test_override_is_per_token_case(self, formatter):
        """Test an override for %d does not apply to %D."""
        iv = IntervalValue(days=4)
        result = formatter.render(iv, "%D", show_units={"%d": ("d", "d")})
        assert result == "04 days"

    def test_none_text_treated_as_absent(self, formatter):
        """Test None override text uses the default word."""
        iv = IntervalValue(days=4)
        assert formatter.render(iv, "%d", show_units={"%d": (None, None)}) == "4 days"

    def test_override_text_with_percent(self, formatter):
        """Test unit text is never read as a directive."""
        iv = IntervalValue(days=4)
        assert formatter.render(iv, "%d", show_units={"%d": ("%s", "%s")}) == "4 %s"

    def test_non_string_text_rejected(self, formatter, sample_interval):
        """Test malformed override text raises ValidationError."""
        with pytest.raises(ValidationError, match="%d"):
            formatter.render(sample_interval, ALL_TOKENS, show_units={"%d": [1, 2]})

    def test_unknown_plurality_key_rejected(self, formatter, sample_interval):
        """Test unknown keys inside an override raise ValidationError."""
        with pytest.raises(ValidationError):
            formatter.render(sample_interval, ALL_TOKENS, show_units={"%d": {"dual": "dd"}})

    def test_bad_override_shape_rejected(self, formatter, sample_interval):
        """Test override values of the wrong shape raise ValidationError."""
        with pytest.raises(ValidationError):
            formatter.render(sample_interval, ALL_TOKENS, show_units={"%d": ("a", "b", "c")})

    def test_unknown_override_token_ignored(self, formatter, sample_interval):
        """Test overrides for tokens outside the vocabulary are ignored."""
        result = formatter.render(sample_interval, ALL_TOKENS, show_units={"%x": ("x", "xs")})
        assert result == "1 year 4 days 39 seconds"

    def test_empty_override_map_hides_units(self, formatter, sample_interval):
        """Test an empty override map behaves like show_units=False."""
        assert formatter.render(sample_interval, ALL_TOKENS, show_units={}) == "1 4 39"

    @pytest.mark.parametrize("show_units", [[("%d", ("d", "dd"))], "false", 1, None])
    def test_show_units_must_be_bool_or_mapping(self, formatter, show_units):
        """Test show_units values that are neither a bool nor a mapping are rejected."""
        with pytest.raises(ValidationError, match="show_units"):
            formatter.render(IntervalValue(days=2), "%d", show_units=show_units)

    def test_pair_list_rejected_by_module_render(self):
        """Test a list of pairs is not mistaken for show_units=True."""
        with pytest.raises(ValidationError):
            render(IntervalValue(days=2), "%d", show_units=[("%d", "dd")])

    def test_normalize_overrides(self):
        """Test normalization keys every text by Plurality."""
        normalized = normalize_overrides({"%d": ("d", "dd"), "%h": {"singular": "h"}})
        assert normalized == {
            "%d": {Plurality.SINGULAR: "d", Plurality.PLURAL: "dd"},
            "%h": {Plurality.SINGULAR: "h"},
        }


# =============================================================================
# Separator
# =============================================================================


class TestSeparator:
    """Tests for reassembly."""

    def test_separator_joins_without_padding(self, formatter):
        """Test the separator appears only between pieces."""
        iv = IntervalValue(years=2, days=3)
        assert formatter.render(iv, "%y %d", separator="-") == "2 years-3 days"

    def test_single_piece_has_no_separator(self, formatter):
        """Test a single surviving piece is not decorated."""
        iv = IntervalValue(days=3)
        assert formatter.render(iv, "%y %d", separator=" | ") == "3 days"

    def test_separator_with_percent(self, formatter):
        """Test separators containing % are copied literally."""
        iv = IntervalValue(years=2, days=3)
        assert formatter.render(iv, "%y %d", show_units=False, separator="%d") == "2%d3"

    def test_empty_separator(self, formatter):
        """Test pieces may be joined with nothing."""
        iv = IntervalValue(years=2, days=3)
        assert formatter.render(iv, "%y%d", show_units=False, separator="") == "23"


# =============================================================================
# Tokenizing
# =============================================================================


class TestTokenizing:
    """Tests for template tokenizing and validation."""

    def test_tokenize_strips_whitespace(self):
        """Test whitespace inside pieces is removed."""
        assert tokenize(" %y \t%m\n%d ") == ["%y", "%m", "%d"]

    def test_tokenize_drops_empty_pieces(self):
        """Test consecutive introducers do not produce pieces."""
        assert tokenize("%%y%%") == ["%y"]

    def test_tokenize_empty_template(self):
        """Test an empty template has no pieces."""
        assert tokenize("") == []

    def test_filter_tokens(self):
        """Test only vocabulary tokens survive."""
        assert filter_tokens(["%y", "%q", "%d-", "%F", "%s"]) == ["%y", "%s"]

    def test_token_vocabulary(self):
        """Test the vocabulary is the twelve component tokens."""
        assert sorted(TOKEN_UNITS) == sorted(
            ["%Y", "%y", "%M", "%m", "%D", "%d", "%H", "%h", "%I", "%i", "%S", "%s"]
        )

    def test_unknown_tokens_vanish(self, formatter, sample_interval):
        """Test unknown tokens render as if absent."""
        with_unknown = formatter.render(sample_interval, "%y %q %m %x %d %s %a")
        without = formatter.render(sample_interval, "%y %m %d %s")
        assert with_unknown == without

    def test_literal_text_is_discarded(self, formatter):
        """Test literal text glued to a token drops that piece."""
        iv = IntervalValue(years=1, days=2)
        assert formatter.render(iv, "%y-%d", show_units=False) == "2"

    def test_literal_words_between_tokens_vanish(self, formatter):
        """Test separate literal words do not survive."""
        iv = IntervalValue(years=1, days=2)
        assert formatter.render(iv, "%y and %d", show_units=False) == "2"

    def test_template_without_tokens(self, formatter, sample_interval):
        """Test a template with no tokens renders empty."""
        assert formatter.render(sample_interval, "no tokens here") == ""


# =============================================================================
# Translation
# =============================================================================


class TestTranslation:
    """Tests for the translation hook."""

    def test_language_from_options(self, provider, sample_interval):
        """Test the option language overrides the formatter default."""
        formatter = IntervalFormatter(provider, language_code="en")
        result = formatter.render(sample_interval, ALL_TOKENS, language_code="nl")
        assert result == "1 jaar 4 dagen 39 seconden"

    def test_language_from_formatter_default(self, provider, sample_interval):
        """Test the formatter default language applies when none is given."""
        formatter = IntervalFormatter(provider, language_code="nl")
        assert formatter.render(sample_interval, ALL_TOKENS) == "1 jaar 4 dagen 39 seconden"

    def test_short_option_names(self, provider, sample_interval):
        """Test the short option names are accepted."""
        formatter = IntervalFormatter(provider)
        result = formatter.render(sample_interval, ALL_TOKENS, langcode="nl", units=True)
        assert result == "1 jaar 4 dagen 39 seconden"

    def test_provider_receives_word_language_and_context(self, sample_interval):
        """Test the provider gets the English word, language and context."""
        recorder = RecordingProvider()
        formatter = IntervalFormatter(recorder, language_code="de", context="billing")
        result = formatter.render(sample_interval, "%y %d")
        assert result == "1 <year> 4 <days>"
        assert recorder.calls == [("year", "de", "billing"), ("days", "de", "billing")]

    def test_context_from_options(self, sample_interval):
        """Test the option context overrides the formatter default."""
        recorder = RecordingProvider()
        formatter = IntervalFormatter(recorder)
        formatter.render(sample_interval, "%d", translation_context="reports")
        assert recorder.calls == [("days", "en", "reports")]

    def test_provider_called_once_per_unit_and_plurality(self, sample_interval):
        """Test repeated tokens reuse one translation."""
        recorder = RecordingProvider()
        formatter = IntervalFormatter(recorder)
        formatter.render(sample_interval, "%d %D %d")
        assert recorder.calls == [("days", "en", "date_interval")]

    def test_provider_not_called_for_overridden_tokens(self, sample_interval):
        """Test overrides bypass the provider."""
        recorder = RecordingProvider()
        formatter = IntervalFormatter(recorder)
        formatter.render(sample_interval, "%y %d", show_units={"%y": ("y", "ys")})
        assert recorder.calls == [("days", "en", "date_interval")]

    def test_provider_not_called_without_units(self, sample_interval):
        """Test no translation happens when units are off."""
        recorder = RecordingProvider()
        IntervalFormatter(recorder).render(sample_interval, ALL_TOKENS, show_units=False)
        assert recorder.calls == []

    def test_provider_failure_propagates(self, sample_interval):
        """Test translation failures are not swallowed."""
        formatter = IntervalFormatter(FailingProvider())
        with pytest.raises(RuntimeError, match="catalog unavailable"):
            formatter.render(sample_interval, ALL_TOKENS)

    def test_strict_catalog_failure_propagates(self, sample_interval):
        """Test a strict catalog miss fails the whole render."""
        formatter = IntervalFormatter(CatalogTranslationProvider(strict=True), language_code="fr")
        with pytest.raises(TranslationError):
            formatter.render(sample_interval, ALL_TOKENS)

    def test_identity_provider(self, sample_interval):
        """Test the identity provider keeps English words."""
        formatter = IntervalFormatter(IdentityTranslationProvider(), language_code="xx")
        assert formatter.render(sample_interval, "%y") == "1 year"

    def test_default_provider_is_english_catalog(self):
        """Test a formatter without provider uses the English catalog."""
        formatter = IntervalFormatter()
        assert isinstance(formatter.translator, CatalogTranslationProvider)
        assert isinstance(formatter.translator, TranslationProvider)


# =============================================================================
# Options and Errors
# =============================================================================


class TestOptions:
    """Tests for FormatOptions and argument errors."""

    def test_defaults(self):
        """Test FormatOptions defaults."""
        opts = FormatOptions()
        assert opts.show_units is True
        assert opts.separator == " "
        assert opts.remove_empty_values is True
        assert opts.language_code is None
        assert opts.translation_context is None
        assert opts.empty_fallback is None

    def test_from_mapping(self):
        """Test building options from a settings mapping."""
        opts = FormatOptions.from_mapping(
            {"units": False, "separator": "-", "langcode": "nl", "context": "x"}
        )
        assert opts.show_units is False
        assert opts.separator == "-"
        assert opts.language_code == "nl"
        assert opts.translation_context == "x"

    def test_unknown_option_rejected(self):
        """Test unknown option names raise ValidationError."""
        with pytest.raises(ValidationError, match="colour"):
            FormatOptions().replace(colour="red")

    def test_options_are_immutable(self):
        """Test options cannot be changed in place."""
        opts = FormatOptions()
        with pytest.raises(AttributeError):
            opts.separator = "-"

    def test_options_with_overrides_are_hashable(self):
        """Test options holding an override mapping can be hashed."""
        opts = FormatOptions(show_units={"%d": ("a", "b")})
        assert hash(opts) == hash(FormatOptions(show_units={"%d": ("a", "b")}))
        assert opts == FormatOptions(show_units={"%d": ("a", "b")})
        assert opts != FormatOptions(show_units={"%d": ("a", "c")})

    def test_none_separator_uses_default(self, sample_interval):
        """Test separator=None falls back to a single space."""
        assert FormatOptions(separator=None).separator == " "
        assert render(sample_interval, "%y %d", show_units=False, separator=None) == "1 4"

    @pytest.mark.parametrize("separator", [False, 0, ["-"]])
    def test_non_string_separator_rejected(self, sample_interval, separator):
        """Test separators that are not strings raise ValidationError."""
        with pytest.raises(ValidationError, match="separator"):
            render(sample_interval, "%y %d", separator=separator)

    def test_formatter_default_options(self, sample_interval):
        """Test options given to the formatter apply to every call."""
        formatter = IntervalFormatter(options=FormatOptions(show_units=False, separator="/"))
        assert formatter.render(sample_interval, ALL_TOKENS) == "1/4/39"

    def test_call_options_replace_defaults(self, sample_interval):
        """Test an options object passed to render() replaces the defaults."""
        formatter = IntervalFormatter(options=FormatOptions(show_units=False, separator="/"))
        assert formatter.render(sample_interval, "%y %d", FormatOptions()) == "1 year 4 days"

    def test_overrides_on_top_of_options(self, sample_interval):
        """Test keyword overrides apply on top of an options object."""
        opts = FormatOptions(show_units=False)
        assert render(sample_interval, "%y %d", opts, separator="+") == "1+4"

    def test_missing_value_rejected(self, formatter):
        """Test formatting None raises ValidationError."""
        with pytest.raises(ValidationError):
            formatter.render(None, ALL_TOKENS)

    def test_wrong_value_type_rejected(self, formatter):
        """Test formatting a non-interval raises TypeError."""
        with pytest.raises(TypeError):
            formatter.render("P1D", ALL_TOKENS)

    def test_render_does_not_mutate_value(self, formatter, sample_interval):
        """Test the interval is unchanged after rendering."""
        before = sample_interval.to_dict()
        formatter.render(sample_interval, ALL_TOKENS, remove_empty_values=False)
        assert sample_interval.to_dict() == before
