"""Tests for merging user configuration over the defaults."""

import pytest

from twinstyle.config.defaults import DEFAULT_CONFIG
from twinstyle.config.merge import (
    ThemeGetter,
    apply_extend,
    deep_merge,
    evaluate_theme,
    freeze,
    merge_configs,
    thaw,
)
from twinstyle.errors import UserConfigError


# ---------------------------------------------------------------------------
# deep_merge
# ---------------------------------------------------------------------------


class TestDeepMerge:
    def test_override_wins(self):
        assert deep_merge({"a": "1"}, {"a": "2"}) == {"a": "2"}

    def test_nested_keys_preserved(self):
        base = {"colors": {"red": {"100": "#fff5f5", "500": "#f56565"}}}
        override = {"colors": {"red": {"500": "#ff0000"}, "brand": "#123456"}}
        merged = deep_merge(base, override)
        assert merged == {
            "colors": {
                "red": {"100": "#fff5f5", "500": "#ff0000"},
                "brand": "#123456",
            }
        }

    def test_lists_replaced(self):
        merged = deep_merge({"sans": ["a", "b"]}, {"sans": ["c"]})
        assert merged == {"sans": ["c"]}

    def test_inputs_untouched(self):
        base = {"a": {"b": "1"}}
        override = {"a": {"c": "2"}}
        deep_merge(base, override)
        assert base == {"a": {"b": "1"}}
        assert override == {"a": {"c": "2"}}

    def test_mapping_replaces_scalar(self):
        assert deep_merge({"a": "1"}, {"a": {"b": "2"}}) == {"a": {"b": "2"}}


class TestApplyExtend:
    def test_extend_merged(self):
        theme = {"colors": {"red": "#f00"}, "extend": {"colors": {"brand": "#123"}}}
        assert apply_extend(theme) == {"colors": {"red": "#f00", "brand": "#123"}}

    def test_no_extend(self):
        assert apply_extend({"colors": {}}) == {"colors": {}}

    def test_extend_must_be_mapping(self):
        with pytest.raises(UserConfigError):
            apply_extend({"extend": ["colors"]})


# ---------------------------------------------------------------------------
# Callable theme values
# ---------------------------------------------------------------------------


class TestThemeGetter:
    def test_reads_dot_path(self):
        getter = ThemeGetter({"colors": {"gray": {"300": "#e2e8f0"}}})
        assert getter("colors.gray.300") == "#e2e8f0"

    def test_default_for_missing(self):
        getter = ThemeGetter({"colors": {}})
        assert getter("colors.gray.300", "currentColor") == "currentColor"
        assert getter("spacing", {}) == {}

    def test_callable_section(self):
        getter = ThemeGetter({"colors": {"red": "#f00"}, "textColor": lambda t: t("colors")})
        assert getter("textColor.red") == "#f00"

    def test_negative(self):
        getter = ThemeGetter({})
        assert getter.negative({"0": "0", "1": "0.25rem", "auto": "auto", "2": 8}) == {
            "-1": "-0.25rem",
            "-2": -8,
        }

    def test_circular_reference(self):
        theme = {"a": lambda t: t("b"), "b": lambda t: t("a")}
        with pytest.raises(UserConfigError, match="Circular theme reference"):
            evaluate_theme(theme)


class TestEvaluateTheme:
    def test_callables_replaced(self):
        theme = evaluate_theme(
            {
                "spacing": {"4": "1rem"},
                "margin": lambda t: {"auto": "auto", **t("spacing"), **t.negative(t("spacing"))},
            }
        )
        assert theme["margin"] == {"auto": "auto", "4": "1rem", "-4": "-1rem"}

    def test_nested_callable(self):
        theme = evaluate_theme({"colors": {"red": "#f00"}, "x": {"y": lambda t: t("colors.red")}})
        assert theme["x"] == {"y": "#f00"}


# ---------------------------------------------------------------------------
# freeze / merge_configs
# ---------------------------------------------------------------------------


class TestFreeze:
    def test_mapping_read_only(self):
        frozen = freeze({"a": {"b": "1"}})
        with pytest.raises(TypeError):
            frozen["a"]["b"] = "2"  # type: ignore[index]

    def test_lists_become_tuples(self):
        assert freeze({"sans": ["a", "b"]})["sans"] == ("a", "b")

    def test_thaw_round_trip(self):
        tree = {"a": {"b": ["c"]}}
        assert thaw(freeze(tree)) == tree


class TestMergeConfigs:
    def test_defaults_only(self):
        config = merge_configs(None, DEFAULT_CONFIG)
        assert config["theme"]["fontSize"]["base"] == "1rem"
        assert config["plugins"] == ()

    def test_user_palette_flows_into_text_color(self):
        user = {"theme": {"colors": {"red": {"500": "#ff0000"}}}}
        config = merge_configs(user, DEFAULT_CONFIG)
        assert config["theme"]["textColor"]["red"]["500"] == "#ff0000"
        assert config["theme"]["textColor"]["red"]["100"] == "#fff5f5"

    def test_margin_has_negative_spacing(self):
        config = merge_configs(None, DEFAULT_CONFIG)
        margin = config["theme"]["margin"]
        assert margin["-4"] == "-1rem"
        assert "-0" not in margin
        assert margin["auto"] == "auto"

    def test_border_color_default(self):
        config = merge_configs(None, DEFAULT_CONFIG)
        assert config["theme"]["borderColor"]["default"] == "#e2e8f0"

    def test_extra_keys_kept(self):
        config = merge_configs({"separator": "_"}, DEFAULT_CONFIG)
        assert config["separator"] == "_"

    def test_plugins_kept_as_given(self):
        def plugin(api):
            pass

        config = merge_configs({"plugins": [plugin]}, DEFAULT_CONFIG)
        assert config["plugins"] == (plugin,)

    def test_result_is_frozen(self):
        config = merge_configs(None, DEFAULT_CONFIG)
        with pytest.raises(TypeError):
            config["theme"]["colors"]["black"] = "#111"  # type: ignore[index]

    def test_defaults_not_mutated(self):
        merge_configs({"theme": {"colors": {"black": "#111"}}}, DEFAULT_CONFIG)
        assert DEFAULT_CONFIG["theme"]["colors"]["black"] == "#000"

    @pytest.mark.parametrize(
        "user",
        [
            ["not", "a", "mapping"],
            {"theme": "dark"},
            {"plugins": "typography"},
        ],
    )
    def test_invalid_shapes(self, user):
        with pytest.raises(UserConfigError):
            merge_configs(user, DEFAULT_CONFIG)
