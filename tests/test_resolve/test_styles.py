"""Tests for the style resolution algorithm."""

import pytest

from twinstyle.config import ConfigContext
from twinstyle.errors import NoMatchingClassError, StyleDescriptorError, UserConfigError
from twinstyle.model.request import StyleMapping, StyleRequest
from twinstyle.resolve.styles import is_empty, resolve, resolve_style


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


TEXT = (
    StyleMapping(prop="fontSize", config="fontSize"),
    StyleMapping(prop="color", config="textColor"),
)


@pytest.fixture(scope="module")
def config():
    return ConfigContext().resolve()


def _request(style_list, class_name, key=None, prefix="", config=None, **kwargs):
    return StyleRequest(
        style_list=style_list,
        class_name=class_name,
        key=key,
        prefix=prefix,
        config=config if config is not None else {},
        **kwargs,
    )


# ---------------------------------------------------------------------------
# is_empty
# ---------------------------------------------------------------------------


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, {}, "", "   ", [], ()])
    def test_empty(self, value):
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", [{"a": 1}, "x", 0, False, ["a"]])
    def test_not_empty(self, value):
        assert is_empty(value) is False


# ---------------------------------------------------------------------------
# Per-candidate probes
# ---------------------------------------------------------------------------


class TestDirectKey:
    def test_exact_key(self, config):
        mapping = StyleMapping(prop="lineHeight", config="lineHeight")
        result = resolve(mapping, _request(mapping, "leading-9", key="9", config=config))
        assert result == {"lineHeight": "2.25rem"}

    def test_default_key_for_bare_token(self, config):
        mapping = StyleMapping(prop="borderRadius", config="borderRadius")
        result = resolve(mapping, _request(mapping, "rounded", config=config))
        assert result == {"borderRadius": "0.25rem"}

    def test_negative_prefix(self, config):
        mapping = StyleMapping(prop="marginTop", config="margin")
        result = resolve(mapping, _request(mapping, "mt-4", key="4", prefix="-", config=config))
        assert result == {"marginTop": "-1rem"}

    def test_font_family_list(self, config):
        mapping = StyleMapping(prop="fontFamily", config="fontFamily")
        result = resolve(mapping, _request(mapping, "font-serif", key="serif", config=config))
        assert result == {"fontFamily": 'Georgia, Cambria, "Times New Roman", Times, serif'}

    def test_dotted_config_path(self, config):
        mapping = StyleMapping(prop="color", config="colors.red")
        result = resolve(mapping, _request(mapping, "red-500", key="500", config=config))
        assert result == {"color": "#f56565"}


class TestHyphenParts:
    def test_nested_color(self, config):
        mapping = StyleMapping(prop="color", config="textColor")
        result = resolve(mapping, _request(mapping, "text-red-500", key="red-500", config=config))
        assert result == {"color": "#f56565"}

    def test_part_without_follower(self, config):
        mapping = StyleMapping(prop="color", config="textColor")
        result = resolve(mapping, _request(mapping, "text-red", key="red", config=config))
        assert result is None

    def test_empty_parts_dropped(self):
        config = {"theme": {"colors": {"red": {"500": "#f56565"}}}}
        mapping = StyleMapping(prop="color", config="colors")
        result = resolve(mapping, _request(mapping, "text--red-500", key="-red-500", config=config))
        assert result == {"color": "#f56565"}


class TestPrefixedParts:
    def test_prefixed_key_nested_under_property(self):
        config = {"theme": {"inset": {"-x": {"4": "-1rem"}}}}
        mapping = StyleMapping(prop="left", config="inset")
        result = resolve(mapping, _request(mapping, "inset-x", key="4", prefix="-", config=config))
        assert result == {"left": {"left": "-1rem"}}

    def test_later_part_wrapped_once_more(self):
        config = {"theme": {"colors": {"brand": {"brand": "#123"}}}}
        mapping = StyleMapping(prop="color", config="colors")
        result = resolve(mapping, _request(mapping, "text-brand", key="brand", config=config))
        assert result == {"color": {"color": "#123"}}

    def test_property_list_wrapped(self):
        config = {"theme": {"inset": {"x": {"4": "1rem"}}}}
        mapping = StyleMapping(prop=("left", "right"), config="inset")
        result = resolve(mapping, _request(mapping, "inset-x", key="4", config=config))
        inner = {"left": "1rem", "right": "1rem"}
        assert result == {"left": inner, "right": inner}

    def test_first_part_is_skipped(self):
        config = {"theme": {"sizes": {"box": {"k": "1px"}}}}
        mapping = StyleMapping(prop="width", config="sizes")
        # "box" is the first part: only later parts are probed flat
        result = resolve(mapping, _request(mapping, "box", key="k", config=config))
        assert result is None


class TestPrecedence:
    def test_direct_key_beats_parts(self):
        config = {"theme": {"sizes": {"a-b": "direct", "a": {"b": "nested"}}}}
        mapping = StyleMapping(prop="width", config="sizes")
        result = resolve(mapping, _request(mapping, "x-a-b", key="a-b", config=config))
        assert result == {"width": "direct"}

    def test_nested_parts_beat_flat_parts(self):
        config = {"theme": {"sizes": {"a": {"b": "nested"}, "b": {"k": "flat"}}}}
        mapping = StyleMapping(prop="width", config="sizes")
        result = resolve(mapping, _request(mapping, "x-a-b", key="k", config=config))
        assert result == {"width": "nested"}


class TestConfigPath:
    def test_missing_section(self):
        mapping = StyleMapping(prop="marginTop", config="spacing")
        with pytest.raises(UserConfigError, match="mt-4 expects spacing in the Tailwind config"):
            resolve(mapping, _request(mapping, "mt-4", key="4", config={"theme": {}}))

    def test_section_not_a_mapping(self):
        mapping = StyleMapping(prop="marginTop", config="spacing")
        config = {"theme": {"spacing": "4px"}}
        with pytest.raises(UserConfigError) as exc_info:
            resolve(mapping, _request(mapping, "mt-4", key="4", config=config))
        assert exc_info.value.path == "theme.spacing"
        assert exc_info.value.class_name == "mt-4"

    def test_no_theme(self):
        mapping = StyleMapping(prop="color", config="colors")
        with pytest.raises(UserConfigError):
            resolve(mapping, _request(mapping, "text-red", key="red"))


# ---------------------------------------------------------------------------
# resolve_style dispatch
# ---------------------------------------------------------------------------


class TestResolveStyleSingle:
    def test_match(self, config):
        mapping = StyleMapping(prop="letterSpacing", config="letterSpacing")
        request = _request(mapping, "tracking-widest", key="widest", config=config)
        assert resolve_style(request) == {"letterSpacing": "0.1em"}

    def test_no_match(self, config):
        mapping = StyleMapping(prop="lineHeight", config="lineHeight")
        request = _request(mapping, "leading-99", key="99", config=config)
        with pytest.raises(NoMatchingClassError) as exc_info:
            resolve_style(request)
        assert exc_info.value.class_name == "leading-99"
        assert "leading-9" in exc_info.value.suggestions

    def test_negative_class_name_in_error(self, config):
        mapping = StyleMapping(prop="marginTop", config="margin")
        request = _request(mapping, "mt-999", key="999", prefix="-", config=config)
        with pytest.raises(NoMatchingClassError, match='"-mt-999" was not found'):
            resolve_style(request)

    def test_missing_section_is_not_a_no_match(self):
        mapping = StyleMapping(prop="marginTop", config="spacing")
        request = _request(mapping, "mt-4", key="4", config={"theme": {"colors": {}}})
        with pytest.raises(UserConfigError):
            resolve_style(request)


class TestResolveStyleList:
    def test_first_candidate(self, config):
        request = _request(TEXT, "text-lg", key="lg", config=config)
        assert resolve_style(request) == {"fontSize": "1.125rem"}

    def test_second_candidate(self, config):
        request = _request(TEXT, "text-red-500", key="red-500", config=config)
        assert resolve_style(request) == {"color": "#f56565"}

    def test_list_style_list(self, config):
        request = _request(list(TEXT), "text-white", key="white", config=config)
        assert resolve_style(request) == {"color": "#fff"}

    def test_no_candidate(self, config):
        request = _request(TEXT, "text-red-999", key="red-999", config=config)
        with pytest.raises(NoMatchingClassError) as exc_info:
            resolve_style(request)
        assert exc_info.value.suggestions[0] == "text-red-900"
        assert "Did you mean" in str(exc_info.value)

    def test_without_suggestions(self, config):
        request = _request(
            TEXT, "text-red-999", key="red-999", config=config, has_suggestions=False
        )
        with pytest.raises(NoMatchingClassError) as exc_info:
            resolve_style(request)
        assert exc_info.value.suggestions == []
        assert str(exc_info.value) == '"text-red-999" was not found'

    def test_missing_section_propagates(self, config):
        style_list = (
            StyleMapping(prop="fontSize", config="fontSize"),
            StyleMapping(prop="color", config="nope"),
        )
        request = _request(style_list, "text-red-500", key="red-500", config=config)
        with pytest.raises(UserConfigError):
            resolve_style(request)

    def test_stops_at_first_match(self, config):
        style_list = (
            StyleMapping(prop="fontSize", config="fontSize"),
            StyleMapping(prop="color", config="nope"),
        )
        request = _request(style_list, "text-lg", key="lg", config=config)
        assert resolve_style(request) == {"fontSize": "1.125rem"}


class TestResolveStyleDescriptor:
    def test_unsupported_shape(self, config):
        request = _request("fontSize", "text-lg", key="fontSize", config=config)
        with pytest.raises(
            StyleDescriptorError, match='"text-lg" requires "fontSize" in the Tailwind config'
        ):
            resolve_style(request)

    def test_list_of_other_things(self, config):
        request = _request(["fontSize"], "text-lg", key="lg", config=config)
        with pytest.raises(StyleDescriptorError):
            resolve_style(request)
