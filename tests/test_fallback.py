"""Tests for wren.routing.fallback — fallback params and opaque keys."""

import re

import pytest

from wren.config import ResolverConfig
from wren.errors import InvalidRouteError, RequiredCatchallExhausted
from wren.routing.fallback import (
    FallbackRouteParam,
    ParamType,
    create_opaque_fallback_route_params,
    get_fallback_route_params,
)
from wren.routing.tree import create_loader_tree as tree

_KEY_RE = re.compile(r"^%%drp:(\w+):([0-9a-f]+)%%$")


class TestParamType:
    def test_values(self) -> None:
        assert {t.value for t in ParamType} == {"dynamic", "catchall", "optional-catchall"}

    def test_short_codes(self) -> None:
        assert ParamType.DYNAMIC.short == "d"
        assert ParamType.CATCHALL.short == "c"
        assert ParamType.OPTIONAL_CATCHALL.short == "oc"

    def test_compares_to_string(self) -> None:
        assert ParamType.DYNAMIC == "dynamic"


class TestFallbackRouteParam:
    def test_equality(self) -> None:
        assert FallbackRouteParam("id", ParamType.DYNAMIC) == FallbackRouteParam(
            "id", ParamType.DYNAMIC
        )

    def test_frozen(self) -> None:
        param = FallbackRouteParam("id", ParamType.DYNAMIC)
        with pytest.raises(AttributeError):
            param.param_name = "other"  # type: ignore[misc]


class TestCreateOpaqueFallbackRouteParams:
    def test_empty_is_none(self) -> None:
        assert create_opaque_fallback_route_params([]) is None

    def test_keys_and_types(self) -> None:
        opaque = create_opaque_fallback_route_params(
            [
                FallbackRouteParam("slug", ParamType.DYNAMIC),
                FallbackRouteParam("rest", ParamType.CATCHALL),
                FallbackRouteParam("extra", ParamType.OPTIONAL_CATCHALL),
            ]
        )
        assert opaque is not None
        assert list(opaque) == ["slug", "rest", "extra"]
        assert [short for _, short in opaque.values()] == ["d", "c", "oc"]

        for name, (search_value, _) in opaque.items():
            match = _KEY_RE.match(search_value)
            assert match is not None
            assert match.group(1) == name

    def test_one_id_per_call(self) -> None:
        opaque = create_opaque_fallback_route_params(
            [FallbackRouteParam("a", ParamType.DYNAMIC), FallbackRouteParam("b", ParamType.DYNAMIC)]
        )
        assert opaque is not None
        ids = {_KEY_RE.match(value).group(2) for value, _ in opaque.values()}
        assert len(ids) == 1

    def test_ids_differ_between_calls(self) -> None:
        params = [FallbackRouteParam("a", ParamType.DYNAMIC)]
        first = create_opaque_fallback_route_params(params)
        second = create_opaque_fallback_route_params(params)
        assert first is not None and second is not None
        assert first["a"][0] != second["a"][0]

    def test_first_record_of_a_name_wins(self) -> None:
        opaque = create_opaque_fallback_route_params(
            [
                FallbackRouteParam("slug", ParamType.OPTIONAL_CATCHALL),
                FallbackRouteParam("slug", ParamType.CATCHALL),
            ]
        )
        assert opaque is not None
        assert opaque["slug"][1] == "oc"


class TestGetFallbackRouteParams:
    def test_page_placeholders_become_fallbacks(self) -> None:
        loader_tree = tree(
            "",
            children=tree("blog", children=tree("[slug]", {"modal": tree("[photo]")})),
        )
        opaque = get_fallback_route_params("/blog/[slug]", loader_tree)
        assert opaque is not None
        assert list(opaque) == ["slug", "photo"]
        assert opaque["slug"][1] == "d"

    def test_concrete_page_has_none(self) -> None:
        loader_tree = tree("", children=tree("blog", children=tree("[slug]")))
        assert get_fallback_route_params("/blog/hello", loader_tree) is None

    def test_catchall_placeholder(self) -> None:
        loader_tree = tree("", children=tree("docs", children=tree("[...path]")))
        opaque = get_fallback_route_params("/docs/[...path]", loader_tree)
        assert opaque is not None
        assert opaque["path"][1] == "c"

    def test_exhausted_catchall_propagates(self) -> None:
        loader_tree = tree("", children=tree("docs", {"sidebar": tree("[...path]")}))
        with pytest.raises(RequiredCatchallExhausted):
            get_fallback_route_params("/", loader_tree)

    def test_unnormalized_page(self) -> None:
        loader_tree = tree("", children=tree("(shop)", children=tree("[item]")))
        config = ResolverConfig(normalized_routes=False)
        opaque = get_fallback_route_params("/(shop)/[item]", loader_tree, config)
        assert opaque is not None
        assert list(opaque) == ["item"]

    def test_normalized_page_rejects_groups(self) -> None:
        loader_tree = tree("", children=tree("(shop)", children=tree("[item]")))
        with pytest.raises(InvalidRouteError):
            get_fallback_route_params("/(shop)/[item]", loader_tree)

    def test_optional_catchall_page_keeps_its_type(self) -> None:
        loader_tree = tree("", children=tree("docs", children=tree("[[...slug]]")))
        opaque = get_fallback_route_params("/docs/[[...slug]]", loader_tree)
        assert opaque is not None
        assert list(opaque) == ["slug"]
        assert opaque["slug"][1] == "oc"

    def test_page_params_precede_tree_params(self) -> None:
        loader_tree = tree(
            "",
            {"sidebar": tree("[[...rest]]")},
            tree("[lang]", children=tree("[[...slug]]")),
        )
        opaque = get_fallback_route_params("/[lang]/[[...slug]]", loader_tree)
        assert opaque is not None
        assert [(name, short) for name, (_, short) in opaque.items()] == [
            ("lang", "d"),
            ("slug", "oc"),
            ("rest", "c"),
        ]

    def test_page_type_wins_without_dedupe(self) -> None:
        loader_tree = tree("", children=tree("docs", children=tree("[[...slug]]")))
        config = ResolverConfig(skip_known_fallbacks=False)
        opaque = get_fallback_route_params("/docs/[[...slug]]", loader_tree, config)
        assert opaque is not None
        assert opaque["slug"][1] == "oc"
