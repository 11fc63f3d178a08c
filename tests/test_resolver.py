import asyncio

import pytest

from pagegen.errors import ResolutionError
from pagegen.models import SpecifierTable
from pagegen.resolver import (
    BEFORE_HYDRATION_PLACEHOLDER,
    BEFORE_HYDRATION_SPECIFIER,
    make_resolver,
    resolve_specifier,
)

TABLE = SpecifierTable(
    entries={
        "/src/components/Counter.jsx": "assets/Counter.1a2b.js",
        "hoisted.js": "assets/hoisted.9f8e.js",
    }
)


@pytest.mark.parametrize(
    "pathname, expected",
    [
        ("/", "./assets/Counter.1a2b.js"),
        ("/about", "../assets/Counter.1a2b.js"),
        ("/about/", "../assets/Counter.1a2b.js"),
        ("/blog/2021/post", "../../../assets/Counter.1a2b.js"),
        ("/assets", "./Counter.1a2b.js"),
    ],
)
def test_resolves_relative_to_pathname(pathname, expected):
    assert resolve_specifier("/src/components/Counter.jsx", pathname, TABLE) == expected


def test_resolved_paths_are_never_bare():
    for pathname in ["/", "/a", "/a/b", "/a/b/c/"]:
        resolved = resolve_specifier("hoisted.js", pathname, TABLE)
        assert resolved.startswith("./") or resolved.startswith("../")


def test_hidden_file_is_still_prefixed():
    table = SpecifierTable(entries={"x": ".well-known/x.js"})
    assert resolve_specifier("x", "/", table) == "./.well-known/x.js"


def test_resolution_is_deterministic():
    first = resolve_specifier("hoisted.js", "/about", TABLE)
    second = resolve_specifier("hoisted.js", "/about", TABLE)
    assert first == second


def test_missing_before_hydration_script_uses_placeholder():
    assert (
        resolve_specifier(BEFORE_HYDRATION_SPECIFIER, "/about", TABLE)
        == BEFORE_HYDRATION_PLACEHOLDER
    )


def test_built_before_hydration_script_resolves_normally():
    table = SpecifierTable(entries={BEFORE_HYDRATION_SPECIFIER: "assets/before.js"})
    assert resolve_specifier(BEFORE_HYDRATION_SPECIFIER, "/", table) == "./assets/before.js"


def test_missing_specifier_raises():
    with pytest.raises(ResolutionError) as excinfo:
        resolve_specifier("/src/components/Missing.jsx", "/", TABLE)
    assert excinfo.value.specifier == "/src/components/Missing.jsx"
    assert "Missing.jsx" in str(excinfo.value)


def test_bound_resolver_uses_pathname():
    resolve = make_resolver(TABLE, "/about")
    assert asyncio.run(resolve("hoisted.js")) == "../assets/hoisted.9f8e.js"
