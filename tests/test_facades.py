import pytest

from pagegen.errors import ConfigurationError
from pagegen.facades import FacadeIndex, chunk_is_page, normalize_facade_id
from pagegen.models import BuildArtifact, PageRecord, RouteData

INDEX_PAGE = PageRecord(RouteData("page", "src/pages/index.astro"), ("/", "/about"))


def _index(root="/home/me/site", **kwargs):
    return FacadeIndex(root, {"/src/pages/index.astro": INDEX_PAGE}, **kwargs)


@pytest.mark.parametrize(
    "facade_id, root, expected",
    [
        ("/home/me/site/src/pages/index.astro", "/home/me/site", "/src/pages/index.astro"),
        ("/home/me/site/src/pages/index.astro", "/home/me/site/", "/src/pages/index.astro"),
        ("C:\\site\\src\\pages\\index.astro", "C:\\site", "/src/pages/index.astro"),
        ("C:/site/src/pages/index.astro", "C:\\site", "/src/pages/index.astro"),
        ("src/pages/index.astro", "/home/me/site", "/src/pages/index.astro"),
        ("/elsewhere/page.astro", "/home/me/site", "/elsewhere/page.astro"),
    ],
)
def test_normalize_facade_id(facade_id, root, expected):
    assert normalize_facade_id(facade_id, root) == expected


def test_normalize_does_not_strip_sibling_directory_prefix():
    assert normalize_facade_id("/home/me/site2/a.astro", "/home/me/site") == "/home/me/site2/a.astro"


def test_chunk_with_known_facade_is_page():
    artifact = BuildArtifact("chunk", "index.py", "/home/me/site/src/pages/index.astro")
    assert chunk_is_page(artifact, _index())


def test_assets_and_chunks_without_facade_are_not_pages():
    index = _index()
    assert not chunk_is_page(BuildArtifact("asset", "index.css"), index)
    assert not chunk_is_page(BuildArtifact("chunk", "shared.py"), index)


def test_unknown_facade_is_not_page():
    artifact = BuildArtifact("chunk", "x.py", "/home/me/site/src/components/Button.astro")
    assert not chunk_is_page(artifact, _index())


def test_classification_ignores_separator_style():
    index = _index(root="C:\\site")
    forward = BuildArtifact("chunk", "index.py", "C:/site/src/pages/index.astro")
    backward = BuildArtifact("chunk", "index.py", "C:\\site\\src\\pages\\index.astro")

    assert chunk_is_page(forward, index) is chunk_is_page(backward, index) is True
    assert index.page_for(forward.facade_module_id) is index.page_for(backward.facade_module_id)


def test_classification_is_idempotent():
    artifact = BuildArtifact("chunk", "index.py", "/home/me/site/src/pages/index.astro")
    index = _index()
    assert [chunk_is_page(artifact, index) for _ in range(3)] == [True, True, True]


def test_stylesheets_and_hoisted_entry_default_to_empty():
    index = _index()
    facade = "/home/me/site/src/pages/index.astro"

    assert index.stylesheets_for(facade) == []
    assert index.hoisted_entry_for(facade) is None


def test_stylesheets_and_hoisted_entry_lookup():
    index = _index(
        stylesheets={"/src/pages/index.astro": ["a.css", "b.css"]},
        hoisted={"/src/pages/index.astro": "hoisted.js"},
    )
    facade = "/home/me/site/src/pages/index.astro"

    assert index.stylesheets_for(facade) == ["a.css", "b.css"]
    assert index.hoisted_entry_for(facade) == "hoisted.js"


def test_missing_page_record_is_configuration_error():
    index = FacadeIndex("/home/me/site", {}, stylesheets={"/src/pages/orphan.astro": ["o.css"]})
    facade = "/home/me/site/src/pages/orphan.astro"

    assert facade in index
    with pytest.raises(ConfigurationError, match="orphan.astro"):
        index.page_for(facade)
