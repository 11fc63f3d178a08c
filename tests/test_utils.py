import pytest

from pagegen.config import BuildConfig
from pagegen.utils import get_time_stat, page_name, prepend_forward_slash, to_posix


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (0.0, 0.0004, "0ms"),
        (1.0, 1.012, "12ms"),
        (0.0, 0.0005, "1ms"),
        (0.0, 0.0025, "3ms"),
        (0.0, 0.749, "749ms"),
        (0.0, 1.5, "1.50s"),
        (2.0, 14.3, "12.30s"),
    ],
)
def test_get_time_stat(start, end, expected):
    assert get_time_stat(start, end) == expected


def test_page_name():
    assert page_name("/") == ""
    assert page_name("/about") == "about/"
    assert page_name("/docs/intro/") == "docs/intro/"


def test_path_helpers():
    assert prepend_forward_slash("src/x") == "/src/x"
    assert prepend_forward_slash("/src/x") == "/src/x"
    assert to_posix("C:\\a\\b") == "C:/a/b"


def test_build_config_defaults(tmp_path):
    config = BuildConfig(output_root=tmp_path / "dist")

    assert config.concurrency == 1
    assert config.chunk_root == tmp_path / "dist"
    assert config.head_inline_scripts() == []


@pytest.mark.parametrize("overrides", [{"concurrency": 0}, {"page_url_format": "flat"}])
def test_build_config_validation(tmp_path, overrides):
    with pytest.raises(ValueError):
        BuildConfig(output_root=tmp_path, **overrides)
