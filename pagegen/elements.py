"""Link and script elements injected into the head of rendered pages."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from .config import InjectedScript
from .utils import append_forward_slash

DEFAULT_SITE = "http://localhost/"


@dataclass(frozen=True)
class SSRElement:
    """An element rendered on the server: tag name, attributes and text content."""

    tag: str
    props: Tuple[Tuple[str, str], ...] = ()
    children: str = ""

    def attrs(self) -> dict:
        return dict(self.props)


def get_root_path(site: Optional[str]) -> str:
    """Return the base path that ``site`` deploys under (``/`` when unset)."""
    return append_forward_slash(urlparse(site or DEFAULT_SITE).path or "/")


def join_to_root(href: str, site: Optional[str]) -> str:
    root = get_root_path(site)
    return posixpath.normpath(root.rstrip("/") + "/" + href.lstrip("/"))


def create_link_stylesheet_element(href: str, site: Optional[str] = None) -> SSRElement:
    return SSRElement(
        tag="link",
        props=(("rel", "stylesheet"), ("href", join_to_root(href, site))),
    )


def create_link_stylesheet_element_set(
    hrefs: Iterable[str], site: Optional[str] = None
) -> List[SSRElement]:
    return [create_link_stylesheet_element(href, site) for href in dict.fromkeys(hrefs)]


def create_module_script_element_with_src(src: str, site: Optional[str] = None) -> SSRElement:
    return SSRElement(
        tag="script",
        props=(("type", "module"), ("src", join_to_root(src, site))),
    )


def create_module_script_element_with_src_set(
    srcs: Iterable[str], site: Optional[str] = None
) -> List[SSRElement]:
    return [create_module_script_element_with_src(src, site) for src in dict.fromkeys(srcs)]


def create_inline_script_element(script: InjectedScript) -> SSRElement:
    return SSRElement(tag="script", children=script.content)


def render_elements(elements: Iterable[SSRElement]) -> str:
    """Serialize elements to HTML markup, one element per line."""
    soup = BeautifulSoup("", "html.parser")
    rendered = []
    for element in elements:
        tag = soup.new_tag(element.tag, attrs=element.attrs())
        if element.children:
            tag.string = element.children
        rendered.append(str(tag))
    return "\n".join(rendered)
