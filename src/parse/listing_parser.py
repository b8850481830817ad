"""Parse the adoption listing page into cats."""
import logging
from typing import Optional

from selectolax.parser import HTMLParser, Node

from src.parse.models import Cat

logger = logging.getLogger(__name__)

# Selectors of the listing markup
ITEM_SELECTOR = ".cats .cat-item"
NAME_SELECTOR = ".cat-name"
TEXT_SELECTOR = ".cat-text"
TAG_SELECTOR = ".cat-tag"
SOLD_SELECTOR = ".sold"
BUTTON_SELECTOR = "a.btn"


def _find(node: Node, selector: str) -> list[Node]:
    """Descendants of node matching selector; the node itself never matches."""
    return [match for match in node.css(selector) if match.mem_id != node.mem_id]


def _joined_text(node: Node, selector: str) -> str:
    """Concatenate the text of every match, like jQuery's .text()."""
    return "".join(match.text() for match in _find(node, selector))


def _button_link(node: Node) -> Optional[str]:
    buttons = _find(node, BUTTON_SELECTOR)
    if not buttons:
        return None
    return buttons[0].attributes.get("href")


def parse_cat(node: Node) -> Cat:
    """Extract one cat from a .cat-item node. Texts are kept verbatim."""
    return Cat(
        name=_joined_text(node, NAME_SELECTOR),
        description=_joined_text(node, TEXT_SELECTOR),
        tags=tuple(tag.text() for tag in _find(node, TAG_SELECTOR)),
        is_sold=len(_find(node, SOLD_SELECTOR)) > 0,
        link=_button_link(node),
    )


def extract_cats(html_content: str, log=None) -> list[Cat]:
    """
    Extract all cats from the listing page, in document order.
    A page without .cat-item nodes yields an empty list.
    """
    log = log or logger
    nodes = HTMLParser(html_content).css(ITEM_SELECTOR) if html_content else []
    log.debug(f"Found {len(nodes)} cats")

    cats = []
    for i, node in enumerate(nodes):
        log.debug(f"Parsing cat {i}")
        cats.append(parse_cat(node))
    return cats
