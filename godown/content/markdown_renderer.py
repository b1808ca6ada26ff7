"""Markdown-to-HTML adapter over Python-Markdown."""

import re
import xml.etree.ElementTree as etree

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

_ABSOLUTE_LINK = re.compile(r"^(?:[a-zA-Z][a-zA-Z0-9+.-]*:|//)")


class TargetBlankTreeprocessor(Treeprocessor):
    """Opens absolute links in a new tab; relative links stay in place."""

    def run(self, root: etree.Element) -> None:
        for anchor in root.iter("a"):
            href = anchor.get("href", "")
            if _ABSOLUTE_LINK.match(href):
                anchor.set("target", "_blank")


class TargetBlankExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        md.treeprocessors.register(TargetBlankTreeprocessor(md), "target_blank", 5)


ENGINE_EXTENSIONS = [
    "toc",
    "tables",
    "fenced_code",
    "sane_lists",
    "def_list",
    "attr_list",
    "smarty",
    "pymdownx.tilde",
    "pymdownx.magiclink",
]


def build_engine() -> markdown.Markdown:
    """Build a Markdown engine with the common block and inline extensions.

    Heading IDs (automatic or ``{#id}``), tables, fenced code, definition
    lists, strikethrough, bare URL autolinks, smart punctuation, and new-tab
    absolute links.
    """
    return markdown.Markdown(
        extensions=[*ENGINE_EXTENSIONS, TargetBlankExtension()],
        output_format="html",
    )


def markdown_to_html(source: bytes) -> str:
    """Render Markdown bytes to an HTML fragment.

    Markdown instances keep per-document state, so each call gets its own.
    """
    return build_engine().convert(source.decode("utf-8", errors="replace"))
