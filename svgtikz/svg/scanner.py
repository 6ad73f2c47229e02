"""SVG document scanner — facade over lxml.etree.iterparse.

Yields one SvgNode per element start tag, lazily, in document order.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

from lxml import etree

from svgtikz.config import Settings, settings
from svgtikz.exceptions import DocumentParseError
from svgtikz.models.svg_node import SvgNode

logger = logging.getLogger(__name__)


def iter_nodes(data: bytes, config: Settings | None = None) -> Iterator[SvgNode]:
    """Scan an in-memory SVG document into element nodes.

    The scan is single-pass; content after the point where the caller stops
    iterating is never tokenized.
    """
    config = config or settings
    logger.debug("Scanning %d bytes of SVG", len(data))

    events = etree.iterparse(
        io.BytesIO(data),
        events=("start",),
        huge_tree=config.svgtikz_huge_tree,
        resolve_entities=config.svgtikz_resolve_entities,
        no_network=True,
    )
    try:
        for _, element in events:
            yield SvgNode(
                tag=etree.QName(element).localname,
                attributes=dict(element.attrib),
                line=element.sourceline,
            )
    except etree.XMLSyntaxError as e:
        logger.warning("Failed to parse SVG document: %s", e)
        raise DocumentParseError(f"Failed to parse SVG document: {e}") from e
