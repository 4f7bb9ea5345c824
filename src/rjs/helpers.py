"""Entry points turning a page update callback into JavaScript source."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mako.template import Template
from markupsafe import Markup, escape

from rjs.config import RJSConfig
from rjs.generator import Block, JavaScriptGenerator
from rjs.nodes import escape_javascript

if TYPE_CHECKING:
	from rjs.context import ViewContext

logger = logging.getLogger(__name__)

SCRIPT_TAG_TEMPLATE = Template(
	"""<script${attributes}>
//<![CDATA[
${content}
//]]>
</script>"""
)


def debug_envelope(source: str) -> str:
	"""Wrap ``source`` so browser-side errors are alerted along with the source."""
	return (
		f"try {{\n{source}\n}} catch (e) "
		"{ alert('RJS error:\\n\\n' + e.toString()); "
		f"alert('{escape_javascript(source)}'); throw e }}"
	)


def update_page(
	block: Block,
	context: ViewContext | None = None,
	config: RJSConfig | None = None,
) -> Markup:
	"""Run ``block`` against a new page and return the generated JavaScript.

	Example:

	    update_page(lambda page: page.hide("spinner"))
	    # -> Element.hide("spinner");
	"""
	config = config or RJSConfig()
	javascript = JavaScriptGenerator(context, block).render()
	if config.debug:
		logger.debug("Wrapping %d characters of JavaScript in the debug envelope", len(javascript))
		javascript = debug_envelope(javascript)
	return Markup(javascript)


def _tag_attributes(html_options: Mapping[str, Any]) -> str:
	attributes: dict[str, Any] = {"type": "text/javascript"}
	attributes.update(html_options)
	parts: list[str] = []
	for key, value in attributes.items():
		if value is None or value is False:
			continue
		if value is True:
			value = key
		parts.append(f' {key}="{escape(value)}"')
	return "".join(parts)


def javascript_tag(
	content: str, html_options: Mapping[str, Any] | None = None
) -> Markup:
	"""Wrap ``content`` in a ``<script>`` tag with a CDATA section."""
	return Markup(
		SCRIPT_TAG_TEMPLATE.render(
			attributes=_tag_attributes(html_options or {}),
			content=content,
		)
	)


def update_page_tag(
	block: Block,
	html_options: Mapping[str, Any] | None = None,
	context: ViewContext | None = None,
	config: RJSConfig | None = None,
) -> Markup:
	"""Like ``update_page`` but wrapped in a ``<script>`` tag for inline use in HTML."""
	return javascript_tag(update_page(block, context, config), html_options)
