"""Prototype and script.aculo.us operations available on the page object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from rjs.errors import RJSError
from rjs.nodes import encode

if TYPE_CHECKING:
	from rjs.context import ViewContext
	from rjs.generator import CallChain

INSERTION_POSITIONS: frozenset[str] = frozenset({"top", "bottom", "before", "after"})

TOGGLE_EFFECTS: frozenset[str] = frozenset({"toggle_appear", "toggle_slide", "toggle_blind"})


def _camelize(name: str) -> str:
	return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


class PrototypeMethods(ABC):
	"""DOM helpers built on top of ``record`` and ``chain``.

	Example:

	    # Generates:
	    #     Element.insert("list", { bottom: "<li>Some item</li>" });
	    #     new Effect.Highlight("list",{});
	    #     ["status-indicator", "cancel-link"].each(Element.hide);
	    def update(page):
	        page.insert_html("bottom", "list", f"<li>{item.name}</li>")
	        page.visual_effect("highlight", "list")
	        page.hide("status-indicator", "cancel-link")
	"""

	_context: ViewContext | None

	@abstractmethod
	def record(self, line: str) -> str:
		raise NotImplementedError

	@abstractmethod
	def chain(
		self, method: str, *args: Any, block: Any = None, **kwargs: Any
	) -> CallChain:
		raise NotImplementedError

	def __getitem__(self, id: str) -> CallChain:
		"""Proxy to the element with the given id: ``page["two"].show()``."""
		return self.chain("$", id)

	def select(self, pattern: str) -> CallChain:
		"""Proxy to the elements matching a CSS selector: ``$$("p.welcome")``."""
		return self.chain("$$", pattern)

	def render_fragment(self, *args: Any, **options: Any) -> str:
		"""Keyword options render through the context, a positional value is used as-is."""
		if options:
			if self._context is None:
				raise RJSError("Rendering a template requires a view context")
			return self._context.render(**options)
		return str(args[0]) if args else ""

	def insert_html(self, position: str, id: str, *args: Any, **options: Any) -> str:
		position = position.lower()
		if position not in INSERTION_POSITIONS:
			raise ValueError(
				f"Invalid insertion position {position!r}, expected one of {sorted(INSERTION_POSITIONS)}"
			)
		content = encode(self.render_fragment(*args, **options))
		return self.record(f"Element.insert({encode(id)}, {{ {position}: {content} }})")

	def replace_html(self, id: str, *args: Any, **options: Any) -> str:
		content = encode(self.render_fragment(*args, **options))
		return self.record(f"Element.update({encode(id)}, {content})")

	def replace(self, id: str, *args: Any, **options: Any) -> str:
		content = encode(self.render_fragment(*args, **options))
		return self.record(f"Element.replace({encode(id)}, {content})")

	def remove(self, *ids: str) -> str:
		return self._loop_on_multiple_args("Element.remove", ids)

	def show(self, *ids: str) -> str:
		return self._loop_on_multiple_args("Element.show", ids)

	def hide(self, *ids: str) -> str:
		return self._loop_on_multiple_args("Element.hide", ids)

	def toggle(self, *ids: str) -> str:
		return self._loop_on_multiple_args("Element.toggle", ids)

	def visual_effect(
		self, name: str, element_id: str | None = None, **options: Any
	) -> str:
		element = encode(element_id) if element_id is not None else "element"
		# script.aculo.us option style: bare keys, no space before the options object
		js_options = "{" + ", ".join(
			f"{key}:{encode(value)}" for key, value in sorted(options.items())
		) + "}"
		if name in TOGGLE_EFFECTS:
			effect = name.removeprefix("toggle_")
			return self.record(f"Effect.toggle({element},'{effect}',{js_options})")
		return self.record(f"new Effect.{_camelize(name)}({element},{js_options})")

	def _loop_on_multiple_args(self, method: str, ids: tuple[str, ...]) -> str:
		if len(ids) > 1:
			return self.record(f"{encode(list(ids))}.each({method})")
		return self.record(f"{method}({encode(ids[0] if ids else None)})")
