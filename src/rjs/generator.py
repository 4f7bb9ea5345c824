"""Record calls on a virtual page object and render them as JavaScript.

A ``JavaScriptGenerator`` is handed to a callback as ``page``. Known
operations (``alert``, ``assign``, ``call``, ``delay``, the DOM helpers from
``rjs.prototype``...) record statements directly. Any other public name
starts a ``CallChain``, which renders as one chained expression:

    # Generates:
    #     Event.observe("one", "click", function() { $("two").show(); });
    #     $("list").addClassName("busy");
    #     tracker().log("updated");
    def update(page):
        page.call("Event.observe", "one", "click", block=lambda p: p["two"].show())
        page["list"].addClassName("busy")
        page.tracker.log("updated")
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any, TypeAlias, override

from rjs.errors import ChainError, RJSError
from rjs.nodes import JSFunction, JSRaw, JSString, encode, encode_loose, literal
from rjs.prototype import PrototypeMethods

if TYPE_CHECKING:
	from rjs.context import ViewContext

logger = logging.getLogger(__name__)

Block: TypeAlias = "Callable[[JavaScriptGenerator], object]"

_TRAILING_TERMINATORS = re.compile(r"[\s;]+\Z")


def normalize_statement(line: str) -> str:
	"""Strip trailing whitespace and semicolons, then terminate with exactly one ``;``."""
	return _TRAILING_TERMINATORS.sub("", line) + ";"


def _reject_keywords(method: str, kwargs: dict[str, Any]) -> None:
	if kwargs:
		names = ", ".join(sorted(kwargs))
		raise ChainError(
			f"{method}() got unsupported keyword arguments: {names}; JavaScript calls are positional"
		)


@dataclass(frozen=True)
class Statement:
	text: str

	@override
	def __str__(self) -> str:
		return self.text


@dataclass
class _Segment:
	method: str
	# None until the segment is called
	args: list[Any] | None = None

	def emit(self) -> str:
		args = ", ".join(encode_loose(arg) for arg in self.args or ())
		return f"{self.method}({args})"


class CallChain:
	"""An unresolved sequence of method calls, rendered as ``a(x).b(y)``.

	Segments are added explicitly with ``then`` or through attribute access.
	Attribute access opens a segment without arguments; calling the chain
	fills them in. A segment that is never called still renders as ``name()``.
	"""

	__slots__: tuple[str, ...] = ("_generator", "_segments")
	_generator: JavaScriptGenerator
	_segments: list[_Segment]

	def __init__(
		self,
		generator: JavaScriptGenerator,
		method: str,
		args: list[Any] | None = None,
	) -> None:
		self._generator = generator
		self._segments = [_Segment(method, args)]

	def then(
		self, method: str, *args: Any, block: Block | None = None, **kwargs: Any
	) -> CallChain:
		_reject_keywords(method, kwargs)
		self._segments.append(
			_Segment(method, self._generator._arguments(args, block))
		)
		return self

	def __getattr__(self, name: str) -> CallChain:
		if name.startswith("_"):
			raise AttributeError(name)
		self._segments.append(_Segment(name))
		return self

	def __call__(
		self, *args: Any, block: Block | None = None, **kwargs: Any
	) -> CallChain:
		segment = self._segments[-1]
		_reject_keywords(segment.method, kwargs)
		if segment.args is not None:
			raise ChainError(
				f"{segment.method}() was already called; use then() to add another call"
			)
		segment.args = self._generator._arguments(args, block)
		return self

	def render(self) -> str:
		return normalize_statement(".".join(s.emit() for s in self._segments))

	@override
	def __str__(self) -> str:
		return self.render()

	@override
	def __repr__(self) -> str:
		methods = ".".join(s.method for s in self._segments)
		return f"<CallChain {methods}>"


SessionItem: TypeAlias = Statement | CallChain


class JavaScriptGenerator(PrototypeMethods):
	"""Accumulates the statements of one page update.

	Items are rendered in the order they were added, joined by newlines.
	Call chains are only turned into text when the session is rendered.
	"""

	_context: ViewContext | None
	_items: list[SessionItem]

	def __init__(
		self, context: ViewContext | None = None, block: Block | None = None
	) -> None:
		self._context = context
		self._items = []
		if block is not None:
			self._run(block)

	def _run(self, block: Block) -> None:
		with_output_buffer = getattr(self._context, "with_output_buffer", None)
		buffer = (
			with_output_buffer(self._items)
			if with_output_buffer is not None
			else nullcontext()
		)
		with buffer:
			block(self)

	@property
	def context(self) -> ViewContext | None:
		return self._context

	@property
	def page(self) -> JavaScriptGenerator:
		return self

	@property
	def items(self) -> tuple[SessionItem, ...]:
		return tuple(self._items)

	def render(self) -> str:
		return "\n".join(str(item) for item in self._items)

	@override
	def __str__(self) -> str:
		return self.render()

	# Recording

	@override
	def record(self, line: str) -> str:
		line = normalize_statement(line)
		self._items.append(Statement(line))
		return line

	def append(self, javascript: str) -> JavaScriptGenerator:
		"""Write raw JavaScript to the page, as-is."""
		self._items.append(Statement(javascript))
		return self

	def __lshift__(self, javascript: str) -> JavaScriptGenerator:
		return self.append(javascript)

	@override
	def chain(
		self, method: str, *args: Any, block: Block | None = None, **kwargs: Any
	) -> CallChain:
		_reject_keywords(method, kwargs)
		proxy = CallChain(self, method, self._arguments(args, block))
		self._items.append(proxy)
		return proxy

	def __getattr__(self, name: str) -> Any:
		if name.startswith("_"):
			raise AttributeError(name)
		helpers = getattr(self._context, "helpers", None)
		if helpers and name in helpers:
			return partial(helpers[name], self)
		logger.debug("Proxying unknown page method %r into a call chain", name)
		proxy = CallChain(self, name)
		self._items.append(proxy)
		return proxy

	# Known operations

	def literal(self, code: object) -> JSRaw:
		"""Returns a value that encodes to ``code`` verbatim."""
		return literal(code)

	def alert(self, message: object) -> str:
		return self.call("alert", message)

	def redirect_to(self, location: str | Any) -> str:
		"""Send the browser to ``location``, a URL or a route for ``context.url_for``."""
		if isinstance(location, str):
			url = location
		elif self._context is None:
			raise RJSError("Resolving a route requires a view context")
		else:
			url = self._context.url_for(location)
		return self.record(f"window.location.href = {JSString(url).emit()}")

	def reload(self) -> str:
		return self.record("window.location.reload()")

	def call(self, function: str, *args: Any, block: Block | None = None) -> str:
		"""Call the JavaScript ``function`` with ``args``.

		``block`` is run against a new generator sharing this context, and the
		result is passed as a trailing ``function() { ... }`` argument.
		"""
		arguments = ", ".join(encode(arg) for arg in self._arguments(args, block))
		return self.record(f"{function}({arguments})")

	def assign(self, variable: str, value: object) -> str:
		return self.record(f"{variable} = {encode(value)}")

	@contextmanager
	def delay(self, seconds: float = 1) -> Iterator[JavaScriptGenerator]:
		"""Run the statements of the ``with`` body after ``seconds``.

		Unlike ``call(block=...)`` the body records into this same session,
		between the opening and closing lines of the ``setTimeout``.
		"""
		self.append("setTimeout(function() {")
		yield self
		self.record(f"}}, {int(seconds * 1000)})")

	# Closures

	def _arguments(self, args: tuple[Any, ...], block: Block | None) -> list[Any]:
		arguments = list(args)
		if block is not None:
			arguments.append(self._block_to_function(block))
		return arguments

	def _block_to_function(self, block: Block) -> JSFunction:
		generator = type(self)(self._context, block)
		return JSFunction(generator.render())


__all__ = [
	"Block",
	"CallChain",
	"JavaScriptGenerator",
	"SessionItem",
	"Statement",
	"normalize_statement",
]
