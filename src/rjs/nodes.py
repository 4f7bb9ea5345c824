from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, override

###############################################################################
# JS AST
###############################################################################


class JSNode(ABC):
	@abstractmethod
	def emit(self) -> str:
		raise NotImplementedError


class JSExpr(JSNode, ABC):
	pass


@dataclass
class JSString(JSExpr):
	value: str

	@override
	def emit(self) -> str:
		s = self.value
		# Escape for double-quoted JS string literals
		s = (
			s.replace("\\", "\\\\")
			.replace('"', '\\"')
			.replace("\n", "\\n")
			.replace("\r", "\\r")
			.replace("\t", "\\t")
			.replace("\b", "\\b")
			.replace("\f", "\\f")
			.replace("\v", "\\v")
			.replace("\x00", "\\x00")
			.replace("\u2028", "\\u2028")
			.replace("\u2029", "\\u2029")
		)
		return f'"{s}"'


@dataclass
class JSNumber(JSExpr):
	value: int | float

	@override
	def emit(self) -> str:
		value = self.value
		if isinstance(value, float):
			if math.isnan(value) or math.isinf(value):
				raise ValueError(f"Out of range float value is not JSON compliant: {value!r}")
			if value.is_integer():
				return str(int(value))
		return str(value)


@dataclass
class JSBoolean(JSExpr):
	value: bool

	@override
	def emit(self) -> str:
		return "true" if self.value else "false"


@dataclass
class JSNull(JSExpr):
	@override
	def emit(self) -> str:
		return "null"


@dataclass
class JSArray(JSExpr):
	elements: Sequence[JSExpr]

	@override
	def emit(self) -> str:
		inner = ", ".join(e.emit() for e in self.elements)
		return f"[{inner}]"


@dataclass
class JSProp(JSExpr):
	key: JSString
	value: JSExpr

	@override
	def emit(self) -> str:
		return f"{self.key.emit()}: {self.value.emit()}"


@dataclass
class JSObjectExpr(JSExpr):
	props: Sequence[JSProp]

	@override
	def emit(self) -> str:
		inner = ", ".join(p.emit() for p in self.props)
		return "{" + inner + "}"


@dataclass
class JSRaw(JSExpr):
	"""Code that is already valid JavaScript. Emitted verbatim at any depth."""

	content: str

	@override
	def emit(self) -> str:
		return self.content


class JSFunction(JSRaw):
	"""An argument-less function literal wrapping an already rendered body."""

	def __init__(self, body: str) -> None:
		super().__init__(f"function() {{ {body} }}")


###############################################################################
# Encoding
###############################################################################


def literal(code: object) -> JSRaw:
	"""Mark ``code`` as a literal JavaScript expression.

	Use this to pass a function reference or any other expression as an
	argument to a page operation without it being quoted:

	    page.call("Event.observe", "one", "click", literal("onClick"))
	    # -> Event.observe("one", "click", onClick);
	"""
	return JSRaw(str(code))


def to_js_expr(
	value: object, fallback: Callable[[object], str] | None = None
) -> JSExpr:
	"""Convert a Python value to a JSExpr.

	Handles:
	- JSExpr: returned as-is (JSRaw stays raw)
	- objects with a ``__js__()`` method: its result, a str is taken as raw code
	- str: JSString
	- int/float: JSNumber
	- bool: JSBoolean
	- None: JSNull
	- list/tuple: JSArray (recursively converted)
	- Mapping: JSObjectExpr (recursively converted, keys stringified)

	Anything else raises TypeError, unless ``fallback`` is given: its result is
	then emitted as raw code, at any depth.
	"""
	# Already a JSExpr
	if isinstance(value, JSExpr):
		return value

	hook = getattr(value, "__js__", None)
	if callable(hook):
		result = hook()
		return result if isinstance(result, JSExpr) else JSRaw(str(result))

	# Primitives
	if isinstance(value, str):
		return JSString(value)
	if isinstance(value, bool):  # Must check before int since bool is subclass of int
		return JSBoolean(value)
	if isinstance(value, (int, float)):
		return JSNumber(value)
	if value is None:
		return JSNull()

	# Collections
	if isinstance(value, (list, tuple)):
		return JSArray([to_js_expr(v, fallback) for v in value])
	if isinstance(value, Mapping):
		props = [JSProp(JSString(str(k)), to_js_expr(v, fallback)) for k, v in value.items()]
		return JSObjectExpr(props)

	if fallback is not None:
		return JSRaw(fallback(value))
	raise TypeError(f"Cannot convert {type(value).__name__} to JSExpr")


def encode(value: object) -> str:
	return to_js_expr(value).emit()


def encode_loose(value: Any) -> str:
	"""Encode like ``encode`` but fall back to ``repr`` for unknown objects.

	Call chains use this instead of ``encode``. The fallback also applies to
	objects nested in lists and mappings.
	"""
	return to_js_expr(value, repr).emit()


_SINGLE_QUOTED_ESCAPES = re.compile(r"\\|\r\n|\n|\r|[\"']")


def _escape_match(match: re.Match[str]) -> str:
	text = match.group(0)
	if text == "\\":
		return "\\\\"
	if text in ("\r\n", "\n", "\r"):
		return "\\n"
	return "\\" + text


def escape_javascript(text: str) -> str:
	"""Escape ``text`` for embedding inside a single-quoted JS string literal."""
	return _SINGLE_QUOTED_ESCAPES.sub(_escape_match, text)
