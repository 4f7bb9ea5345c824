"""Tests for chained proxies started from unknown page methods."""

from __future__ import annotations

import pytest
from rjs.errors import ChainError
from rjs.generator import JavaScriptGenerator


class _Point:
	def __repr__(self) -> str:
		return "Point(1, 2)"


def test_single_call(page: JavaScriptGenerator) -> None:
	page.init()
	assert page.render() == "init();"


def test_attribute_only_segment_gets_empty_call(page: JavaScriptGenerator) -> None:
	page.foo.bar(1, 2)
	assert page.render() == "foo().bar(1, 2);"


def test_uncalled_chain_still_renders(page: JavaScriptGenerator) -> None:
	page.foo.init
	assert page.render() == "foo().init();"


def test_explicit_builder(page: JavaScriptGenerator) -> None:
	chain = page.chain("Form", "signup").then("reset").then("focus", "email")
	assert chain.render() == 'Form("signup").reset().focus("email");'
	assert page.render() == chain.render()


def test_chain_added_directly_not_through_record(page: JavaScriptGenerator) -> None:
	chain = page.chain("a")
	assert page.items[0] is chain


def test_chain_returns_itself(page: JavaScriptGenerator) -> None:
	chain = page.a
	assert chain.b(1) is chain
	assert chain.then("c") is chain


def test_element_proxy(page: JavaScriptGenerator) -> None:
	page["two"].show()
	page.select("p.welcome b").first().hide()
	assert page.render() == '$("two").show();\n$$("p.welcome b").first().hide();'


def test_chain_block_argument(page: JavaScriptGenerator) -> None:
	page["one"].observe("click", block=lambda p: p["two"].toggle())
	assert page.render() == '$("one").observe("click", function() { $("two").toggle(); });'


def test_chain_uses_loose_encoding(page: JavaScriptGenerator) -> None:
	page.plot(_Point(), [1, "a"], page.literal("window"))
	assert page.render() == 'plot(Point(1, 2), [1, "a"], window);'


def test_calling_segment_twice_raises(page: JavaScriptGenerator) -> None:
	chain = page.foo(1)
	with pytest.raises(ChainError):
		chain(2)


def test_chain_terminates_with_one_semicolon(page: JavaScriptGenerator) -> None:
	page.chain("run", "a;")
	assert page.render() == 'run("a;");'


def test_repr(page: JavaScriptGenerator) -> None:
	assert repr(page.Effect.Highlight) == "<CallChain Effect.Highlight>"


def test_keyword_arguments_are_rejected(page: JavaScriptGenerator) -> None:
	with pytest.raises(ChainError, match="x"):
		page.foo(x=1)
	with pytest.raises(ChainError, match="silent"):
		page["one"].then("fade", silent=True)
	with pytest.raises(ChainError, match="a, b"):
		page.chain("init", b=2, a=1)


def test_nested_unencodable_arguments_use_repr(page: JavaScriptGenerator) -> None:
	page.plot([_Point()], {"origin": _Point()})
	assert page.render() == 'plot([Point(1, 2)], {"origin": Point(1, 2)});'
