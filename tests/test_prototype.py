"""Tests for the Prototype / script.aculo.us page operations."""

from __future__ import annotations

import pytest
from rjs.context import TemplateContext
from rjs.errors import RJSError
from rjs.generator import JavaScriptGenerator


def test_show_hide_single(page: JavaScriptGenerator) -> None:
	assert page.show("a") == 'Element.show("a");'
	assert page.hide("a") == 'Element.hide("a");'
	assert page.toggle("a") == 'Element.toggle("a");'
	assert page.remove("a") == 'Element.remove("a");'


def test_show_hide_multiple(page: JavaScriptGenerator) -> None:
	assert (
		page.hide("status-indicator", "cancel-link")
		== '["status-indicator", "cancel-link"].each(Element.hide);'
	)


def test_insert_html(page: JavaScriptGenerator) -> None:
	line = page.insert_html("bottom", "list", "<li>Some item</li>")
	assert line == 'Element.insert("list", { bottom: "<li>Some item</li>" });'


def test_insert_html_position_is_case_insensitive(page: JavaScriptGenerator) -> None:
	assert page.insert_html("Top", "list", "x") == 'Element.insert("list", { top: "x" });'


def test_insert_html_rejects_unknown_position(page: JavaScriptGenerator) -> None:
	with pytest.raises(ValueError):
		page.insert_html("middle", "list", "x")
	assert page.items == ()


def test_replace_html_and_replace(page: JavaScriptGenerator) -> None:
	assert page.replace_html("person", "<b>Bob</b>") == 'Element.update("person", "<b>Bob</b>");'
	assert page.replace("person", "<div>Bob</div>") == 'Element.replace("person", "<div>Bob</div>");'


def test_render_partial_through_context(context: TemplateContext) -> None:
	page = JavaScriptGenerator(context)
	line = page.insert_html("bottom", "list", partial="items/row", locals={"name": "Ada"})
	assert line == 'Element.insert("list", { bottom: "<li>Ada</li>" });'


def test_render_without_context_raises(page: JavaScriptGenerator) -> None:
	with pytest.raises(RJSError):
		page.replace_html("notice", partial="notice")


def test_render_fragment(page: JavaScriptGenerator) -> None:
	assert page.render_fragment("<p>x</p>") == "<p>x</p>"
	assert page.render_fragment() == ""


def test_visual_effect(page: JavaScriptGenerator) -> None:
	assert page.visual_effect("highlight", "list") == 'new Effect.Highlight("list",{});'
	assert (
		page.visual_effect("blind_down", "menu", duration=0.5, delay=1)
		== 'new Effect.BlindDown("menu",{delay:1, duration:0.5});'
	)


def test_visual_effect_without_element(page: JavaScriptGenerator) -> None:
	assert page.visual_effect("fade") == "new Effect.Fade(element,{});"


def test_toggle_effects(page: JavaScriptGenerator) -> None:
	assert (
		page.visual_effect("toggle_appear", "notice")
		== "Effect.toggle(\"notice\",'appear',{});"
	)
