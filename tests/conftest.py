from pathlib import Path

import pytest
from mako.lookup import TemplateLookup
from rjs.context import TemplateContext
from rjs.generator import JavaScriptGenerator
from starlette.responses import PlainTextResponse
from starlette.routing import Route, Router


def _show_item(request):  # pyright: ignore[reportUnusedParameter]
	return PlainTextResponse("item")


@pytest.fixture
def page() -> JavaScriptGenerator:
	return JavaScriptGenerator()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
	(tmp_path / "items").mkdir()
	(tmp_path / "items" / "_row.mako").write_text("<li>${name}</li>")
	(tmp_path / "_notice.mako").write_text('<p class="notice">${message}</p>')
	(tmp_path / "banner.mako").write_text("<h1>Welcome</h1>")
	return tmp_path


@pytest.fixture
def context(template_dir: Path) -> TemplateContext:
	router = Router(
		routes=[Route("/items/{id:int}", endpoint=_show_item, name="show_item")]
	)
	return TemplateContext(
		lookup=TemplateLookup(directories=[str(template_dir)]),
		router=router,
	)
