from collections.abc import Callable, Iterator, Mapping
from contextlib import AbstractContextManager, contextmanager
from typing import Any, Protocol, runtime_checkable

from mako.lookup import TemplateLookup
from starlette.routing import Router

from rjs.errors import RJSError


@runtime_checkable
class ViewContext(Protocol):
	"""What the page object needs from the surrounding view layer.

	- url_for: resolve a route description to a URL
	- render: render a template or partial to a string
	- with_output_buffer: redirect template output into the page session
	"""

	def url_for(self, location: Any) -> str: ...

	def render(self, **options: Any) -> str: ...

	def with_output_buffer(self, buffer: list[Any]) -> AbstractContextManager[Any]: ...


class TemplateContext:
	"""ViewContext backed by mako templates and a starlette router.

	Partials follow the leading underscore convention: ``render(partial="items/row")``
	renders ``items/_row.mako``. ``render(template="...")`` uses the uri as given.
	"""

	lookup: TemplateLookup | None
	router: Router | None
	helpers: dict[str, Callable[..., Any]]
	output_buffer: list[Any]

	def __init__(
		self,
		lookup: TemplateLookup | None = None,
		router: Router | None = None,
		helpers: Mapping[str, Callable[..., Any]] | None = None,
	) -> None:
		self.lookup = lookup
		self.router = router
		self.helpers = dict(helpers or {})
		self.output_buffer = []

	def url_for(self, location: Mapping[str, Any]) -> str:
		"""Resolve ``{"name": route_name, **path_params}`` through the router."""
		if self.router is None:
			raise RJSError("Resolving a route requires a router")
		params = dict(location)
		name = params.pop("name")
		return str(self.router.url_path_for(name, **params))

	def render(
		self,
		*,
		partial: str | None = None,
		template: str | None = None,
		locals: Mapping[str, Any] | None = None,
	) -> str:
		if self.lookup is None:
			raise RJSError("Rendering a template requires a template lookup")
		if partial is not None:
			directory, _, name = partial.rpartition("/")
			uri = f"{directory}/_{name}.mako" if directory else f"_{name}.mako"
		elif template is not None:
			uri = template
		else:
			raise RJSError("render() needs either partial= or template=")
		return self.lookup.get_template(uri).render(**dict(locals or {}))

	@contextmanager
	def with_output_buffer(self, buffer: list[Any]) -> Iterator[list[Any]]:
		previous, self.output_buffer = self.output_buffer, buffer
		try:
			yield buffer
		finally:
			self.output_buffer = previous
