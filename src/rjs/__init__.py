from rjs.config import ENV_RJS_DEBUG, RJSConfig
from rjs.context import TemplateContext, ViewContext
from rjs.errors import ChainError, RJSError
from rjs.generator import (
	CallChain,
	JavaScriptGenerator,
	SessionItem,
	Statement,
	normalize_statement,
)
from rjs.helpers import (
	debug_envelope,
	javascript_tag,
	update_page,
	update_page_tag,
)
from rjs.nodes import JSRaw, encode, encode_loose, escape_javascript, literal

__all__ = [
	# Page
	"JavaScriptGenerator",
	"CallChain",
	"Statement",
	"SessionItem",
	"normalize_statement",
	# Entry points
	"update_page",
	"update_page_tag",
	"javascript_tag",
	"debug_envelope",
	# Encoding
	"JSRaw",
	"literal",
	"encode",
	"encode_loose",
	"escape_javascript",
	# Context and configuration
	"ViewContext",
	"TemplateContext",
	"RJSConfig",
	"ENV_RJS_DEBUG",
	# Errors
	"RJSError",
	"ChainError",
]
