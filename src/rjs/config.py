import os
from dataclasses import dataclass

ENV_RJS_DEBUG = "RJS_DEBUG"


@dataclass(frozen=True)
class RJSConfig:
	"""
	Configuration for rendering page updates.

	Attributes:
	    debug (bool): Wrap generated JavaScript in a try/catch that alerts the
	        error and the generated source when it fails in the browser.
	"""

	debug: bool = False
	"""Wrap output in the debug envelope."""

	@classmethod
	def from_env(cls) -> "RJSConfig":
		value = os.environ.get(ENV_RJS_DEBUG)
		if value is None:
			return cls()
		return cls(debug=value not in {"", "0", "false", "False"})
