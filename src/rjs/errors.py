class RJSError(Exception):
	"""Base class for errors raised while building a page update."""


class ChainError(RJSError):
	"""Raised when a call chain is extended in a way JavaScript can't express."""
