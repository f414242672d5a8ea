"""
Most-fundamental classes of the syntax tree, kept apart from the
concrete node shapes so that everything can refer to them freely.
"""
from .tokens import Token

class Phrase:
	""" Anything the parser builds. It remembers the token that anchors it. """
	site: Token
	@property
	def line(self) -> int: return self.site.line
	@property
	def span(self) -> slice: return self.site.span

class Expression(Phrase):
	""" Evaluated for a value. """

class Statement(Phrase):
	""" Executed for effect. """
