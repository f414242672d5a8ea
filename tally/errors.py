"""
The three ways a Tally program can fail, one per stage.
None of them is recovered within the core: each aborts its stage
and the caller decides what to tell the human.
"""
from typing import Optional

class TallyError(Exception):
	"""
	Common base so a host can catch every Tally failure at once,
	while still telling the three kinds apart.
	"""
	def __init__(self, message:str, line:Optional[int]=None, span:Optional[slice]=None):
		super().__init__(message, line)
		self.message, self.line, self.span = message, line, span
	
	def __str__(self):
		if self.line is None: return self.message
		return "%s at line %d" % (self.message, self.line)

class LexError(TallyError):
	""" Unterminated string, malformed number, unknown escape, or unrecognized character. """

class ParseError(TallyError):
	""" Some specific construct was required, but a different token turned up. """
	def __init__(self, expected:str, token):
		message = "Expected %s but found %s" % (expected, token.describe())
		super().__init__(message, token.line, token.span)
		self.expected, self.token = expected, token

class ExecutionError(TallyError):
	""" Undefined variable, ill-typed operator, division by zero, or a non-boolean condition. """
	def __init__(self, message:str, site=None):
		if site is None: super().__init__(message)
		else: super().__init__(message, site.line, site.span)
		self.site = site
