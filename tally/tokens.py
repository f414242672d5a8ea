"""
The closed vocabulary of the scanner.
Every kind's value is the text it is spelled with, so that
punctuation and keywords can be looked up directly from source text.
"""
from enum import Enum
from typing import NamedTuple, Any
from .primitive import display

class Kind(Enum):
	NUMBER = "number"
	STRING = "string"
	IDENTIFIER = "identifier"
	
	LET = "let"
	IF = "if"
	ELSE = "else"
	WHILE = "while"
	PRINT = "print"
	
	PLUS = "+"
	MINUS = "-"
	STAR = "*"
	SLASH = "/"
	EQUAL_EQUAL = "=="
	BANG_EQUAL = "!="
	LESS = "<"
	GREATER = ">"
	LESS_EQUAL = "<="
	GREATER_EQUAL = ">="
	ASSIGN = "="
	
	LEFT_PAREN = "("
	RIGHT_PAREN = ")"
	LEFT_BRACE = "{"
	RIGHT_BRACE = "}"
	SEMICOLON = ";"
	
	END = "<END>"

KEYWORDS = {k.value: k for k in (Kind.LET, Kind.IF, Kind.ELSE, Kind.WHILE, Kind.PRINT)}

class Token(NamedTuple):
	""" Value is the float for NUMBER, the decoded text for STRING, the name for IDENTIFIER, else None. """
	kind: Kind
	value: Any
	line: int
	span: slice
	
	def describe(self) -> str:
		if self.kind is Kind.END: return "end of input"
		if self.kind is Kind.STRING: return "string %r" % self.value
		if self.kind is Kind.NUMBER: return "number %s" % display(self.value)
		if self.kind is Kind.IDENTIFIER: return "identifier '%s'" % self.value
		return "'%s'" % self.kind.value
