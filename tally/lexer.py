"""
Turns source text into a list of tokens, ending with exactly one END token.

The scanner works one character at a time with a single character of
look-ahead, which is all this grammar ever needs: two-character operators
are matched greedily before their one-character prefixes, and a slash
followed by a slash starts a comment that runs to the end of the line.

It is also the only place that knows about lines. Every token records the
line it started on, and the character span it covers, so that later stages
can complain intelligibly.
"""
from string import ascii_letters, digits as _digits
from .tokens import Kind, Token, KEYWORDS
from .errors import LexError

WHITESPACE = " \t\r\n"
ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"'}
SINGLE = {"+": Kind.PLUS, "-": Kind.MINUS, "*": Kind.STAR, "/": Kind.SLASH, "(": Kind.LEFT_PAREN, ")": Kind.RIGHT_PAREN, "{": Kind.LEFT_BRACE, "}": Kind.RIGHT_BRACE, ";": Kind.SEMICOLON}
# The ones that might grow a trailing '=':
PREFIX = {"=": (Kind.ASSIGN, Kind.EQUAL_EQUAL), "<": (Kind.LESS, Kind.LESS_EQUAL), ">": (Kind.GREATER, Kind.GREATER_EQUAL), "!": (None, Kind.BANG_EQUAL)}
WORD_START = frozenset(ascii_letters)
WORD_PART = frozenset(ascii_letters + _digits + "_")
DIGITS = frozenset(_digits)

def tokenize(text:str) -> list[Token]:
	return Lexer(text).tokenize()

class Lexer:
	def __init__(self, text:str):
		self.text = text
		self.pos = 0
		self.line = 1
		self.start = 0
		self.start_line = 1
		self._done = False
	
	def tokenize(self) -> list[Token]:
		"""
		The sequence is not restartable: a lexer hands over its tokens once.
		"""
		if self._done: raise RuntimeError("This lexer has already been consumed.")
		self._done = True
		tokens = []
		while True:
			self._skip_blanks()
			self.start, self.start_line = self.pos, self.line
			if self._at_end():
				tokens.append(self._token(Kind.END))
				return tokens
			tokens.append(self._scan_one())
	
	def _peek(self, ahead=0) -> str:
		index = self.pos + ahead
		return self.text[index] if index < len(self.text) else ""
	
	def _at_end(self): return self.pos >= len(self.text)
	
	def _advance(self) -> str:
		ch = self.text[self.pos]
		self.pos += 1
		if ch == "\n": self.line += 1
		return ch
	
	def _token(self, kind:Kind, value=None) -> Token:
		return Token(kind, value, self.start_line, slice(self.start, self.pos))
	
	def _fail(self, message:str):
		raise LexError(message, self.line, slice(self.start, max(self.pos, self.start+1)))
	
	def _skip_blanks(self):
		while not self._at_end():
			ch = self._peek()
			if ch in WHITESPACE:
				self._advance()
			elif ch == "/" and self._peek(1) == "/":
				while not self._at_end() and self._peek() != "\n":
					self._advance()
			else:
				return
	
	def _scan_one(self) -> Token:
		ch = self._advance()
		if ch in SINGLE: return self._token(SINGLE[ch])
		if ch in PREFIX:
			bare, with_equals = PREFIX[ch]
			if self._peek() == "=":
				self._advance()
				return self._token(with_equals)
			if bare is None: self._fail("Unexpected character %r (did you mean '!='?)" % ch)
			return self._token(bare)
		if ch == '"': return self._string()
		if ch in DIGITS: return self._number()
		if ch in WORD_START: return self._word()
		self._fail("Unexpected character %r" % ch)
	
	def _number(self) -> Token:
		while self._peek() in DIGITS:
			self._advance()
		if self._peek() == ".":
			if self._peek(1) not in DIGITS:
				self._advance()
				self._fail("Malformed number %r: a decimal point needs digits after it" % self.text[self.start:self.pos])
			self._advance()
			while self._peek() in DIGITS:
				self._advance()
		return self._token(Kind.NUMBER, float(self.text[self.start:self.pos]))
	
	def _word(self) -> Token:
		while not self._at_end() and self._peek() in WORD_PART:
			self._advance()
		word = self.text[self.start:self.pos]
		if word in KEYWORDS: return self._token(KEYWORDS[word])
		return self._token(Kind.IDENTIFIER, word)
	
	def _string(self) -> Token:
		# Raw newlines are not allowed inside a string; write \n instead.
		fragments = []
		while True:
			if self._at_end() or self._peek() == "\n":
				self._fail("Unterminated string")
			ch = self._advance()
			if ch == '"':
				return self._token(Kind.STRING, "".join(fragments))
			if ch == "\\":
				if self._at_end(): self._fail("Unterminated string")
				code = self._advance()
				if code not in ESCAPES: self._fail("Unknown escape sequence '\\%s'" % code)
				fragments.append(ESCAPES[code])
			else:
				fragments.append(ch)
