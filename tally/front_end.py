"""
Recursive descent over the token list, one method per precedence tier.

From loosest to tightest binding:

	equality     ==  !=
	comparison   <  >  <=  >=
	term         +  -
	factor       *  /
	unary        -
	primary      number, string, identifier, ( expression )

Every binary tier is left-associative. There is no error recovery:
the first thing that does not fit aborts the whole parse.
"""
from typing import Sequence
from .tokens import Kind, Token
from .errors import ParseError
from .lexer import tokenize
from . import syntax

EQUALITY = (Kind.EQUAL_EQUAL, Kind.BANG_EQUAL)
COMPARISON = (Kind.LESS, Kind.GREATER, Kind.LESS_EQUAL, Kind.GREATER_EQUAL)
TERM = (Kind.PLUS, Kind.MINUS)
FACTOR = (Kind.STAR, Kind.SLASH)

class Parser:
	def __init__(self, tokens:Sequence[Token]):
		assert tokens and tokens[-1].kind is Kind.END, "The token list must end with END."
		self._tokens = tokens
		self._current = 0
	
	def parse(self) -> syntax.Program:
		first = self._peek()
		statements = []
		try:
			while not self._check(Kind.END):
				statements.append(self.statement())
		except RecursionError:
			raise ParseError("shallower nesting", self._peek()) from None
		return syntax.Program(statements, first)
	
	# Token-level plumbing:
	
	def _peek(self, ahead=0) -> Token:
		index = min(self._current + ahead, len(self._tokens) - 1)
		return self._tokens[index]
	
	def _check(self, *kinds:Kind) -> bool:
		return self._peek().kind in kinds
	
	def _advance(self) -> Token:
		token = self._peek()
		if token.kind is not Kind.END: self._current += 1
		return token
	
	def _expect(self, kind:Kind, what:str) -> Token:
		if self._check(kind): return self._advance()
		raise ParseError(what, self._peek())
	
	# Statements:
	
	def statement(self) -> syntax.Statement:
		kind = self._peek().kind
		if kind is Kind.LET: return self._let()
		if kind is Kind.IF: return self._if()
		if kind is Kind.WHILE: return self._while()
		if kind is Kind.PRINT: return self._print()
		if kind is Kind.LEFT_BRACE: return self._block()
		if kind is Kind.IDENTIFIER and self._peek(1).kind is Kind.ASSIGN: return self._assign()
		expr = self.expression()
		self._expect(Kind.SEMICOLON, "';' after expression")
		return syntax.ExpressionStatement(expr)
	
	def _let(self):
		keyword = self._advance()
		name = self._expect(Kind.IDENTIFIER, "variable name after 'let'")
		self._expect(Kind.ASSIGN, "'=' after variable name")
		initializer = self.expression()
		self._expect(Kind.SEMICOLON, "';' after let statement")
		return syntax.Let(name.value, initializer, keyword)
	
	def _assign(self):
		name = self._advance()
		self._advance()  # The '=' was already seen by statement().
		value = self.expression()
		self._expect(Kind.SEMICOLON, "';' after assignment")
		return syntax.Assign(name.value, value, name)
	
	def _condition(self, keyword:Token):
		self._expect(Kind.LEFT_PAREN, "'(' after '%s'" % keyword.kind.value)
		condition = self.expression()
		self._expect(Kind.RIGHT_PAREN, "')' after %s condition" % keyword.kind.value)
		return condition
	
	def _if(self):
		keyword = self._advance()
		condition = self._condition(keyword)
		then_branch = self.statement()
		if self._check(Kind.ELSE):
			self._advance()
			else_branch = self.statement()
		else:
			else_branch = None
		return syntax.If(condition, then_branch, else_branch, keyword)
	
	def _while(self):
		keyword = self._advance()
		condition = self._condition(keyword)
		body = self.statement()
		return syntax.While(condition, body, keyword)
	
	def _print(self):
		keyword = self._advance()
		self._expect(Kind.LEFT_PAREN, "'(' after 'print'")
		expr = self.expression()
		self._expect(Kind.RIGHT_PAREN, "')' after print expression")
		self._expect(Kind.SEMICOLON, "';' after print statement")
		return syntax.Print(expr, keyword)
	
	def _block(self):
		brace = self._advance()
		statements = []
		while not self._check(Kind.RIGHT_BRACE, Kind.END):
			statements.append(self.statement())
		self._expect(Kind.RIGHT_BRACE, "'}' after block")
		return syntax.Block(statements, brace)
	
	# Expressions:
	
	def expression(self) -> syntax.Expression:
		return self._equality()
	
	def _left_fold(self, operators, operand):
		expr = operand()
		while self._check(*operators):
			glyph = self._advance()
			expr = syntax.Binary(expr, glyph.kind.value, operand(), glyph)
		return expr
	
	def _equality(self): return self._left_fold(EQUALITY, self._comparison)
	def _comparison(self): return self._left_fold(COMPARISON, self._term)
	def _term(self): return self._left_fold(TERM, self._factor)
	def _factor(self): return self._left_fold(FACTOR, self._unary)
	
	def _unary(self):
		if self._check(Kind.MINUS):
			glyph = self._advance()
			return syntax.Unary(glyph.kind.value, self._unary(), glyph)
		return self._primary()
	
	def _primary(self):
		token = self._peek()
		if token.kind is Kind.NUMBER:
			self._advance()
			return syntax.NumberLiteral(token.value, token)
		if token.kind is Kind.STRING:
			self._advance()
			return syntax.StringLiteral(token.value, token)
		if token.kind is Kind.IDENTIFIER:
			self._advance()
			return syntax.Identifier(token.value, token)
		if token.kind is Kind.LEFT_PAREN:
			self._advance()
			inner = self.expression()
			self._expect(Kind.RIGHT_PAREN, "')' after expression")
			return syntax.Grouping(inner, token)
		raise ParseError("an expression", token)

def parse_tokens(tokens:Sequence[Token]) -> syntax.Program:
	return Parser(tokens).parse()

def parse_text(text:str) -> syntax.Program:
	""" Lex and parse in one go. Raises LexError or ParseError. """
	return parse_tokens(tokenize(text))
