"""
The set of parse-nodes in simple form.
The parser calls these constructors as it recognizes each production.
Nodes are built once and never mutated afterward; the interpreter only reads them.
Each node owns its children exclusively, so the whole thing is a tree.
"""
from typing import Optional, Sequence
from .tokens import Token
from .ontology import Phrase, Expression, Statement

BINARY_GLYPHS = frozenset(("+", "-", "*", "/", "==", "!=", "<", ">", "<=", ">="))
UNARY_GLYPHS = frozenset(("-",))

class NumberLiteral(Expression):
	def __init__(self, value:float, site:Token):
		self.value, self.site = value, site
	def __repr__(self): return "<Number %r>" % self.value

class StringLiteral(Expression):
	def __init__(self, text:str, site:Token):
		self.text, self.site = text, site
	def __repr__(self): return "<String %r>" % self.text

class Identifier(Expression):
	def __init__(self, name:str, site:Token):
		self.name, self.site = name, site
	def __repr__(self): return "<ref:%s>" % self.name

class Unary(Expression):
	def __init__(self, glyph:str, operand:Expression, site:Token):
		assert glyph in UNARY_GLYPHS, glyph
		self.glyph, self.operand, self.site = glyph, operand, site
	def __repr__(self): return "(%s%r)" % (self.glyph, self.operand)

class Binary(Expression):
	def __init__(self, lhs:Expression, glyph:str, rhs:Expression, site:Token):
		assert glyph in BINARY_GLYPHS, glyph
		self.lhs, self.glyph, self.rhs, self.site = lhs, glyph, rhs, site
	def __repr__(self): return "(%r %s %r)" % (self.lhs, self.glyph, self.rhs)

class Grouping(Expression):
	def __init__(self, inner:Expression, site:Token):
		self.inner, self.site = inner, site
	def __repr__(self): return "[%r]" % (self.inner,)

class Let(Statement):
	""" Defines or redefines a global; never fails on account of the name. """
	def __init__(self, name:str, initializer:Expression, site:Token):
		self.name, self.initializer, self.site = name, initializer, site

class Assign(Statement):
	""" Overwrites an existing global. The name must already be bound. """
	def __init__(self, name:str, value:Expression, site:Token):
		self.name, self.value, self.site = name, value, site

class If(Statement):
	def __init__(self, condition:Expression, then_branch:Statement, else_branch:Optional[Statement], site:Token):
		self.condition, self.then_branch, self.else_branch, self.site = condition, then_branch, else_branch, site

class While(Statement):
	def __init__(self, condition:Expression, body:Statement, site:Token):
		self.condition, self.body, self.site = condition, body, site

class Print(Statement):
	def __init__(self, expr:Expression, site:Token):
		self.expr, self.site = expr, site

class Block(Statement):
	""" Runs its statements in order against the same global environment. No new scope. """
	def __init__(self, statements:Sequence[Statement], site:Token):
		self.statements, self.site = tuple(statements), site

class ExpressionStatement(Statement):
	def __init__(self, expr:Expression):
		self.expr = expr
		self.site = expr.site

class Program(Phrase):
	statements: tuple[Statement, ...]
	def __init__(self, statements:Sequence[Statement], site:Token):
		self.statements, self.site = tuple(statements), site
