"""
The tree-walker proper.

Statements are executed for effect; expressions are evaluated for value.
The environment is passed explicitly to every visit, so one interpreter
can run any number of programs, each against whatever environment the
caller supplies.
"""
from typing import Callable
from boozetools.support.foundation import Visitor
from .. import syntax
from ..environment import Environment, UndefinedVariable
from ..errors import ExecutionError
from ..primitive import VALUE, BINARY_OPS, UNARY_OPS, OperatorError, display, kind_of

EMIT = Callable[[str], None]

class Interpreter(Visitor):
	def __init__(self, emit:EMIT):
		self._emit = emit
	
	def run(self, program:syntax.Program, env:Environment=None) -> Environment:
		if env is None: env = Environment()
		try: self.visit(program, env)
		except RecursionError: raise ExecutionError("Program is nested too deeply to evaluate") from None
		return env
	
	def visit_Program(self, program:syntax.Program, env:Environment):
		for stmt in program.statements: self.visit(stmt, env)
	
	def evaluate(self, expr:syntax.Expression, env:Environment) -> VALUE:
		return self.visit(expr, env)
	
	def _decide(self, condition:syntax.Expression, env:Environment) -> bool:
		# Only comparisons make booleans, and only a boolean can steer control flow.
		value = self.evaluate(condition, env)
		if isinstance(value, bool): return value
		raise ExecutionError("Condition must be a comparison, got %s" % kind_of(value), condition)
	
	# Statements:
	
	def visit_Let(self, stmt:syntax.Let, env:Environment):
		env.define(stmt.name, self.evaluate(stmt.initializer, env))
	
	def visit_Assign(self, stmt:syntax.Assign, env:Environment):
		if stmt.name not in env: raise _undefined(stmt.name, stmt)
		env.assign(stmt.name, self.evaluate(stmt.value, env))
	
	def visit_If(self, stmt:syntax.If, env:Environment):
		if self._decide(stmt.condition, env): self.visit(stmt.then_branch, env)
		elif stmt.else_branch is not None: self.visit(stmt.else_branch, env)
	
	def visit_While(self, stmt:syntax.While, env:Environment):
		while self._decide(stmt.condition, env):
			self.visit(stmt.body, env)
	
	def visit_Print(self, stmt:syntax.Print, env:Environment):
		self._emit(display(self.evaluate(stmt.expr, env)))
	
	def visit_Block(self, stmt:syntax.Block, env:Environment):
		for inner in stmt.statements: self.visit(inner, env)
	
	def visit_ExpressionStatement(self, stmt:syntax.ExpressionStatement, env:Environment):
		self.evaluate(stmt.expr, env)
	
	# Expressions:
	
	@staticmethod
	def visit_NumberLiteral(expr:syntax.NumberLiteral, env:Environment): return expr.value
	
	@staticmethod
	def visit_StringLiteral(expr:syntax.StringLiteral, env:Environment): return expr.text
	
	@staticmethod
	def visit_Identifier(expr:syntax.Identifier, env:Environment):
		try: return env.lookup(expr.name)
		except UndefinedVariable: raise _undefined(expr.name, expr) from None
	
	def visit_Grouping(self, expr:syntax.Grouping, env:Environment):
		return self.evaluate(expr.inner, env)
	
	def visit_Unary(self, expr:syntax.Unary, env:Environment):
		operand = self.evaluate(expr.operand, env)
		try: return UNARY_OPS[expr.glyph](operand)
		except OperatorError as ex: raise ExecutionError(str(ex), expr) from None
	
	def visit_Binary(self, expr:syntax.Binary, env:Environment):
		# Left first, then right, then the operator. Nothing short-circuits.
		lhs = self.evaluate(expr.lhs, env)
		rhs = self.evaluate(expr.rhs, env)
		try: return BINARY_OPS[expr.glyph](lhs, rhs)
		except OperatorError as ex: raise ExecutionError(str(ex), expr) from None

def _undefined(name:str, site:syntax.Phrase) -> ExecutionError:
	return ExecutionError("Undefined variable '%s'" % name, site)
