"""
Overall control for running a program: lex, parse, then walk the tree.
"""
from typing import Optional
from .. import syntax
from ..diagnostics import Report
from ..environment import Environment
from ..front_end import parse_tokens
from ..lexer import tokenize
from .evaluator import Interpreter, EMIT

def run_program(program:syntax.Program, emit:EMIT, env:Optional[Environment]=None) -> Environment:
	return Interpreter(emit).run(program, env)

def run_text(text:str, emit:EMIT, env:Optional[Environment]=None, report:Optional[Report]=None) -> Environment:
	"""
	The whole pipeline on one string. Errors propagate to the caller
	untouched; a report, if given, only hears about progress.
	"""
	report = report or Report()
	report.info("Lex")
	tokens = tokenize(text)
	report.info("Parse", len(tokens), "tokens")
	program = parse_tokens(tokens)
	report.info("Run", len(program.statements), "top-level statements")
	return run_program(program, emit, env)
