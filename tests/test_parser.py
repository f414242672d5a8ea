import unittest

from tally import syntax
from tally.front_end import Parser, parse_text
from tally.lexer import tokenize
from tally.errors import ParseError
from tally.tokens import Kind

def only(text) -> syntax.Statement:
	program = parse_text(text)
	assert len(program.statements) == 1, program.statements
	return program.statements[0]

def expr_of(text) -> syntax.Expression:
	stmt = only(text + ";")
	assert isinstance(stmt, syntax.ExpressionStatement)
	return stmt.expr

class StatementTests(unittest.TestCase):
	
	def test_let(self):
		stmt = only("let x = 1 + 2;")
		self.assertIsInstance(stmt, syntax.Let)
		self.assertEqual("x", stmt.name)
		self.assertIsInstance(stmt.initializer, syntax.Binary)
	
	def test_assign_versus_expression_statement(self):
		self.assertIsInstance(only("x = 3;"), syntax.Assign)
		stmt = only("x == 3;")
		self.assertIsInstance(stmt, syntax.ExpressionStatement)
		self.assertEqual("==", stmt.expr.glyph)
		stmt = only("x + 1;")
		self.assertIsInstance(stmt, syntax.ExpressionStatement)
		self.assertIsInstance(stmt.expr.lhs, syntax.Identifier)
	
	def test_if_without_else(self):
		stmt = only("if (x < 1) print(x);")
		self.assertIsInstance(stmt, syntax.If)
		self.assertIsInstance(stmt.then_branch, syntax.Print)
		self.assertIsNone(stmt.else_branch)
	
	def test_if_with_else(self):
		stmt = only("if (x < 1) { print(x); } else print(0);")
		self.assertIsInstance(stmt.then_branch, syntax.Block)
		self.assertIsInstance(stmt.else_branch, syntax.Print)
	
	def test_else_binds_to_nearest_if(self):
		stmt = only("if (a < 1) if (b < 1) print(1); else print(2);")
		self.assertIsNone(stmt.else_branch)
		self.assertIsInstance(stmt.then_branch.else_branch, syntax.Print)
	
	def test_bodies_are_single_statements(self):
		program = parse_text("while (i < 3) i = i + 1; print(i);")
		self.assertEqual(2, len(program.statements))
		loop = program.statements[0]
		self.assertIsInstance(loop, syntax.While)
		self.assertIsInstance(loop.body, syntax.Assign)
	
	def test_blocks(self):
		stmt = only("{ let a = 1; { print(a); } }")
		self.assertIsInstance(stmt, syntax.Block)
		self.assertEqual(2, len(stmt.statements))
		self.assertIsInstance(stmt.statements[1], syntax.Block)
		self.assertEqual((), only("{}").statements)
	
	def test_print(self):
		stmt = only('print("hi");')
		self.assertIsInstance(stmt, syntax.Print)
		self.assertEqual("hi", stmt.expr.text)
	
	def test_empty_program(self):
		self.assertEqual((), parse_text("").statements)
		self.assertEqual((), parse_text("// just a comment").statements)
	
	def test_statement_lines(self):
		program = parse_text("let a = 1;\n\nprint(a);\n")
		self.assertEqual([1, 3], [s.line for s in program.statements])

class ExpressionTests(unittest.TestCase):
	
	def test_precedence(self):
		expr = expr_of("1 + 2 * 3")
		self.assertEqual("+", expr.glyph)
		self.assertEqual("*", expr.rhs.glyph)
		expr = expr_of("(1 + 2) * 3")
		self.assertEqual("*", expr.glyph)
		self.assertIsInstance(expr.lhs, syntax.Grouping)
		self.assertEqual("+", expr.lhs.inner.glyph)
	
	def test_tiers(self):
		expr = expr_of("a == b < c + d * e")
		self.assertEqual("==", expr.glyph)
		self.assertEqual("<", expr.rhs.glyph)
		self.assertEqual("+", expr.rhs.rhs.glyph)
		self.assertEqual("*", expr.rhs.rhs.rhs.glyph)
	
	def test_left_associative(self):
		expr = expr_of("10 - 3 - 2")
		self.assertEqual("-", expr.glyph)
		self.assertIsInstance(expr.lhs, syntax.Binary)
		self.assertEqual(10, expr.lhs.lhs.value)
		self.assertEqual(2, expr.rhs.value)
		expr = expr_of("8 / 4 / 2")
		self.assertEqual(2, expr.rhs.value)
	
	def test_unary(self):
		expr = expr_of("--x")
		self.assertIsInstance(expr, syntax.Unary)
		self.assertIsInstance(expr.operand, syntax.Unary)
		self.assertIsInstance(expr.operand.operand, syntax.Identifier)
		expr = expr_of("-2 * 3")
		self.assertEqual("*", expr.glyph)
		self.assertIsInstance(expr.lhs, syntax.Unary)
	
	def test_literals(self):
		self.assertEqual(2.5, expr_of("2.5").value)
		self.assertEqual("s", expr_of('"s"').text)
		self.assertEqual("name", expr_of("name").name)

class SyntaxErrorTests(unittest.TestCase):
	
	def assertParseError(self, text, line=1):
		with self.assertRaises(ParseError) as cm:
			parse_text(text)
		self.assertEqual(line, cm.exception.line)
		return cm.exception
	
	def test_missing_initializer(self):
		ex = self.assertParseError("let x = ;")
		self.assertIs(Kind.SEMICOLON, ex.token.kind)
		self.assertEqual("an expression", ex.expected)
	
	def test_missing_pieces(self):
		for text in [
			"let = 1;",
			"let x 1;",
			"let x = 1",
			"print 1;",
			"print(1;",
			"print(1)",
			"if x < 1 print(x);",
			"if (x < 1 print(x);",
			"while (x) ",
			"{ print(1);",
			"(1 + 2;",
			"x = ;",
			"1 +;",
			"}",
			"else print(1);",
		]:
			with self.subTest(text):
				self.assertParseError(text)
	
	def test_reports_the_right_line(self):
		ex = self.assertParseError("let a = 1;\nlet b = 2;\nlet c = 3\nprint(c);", line=4)
		self.assertIs(Kind.PRINT, ex.token.kind)
		self.assertIn("';'", ex.expected)
	
	def test_first_error_aborts(self):
		# Nothing after the first problem matters, and no partial tree comes back.
		parser = Parser(tokenize("print(1); let = 2; print(3);"))
		self.assertRaises(ParseError, parser.parse)
	
	def test_message(self):
		ex = self.assertParseError("let 5 = x;")
		self.assertIn("variable name", str(ex))
		self.assertIn("line 1", str(ex))
	
	def test_numbers_are_described_in_full(self):
		ex = self.assertParseError("let x 1234567.5;")
		self.assertIn("number 1234567.5", str(ex))
	
	def test_deep_nesting_is_a_parse_error(self):
		for text in [
			"print(" + "(" * 3000 + "1" + ")" * 3000 + ");",
			"{" * 3000 + "}" * 3000,
			"let x = " + "-" * 3000 + "1;",
		]:
			with self.subTest(text[:10]):
				with self.assertRaises(ParseError) as cm:
					parse_text(text)
				self.assertIn("nesting", cm.exception.expected)

if __name__ == '__main__':
	unittest.main()
