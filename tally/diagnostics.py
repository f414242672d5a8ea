"""
Turning failures into something a human can act on.

The core raises; this module explains. A Report collects issues and,
when asked, complains about them on the console with a picture of
the offending line of source text.
"""
import sys
from pathlib import Path
from typing import Optional, Sequence
from boozetools.support.failureprone import SourceText, illustration
from .errors import TallyError, LexError, ParseError, ExecutionError

class Report:
	""" Collects issues for one run. Also the channel for verbose progress chatter. """
	issues: list["Pic"]
	
	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.issues = []
	
	def ok(self): return not self.issues
	def sick(self): return bool(self.issues)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def reset(self):
		self.issues.clear()
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self.issues)
	
	# Methods the file-handling part of the command line calls:
	
	def no_such_file(self, path:Path):
		self.issues.append(Pic("I see no file called %s" % path, []))
	
	def broken_file(self, path:Path, why:str):
		self.issues.append(Pic("Something went wrong while trying to read %s" % path, [], [why]))
	
	# One method per stage of the pipeline:
	
	def lex_error(self, listing:"Listing", ex:LexError):
		intro = "Tally could not make sense of some characters: %s." % ex.message
		self.issues.append(Pic(intro, _annotate(listing, ex, "here")))
	
	def parse_error(self, listing:"Listing", ex:ParseError):
		intro = "Tally got confused by %s." % ex.token.describe()
		caption = "expected %s" % ex.expected
		self.issues.append(Pic(intro, _annotate(listing, ex, caption)))
	
	def runtime_error(self, listing:"Listing", ex:ExecutionError):
		intro = "The program stopped: %s." % ex.message
		self.issues.append(Pic(intro, _annotate(listing, ex, "while evaluating this")))
	
	def failed(self, listing:"Listing", ex:TallyError):
		""" Route an exception to the matching complaint. """
		if isinstance(ex, LexError): self.lex_error(listing, ex)
		elif isinstance(ex, ParseError): self.parse_error(listing, ex)
		elif isinstance(ex, ExecutionError): self.runtime_error(listing, ex)
		else: self.issues.append(Pic(str(ex), []))

def _annotate(listing:"Listing", ex:TallyError, caption:str) -> list["Annotation"]:
	if ex.span is None: return []
	return [Annotation(listing, ex.span, caption)]

class Listing:
	""" Source text together with where it came from. """
	def __init__(self, text:str, path:Optional[Path]=None):
		self.text, self.path = text, path
		self.source = SourceText(text, filename=str(path) if path else None)

class Annotation:
	def __init__(self, listing:Listing, where:slice, caption:str=""):
		self.listing = listing
		self.slice = where
		self.caption = caption
	
	def illustrate(self):
		text = self.listing.text
		if not text.strip():
			return "(empty program) " + self.caption
		# The END token sits just past the last character.
		start = min(self.slice.start, len(text.rstrip()) - 1)
		row, col = self.listing.source.find_row_col(start)
		single_line = self.listing.source.line_of_text(row)
		width = max(self.slice.stop - self.slice.start, 1)
		return illustration(single_line, col, width, prefix="% 6d |" % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:Sequence[Annotation], footer:Sequence[str]=()):
		self._intro, self._anns, self._footer = intro, list(anns), footer
	
	@property
	def description(self): return self._intro
	
	def as_text(self):
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.listing.path != path:
				path = ann.listing.path
				if path: lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def load_source(path:Path) -> Listing:
	with open(path, "r", encoding="utf-8") as fh:
		return Listing(fh.read(), path)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
