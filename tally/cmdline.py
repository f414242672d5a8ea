"""
This is an interpreter for the Tally scripting language.

For example:

    tally program.tly

will run program.tly if possible, or else try to explain why not.
With no program at all, it runs a small built-in example.

    tally -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

BUILT_IN_EXAMPLE = """
// The built-in example. Pass a .tly file as an argument to run something else.
print("Hello, World!");

let name = "Tally";
let greeting = "Hello, " + name + "!";
print(greeting);

let x = 10;
let y = 20;
let sum = x + y;
print(sum);

if (sum > 25) {
    print("Sum is greater than 25");
} else {
    print("Sum is 25 or less");
}
"""

parser = argparse.ArgumentParser(
	prog="tally",
	description="Interpreter for the Tally scripting language.",
)
parser.add_argument("program", nargs="?", help="try examples/fibonacci.tly for example.")
parser.add_argument('-c', "--check", action="store_true", help="Check that the program parses, but do not actually run it.")
parser.add_argument('-v', "--verbose", action="count", help="Say what is happening along the way.")

def run(args) -> int:
	from .diagnostics import Report, Listing, load_source
	from .errors import TallyError
	from .front_end import parse_text
	from .tree_walker.executive import run_text
	report = Report(verbose=args.verbose)
	if args.program is None:
		report.info("No program given; running the built-in example.")
		listing = Listing(BUILT_IN_EXAMPLE)
	else:
		path = Path.cwd() / args.program
		try: listing = load_source(path)
		except FileNotFoundError: report.no_such_file(path)
		except (OSError, UnicodeDecodeError) as ex: report.broken_file(path, str(ex))
		if report.sick():
			report.complain_to_console()
			return 1
	try:
		if args.check:
			parse_text(listing.text)
			print("Looks plausible to me.", file=sys.stderr)
		else:
			run_text(listing.text, print, report=report)
	except TallyError as ex:
		report.failed(listing, ex)
		report.complain_to_console()
		return 1
	return 0

def main():
	sys.exit(run(parser.parse_args()))
