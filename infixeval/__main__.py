#!/usr/bin/env python3

# Command line calculator: evaluate expressions given as arguments, piped in
# one per line, or typed at an interactive prompt

import argparse
import logging
import sys

from . import __version__
from .config import LOG_FORMAT, Config
from .errors import EvaluationError
from .evaluator import Evaluator

def build_parser():
    parser = argparse.ArgumentParser(prog='infixeval',
            description='Evaluate integer infix expressions, with every token '
            'separated by whitespace, like "( 3 + 4 ) * 2".')
    parser.add_argument('expressions', nargs='*', metavar='EXPR',
            help='expression to evaluate. With none, read from stdin')
    parser.add_argument('-v', '--verbose', action='store_true',
            help='log every reduction')
    parser.add_argument('--prompt', default=None, help='prompt for interactive mode')
    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)
    return parser

# Evaluate one expression and print the result, or the error. Returns whether it worked.
def run_one(evaluator, text, filename):
    try:
        result = evaluator.evaluate(text, filename=filename)
    except EvaluationError as e:
        e.print(file=sys.stderr)
        return False
    except ArithmeticError as e:
        print('%s: error: %s' % (filename, e), file=sys.stderr)
        return False
    print(result)
    return True

def run_lines(evaluator, lines, filename):
    ok = True
    for line in lines:
        if line.strip():
            ok = run_one(evaluator, line.rstrip('\n'), filename) and ok
    return ok

def repl(evaluator, config):
    try:
        while True:
            line = input(config.prompt)
            if line.strip():
                run_one(evaluator, line, config.filename)
    except (EOFError, KeyboardInterrupt):
        print()

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = Config.from_env()
        if args.prompt is not None:
            config = config.replace(prompt=args.prompt)
        if args.verbose:
            config = config.replace(log_level='DEBUG')
    except ValueError as e:
        parser.error(str(e))
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    evaluator = Evaluator()
    if args.expressions:
        ok = all([run_one(evaluator, text, '<args>') for text in args.expressions])
        return 0 if ok else 1
    if not sys.stdin.isatty():
        return 0 if run_lines(evaluator, sys.stdin, config.filename) else 1
    repl(evaluator, config)
    return 0

if __name__ == '__main__':
    sys.exit(main())
