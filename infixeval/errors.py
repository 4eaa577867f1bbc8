import sys

# Return the full line of text that a given Info points into
def get_source_line(text, info):
    start = text.rfind('\n', 0, info.textpos) + 1
    end = text.find('\n', info.textpos)
    # Special handling for the case where the last line doesn't have a trailing newline
    if end == -1:
        end = None
    return text[start:end]

# Base class for all errors raised on malformed input. These are SyntaxErrors,
# with a kind string that stays stable across message changes, an optional Info
# pointing at the token responsible, and the source text once the evaluator has
# seen it (so the error can be printed with a caret under the bad token).
class EvaluationError(SyntaxError):
    kind = 'invalid-expression'
    default_msg = 'invalid expression'
    def __init__(self, msg=None, info=None, text=None):
        msg = msg or self.default_msg
        super().__init__(msg)
        self.msg = msg
        self.info = info
        self.text = text
    def __str__(self):
        return self.msg
    def print(self, file=None):
        file = file or sys.stderr
        info = self.info
        source_info = '%s(%s): ' % (info.filename, info.lineno) if info and info.filename else ''
        print('%serror: %s' % (source_info, self.msg), file=file)
        if info is not None and self.text is not None:
            line = get_source_line(self.text, info)
            if line.strip():
                print(line, file=file)
                print(' ' * info.column + '^' * max(info.length, 1), file=file)
        elif self.text is not None and self.text.strip():
            print(self.text.rstrip('\n'), file=file)

# Tokenizer errors: a whitespace-delimited word that isn't an operator or an integer
class LexError(EvaluationError):
    pass

class InvalidExpression(LexError):
    kind = 'invalid-expression'
    default_msg = 'invalid expression'

# Also raised by the evaluator for operators it can't reduce, like a leftover '('
class InvalidOperator(LexError):
    kind = 'invalid-operator'
    default_msg = 'invalid operator'

# Starts with a digit, but isn't an integer
class InvalidSyntax(LexError):
    kind = 'invalid-syntax-operand'
    default_msg = 'invalid syntax'

class UnmatchedParenthesis(EvaluationError):
    kind = 'unmatched-close-paren'
    default_msg = "no open parenthesis '('"

class TooManyOperands(EvaluationError):
    kind = 'too-many-operands'
    default_msg = 'too many operands'

class OperandUnderflow(EvaluationError):
    kind = 'operand-underflow'
    default_msg = 'too many operands/operators or parenthesis mismatch'
