import copy
import re

from .errors import InvalidExpression, InvalidOperator, InvalidSyntax

OPERATORS = '+-*/%^()'

# Info means basically filename/line number, used for reporting errors
class Info:
    def __init__(self, filename, lineno=1, textpos=0, column=0, length=0):
        self.filename = filename
        self.lineno = lineno
        self.textpos = textpos
        self.column = column
        self.length = length
    def __repr__(self):
        return 'Info(%r, %s, %s, %s)' % (self.filename, self.lineno, self.column, self.length)

class Token:
    def __init__(self, type, value, info=None):
        self.type = type
        self.value = value
        self.info = info
    def copy(self, type=None, value=None, info=None):
        c = copy.copy(self)
        if type is not None:  c.type = type
        if value is not None: c.value = value
        if info is not None:  c.info = info
        return c
    def __repr__(self):
        return 'Token(%s, %r, info=%s)' % (self.type, self.value, self.info)

class Lexer:
    # The token list is a sequence of (name, regex) or (name, (regex, fn)) pairs,
    # tried in order. fn gets each matched token, and returns a replacement token,
    # or None to skip it. It can also raise, to reject the token outright.
    def __init__(self, token_list):
        if isinstance(token_list, dict):
            token_list = token_list.items()
        self.token_fns = {}
        sorted_tokens = []
        for k, v in token_list:
            if isinstance(v, tuple):
                v, fn = v
                self.token_fns[k] = fn
            sorted_tokens.append([k, v])
        regex = '|'.join('(?P<%s>%s)' % (k, v) for k, v in sorted_tokens)
        self.matcher = re.compile(regex, re.MULTILINE).match

    def lex_input(self, text, filename):
        match = self.matcher(text)
        lineno = 1
        last_newline = 0
        end = 0
        while match is not None:
            type = match.lastgroup
            value = match.group(type)
            start, end = match.start(), match.end()

            # Info is attached before the token function runs, so errors raised
            # from there can point at the token
            info = Info(filename, lineno, start, start - last_newline, end - start)
            token = Token(type, value, info)
            if type in self.token_fns:
                token = self.token_fns[type](token)
            if token:
                yield token

            # If there's a newline in this token, bump the newline count, and save the position
            # of the start of the next line (so we know what column a given character is in)
            if '\n' in value:
                lineno += value.count('\n')
                last_newline = start + value.rfind('\n') + 1
            match = self.matcher(text, end)

        # Check for invalid input--we didn't reach the end of the input
        if end != len(text):
            info = Info(filename, lineno, end, end - last_newline, 1)
            raise InvalidExpression('tokenizing error, invalid input', info=info)

    def input(self, text, filename=None):
        return LexerContext(text, self.lex_input(text, filename), filename)

class LexerContext:
    def __init__(self, text, token_stream, filename):
        self.text = text
        self.filename = filename
        # The token_stream argument is a generator from the lex_input() function above.
        # It's consumed lazily, so an invalid token is only reported once everything
        # before it has been handled.
        self.token_stream = token_stream
        self.lookahead = None

    def peek(self):
        if self.lookahead is None and self.token_stream is not None:
            try:
                self.lookahead = next(self.token_stream)
            except StopIteration:
                # Simple sentinel: take away the token stream when it's been consumed
                self.token_stream = None
        return self.lookahead

    def next(self):
        token = self.peek()
        self.lookahead = None
        return token

    def __iter__(self):
        token = self.next()
        while token is not None:
            yield token
            token = self.next()

# Anything that got past NUMBER and OPERATOR is an error. Sort out which kind by
# what the word starts with.
def reject_word(token):
    ch = token.value[0]
    # ASCII only, the same digits NUMBER accepts
    if '0' <= ch <= '9':
        raise InvalidSyntax(info=token.info)
    elif ch in OPERATORS:
        raise InvalidOperator(info=token.info)
    raise InvalidExpression(info=token.info)

# Every token has to be a whole whitespace-delimited word, hence the (?!\S)
table = [
    ('WHITESPACE', (r'\s+', lambda t: None)),
    ('NUMBER',     (r'[+-]?[0-9]+(?!\S)', lambda t: t.copy(value=int(t.value)))),
    ('OPERATOR',   r'[-+*/%^()](?!\S)'),
    ('INVALID',    (r'\S+', reject_word)),
]
lexer = Lexer(table)

def tokenize(text, filename=None):
    return iter(lexer.input(text, filename))
