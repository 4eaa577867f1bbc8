import logging
import operator

from . import lex
from .errors import (EvaluationError, InvalidExpression, InvalidOperator,
        OperandUnderflow, TooManyOperands, UnmatchedParenthesis)

logger = logging.getLogger(__name__)

# Parentheses get the lowest rank: nothing ever reduces against them, they're
# only matched up with each other
PRECEDENCE = {
    '+': 1, '-': 1,
    '*': 2, '/': 2, '%': 2,
    '^': 3,
    '(': 0, ')': 0,
}

def precedence(op):
    return PRECEDENCE[op]

# Integer division that truncates toward zero, rather than flooring like //
def trunc_div(lhs, rhs):
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient

def divide(lhs, rhs):
    if rhs == 0:
        raise ZeroDivisionError('division by zero')
    return trunc_div(lhs, rhs)

# The remainder takes the sign of the left operand: -7 % 2 == -1, 7 % -2 == 1
def remainder(lhs, rhs):
    if rhs == 0:
        raise ZeroDivisionError('remainder by zero')
    return lhs - rhs * trunc_div(lhs, rhs)

# Results bigger than this many bits raise OverflowError instead of eating all
# the memory, e.g. 2 ^ 10000000000
MAX_POWER_BITS = 1 << 22

# A negative exponent gives a fraction, truncated toward zero: only bases of 1
# and -1 come out nonzero, so 2 ^ -1 == 0 and -1 ^ -3 == -1. 0 ^ -1 raises
# ZeroDivisionError.
def power(lhs, rhs):
    if rhs < 0:
        if lhs == 0:
            raise ZeroDivisionError('zero to a negative power')
        if lhs == 1:
            return 1
        if lhs == -1:
            return -1 if rhs % 2 else 1
        return 0
    # bit_length() - 1 is a lower bound on log2(|lhs|), so only results that
    # are certainly over the limit get rejected
    if (abs(lhs).bit_length() - 1) * rhs > MAX_POWER_BITS:
        raise OverflowError('power result too large')
    return lhs ** rhs

BINARY_OPS = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': divide,
    '%': remainder,
    '^': power,
}

def apply_op(op, operands, info=None):
    """Pop the right then the left operand, apply op, and push the result.

    Raises OperandUnderflow if there aren't two operands to pop, and
    InvalidOperator for symbols with no arithmetic meaning (a '(' that was
    never closed). Arithmetic errors like division by zero pass through.
    """
    if len(operands) < 2:
        raise OperandUnderflow(info=info)
    fn = BINARY_OPS.get(op)
    if fn is None:
        raise InvalidOperator('unbalanced parenthesis', info=info)
    rhs = operands.pop()
    lhs = operands.pop()
    result = fn(lhs, rhs)
    logger.debug('reduce %s %s %s -> %s', lhs, op, rhs, result)
    operands.append(result)
    return result

# The operand and operator stacks for a single evaluation. A fresh one is made
# for every call, so nothing carries over from one expression to the next.
class StackMachine:
    def __init__(self):
        self.operands = []
        self.operators = []

    def push(self, token):
        if token.type == 'NUMBER':
            self.push_operand(token)
        elif token.type == 'OPERATOR':
            self.push_operator(token)
        else:
            raise InvalidExpression(info=token.info)

    def push_operand(self, token):
        self.operands.append(token.value)

    def push_operator(self, token):
        op = token.value
        if op not in PRECEDENCE:
            raise InvalidOperator(info=token.info)
        # A ')' reduces everything back to the matching '(', which is then dropped.
        # It's never pushed itself.
        if op == ')':
            while self.operators and self.operators[-1].value != '(':
                self.reduce()
            if not self.operators:
                raise UnmatchedParenthesis(info=token.info)
            self.operators.pop()
        elif op == '(' or not self.operators:
            self.operators.append(token)
        else:
            # Reduce while the top binds at least as tightly. Equal precedence
            # reduces too, which is what makes operators left-associative.
            while self.operators and precedence(self.operators[-1].value) >= precedence(op):
                self.reduce()
            self.operators.append(token)

    def reduce(self):
        token = self.operators.pop()
        return apply_op(token.value, self.operands, info=token.info)

    # Once the input runs out, everything left can be applied top-down
    def drain(self):
        while self.operators:
            self.reduce()

    def result(self):
        if not self.operands:
            raise OperandUnderflow()
        if len(self.operands) > 1:
            raise TooManyOperands()
        return self.operands[0]

class Evaluator:
    """Evaluates whitespace-separated infix integer expressions.

    An Evaluator only holds its lexer; the stacks live in a StackMachine made
    per call, so one instance can be shared freely.
    """
    def __init__(self, lexer=None):
        self.lexer = lexer or lex.lexer

    def evaluate(self, text, filename=None):
        machine = StackMachine()
        try:
            for token in self.lexer.input(text, filename):
                machine.push(token)
            machine.drain()
            result = machine.result()
        except EvaluationError as e:
            # Attach the source so the error can show where it happened
            if e.text is None:
                e.text = text
            raise
        logger.debug('%r = %s', text, result)
        return result

default_evaluator = Evaluator()

def evaluate(text, filename=None):
    return default_evaluator.evaluate(text, filename)
