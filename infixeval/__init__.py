from .errors import (EvaluationError, LexError, InvalidExpression, InvalidOperator,
        InvalidSyntax, UnmatchedParenthesis, TooManyOperands, OperandUnderflow)
from .evaluator import PRECEDENCE, Evaluator, StackMachine, evaluate, precedence
from .lex import Token, tokenize

__version__ = '0.1.0'
