from .errors import (InterpreterError, InvalidToken, ParsingError, EmptyExpression,
                     UnbalancedParentheses, DivisionByZero, UnsupportedSyntax, UndefinedOperator)
from .lexergenerator import LexerGenerator
from .box import Token, SourcePosition
from .nodes import Number, Variable, BinaryOp, evaluate_node
from .calculator import Context, Calculator, tokenize, parse, evaluate
from .sql import SQLContext, SQLInterpreter, SelectExpression, WhereExpression
from .regex import RegexContext, SimpleRegexInterpreter

__version__ = '0.1.0'

__all__ = [
    "LexerGenerator", "Token", "SourcePosition",
    "InterpreterError", "InvalidToken", "ParsingError", "EmptyExpression",
    "UnbalancedParentheses", "DivisionByZero", "UnsupportedSyntax", "UndefinedOperator",
    "Number", "Variable", "BinaryOp", "evaluate_node",
    "Context", "Calculator", "tokenize", "parse", "evaluate",
    "SQLContext", "SQLInterpreter", "SelectExpression", "WhereExpression",
    "RegexContext", "SimpleRegexInterpreter",
]
