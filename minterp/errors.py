class InterpreterError(Exception):
    """所有解释器错误的基类，携带错误信息和源位置"""

    def __init__(self, message, source_pos=None):
        super().__init__(message)
        self.message = message
        self.source_pos = source_pos

    def get_source_pos(self):
        return self.source_pos

    def __str__(self):
        if self.source_pos is None:
            return str(self.message)
        return f"{self.message} (at {self.source_pos!r})"

    def __repr__(self):
        return f'{type(self).__name__}({self.message!r}, {self.source_pos!r})'


class InvalidToken(InterpreterError):
    pass


class ParsingError(InterpreterError):
    pass


class EmptyExpression(ParsingError):
    pass


class UnbalancedParentheses(ParsingError):
    pass


class DivisionByZero(InterpreterError, ZeroDivisionError):
    pass


class UnsupportedSyntax(InterpreterError):
    pass


class UndefinedOperator(InterpreterError):
    pass
