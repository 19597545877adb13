from .errors import EmptyExpression, ParsingError, UnbalancedParentheses
from .lexergenerator import LexerGenerator
from .nodes import BinaryOp, Number, Variable, evaluate_node

PRECEDENCE = {
    "PLUS": 1,
    "MINUS": 1,
    "MUL": 2,
    "DIV": 2,
}


class Context:
    """变量上下文：变量名 -> 数值，未定义的变量取 0"""

    def __init__(self, variables=None):
        self.variables = dict(variables or {})

    def set_variable(self, name, value):
        self.variables[name] = value

    def get_variable(self, name):
        return self.variables.get(name, 0)

    def has_variable(self, name):
        return name in self.variables

    def __str__(self):
        return ", ".join(f"{key}={value}" for key, value in self.variables.items())


def build_lexer():
    lg = LexerGenerator()
    lg.add("NUMBER", r"\d+")
    lg.add("IDENTIFIER", r"[A-Za-z_]\w*")
    lg.add("PLUS", r"\+")
    lg.add("MINUS", r"-")
    lg.add("MUL", r"\*")
    lg.add("DIV", r"/")
    lg.add("LPAREN", r"\(")
    lg.add("RPAREN", r"\)")
    lg.ignore(r"\s+")
    return lg.build()


lexer = build_lexer()


def tokenize(expression):
    """返回表达式的 Token 流（惰性）"""
    return lexer.lex(expression)


class Parser:
    """
    调度场（shunting-yard）解析器，将 Token 流转换为表达式树。
    output 栈保存已构建的节点，operators 栈保存运算符和左括号。
    """

    def __init__(self):
        self.output = []
        self.operators = []

    def parse(self, tokens):
        self.output = []
        self.operators = []
        expect_operand = True
        last = None
        for token in tokens:
            last = token
            kind = token.get_type()
            if kind in ("NUMBER", "IDENTIFIER"):
                if not expect_operand:
                    self._unexpected(token)
                if kind == "NUMBER":
                    self.output.append(Number(float(token.get_str())))
                else:
                    self.output.append(Variable(token.get_str()))
                expect_operand = False
            elif kind == "LPAREN":
                if not expect_operand:
                    self._unexpected(token)
                self.operators.append(token)
            elif kind == "RPAREN":
                if not any(op.get_type() == "LPAREN" for op in self.operators):
                    raise UnbalancedParentheses("Unmatched ')'", token.get_source_pos())
                if expect_operand:
                    self._unexpected(token)
                self._close_paren()
            elif kind in PRECEDENCE:
                # 不支持一元负号："-5" 在这里报错
                if expect_operand:
                    self._unexpected(token)
                while self.operators and self._precedence(self.operators[-1]) >= PRECEDENCE[kind]:
                    self._reduce()
                self.operators.append(token)
                expect_operand = True
            else:
                self._unexpected(token)

        if last is None:
            raise EmptyExpression("Empty expression")
        for op in self.operators:
            if op.get_type() == "LPAREN":
                raise UnbalancedParentheses("Unclosed '('", op.get_source_pos())
        if expect_operand:
            raise ParsingError("Unexpected end of expression", last.get_source_pos())

        while self.operators:
            self._reduce()

        assert len(self.output) == 1
        return self.output.pop()

    def _precedence(self, token):
        # 左括号作为标记，优先级最低
        return PRECEDENCE.get(token.get_type(), 0)

    def _reduce(self):
        op = self.operators.pop()
        # 先弹出右操作数，再弹出左操作数
        right = self.output.pop()
        left = self.output.pop()
        self.output.append(BinaryOp(op.get_str(), left, right))

    def _close_paren(self):
        while self.operators[-1].get_type() != "LPAREN":
            self._reduce()
        self.operators.pop()

    def _unexpected(self, token):
        raise ParsingError(f"Unexpected {token.get_type()} {token.get_str()!r}", token.get_source_pos())


def parse(tokens):
    """
    解析 Token 序列，返回表达式树的根节点。
    :param tokens: Token 的任意可迭代对象，只消费一次。
    """
    return Parser().parse(tokens)


def evaluate(expression, context=None):
    """对表达式字符串求值。context 为 None 时使用空上下文"""
    if context is None:
        context = Context()
    return evaluate_node(parse(tokenize(expression)), context)


class Calculator:
    """计算器解释器：持有变量上下文，对表达式求值"""

    def __init__(self, context=None):
        self.context = context if context is not None else Context()

    def set_variable(self, name, value):
        self.context.set_variable(name, value)

    def parse(self, expression):
        return parse(tokenize(expression))

    def evaluate(self, expression):
        return evaluate(expression, self.context)
