import re

from .lexer import Lexer


class Match:
    """封装匹配索引"""

    _attrs_ = ["start", "end"]

    def __init__(self, start, end):
        self.start = start
        self.end = end


class Rule:
    """封装匹配的名称和正则表达式对象"""

    _attrs_ = ['name', 're']

    def __init__(self, name, pattern, flags=0):
        self.name = name
        self.re = re.compile(pattern, flags=flags)

    def matches(self, s, pos):
        """
        从位置pos开始解析字符串s
        :return: 如果规则匹配，则返回一个`Match`对象；如果不匹配，则返回None
        """
        m = self.re.match(s, pos)
        if m is None or m.end() == pos:
            # 空匹配不会推进位置，视为不匹配
            return None
        return Match(*m.span(0))


class LexerGenerator:
    """
    用于生成词法分析器。

    >>> from minterp import LexerGenerator
    >>> lg = LexerGenerator()
    >>> lg.add('NUMBER', r'\\d+')
    >>> lg.add('ADD', r'\\+')
    >>> lg.ignore(r'\\s+')
    >>> lexer = lg.build()
    >>> iterator = lexer.lex('1 + 1')
    >>> next(iterator)
    Token('NUMBER', '1')
    >>> next(iterator)
    Token('ADD', '+')
    >>> next(iterator)
    Token('NUMBER', '1')
    >>> next(iterator)
    Traceback (most recent call last):
    ...
    StopIteration
    """

    def __init__(self):
        self.rules = []
        self.ignore_rules = []

    def add(self, name, pattern, flags=0):
        """添加匹配规则，第一条优先"""
        self.rules.append(Rule(name, pattern, flags=flags))

    def ignore(self, pattern, flags=0):
        """添加忽略规则，第一条优先"""
        self.ignore_rules.append(Rule("", pattern, flags=flags))

    def build(self):
        """
        返回一个词法分析器实例，该实例提供一个 `lex` 方法
        该方法必须传递一个字符串，返回一个迭代器生成 `Token` 实例。
        """
        return Lexer(self.rules, self.ignore_rules)
