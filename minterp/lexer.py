from .errors import InvalidToken
from .box import SourcePosition, Token


class Lexer:
    """词法分析器，lex()获取 Token 流"""

    def __init__(self, rules, ignore_rules):
        self.rules = rules
        self.ignore_rules = ignore_rules

    def lex(self, s):
        return LexerStream(self, s)


class LexerStream:
    """词法分析器流，按需生成 Token"""

    def __init__(self, lexer, s):
        self.lexer = lexer
        self.s = s
        self.idx = 0
        self._lineno = 1
        self._colno = 1

    def __iter__(self):
        return self

    def _column(self, idx):
        last_nl = self.s.rfind("\n", 0, idx)
        if last_nl < 0:
            return idx + 1
        return idx - last_nl

    def _update_pos(self, match):
        self.idx = match.end
        self._lineno += self.s.count("\n", match.start, match.end)
        return self._column(match.start)

    def __next__(self):
        # 跳过忽略规则
        while True:
            if self.idx >= len(self.s):
                raise StopIteration
            for rule in self.lexer.ignore_rules:
                match = rule.matches(self.s, self.idx)
                if match:
                    self._update_pos(match)
                    break
            else:
                break

        for rule in self.lexer.rules:
            match = rule.matches(self.s, self.idx)
            if match:
                lineno = self._lineno
                self._colno = self._update_pos(match)
                source_pos = SourcePosition(match.start, lineno, self._colno)
                return Token(rule.name, self.s[match.start:match.end], source_pos)

        source_pos = SourcePosition(self.idx, self._lineno, self._column(self.idx))
        raise InvalidToken(f"Unexpected character {self.s[self.idx]!r}", source_pos)
