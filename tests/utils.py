from minterp import Token


class RecordingLexer:
    """记录解析器从 Token 流中取出的每个 Token"""

    def __init__(self, record, tokens):
        self.tokens = iter(tokens)
        self.record = record

    def next(self):
        s = "None"
        try:
            token = next(self.tokens)
            s = token.get_type()
        finally:
            self.record.append(f"token:{s}")
        return token

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()


def tokens(*pairs):
    return [Token(name, value) for name, value in pairs]
