class BaseBox:
    """
    语法树节点与令牌的公共基类。
    """
    _attrs_ = []


class SourcePosition:
    """封装源位置信息（索引，行号，列号）"""

    def __init__(self, idx, lineno, colno):
        self.idx = idx
        self.lineno = lineno
        self.colno = colno

    def __repr__(self):
        return f"SourcePosition(idx={self.idx}, lineno={self.lineno}, colno={self.colno})"

    def __eq__(self, other):
        if not isinstance(other, SourcePosition):
            return NotImplemented
        return (self.idx, self.lineno, self.colno) == (other.idx, other.lineno, other.colno)


class Token(BaseBox):
    """封装词法分析器生成的令牌"""
    def __init__(self, name, value, source_pos=None):
        self.name = name
        self.value = value
        self.source_pos = source_pos

    def __repr__(self):
        return f"Token({self.name!r}, {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            # 尝试other的比较方法
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def get_type(self):
        return self.name

    def get_source_pos(self):
        return self.source_pos

    def get_str(self):
        return self.value
