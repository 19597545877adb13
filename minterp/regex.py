"""
简单正则表达式解释器。

支持字面字符、``.``（任意单个字符）、``*``（前一项零次或多次）以及 ``|``
（选择）。``test`` 要求从位置 0 开始消费整个输入。

匹配位置是按值传递的整数：每个节点接收起始位置，返回 ``(是否成功, 新位置)``，
失败时返回的位置与起始位置相同。

回溯模式下则改为推进位置集合，见 ``match_all``。
"""
from .box import BaseBox


class RegexContext:
    """待匹配的输入；position 记录最近一次 test 的结束位置"""

    def __init__(self, input):
        self.input = input
        self.position = 0

    def char_at(self, pos):
        return self.input[pos] if pos < len(self.input) else ""

    def is_at_end(self, pos):
        return pos >= len(self.input)


class RegexNode(BaseBox):
    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        args = ", ".join(repr(v) for v in vars(self).values())
        return f"{type(self).__name__}({args})"


class Literal(RegexNode):
    def __init__(self, char):
        self.char = char


class AnyChar(RegexNode):
    pass


class Sequence(RegexNode):
    def __init__(self, items):
        self.items = list(items)


class Alternation(RegexNode):
    def __init__(self, left, right):
        self.left = left
        self.right = right


class ZeroOrMore(RegexNode):
    def __init__(self, item):
        self.item = item


def compile_pattern(pattern):
    """将模式字符串编译为节点树；``|`` 生成右嵌套的选择链"""
    branches = []
    items = []
    for char in pattern:
        if char == ".":
            items.append(AnyChar())
        elif char == "*" and items:
            # a** 与 a* 等价，不再嵌套
            if not isinstance(items[-1], ZeroOrMore):
                items.append(ZeroOrMore(items.pop()))
        elif char == "|":
            branches.append(Sequence(items))
            items = []
        else:
            items.append(Literal(char))
    node = Sequence(items)
    for branch in reversed(branches):
        node = Alternation(branch, node)
    return node


def match_greedy(node, ctx, pos):
    """
    贪婪匹配，不回溯：``*`` 尽可能多地匹配且从不退让，
    选择只在左分支本身失败时才尝试右分支。
    """
    if isinstance(node, Literal):
        if ctx.char_at(pos) == node.char:
            return True, pos + 1
        return False, pos
    elif isinstance(node, AnyChar):
        if not ctx.is_at_end(pos):
            return True, pos + 1
        return False, pos
    elif isinstance(node, Sequence):
        current = pos
        for item in node.items:
            ok, current = match_greedy(item, ctx, current)
            if not ok:
                return False, pos
        return True, current
    elif isinstance(node, Alternation):
        # 沿右嵌套的选择链迭代
        while isinstance(node, Alternation):
            ok, end = match_greedy(node.left, ctx, pos)
            if ok:
                return True, end
            node = node.right
        return match_greedy(node, ctx, pos)
    elif isinstance(node, ZeroOrMore):
        current = pos
        while True:
            ok, end = match_greedy(node.item, ctx, current)
            # 空匹配会导致死循环
            if not ok or end == current:
                return True, current
            current = end
    raise TypeError(f"Unknown regex node: {type(node).__name__}")


def match_all(node, ctx, starts):
    """
    回溯匹配：返回从 starts 中任一位置出发能到达的全部结束位置。
    按位置集合推进，等价于尝试所有回溯分支，但不随输入长度加深递归。
    """
    if isinstance(node, Literal):
        return {pos + 1 for pos in starts if ctx.char_at(pos) == node.char}
    elif isinstance(node, AnyChar):
        return {pos + 1 for pos in starts if not ctx.is_at_end(pos)}
    elif isinstance(node, Sequence):
        current = set(starts)
        for item in node.items:
            if not current:
                break
            current = match_all(item, ctx, current)
        return current
    elif isinstance(node, Alternation):
        ends = set()
        while isinstance(node, Alternation):
            ends |= match_all(node.left, ctx, starts)
            node = node.right
        return ends | match_all(node, ctx, starts)
    elif isinstance(node, ZeroOrMore):
        reached = set(starts)
        frontier = reached
        while frontier:
            frontier = match_all(node.item, ctx, frontier) - reached
            reached |= frontier
        return reached
    raise TypeError(f"Unknown regex node: {type(node).__name__}")


class SimpleRegexInterpreter:
    """
    :param backtracking: 为 False（默认）时保持贪婪且不回溯的 ``*``，
                         例如 ``a*a`` 无法匹配 ``aa``；为 True 时完整回溯。
    """

    def __init__(self, backtracking=False):
        self.backtracking = backtracking

    def compile(self, pattern):
        return compile_pattern(pattern)

    def test(self, pattern, input):
        ctx = RegexContext(input)
        try:
            node = compile_pattern(pattern)
            if self.backtracking:
                ends = match_all(node, ctx, {0})
                ctx.position = len(input) if len(input) in ends else max(ends, default=0)
                return len(input) in ends
            ok, end = match_greedy(node, ctx, 0)
        except RecursionError:
            return False
        ctx.position = end
        return ok and ctx.is_at_end(end)
