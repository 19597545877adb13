from .box import BaseBox
from .errors import DivisionByZero, UndefinedOperator

OPERATORS = ("+", "-", "*", "/")


def _postorder(node):
    """后序遍历（显式栈），深层的树不会触发递归上限"""
    order = []
    stack = [node]
    while stack:
        current = stack.pop()
        order.append(current)
        if isinstance(current, BinaryOp):
            stack.append(current.left)
            stack.append(current.right)
    order.reverse()
    return order


class Node(BaseBox):
    """表达式树节点。节点集合是封闭的：Number、Variable、BinaryOp"""

    def _labels(self):
        # 固定元数的树，后序标签序列唯一确定树的结构
        return [(type(n).__name__, n._label()) for n in _postorder(self)]

    def __eq__(self, other):
        if not isinstance(other, Node) or type(self) is not type(other):
            return NotImplemented
        return self._labels() == other._labels()

    def __hash__(self):
        return hash(tuple(self._labels()))

    def __str__(self):
        rendered = []
        for n in _postorder(self):
            if isinstance(n, BinaryOp):
                right = rendered.pop()
                left = rendered.pop()
                rendered.append(f"({left} {n.operator} {right})")
            else:
                rendered.append(n._render())
        return rendered.pop()


class Number(Node):
    def __init__(self, value):
        self.value = float(value)

    def _label(self):
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"

    def _render(self):
        # 整数值不显示小数部分，与输入保持一致
        if self.value.is_integer():
            return str(int(self.value))
        return str(self.value)


class Variable(Node):
    def __init__(self, name):
        self.name = name

    def _label(self):
        return self.name

    def __repr__(self):
        return f"Variable({self.name!r})"

    def _render(self):
        return self.name


class BinaryOp(Node):
    def __init__(self, operator, left, right):
        if operator not in OPERATORS:
            raise UndefinedOperator(f"Unknown operator {operator!r}")
        self.operator = operator
        self.left = left
        self.right = right

    def _label(self):
        return self.operator

    def __repr__(self):
        return f"BinaryOp({self.operator!r}, {self.left!r}, {self.right!r})"


def evaluate_node(node, context):
    """
    求值表达式树。按后序遍历，用值栈代替递归。
    :param node: 表达式树的根节点。
    :param context: 提供 get_variable(name) 的上下文。
    :return: 浮点数结果。
    """
    values = []
    for current in _postorder(node):
        if isinstance(current, Number):
            values.append(current.value)
        elif isinstance(current, Variable):
            values.append(context.get_variable(current.name))
        elif isinstance(current, BinaryOp):
            right = values.pop()
            left = values.pop()
            op = current.operator
            if op == "+":
                values.append(left + right)
            elif op == "-":
                values.append(left - right)
            elif op == "*":
                values.append(left * right)
            elif op == "/":
                if right == 0:
                    raise DivisionByZero(f"Division by zero in {current}")
                values.append(left / right)
            else:
                raise UndefinedOperator(f"Unknown operator {op!r}")
        else:
            raise TypeError(f"Unknown node type: {type(current).__name__}")
    return values.pop()
