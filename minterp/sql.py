import re
import operator

from .errors import UndefinedOperator, UnsupportedSyntax

SELECT_RE = re.compile(
    r"\s*SELECT\s+(?P<columns>.+?)\s+FROM\s+(?P<table>\w+)(?:\s+WHERE\s+(?P<where>.+?))?\s*;?\s*",
    re.IGNORECASE | re.DOTALL,
)
# 较长的运算符必须排在其前缀之前，否则 ">=" 会被读成 ">"
WHERE_RE = re.compile(
    r"(?P<column>\w+)\s*(?P<op>!=|>=|<=|=|>|<|\bLIKE\b)\s*(?P<value>'[^']*'|[^\s']+)",
    re.IGNORECASE,
)
COMPARISONS = {
    "=": operator.eq,
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}

_missing = object()


class SQLContext:
    """SQL上下文：表名 -> 行列表"""

    def __init__(self):
        self.tables = {}

    def add_table(self, name, rows):
        self.tables[name] = list(rows)

    def get_table(self, name):
        return self.tables.get(name, [])

    def has_table(self, name):
        return name in self.tables


class WhereExpression:
    """单个谓词：column op value"""

    def __init__(self, column, op, value):
        op = op.upper()
        if op not in COMPARISONS and op not in ("!=", "LIKE"):
            raise UndefinedOperator(f"Unknown operator {op!r}")
        self.column = column
        self.operator = op
        self.value = value

    def __repr__(self):
        return f"WhereExpression({self.column!r}, {self.operator!r}, {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, WhereExpression):
            return NotImplemented
        return (self.column, self.operator, self.value) == (other.column, other.operator, other.value)

    def evaluate(self, row):
        column_value = row.get(self.column, _missing)
        if self.operator == "!=":
            return column_value is _missing or column_value != self.value
        if column_value is _missing:
            return False
        if self.operator == "LIKE":
            return str(self.value) in str(column_value)
        try:
            return bool(COMPARISONS[self.operator](column_value, self.value))
        except TypeError:
            # 无法比较的值（如字符串与数字）不满足条件
            return False


class SelectExpression:
    def __init__(self, columns, table, where=None):
        self.columns = columns
        self.table = table
        self.where = where

    def __repr__(self):
        return f"SelectExpression({self.columns!r}, {self.table!r}, {self.where!r})"

    def interpret(self, context):
        rows = context.get_table(self.table)
        if self.where is not None:
            rows = [row for row in rows if self.where.evaluate(row)]
        if "*" in self.columns:
            return [dict(row) for row in rows]
        return [
            {col: row[col] for col in self.columns if col in row}
            for row in rows
        ]


def parse_value(text):
    """'quoted' -> 字符串，能被 float() 解析的 -> float，其他保持原样"""
    if len(text) >= 2 and text.startswith("'") and text.endswith("'"):
        return text[1:-1]
    try:
        value = float(text)
    except ValueError:
        return text
    # "nan" 之类按普通单词处理
    if value != value:
        return text
    return value


def parse_where(clause):
    match = WHERE_RE.fullmatch(clause.strip())
    if match is None:
        raise UnsupportedSyntax(f"Unsupported WHERE clause: {clause!r}")
    return WhereExpression(match.group("column"), match.group("op"), parse_value(match.group("value")))


def parse_sql(sql):
    """
    解析 SELECT <cols> FROM <table> [WHERE <column> <op> <value>]。
    :raises UnsupportedSyntax: 查询不是上述形式。
    """
    match = SELECT_RE.fullmatch(sql)
    if match is None:
        raise UnsupportedSyntax(f"Unsupported SQL syntax: {sql!r}")
    columns = [col.strip() for col in match.group("columns").split(",")]
    if not all(columns):
        raise UnsupportedSyntax(f"Empty column in select list: {match.group('columns')!r}")
    where = match.group("where")
    return SelectExpression(
        columns,
        match.group("table"),
        parse_where(where) if where is not None else None,
    )


class SQLInterpreter:
    """简单SQL解释器"""

    def __init__(self, context=None):
        self.context = context if context is not None else SQLContext()

    def add_table(self, name, rows):
        self.context.add_table(name, rows)

    def parse(self, sql):
        return parse_sql(sql)

    def execute(self, sql):
        return parse_sql(sql).interpret(self.context)
