from minterp import Calculator, SQLInterpreter, SimpleRegexInterpreter


def demo_calculator():
    print("1. 基本表达式计算器：")
    calculator = Calculator()
    calculator.set_variable("x", 10)
    calculator.set_variable("y", 5)
    print("上下文：", calculator.context)

    for code in ("x + y", "x * y - 2", "(x + y) * 2"):
        print(f"计算 {code}：", calculator.evaluate(code), " 语法树：", calculator.parse(code))


def demo_sql():
    print("\n2. SQL查询解释器：")
    sql = SQLInterpreter()
    sql.add_table("users", [
        {"id": 1, "name": "张三", "age": 25, "city": "北京"},
        {"id": 2, "name": "李四", "age": 30, "city": "上海"},
        {"id": 3, "name": "王五", "age": 28, "city": "北京"},
        {"id": 4, "name": "赵六", "age": 35, "city": "广州"},
    ])

    for query in (
        "SELECT * FROM users",
        "SELECT name, age FROM users WHERE city = '北京'",
        "SELECT * FROM users WHERE age > 28",
    ):
        print(f"执行 {query}：")
        for row in sql.execute(query):
            print("  ", row)


def demo_regex():
    print("\n3. 正则表达式解释器：")
    regex = SimpleRegexInterpreter()
    for pattern, text in (("a*b", "aaab"), ("a*b", "b"), ("a*b", "c"),
                          ("a.c", "abc"), ("a|b", "a"), ("a|b", "b")):
        print(f'测试 "{pattern}" 匹配 "{text}"：', regex.test(pattern, text))

    # 默认的 * 不回溯，开启 backtracking 后 "a*a" 才能匹配 "aa"
    print('测试 "a*a" 匹配 "aa"：', regex.test("a*a", "aa"),
          "（回溯：", SimpleRegexInterpreter(backtracking=True).test("a*a", "aa"), "）")


if __name__ == '__main__':
    print("=== 解释器模式演示 ===\n")
    demo_calculator()
    demo_sql()
    demo_regex()
    print("\n=== 解释器模式演示完成 ===")
