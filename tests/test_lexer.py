import re

from pytest import raises

from minterp import LexerGenerator, InvalidToken, tokenize


class TestLexer(object):
    def test_simple(self):
        lg = LexerGenerator()
        lg.add("NUMBER", r"\d+")
        lg.add("PLUS", r"\+")

        l = lg.build()

        stream = l.lex("2+3")
        t = next(stream)
        assert t.name == "NUMBER"
        assert t.value == "2"
        t = next(stream)
        assert t.name == "PLUS"
        assert t.value == "+"
        t = next(stream)
        assert t.name == "NUMBER"
        assert t.value == "3"
        assert t.source_pos.idx == 2

        with raises(StopIteration):
            next(stream)

    def test_position(self):
        lg = LexerGenerator()
        lg.add("NUMBER", r"\d+")
        lg.add("PLUS", r"\+")
        lg.ignore(r"\s+")

        l = lg.build()

        stream = l.lex("2 +\n    37")
        t = next(stream)
        assert (t.source_pos.lineno, t.source_pos.colno) == (1, 1)
        t = next(stream)
        assert (t.source_pos.lineno, t.source_pos.colno) == (1, 3)
        t = next(stream)
        assert (t.source_pos.lineno, t.source_pos.colno) == (2, 5)
        with raises(StopIteration):
            next(stream)

    def test_regex_flags(self):
        lg = LexerGenerator()
        lg.add("ALL", r".*", re.DOTALL)

        stream = lg.build().lex("test\ndotall")
        t = next(stream)
        assert t.get_str() == "test\ndotall"
        with raises(StopIteration):
            next(stream)

    def test_ignore_recursion(self):
        lg = LexerGenerator()
        lg.ignore(r"\s")

        assert list(lg.build().lex(" " * 2000)) == []

    def test_empty_match_is_not_a_token(self):
        lg = LexerGenerator()
        lg.add("MAYBE", r"a*")

        stream = lg.build().lex("b")
        with raises(InvalidToken):
            next(stream)

    def test_error(self):
        lg = LexerGenerator()
        lg.add("NUMBER", r"\d+")
        lg.add("PLUS", r"\+")

        stream = lg.build().lex("1+2+fail")
        for _ in range(4):
            next(stream)
        with raises(InvalidToken) as excinfo:
            next(stream)

        assert 'SourcePosition(' in repr(excinfo.value)
        assert excinfo.value.source_pos.idx == 4
        assert excinfo.value.source_pos.colno == 5

    def test_error_line_number(self):
        lg = LexerGenerator()
        lg.add("NEW_LINE", r"\n")

        stream = lg.build().lex("\nfail")
        next(stream)
        with raises(InvalidToken) as excinfo:
            next(stream)

        assert excinfo.value.source_pos.lineno == 2
        assert excinfo.value.source_pos.colno == 1


class TestTokenize(object):
    def test_expression(self):
        names = [t.get_type() for t in tokenize("(x + 12) * y / 3 - z")]
        assert names == [
            "LPAREN", "IDENTIFIER", "PLUS", "NUMBER", "RPAREN",
            "MUL", "IDENTIFIER", "DIV", "NUMBER", "MINUS", "IDENTIFIER",
        ]

    def test_number_then_identifier(self):
        assert [t.get_str() for t in tokenize("12abc")] == ["12", "abc"]

    def test_identifier_with_digits(self):
        assert [t.get_str() for t in tokenize("x1 + _y")] == ["x1", "+", "_y"]

    def test_leading_minus_is_an_operator(self):
        assert [t.get_type() for t in tokenize("-5")] == ["MINUS", "NUMBER"]

    def test_no_float_literals(self):
        with raises(InvalidToken) as excinfo:
            list(tokenize("1.5"))
        assert excinfo.value.source_pos.idx == 1

    def test_unknown_character(self):
        with raises(InvalidToken):
            list(tokenize("2 % 3"))

    def test_lazy(self):
        stream = tokenize("1 + $")
        assert next(stream).get_str() == "1"
        assert next(stream).get_str() == "+"
        with raises(InvalidToken):
            next(stream)

    def test_whitespace_only(self):
        assert list(tokenize(" \t\n ")) == []
