import pytest
from hypothesis import given, strategies as st

from mlisp.errors import MLispSyntaxError
from mlisp.reader import lex, parse, parse_program, read, read_program
from mlisp.reader.ast import (
    NumberNode,
    QExprNode,
    SExprNode,
    SourceLocation,
    StringNode,
    SymbolNode,
)
from mlisp.types import Number, QExpr, SExpr, String, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(+ 1 2)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "2"), ("rparen", ")")]),
        ("{a}", [("lbrace", "{"), ("atom", "a"), ("rbrace", "}")]),
        ('"hello world"', [("string", '"hello world"')]),
        ('"a \\" b"', [("string", '"a \\" b"')]),
        ("; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("a;trailing\nb", [("atom", "a"), ("atom", "b")]),
        ("(a)(b)", [("lparen", "("), ("atom", "a"), ("rparen", ")"), ("lparen", "("), ("atom", "b"), ("rparen", ")")]),
        ('x"s"', [("atom", "x"), ("string", '"s"')]),
        ("   ", []),
    ],
)
def test_lexer_basic(source, expected):
    assert [(t.kind, t.value) for t in lex(source)] == expected


def test_lexer_tracks_lines():
    tokens = list(lex('a\nb\n\n"multi\nline"\nc'))
    assert [t.lineno for t in tokens] == [1, 2, 4, 6]


def test_lexer_unterminated_string():
    with pytest.raises(MLispSyntaxError, match="unterminated string"):
        list(lex('(println "abc)'))


@pytest.mark.parametrize(
    "text,is_number",
    [
        ("1", True),
        ("-2", True),
        ("+4", True),
        ("3.5", True),
        (".5", True),
        ("5.", True),
        ("1e3", True),
        ("2.5E-2", True),
        ("-", False),
        ("+", False),
        ("...", False),
        ("1a", False),
        ("1.2.3", False),
        ("e5", False),
    ],
)
def test_number_or_symbol(text, is_number):
    node = parse(text)
    if is_number:
        assert node == NumberNode(float(text), SourceLocation("<input>", 1))
    else:
        assert node == SymbolNode(text, SourceLocation("<input>", 1))


def test_string_escapes():
    assert parse(r'"a\"b\n\t\\c\q"').text == 'a"b\n\t\\cq'


def test_parse_nested():
    node = parse("(a {b (c)} \"d\")")
    assert isinstance(node, SExprNode)
    a, q, d = node.children
    assert a.name == "a"
    assert isinstance(q, QExprNode)
    assert q.children[0].name == "b"
    assert isinstance(q.children[1], SExprNode)
    assert isinstance(d, StringNode) and d.text == "d"


def test_parse_wraps_several_forms():
    node = parse("+ 1 2")
    assert isinstance(node, SExprNode)
    assert [type(c) for c in node.children] == [SymbolNode, NumberNode, NumberNode]
    assert parse("") == SExprNode([], SourceLocation("<input>", 1))


def test_parse_program_locations():
    nodes = parse_program("a\n(b\n c)\n\n{d}", "prog.mlisp")
    assert [n.location for n in nodes] == [
        SourceLocation("prog.mlisp", 1),
        SourceLocation("prog.mlisp", 2),
        SourceLocation("prog.mlisp", 5),
    ]
    assert str(nodes[1].children[1].location) == "prog.mlisp:3"


@pytest.mark.parametrize(
    "source,message",
    [
        (")", "unexpected token: `)` at <input>:1"),
        ("}", "unexpected token: `}` at <input>:1"),
        ("(a}", "unexpected token: `}` at <input>:1"),
        ("(a", "unexpected end of input: expected `)` at <input>:1"),
        ("{a\nb", "unexpected end of input: expected `}` at <input>:2"),
        ("(a (b)", "unexpected end of input: expected `)` at <input>:1"),
    ],
)
def test_syntax_errors(source, message):
    with pytest.raises(MLispSyntaxError) as exc:
        parse(source)
    assert str(exc.value) == message


def test_syntax_error_attributes():
    with pytest.raises(MLispSyntaxError) as exc:
        parse_program("(a\n\n)\n)", "bad.mlisp")
    assert exc.value.filename == "bad.mlisp"
    assert exc.value.lineno == 4
    assert exc.value.message == "unexpected token: `)`"


def test_read_values():
    assert read('{1 (two) "three"}') == QExpr([Number(1), SExpr([Symbol("two")]), String("three")])
    assert read("+ 1 2") == SExpr([Symbol("+"), Number(1), Number(2)])
    assert read("") == SExpr()


def test_read_program():
    assert read_program("(def {a} 1) a") == [
        SExpr([Symbol("def"), QExpr([Symbol("a")]), Number(1)]),
        Symbol("a"),
    ]


symbols = st.from_regex(r"[a-z_!?*<>=][a-z0-9_!?*<>=-]{0,8}", fullmatch=True).map(Symbol)
atoms = st.one_of(st.integers(-10**6, 10**6).map(Number), symbols)
trees = st.recursive(
    atoms,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(SExpr),
        st.lists(children, max_size=4).map(QExpr),
    ),
    max_leaves=20,
)


@given(st.lists(trees, min_size=1, max_size=4))
def test_displayed_forms_read_back(forms):
    source = "\n".join(f.display() for f in forms)
    assert read_program(source) == forms
