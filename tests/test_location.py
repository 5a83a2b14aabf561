from heapview.location import FileLine, Symbol, unresolved_function_name


def test_default_symbol_is_invalid():
    assert not Symbol().is_valid()


def test_symbol_valid_with_any_field():
    assert Symbol(symbol="main").is_valid()
    assert Symbol(binary="app").is_valid()
    assert Symbol(path="/bin/app").is_valid()


def test_symbol_equality_and_hash():
    a = Symbol("f", "libx.so", "/lib/libx.so")
    b = Symbol("f", "libx.so", "/lib/libx.so")
    assert a == b
    assert len({a, b}) == 1


def test_symbol_ordering_is_lexicographic_by_fields():
    assert Symbol("a", "z", "z") < Symbol("b", "a", "a")
    assert Symbol("a", "a", "z") < Symbol("a", "b", "a")
    assert Symbol("a", "a", "a") < Symbol("a", "a", "b")
    assert not Symbol("a", "a", "a") < Symbol("a", "a", "a")


def test_symbol_sorting():
    symbols = [Symbol("c"), Symbol("a"), Symbol("b")]
    assert [s.symbol for s in sorted(symbols)] == ["a", "b", "c"]


def test_fileline_empty_file_string():
    assert str(FileLine("", 12)) == "??"


def test_fileline_string():
    assert str(FileLine("main.cpp", 42)) == "main.cpp:42"


def test_fileline_ordering():
    assert FileLine("a.cpp", 10) < FileLine("a.cpp", 11)
    assert FileLine("a.cpp", 99) < FileLine("b.cpp", 1)
    assert FileLine("a.cpp", 3) == FileLine("a.cpp", 3)


def test_fileline_hashable():
    assert len({FileLine("a.cpp", 1), FileLine("a.cpp", 1), FileLine("a.cpp", 2)}) == 2


def test_unresolved_function_name():
    assert unresolved_function_name() == "<unresolved function>"