import pytest

from saphire.natives import (
    NIL,
    builtin_first,
    builtin_last,
    builtin_len,
    builtin_print,
    builtin_push,
    builtin_rest,
    lookup_builtin,
)
from saphire.objects import Array, Error, Hash, Number, String


def _array(*values):
    return Array([Number(float(v)) for v in values])


def test_len_of_string():
    assert builtin_len(String("four")).value == 4


def test_len_of_empty_string():
    assert builtin_len(String("")).value == 0


def test_len_of_array_matches_elements():
    arr = _array(1, 2, 3)
    assert builtin_len(arr).value == len(arr.elements)


def test_len_of_empty_hash():
    assert builtin_len(Hash()).value == 0


def test_len_unsupported_argument():
    result = builtin_len(Number(1.0))
    assert isinstance(result, Error)
    assert result.message == "argument to `len` not supported, got NUMBER"


def test_len_wrong_arity():
    result = builtin_len(String("one"), String("two"))
    assert result.message == "wrong number of arguments, got=2, want=1"


def test_first_and_last_return_same_objects():
    arr = _array(1, 2, 3)
    assert builtin_first(arr) is arr.elements[0]
    assert builtin_last(arr) is arr.elements[-1]


@pytest.mark.parametrize("fn", [builtin_first, builtin_last, builtin_rest])
def test_empty_array_gives_nil(fn):
    assert fn(Array([])) is NIL


@pytest.mark.parametrize(
    "fn,name", [(builtin_first, "first"), (builtin_last, "last"), (builtin_rest, "rest")]
)
def test_non_array_argument(fn, name):
    result = fn(Number(1.0))
    assert result.message == f"argument to `{name}` must be ARRAY, got NUMBER"


@pytest.mark.parametrize("fn", [builtin_first, builtin_last, builtin_rest])
def test_wrong_arity_single_array(fn):
    result = fn()
    assert result.message == "wrong number of arguments. got=0, want=1"


def test_rest_drops_first_and_keeps_original():
    arr = _array(1, 2, 3)
    rest = builtin_rest(arr)
    assert rest.elements == arr.elements[1:]
    assert rest is not arr
    assert len(arr.elements) == 3


def test_push_appends_without_mutating():
    arr = _array(1, 2)
    item = String("x")
    pushed = builtin_push(arr, item)
    assert pushed.elements == [*arr.elements, item]
    assert len(arr.elements) == 2


def test_push_wrong_arity():
    assert builtin_push(Array([])).message == "wrong number of arguments. got=1, want=2"


def test_push_non_array():
    result = builtin_push(String("a"), String("b"))
    assert result.message == "argument to `push` must be ARRAY, got STRING"


def test_print_writes_each_argument(capsys):
    result = builtin_print(String("hello"), String("world"))
    assert result is NIL
    assert capsys.readouterr().out == "hello\nworld\n"


def test_print_number_uses_inspect(capsys):
    builtin_print(Number(1.0))
    assert capsys.readouterr().out == "1.00\n"


def test_lookup_builtin():
    assert lookup_builtin("len").fn is builtin_len
    assert lookup_builtin("push").fn is builtin_push
    assert lookup_builtin("missing") is None