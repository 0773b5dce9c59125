"""Functions that every program can call without defining them."""

from __future__ import annotations

from .objects import (
    Array,
    Boolean,
    Builtin,
    Error,
    Hash,
    Nil,
    Number,
    Object,
    ObjectType,
    String,
)

NIL = Nil()
TRUE = Boolean(True)
FALSE = Boolean(False)


def _single_array(name: str, args: tuple[Object, ...]) -> Array | Error:
    if len(args) != 1:
        return Error(f"wrong number of arguments. got={len(args)}, want=1")
    arg = args[0]
    if arg.type is not ObjectType.ARRAY:
        return Error(f"argument to `{name}` must be ARRAY, got {arg.type}")
    return arg  # type: ignore[return-value]


def builtin_len(*args: Object) -> Object:
    """Length of a string in bytes, or the size of an array or hash."""
    if len(args) != 1:
        return Error(f"wrong number of arguments, got={len(args)}, want=1")
    match args[0]:
        case String(value=text):
            return Number(float(len(text.encode("utf-8"))))
        case Array(elements=elements):
            return Number(float(len(elements)))
        case Hash(pairs=pairs):
            return Number(float(len(pairs)))
    return Error(f"argument to `len` not supported, got {args[0].type}")


def builtin_first(*args: Object) -> Object:
    """First element of an array, or nil when it is empty."""
    arr = _single_array("first", args)
    if isinstance(arr, Error):
        return arr
    return arr.elements[0] if arr.elements else NIL


def builtin_last(*args: Object) -> Object:
    """Last element of an array, or nil when it is empty."""
    arr = _single_array("last", args)
    if isinstance(arr, Error):
        return arr
    return arr.elements[-1] if arr.elements else NIL


def builtin_rest(*args: Object) -> Object:
    """A new array without the first element, or nil when it is empty."""
    arr = _single_array("rest", args)
    if isinstance(arr, Error):
        return arr
    if not arr.elements:
        return NIL
    return Array(list(arr.elements[1:]))


def builtin_push(*args: Object) -> Object:
    """A new array with the second argument appended to the first."""
    if len(args) != 2:
        return Error(f"wrong number of arguments. got={len(args)}, want=2")
    target, item = args
    if target.type is not ObjectType.ARRAY:
        return Error(f"argument to `push` must be ARRAY, got {target.type}")
    return Array([*target.elements, item])  # type: ignore[attr-defined]


def builtin_print(*args: Object) -> Object:
    """Write each argument on a line of its own to standard output."""
    for arg in args:
        print(arg.inspect())
    return NIL


_BUILTINS: dict[str, Builtin] = {
    "len": Builtin(builtin_len),
    "first": Builtin(builtin_first),
    "last": Builtin(builtin_last),
    "rest": Builtin(builtin_rest),
    "push": Builtin(builtin_push),
    "print": Builtin(builtin_print),
}


def lookup_builtin(name: str) -> Builtin | None:
    """Return the builtin called ``name``, or None if there is none."""
    return _BUILTINS.get(name)