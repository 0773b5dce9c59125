"""Tree-walking evaluator for parsed programs."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable

from . import nodes
from .environment import Environment
from .natives import FALSE, NIL, TRUE, lookup_builtin
from .objects import (
    Array,
    Boolean,
    Builtin,
    Error,
    Function,
    Hash,
    HashPair,
    Number,
    Object,
    ObjectType,
    ReturnValue,
    String,
)

__all__ = ["FALSE", "NIL", "TRUE", "evaluate", "is_truthy"]

_HASHABLE = (Number, Boolean, String)
_INT64_MIN = -(2**63)


def evaluate(node: nodes.Node | None, env: Environment) -> Object | None:
    """Evaluate ``node`` in ``env``; statements without a value give None."""
    match node:
        case nodes.Program():
            return _eval_program(node, env)
        case nodes.ExpressionStatement():
            return evaluate(node.expression, env)
        case nodes.UnaryExpression():
            right = evaluate(node.right, env)
            if _is_error(right):
                return right
            return _eval_unary(node.operator, right)
        case nodes.BinaryExpression():
            left = evaluate(node.left, env)
            if _is_error(left):
                return left
            right = evaluate(node.right, env)
            if _is_error(right):
                return right
            return _eval_binary(node.operator, left, right)
        case nodes.LetStatement():
            value = evaluate(node.value, env)
            if _is_error(value):
                return value
            env.set(node.name.value, value)
            return None
        case nodes.IfExpression():
            return _eval_if(node, env)
        case nodes.BlockStatement():
            return _eval_block(node, env)
        case nodes.ReturnStatement():
            value = evaluate(node.return_value, env)
            if _is_error(value):
                return value
            return ReturnValue(value)
        case nodes.Identifier():
            return _eval_identifier(node, env)
        case nodes.NumberLiteral():
            return Number(node.value)
        case nodes.Boolean():
            return _to_boolean(node.value)
        case nodes.FunctionLiteral():
            return Function(node.parameters, node.body, env)
        case nodes.CallExpression():
            function = evaluate(node.function, env)
            if _is_error(function):
                return function
            args = _eval_expressions(node.arguments, env)
            if len(args) == 1 and _is_error(args[0]):
                return args[0]
            return _apply_function(function, args)
        case nodes.StringLiteral():
            return String(node.value)
        case nodes.ArrayLiteral():
            elements = _eval_expressions(node.elements, env)
            if len(elements) == 1 and _is_error(elements[0]):
                return elements[0]
            return Array(elements)
        case nodes.IndexExpression():
            left = evaluate(node.left, env)
            if _is_error(left):
                return left
            index = evaluate(node.index, env)
            if _is_error(index):
                return index
            return _eval_index(left, index)
        case nodes.HashLiteral():
            return _eval_hash_literal(node, env)
    return None


def is_truthy(obj: Object | None) -> bool:
    """Only nil and false are false; every other value is true."""
    return obj is not NIL and obj is not FALSE


def _is_error(obj: Object | None) -> bool:
    return obj is not None and obj.type is ObjectType.ERROR


def _to_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def _eval_program(program: nodes.Program, env: Environment) -> Object | None:
    result: Object | None = None
    for statement in program.statements:
        result = evaluate(statement, env)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, Error):
            return result
    return result


def _eval_block(block: nodes.BlockStatement, env: Environment) -> Object | None:
    result: Object | None = None
    for statement in block.statements:
        result = evaluate(statement, env)
        if result is not None and result.type in (
            ObjectType.RETURN_VALUE,
            ObjectType.ERROR,
        ):
            return result
    return result


def _eval_unary(op: str, right: Object) -> Object:
    if op == "!":
        return TRUE if right is FALSE or right is NIL else FALSE
    if op == "-":
        if right.type is not ObjectType.NUMBER:
            return Error(f"unknown operator: -{right.type}")
        return Number(-right.value)  # type: ignore[attr-defined]
    return Error(f"unknown operator: {op}{right.type}")


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y == int(y) and int(y) % 2 == 1


def _power(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_integer(y) else math.inf
    except ValueError:
        if x == 0 and y < 0:
            return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
        return math.nan


def _divide(x: float, y: float) -> float:
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _to_int64(x: float) -> int:
    if math.isfinite(x) and _INT64_MIN <= x < 2**63:
        return int(x)
    return _INT64_MIN


def _modulo(x: float, y: float) -> float:
    a, b = _to_int64(x), _to_int64(y)
    if b == 0:
        raise ZeroDivisionError("integer divide by zero")
    remainder = abs(a) % abs(b)
    return float(-remainder if a < 0 else remainder)


_ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "**": _power,
    "/": _divide,
    "%": _modulo,
}

_COMPARISON: dict[str, Callable[[float, float], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
    "==": operator.eq,
    "!=": operator.ne,
}


def _eval_binary(op: str, left: Object, right: Object) -> Object:
    if left.type is ObjectType.NUMBER and right.type is ObjectType.NUMBER:
        return _eval_number_binary(op, left, right)
    if left.type is ObjectType.STRING and right.type is ObjectType.STRING:
        if op != "+":
            return Error(f"unknown operator: {left.type} {op} {right.type}")
        return String(left.value + right.value)  # type: ignore[attr-defined]
    if op == "==":
        return _to_boolean(left is right)
    if op == "!=":
        return _to_boolean(left is not right)
    if left.type is not right.type:
        return Error(f"type mismatch: {left.type} {op} {right.type}")
    return Error(f"unknown operator: {left.type} {op} {right.type}")


def _eval_number_binary(op: str, left: Object, right: Object) -> Object:
    x = left.value  # type: ignore[attr-defined]
    y = right.value  # type: ignore[attr-defined]
    if op in _ARITHMETIC:
        return Number(_ARITHMETIC[op](x, y))
    if op in _COMPARISON:
        return _to_boolean(_COMPARISON[op](x, y))
    return Error(f"unknown operator: {left.type} {op} {right.type}")


def _eval_if(node: nodes.IfExpression, env: Environment) -> Object | None:
    condition = evaluate(node.condition, env)
    if _is_error(condition):
        return condition
    if is_truthy(condition):
        return evaluate(node.consequence, env)
    if node.alternative is not None:
        return evaluate(node.alternative, env)
    return NIL


def _eval_identifier(node: nodes.Identifier, env: Environment) -> Object:
    value = env.get(node.value)
    if value is not None:
        return value
    builtin = lookup_builtin(node.value)
    if builtin is not None:
        return builtin
    return Error(f"identifier not found: {node.value}")


def _eval_expressions(
    expressions: list[nodes.Node], env: Environment
) -> list[Object | None]:
    results: list[Object | None] = []
    for expression in expressions:
        evaluated = evaluate(expression, env)
        if _is_error(evaluated):
            return [evaluated]
        results.append(evaluated)
    return results


def _eval_index(left: Object, index: Object) -> Object:
    if left.type is ObjectType.ARRAY and index.type is ObjectType.NUMBER:
        elements = left.elements  # type: ignore[attr-defined]
        idx = index.value  # type: ignore[attr-defined]
        if not 0 <= idx <= len(elements) - 1:
            return NIL
        return elements[int(idx)]
    if left.type is ObjectType.HASH:
        if not isinstance(index, _HASHABLE):
            return Error(f"unusable as hash key: {index.type}")
        pair = left.pairs.get(index.hash_key())  # type: ignore[attr-defined]
        return NIL if pair is None else pair.value
    return Error(f"index operator not supported: {left.type}")


def _eval_hash_literal(node: nodes.HashLiteral, env: Environment) -> Object:
    pairs = {}
    for key_node, value_node in node.pairs:
        key = evaluate(key_node, env)
        if _is_error(key):
            return key
        if not isinstance(key, _HASHABLE):
            return Error(f"unusable as hash key: {key.type}")
        value = evaluate(value_node, env)
        if _is_error(value):
            return value
        pairs[key.hash_key()] = HashPair(key, value)
    return Hash(pairs)


def _apply_function(fn: Object, args: list[Object | None]) -> Object | None:
    match fn:
        case Function():
            if len(args) < len(fn.parameters):
                raise IndexError(
                    f"function takes {len(fn.parameters)} arguments, got {len(args)}"
                )
            scope = fn.env.enclosed()
            for param, arg in zip(fn.parameters, args):
                scope.set(param.value, arg)
            # A ``return`` in the body stays wrapped; the program unwraps it.
            return evaluate(fn.body, scope)
        case Builtin():
            return fn.fn(*args)
    return Error(f"not a function: {fn.type}")