"""Runtime values produced and consumed by the interpreter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from .nodes import BlockStatement, Identifier

if TYPE_CHECKING:
    from .environment import Environment

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_UINT64_OUT_OF_RANGE = 0x8000000000000000


class ObjectType(str, Enum):
    """The kind of a runtime value, as shown in error messages."""

    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NIL = "NIL"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"
    FUNCTION = "FUNCTION"
    STRING = "STRING"
    BUILTIN = "BUILTIN"
    ARRAY = "ARRAY"
    HASH = "HASH"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


@dataclass(frozen=True)
class HashKey:
    """The key under which a hashable value is stored in a hash."""

    type: ObjectType
    value: int


class Object(ABC):
    """Base of every runtime value."""

    type: ClassVar[ObjectType]

    @abstractmethod
    def inspect(self) -> str:
        """Return the text shown for this value."""

    def __str__(self) -> str:
        return self.inspect()


@dataclass(eq=False)
class Number(Object):
    type: ClassVar[ObjectType] = ObjectType.NUMBER
    value: float = 0.0

    def inspect(self) -> str:
        if math.isnan(self.value):
            return "NaN"
        if math.isinf(self.value):
            return "+Inf" if self.value > 0 else "-Inf"
        return f"{self.value:.2f}"

    def hash_key(self) -> HashKey:
        """Key by the integral part of the number."""
        if math.isfinite(self.value):
            key = int(self.value) & _UINT64_MASK
        else:
            key = _UINT64_OUT_OF_RANGE
        return HashKey(self.type, key)


@dataclass(eq=False)
class Boolean(Object):
    type: ClassVar[ObjectType] = ObjectType.BOOLEAN
    value: bool = False

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def hash_key(self) -> HashKey:
        return HashKey(self.type, 1 if self.value else 0)


@dataclass(eq=False)
class Nil(Object):
    type: ClassVar[ObjectType] = ObjectType.NIL

    def inspect(self) -> str:
        return "nil"


@dataclass(eq=False)
class ReturnValue(Object):
    """Wraps a value travelling out of a function through ``return``."""

    type: ClassVar[ObjectType] = ObjectType.RETURN_VALUE
    value: Object

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass(eq=False)
class Error(Object):
    """A runtime error value of the language."""

    type: ClassVar[ObjectType] = ObjectType.ERROR
    message: str = ""

    def inspect(self) -> str:
        return "ERROR: " + self.message


@dataclass(eq=False)
class Function(Object):
    """A user-defined function closed over the environment it was made in."""

    type: ClassVar[ObjectType] = ObjectType.FUNCTION
    parameters: list[Identifier]
    body: BlockStatement
    env: Environment

    def inspect(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {{\n{self.body}\n}}"


@dataclass(eq=False)
class String(Object):
    type: ClassVar[ObjectType] = ObjectType.STRING
    value: str = ""

    def inspect(self) -> str:
        return self.value

    def hash_key(self) -> HashKey:
        """Key by the 64-bit FNV-1a hash of the UTF-8 text."""
        digest = _FNV64_OFFSET
        for byte in self.value.encode("utf-8"):
            digest = ((digest ^ byte) * _FNV64_PRIME) & _UINT64_MASK
        return HashKey(self.type, digest)


@dataclass(eq=False)
class Builtin(Object):
    """A function provided by the interpreter itself."""

    type: ClassVar[ObjectType] = ObjectType.BUILTIN
    fn: Callable[..., Object]

    def inspect(self) -> str:
        return "builtin function"


@dataclass(eq=False)
class Array(Object):
    type: ClassVar[ObjectType] = ObjectType.ARRAY
    elements: list[Object] = field(default_factory=list)

    def inspect(self) -> str:
        return "[" + ", ".join(e.inspect() for e in self.elements) + "]"


@dataclass(frozen=True)
class HashPair:
    """A key and its value as stored in a hash."""

    key: Object
    value: Object


@dataclass(eq=False)
class Hash(Object):
    type: ClassVar[ObjectType] = ObjectType.HASH
    pairs: dict[HashKey, HashPair] = field(default_factory=dict)

    def inspect(self) -> str:
        items = ", ".join(
            f"{p.key.inspect()}: {p.value.inspect()}" for p in self.pairs.values()
        )
        return "{" + items + "}"