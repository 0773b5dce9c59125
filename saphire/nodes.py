"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from .tokens import Token


class Node:
    """Base of every syntax tree node."""

    token: Token

    def token_literal(self) -> str:
        """Return the literal of the token the node starts with."""
        return self.token.literal

    def __str__(self) -> str:
        return self.token_literal()


@dataclass(eq=False)
class Program(Node):
    """The root node: a sequence of statements."""

    statements: list[Node] = field(default_factory=list)

    def token_literal(self) -> str:
        return self.statements[0].token_literal() if self.statements else ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


@dataclass(eq=False)
class Identifier(Node):
    token: Token
    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class LetStatement(Node):
    token: Token
    name: Identifier | None = None
    value: Node | None = None

    def __str__(self) -> str:
        value = "" if self.value is None else str(self.value)
        return f"{self.token_literal()} {self.name} = {value};"


@dataclass(eq=False)
class ReturnStatement(Node):
    token: Token
    return_value: Node | None = None

    def __str__(self) -> str:
        value = "" if self.return_value is None else str(self.return_value)
        return f"{self.token_literal()} {value};"


@dataclass(eq=False)
class ExpressionStatement(Node):
    token: Token
    expression: Node | None = None

    def __str__(self) -> str:
        return "" if self.expression is None else str(self.expression)


@dataclass(eq=False)
class NumberLiteral(Node):
    token: Token
    value: float = 0.0


@dataclass(eq=False)
class UnaryExpression(Node):
    token: Token
    operator: str = ""
    right: Node | None = None

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass(eq=False)
class BinaryExpression(Node):
    token: Token
    left: Node | None = None
    operator: str = ""
    right: Node | None = None

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass(eq=False)
class Boolean(Node):
    token: Token
    value: bool = False


@dataclass(eq=False)
class BlockStatement(Node):
    token: Token
    statements: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


@dataclass(eq=False)
class IfExpression(Node):
    token: Token
    condition: Node | None = None
    consequence: BlockStatement | None = None
    alternative: BlockStatement | None = None

    def __str__(self) -> str:
        text = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            text += f"else {self.alternative}"
        return text


@dataclass(eq=False)
class FunctionLiteral(Node):
    token: Token
    parameters: list[Identifier] = field(default_factory=list)
    body: BlockStatement | None = None

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {self.body}"


@dataclass(eq=False)
class CallExpression(Node):
    token: Token
    function: Node | None = None
    arguments: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


@dataclass(eq=False)
class StringLiteral(Node):
    token: Token
    value: str = ""


@dataclass(eq=False)
class ArrayLiteral(Node):
    token: Token
    elements: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self.elements) + "]"


@dataclass(eq=False)
class IndexExpression(Node):
    token: Token
    left: Node | None = None
    index: Node | None = None

    def __str__(self) -> str:
        return f"({self.left}[{self.index}])"


@dataclass(eq=False)
class HashLiteral(Node):
    """A hash literal; ``pairs`` holds (key, value) nodes in source order."""

    token: Token
    pairs: list[tuple[Node, Node]] = field(default_factory=list)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}:{v}" for k, v in self.pairs) + "}"