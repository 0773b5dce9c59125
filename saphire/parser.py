"""Pratt parser building a syntax tree from tokens."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from .lexer import Lexer
from .nodes import (
    ArrayLiteral,
    BinaryExpression,
    BlockStatement,
    Boolean,
    CallExpression,
    ExpressionStatement,
    FunctionLiteral,
    HashLiteral,
    Identifier,
    IfExpression,
    IndexExpression,
    LetStatement,
    Node,
    NumberLiteral,
    Program,
    ReturnStatement,
    StringLiteral,
    UnaryExpression,
)
from .tokens import Token, TokenType


class Precedence(IntEnum):
    """Binding strength of operators, weakest first."""

    LOWEST = 1
    EQUALS = 2
    LESSGREATER = 3
    SUM = 4
    PRODUCT = 5
    UNARY = 6
    CALL = 7
    INDEX = 8


_PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.LTE: Precedence.LESSGREATER,
    TokenType.GTE: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.MOD: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.POWER: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.LBRACKET: Precedence.INDEX,
}

_BINARY_OPERATORS = (
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.SLASH,
    TokenType.ASTERISK,
    TokenType.POWER,
    TokenType.MOD,
    TokenType.EQ,
    TokenType.NOT_EQ,
    TokenType.LT,
    TokenType.GT,
    TokenType.LTE,
    TokenType.GTE,
)


class Parser:
    """Parses the tokens of a lexer; problems are collected in ``errors``."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self.errors: list[str] = []
        self._cur = Token(TokenType.EOF, "")
        self._peek = Token(TokenType.EOF, "")

        self._unary: dict[TokenType, Callable[[], Node | None]] = {
            TokenType.IDENT: self._parse_identifier,
            TokenType.NUM: self._parse_number_literal,
            TokenType.BANG: self._parse_unary_expression,
            TokenType.MINUS: self._parse_unary_expression,
            TokenType.TRUE: self._parse_boolean,
            TokenType.FALSE: self._parse_boolean,
            TokenType.LPAREN: self._parse_grouped_expression,
            TokenType.IF: self._parse_if_expression,
            TokenType.FUNCTION: self._parse_function_literal,
            TokenType.STRING: self._parse_string_literal,
            TokenType.LBRACKET: self._parse_array_literal,
            TokenType.LBRACE: self._parse_hash_literal,
        }
        self._binary: dict[TokenType, Callable[[Node | None], Node | None]] = {
            op: self._parse_binary_expression for op in _BINARY_OPERATORS
        }
        self._binary[TokenType.LPAREN] = self._parse_call_expression
        self._binary[TokenType.LBRACKET] = self._parse_index_expression

        self._advance()
        self._advance()

    def parse_program(self) -> Program:
        """Parse statements until the end of input."""
        program = Program()
        while self._cur.type is not TokenType.EOF:
            stmt = self._parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self._advance()
        return program

    def _advance(self) -> None:
        self._cur = self._peek
        self._peek = self._lexer.next_token()

    def _cur_is(self, kind: TokenType) -> bool:
        return self._cur.type is kind

    def _peek_is(self, kind: TokenType) -> bool:
        return self._peek.type is kind

    def _expect_peek(self, kind: TokenType) -> bool:
        if self._peek_is(kind):
            self._advance()
            return True
        self.errors.append(
            f"expected next token to be {kind}, got {self._peek.type} instead"
        )
        return False

    def _peek_precedence(self) -> Precedence:
        return _PRECEDENCES.get(self._peek.type, Precedence.LOWEST)

    def _cur_precedence(self) -> Precedence:
        return _PRECEDENCES.get(self._cur.type, Precedence.LOWEST)

    def _skip_optional_semicolon(self) -> None:
        if self._peek_is(TokenType.SEMICOLON):
            self._advance()

    def _parse_statement(self) -> Node | None:
        if self._cur_is(TokenType.LET):
            return self._parse_let_statement()
        if self._cur_is(TokenType.RETURN):
            return self._parse_return_statement()
        return self._parse_expression_statement()

    def _parse_let_statement(self) -> Node | None:
        stmt = LetStatement(self._cur)
        if not self._expect_peek(TokenType.IDENT):
            return None
        stmt.name = Identifier(self._cur, self._cur.literal)
        if not self._expect_peek(TokenType.ASSIGN):
            return None
        self._advance()
        stmt.value = self._parse_expression(Precedence.LOWEST)
        self._skip_optional_semicolon()
        return stmt

    def _parse_return_statement(self) -> Node:
        stmt = ReturnStatement(self._cur)
        self._advance()
        stmt.return_value = self._parse_expression(Precedence.LOWEST)
        self._skip_optional_semicolon()
        return stmt

    def _parse_expression_statement(self) -> Node:
        stmt = ExpressionStatement(self._cur)
        stmt.expression = self._parse_expression(Precedence.LOWEST)
        self._skip_optional_semicolon()
        return stmt

    def _parse_expression(self, precedence: Precedence) -> Node | None:
        unary = self._unary.get(self._cur.type)
        if unary is None:
            self.errors.append(f"no unary parse function for {self._cur.type} found")
            return None
        left = unary()

        while (
            not self._peek_is(TokenType.SEMICOLON)
            and precedence < self._peek_precedence()
        ):
            binary = self._binary.get(self._peek.type)
            if binary is None:
                return left
            self._advance()
            left = binary(left)
        return left

    def _parse_identifier(self) -> Node:
        return Identifier(self._cur, self._cur.literal)

    def _parse_number_literal(self) -> Node | None:
        try:
            value = float(self._cur.literal)
        except ValueError:
            self.errors.append(f'could not parse "{self._cur.literal}" as number')
            return None
        return NumberLiteral(self._cur, value)

    def _parse_string_literal(self) -> Node:
        return StringLiteral(self._cur, self._cur.literal)

    def _parse_boolean(self) -> Node:
        return Boolean(self._cur, self._cur_is(TokenType.TRUE))

    def _parse_unary_expression(self) -> Node:
        expression = UnaryExpression(self._cur, self._cur.literal)
        self._advance()
        expression.right = self._parse_expression(Precedence.UNARY)
        return expression

    def _parse_binary_expression(self, left: Node | None) -> Node:
        expression = BinaryExpression(self._cur, left, self._cur.literal)
        precedence = self._cur_precedence()
        self._advance()
        expression.right = self._parse_expression(precedence)
        return expression

    def _parse_grouped_expression(self) -> Node | None:
        self._advance()
        expression = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        return expression

    def _parse_if_expression(self) -> Node | None:
        expression = IfExpression(self._cur)
        if not self._expect_peek(TokenType.LPAREN):
            return None
        self._advance()
        expression.condition = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        if not self._expect_peek(TokenType.LBRACE):
            return None
        expression.consequence = self._parse_block_statement()

        if self._peek_is(TokenType.ELSE):
            self._advance()
            if not self._expect_peek(TokenType.LBRACE):
                return None
            expression.alternative = self._parse_block_statement()
        return expression

    def _parse_block_statement(self) -> BlockStatement:
        block = BlockStatement(self._cur)
        self._advance()
        while not self._cur_is(TokenType.RBRACE) and not self._cur_is(TokenType.EOF):
            stmt = self._parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self._advance()
        return block

    def _parse_function_literal(self) -> Node | None:
        literal = FunctionLiteral(self._cur)
        if not self._expect_peek(TokenType.LPAREN):
            return None
        literal.parameters = self._parse_function_parameters() or []
        if not self._expect_peek(TokenType.LBRACE):
            return None
        literal.body = self._parse_block_statement()
        return literal

    def _parse_function_parameters(self) -> list[Identifier] | None:
        if self._peek_is(TokenType.RPAREN):
            self._advance()
            return []

        self._advance()
        identifiers = [Identifier(self._cur, self._cur.literal)]
        while self._peek_is(TokenType.COMMA):
            self._advance()
            self._advance()
            identifiers.append(Identifier(self._cur, self._cur.literal))

        if not self._expect_peek(TokenType.RPAREN):
            return None
        return identifiers

    def _parse_call_expression(self, function: Node | None) -> Node:
        expression = CallExpression(self._cur, function)
        expression.arguments = self._parse_expression_list(TokenType.RPAREN) or []
        return expression

    def _parse_array_literal(self) -> Node:
        array = ArrayLiteral(self._cur)
        array.elements = self._parse_expression_list(TokenType.RBRACKET) or []
        return array

    def _parse_expression_list(self, end: TokenType) -> list[Node | None] | None:
        if self._peek_is(end):
            self._advance()
            return []

        self._advance()
        items = [self._parse_expression(Precedence.LOWEST)]
        while self._peek_is(TokenType.COMMA):
            self._advance()
            self._advance()
            items.append(self._parse_expression(Precedence.LOWEST))

        if not self._expect_peek(end):
            return None
        return items

    def _parse_index_expression(self, left: Node | None) -> Node | None:
        expression = IndexExpression(self._cur, left)
        self._advance()
        expression.index = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RBRACKET):
            return None
        return expression

    def _parse_hash_literal(self) -> Node | None:
        hash_literal = HashLiteral(self._cur)
        while not self._peek_is(TokenType.RBRACE):
            self._advance()
            key = self._parse_expression(Precedence.LOWEST)
            if not self._expect_peek(TokenType.COLON):
                return None
            self._advance()
            value = self._parse_expression(Precedence.LOWEST)
            hash_literal.pairs.append((key, value))
            if not self._peek_is(TokenType.RBRACE) and not self._expect_peek(
                TokenType.COMMA
            ):
                return None

        if not self._expect_peek(TokenType.RBRACE):
            return None
        return hash_literal


def parse(source: str) -> tuple[Program, list[str]]:
    """Parse ``source`` and return the program with any parser errors."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, list(parser.errors)