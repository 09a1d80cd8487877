"""
Renders monkey AST nodes back into monkey infix source.

This module defines the `InfixEmitter` class, used by the `Transpiler` to turn
parsed expressions back into text the lexer and parser accept again.

Behavior:
    - Each top-level expression becomes one line terminated by `;`.
    - Left-nested additions are written without grouping, matching the
      parser's left-associativity: `add(add(1, 2), 3)` → `1 + 2 + 3`.
    - A right-nested addition is wrapped in parentheses to keep its shape
      visible. The parser does not accept grouping, so such output does not
      parse back; parser-built trees never contain one.

Raises:
    - `NotImplementedError`: If an AST kind has no corresponding emitter.
"""

from monkey.monkey_ast import ASTNode


class InfixEmitter:
    """Emits monkey infix source from AST nodes.

    Attributes:
        lines (list[str]): Accumulated lines of emitted source.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def emit_integer(self, node: ASTNode) -> str:
        return str(node.value)

    def emit_identifier(self, node: ASTNode) -> str:
        return str(node.value)

    def emit_add(self, node: ASTNode) -> str:
        # Loop down the left operands; only right operands recurse
        chain = []
        while node.kind == "add":
            chain.append(node)
            node = node.left
        text = self.emit_expr(node)
        for add in reversed(chain):
            right = self.emit_expr(add.right)
            if add.right.kind == "add":
                right = f"({right})"
            text = f"{text} + {right}"
        return text

    def emit_expr(self, node: ASTNode) -> str:
        method = getattr(self, f"emit_{node.kind}", None)
        if method is None:
            raise NotImplementedError(
                f"No expression emitter for kind '{node.kind}' "
                f"(line {node.line}, col {node.col})"
            )
        return str(method(node))

    def emit_statement(self, node: ASTNode) -> None:
        self.lines.append(f"{self.emit_expr(node)};")
