"""
Renders monkey AST nodes as prefix S-expressions, e.g. `(+ (+ 1 2) x)`.

Used for debugging output where the exact tree shape matters more than
readability as monkey source.
"""

from monkey.monkey_ast import ASTNode


class SExprEmitter:
    """Emits one parenthesized prefix form per top-level expression.

    Leaves print as their value. A binary node prints as
    `(<operator> <left> <right>)`, so nesting shows grouping directly.

    Attributes:
        lines (list[str]): Accumulated lines of emitted output.
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
        chain = []
        while node.kind == "add":
            chain.append(node)
            node = node.left
        text = self.emit_expr(node)
        for add in reversed(chain):
            text = f"({add.value} {text} {self.emit_expr(add.right)})"
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
        self.lines.append(self.emit_expr(node))
