"""
Provides the `Transpiler` class and emitter interface for turning monkey ASTs into text.

Classes and Features:
    - Emitter (Protocol): Interface for all backend emitters.
    - InfixEmitter: Renders expressions back into monkey source.
    - SExprEmitter: Renders expressions as prefix S-expressions.
    - Transpiler: Uses the emitter for the selected target ("infix", "monkey",
      "sexpr") and dispatches each top-level AST node to it.

Example:
    >>> transpiler = Transpiler("infix")
    >>> output = transpiler.transpile(parse_source("1+2+x"))
    >>> print(output)
    1 + 2 + x;

Raises:
    ValueError: If the target is not supported.
    TypeError: If the AST contains non-ASTNode items.
    NotImplementedError: If the emitter lacks an `emit_*` method for a node kind.
"""

import logging
from typing import Protocol

from monkey.emitters.infix_emitter import InfixEmitter
from monkey.emitters.sexpr_emitter import SExprEmitter
from monkey.monkey_ast import ASTNode

logger = logging.getLogger(__name__)


class Emitter(Protocol):  # pragma: no cover
    """Protocol for all monkey emitters.

    Methods:
        __init__(): Initializes the emitter with an empty buffer.
        emit_statement(node): Renders one top-level expression into the buffer.
        get_output(): Returns the complete emitted text.
    """

    def __init__(self) -> None: ...  # pragma: no cover

    def emit_statement(self, node: ASTNode) -> None: ...  # pragma: no cover

    def get_output(self) -> str: ...  # pragma: no cover


EmitterType = type[Emitter]
"""Alias for a concrete Emitter class type."""


EMITTERS: dict[str, EmitterType] = {
    "infix": InfixEmitter,
    "monkey": InfixEmitter,
    "sexpr": SExprEmitter,
}
"""Target name → emitter class. Target names are matched case-insensitively."""


class Transpiler:
    """Renders monkey AST nodes with the emitter for the selected target.

    Every `transpile()` call starts from a fresh emitter, so one Transpiler
    can render several programs without output carrying over between calls.

    Attributes:
        target (str): The normalized target name.
        emitter (Emitter): The emitter used by the most recent call.
    """

    def __init__(self, target: str) -> None:
        """
        Raises:
            ValueError: If the target is not supported.
        """
        self.target = target.lower()
        if self.target not in EMITTERS:
            raise ValueError(f"Unknown transpilation target: {target!r}")
        self.emitter: Emitter = EMITTERS[self.target]()

    def transpile(self, ast: list[ASTNode]) -> str:
        """Renders `ast` one top-level expression per output line.

        Raises:
            TypeError: If any element in the AST list is not an ASTNode.
            NotImplementedError: If the emitter has no `emit_<kind>` for a node.
        """
        if not all(isinstance(node, ASTNode) for node in ast):
            raise TypeError("All items in AST must be ASTNode instances.")
        self.emitter = EMITTERS[self.target]()
        for node in ast:
            self.emitter.emit_statement(node)
        logger.debug("Transpiled %d expressions to %s", len(ast), self.target)
        return self.emitter.get_output()
