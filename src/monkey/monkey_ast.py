"""
Defines the abstract syntax tree (AST) node structure for the monkey language.

Classes:
    ASTNode:
        A node in the syntax tree, built by the parser and consumed by the emitters.

    ASTDict:
        TypedDict representation for serializing ASTNode instances to plain Python dictionaries,
        suitable for JSON output or debugging.

Node kinds:
    integer: Leaf, `value` is the literal's int.
    identifier: Leaf, `value` is the name.
    add: Binary node, `value` is "+", `children` is `(left, right)`.

Nodes are built bottom-up and not changed afterwards. Each node is owned by
exactly one parent, so the structure is always a tree. A chain `1+2+3` is
left-leaning: `add(add(1, 2), 3)`.

Example:
    node = add_node(integer_node(1), identifier_node("x"))
"""

from typing import Any, TypedDict


class ASTDict(TypedDict):
    """
    Serialized shape of an ASTNode.

    Fields:
        kind (str): The type of AST node ("integer", "identifier", "add").
        value (Any): The literal value, name, or operator text.
        line (int): Line number in the source code where the node originates.
        col (int): Column number in the source code where the node originates.
        children (list[ASTDict]): Child nodes in order.
    """

    kind: str
    value: Any
    line: int
    col: int
    children: list["ASTDict"]


class ASTNode:
    """
    Represents a node in the abstract syntax tree (AST) for the monkey language.

    Args:
        kind (str): The type of node ("integer", "identifier", "add").
        value (int | str, optional): Literal value, identifier name, or operator text.
        children (Iterable[ASTNode], optional): Child nodes; stored as a tuple.
        line (int): Source line number (default is 0).
        col (int): Source column number (default is 0).
    """

    def __init__(
        self,
        kind: str,
        value: int | str | None = None,
        children: Any = None,
        line: int = 0,
        col: int = 0,
    ):
        self.kind = kind
        self.value = value
        self.children: tuple["ASTNode", ...] = tuple(children or ())
        self.line = line
        self.col = col

    @property
    def left(self) -> "ASTNode":
        return self.children[0]

    @property
    def right(self) -> "ASTNode":
        return self.children[1]

    def left_spine(self) -> list["ASTNode"]:
        """Returns this node and its first-child descendants, top-down.

        Walking the spine with a loop keeps deep left-leaning chains such as
        `1+1+...+1` away from the recursion limit.
        """
        spine = [self]
        while spine[-1].children:
            spine.append(spine[-1].children[0])
        return spine

    def __repr__(self) -> str:
        heads: list[str] = []
        tails: list[str] = []
        for node in self.left_spine():
            parts = [f"{node.kind}"]
            if node.value is not None:
                parts.append(f"value={repr(node.value)}")
            if node.children:
                heads.append(f"ASTNode({', '.join(parts)}, children=[")
                tails.append("".join(f", {c!r}" for c in node.children[1:]) + "])")
            else:
                heads.append(f"ASTNode({', '.join(parts)})")
        return "".join(heads) + "".join(reversed(tails))

    def __eq__(self, other: Any) -> bool:
        a, b = self, other
        while True:
            if not isinstance(b, ASTNode):
                return False
            if (a.kind, a.value, a.line, a.col, len(a.children)) != (
                b.kind,
                b.value,
                b.line,
                b.col,
                len(b.children),
            ):
                return False
            if not a.children:
                return True
            if a.children[1:] != b.children[1:]:
                return False
            a, b = a.children[0], b.children[0]

    def to_dict(self) -> ASTDict:
        spine = self.left_spine()
        children: list[ASTDict] = []
        for node in reversed(spine):
            if node.children:
                children = children + [c.to_dict() for c in node.children[1:]]
            result: ASTDict = {
                "kind": node.kind,
                "value": node.value,
                "line": node.line,
                "col": node.col,
                "children": children,
            }
            children = [result]
        return result


def integer_node(value: int, line: int = 0, col: int = 0) -> ASTNode:
    return ASTNode("integer", value, line=line, col=col)


def identifier_node(name: str, line: int = 0, col: int = 0) -> ASTNode:
    return ASTNode("identifier", name, line=line, col=col)


def add_node(left: ASTNode, right: ASTNode, line: int = 0, col: int = 0) -> ASTNode:
    return ASTNode("add", "+", [left, right], line=line, col=col)
