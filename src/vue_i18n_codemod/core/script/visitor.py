"""
Generic traversal over script nodes.

Children are discovered from dataclass fields, in declaration order, which is
also source order. Two tools are provided:

- :func:`walk` yields every node with its parent (read-only scans).
- :class:`NodeTransformer` rebuilds child slots from the return value of
  ``visit_<Kind>`` handlers, mirroring :class:`ast.NodeTransformer`.
"""

from dataclasses import fields
from typing import Iterator, Optional, Tuple

from vue_i18n_codemod.core.script.nodes import Node


def iter_child_nodes(node: Node) -> Iterator[Node]:
  """
  Yields the direct children of a node in document order.

  Args:
      node (Node): The parent node.

  Returns:
      Iterator[Node]: Child nodes; ``None`` holes are skipped.
  """
  for f in fields(node):
    value = getattr(node, f.name)
    if isinstance(value, Node):
      yield value
    elif isinstance(value, list):
      for item in value:
        if isinstance(item, Node):
          yield item


def walk(node: Node, parent: Optional[Node] = None) -> Iterator[Tuple[Node, Optional[Node]]]:
  """
  Depth-first, pre-order traversal of a subtree.

  Args:
      node (Node): Root of the subtree (included in the output).
      parent (Node, optional): Parent reported for the root.

  Returns:
      Iterator[Tuple[Node, Optional[Node]]]: ``(node, parent)`` pairs.
  """
  yield node, parent
  for child in iter_child_nodes(node):
    yield from walk(child, node)


class NodeTransformer:
  """
  Base class for in-place tree rewriting.

  ``visit`` dispatches to ``visit_<ClassName>(node, parent)`` when defined. The
  handler returns the node to store in the parent's slot and is responsible for
  descending (via ``generic_visit``) if it wants children processed. Kinds
  without a handler are descended automatically.
  """

  def visit(self, node: Node, parent: Optional[Node] = None) -> Node:
    """
    Visits a node and returns its replacement.

    Args:
        node (Node): The node being visited.
        parent (Node, optional): The node owning the slot `node` sits in.

    Returns:
        Node: The node to store back in the parent's slot.
    """
    handler = getattr(self, f"visit_{type(node).__name__}", None)
    if handler is not None:
      return handler(node, parent)
    self.generic_visit(node)
    return node

  def generic_visit(self, node: Node) -> Node:
    """
    Visits every child slot of `node`, writing back replacements.

    Args:
        node (Node): The node whose children are visited.

    Returns:
        Node: `node` itself, mutated in place.
    """
    for f in fields(node):
      value = getattr(node, f.name)
      if isinstance(value, Node):
        setattr(node, f.name, self.visit(value, node))
      elif isinstance(value, list):
        for idx, item in enumerate(value):
          if isinstance(item, Node):
            value[idx] = self.visit(item, node)
    return node
