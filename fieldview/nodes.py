"""
Abstract node tree produced by renderers.

A node is a plain ``{tag, attributes, children}`` description. The host
rendering surface turns it into real markup or widgets; nothing in this
package ever touches the host directly.
"""

from typing import Any, Callable, Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


EventHandler = Callable[..., Any]


class Node(BaseModel):
    """One element in a rendered tree."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    tag: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    children: list[Union["Node", str]] = Field(default_factory=list)
    events: dict[str, EventHandler] = Field(
        default_factory=dict,
        exclude=True,
        description="Interaction handlers keyed by event name (click, mouseover, ...)",
    )

    @property
    def css_classes(self) -> list[str]:
        return str(self.attributes.get("class", "")).split()

    def has_class(self, name: str) -> bool:
        return name in self.css_classes

    def walk(self) -> Iterator["Node"]:
        """Yield this node and every descendant node, depth-first."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.walk()

    def find_all(self, predicate: Callable[["Node"], bool]) -> list["Node"]:
        return [node for node in self.walk() if predicate(node)]

    def find_by_class(self, name: str) -> list["Node"]:
        return self.find_all(lambda node: node.has_class(name))

    def first_by_class(self, name: str) -> Optional["Node"]:
        matches = self.find_by_class(name)
        return matches[0] if matches else None

    def text(self) -> str:
        """Concatenated text content of the subtree."""
        parts = []
        for child in self.children:
            if isinstance(child, Node):
                parts.append(child.text())
            else:
                parts.append(child)
        return "".join(parts)

    def trigger(self, event: str, *args: Any) -> Any:
        """Invoke the handler bound to ``event``. No-op when none is bound."""
        handler = self.events.get(event)
        if handler is None:
            return None
        return handler(*args)


Node.model_rebuild()


def classes(*names: Optional[str]) -> str:
    """Join CSS class names, skipping empty ones."""
    return " ".join(name for name in names if name)


def element(
    tag: str,
    attributes: Optional[dict[str, Any]] = None,
    *children: Union[Node, str, None],
    events: Optional[dict[str, EventHandler]] = None,
) -> Node:
    """Build a node, dropping ``None`` children and ``None`` attribute values."""
    return Node(
        tag=tag,
        attributes={k: v for k, v in (attributes or {}).items() if v is not None},
        children=[child for child in children if child is not None],
        events=events or {},
    )
