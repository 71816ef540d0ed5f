"""XML tree nodes and attributes, with an indented text writer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TextIO, Union

__all__ = ["XmlAttribute", "XmlNode"]

_INDENT_WIDTH = 4


@dataclass
class XmlAttribute:
    """A tag attribute such as ``id="1"`` in ``<tag id="1">``."""

    name: str = ""
    value: str = ""


@dataclass
class XmlNode:
    """An element with a name, a text value, attributes and child elements."""

    name: str = ""
    value: str = ""
    attributes: list[XmlAttribute] = field(default_factory=list)
    children: list["XmlNode"] = field(default_factory=list)
    parent: Optional["XmlNode"] = field(default=None, repr=False, compare=False)

    def add_attribute(self, name: str, value: str) -> XmlAttribute:
        """Append an attribute and return it."""
        attribute = XmlAttribute(name, value)
        self.attributes.append(attribute)
        return attribute

    def add_child(self, node: "XmlNode") -> "XmlNode":
        """Append ``node`` as the last child, make this node its parent and return it."""
        node.parent = self
        self.children.append(node)
        return node

    def latest_child(self) -> "XmlNode":
        """Return the most recently added child; raise IndexError if there is none."""
        if not self.children:
            raise IndexError("node has no children")
        return self.children[-1]

    def get_node(self, key: Union[int, str]) -> Optional["XmlNode"]:
        """Return a child by position or by tag name, or None if there is no such child."""
        if isinstance(key, str):
            return next((child for child in self.children if child.name == key), None)
        if 0 <= key < len(self.children):
            return self.children[key]
        return None

    def get_attribute(self, index: int) -> Optional[XmlAttribute]:
        """Return the attribute at ``index``, or None if it does not exist."""
        if 0 <= index < len(self.attributes):
            return self.attributes[index]
        return None

    def clear(self) -> None:
        """Drop the name, value, attributes and children of this node."""
        self.name = ""
        self.value = ""
        self.attributes.clear()
        self.children.clear()

    def _attribute_text(self) -> str:
        return "".join(f' {a.name}="{a.value}"' for a in self.attributes)

    def write(self, stream: TextIO, depth: int = 0) -> None:
        """Write this node and its subtree to a text stream, indented by ``depth``."""
        indent = " " * (_INDENT_WIDTH * depth)
        has_children = bool(self.children)

        if self.value or has_children:
            if self.name:
                stream.write(f"{indent}<{self.name}{self._attribute_text()}")
                stream.write(" >\n" if has_children else " >")
            if has_children:
                for child in self.children:
                    child.write(stream, depth + 1)
            else:
                stream.write(self.value)
            if self.name:
                closing_indent = indent if has_children else ""
                stream.write(f"{closing_indent}</{self.name}>\n")
        elif self.name:
            stream.write(f"{indent}<{self.name}{self._attribute_text()} />\n")