"""XML element tree model."""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class XmlNode:
    """
    One XML element: a name, ordered attributes and ordered children.

    Children are either nested ``XmlNode`` elements or text runs (``str``).
    Empty text runs carry nothing and are dropped on construction, so a
    node built in code compares equal to the same node read from text.
    """

    name: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple[Union["XmlNode", str], ...] = ()

    def __post_init__(self):
        self._validate()
        object.__setattr__(
            self, "children", tuple(child for child in self.children if child != "")
        )

    def _validate(self) -> None:
        """Validate node integrity."""
        if not self.name:
            raise ValueError("name cannot be empty")

        seen = set()
        for attr_name, attr_value in self.attributes:
            if attr_name in seen:
                raise ValueError(f"duplicate attribute '{attr_name}' on <{self.name}>")
            if not isinstance(attr_value, str):
                raise ValueError(f"attribute '{attr_name}' value must be str")
            seen.add(attr_name)

        for child in self.children:
            if not isinstance(child, (XmlNode, str)):
                raise ValueError(f"children must be XmlNode or str, got {type(child).__name__}")

    @property
    def elements(self) -> Iterator["XmlNode"]:
        """Element children in document order."""
        return (child for child in self.children if isinstance(child, XmlNode))

    @property
    def is_text_only(self) -> bool:
        """True when the node has no element children; attributes do not count."""
        return not any(isinstance(child, XmlNode) for child in self.children)

    @property
    def text(self) -> str:
        """Concatenated text runs directly under this node."""
        return "".join(child for child in self.children if isinstance(child, str))

    def get(self, attr_name: str, default: Optional[str] = None) -> Optional[str]:
        for name, value in self.attributes:
            if name == attr_name:
                return value
        return default
