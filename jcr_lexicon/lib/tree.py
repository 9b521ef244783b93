"""
Minimal in-memory repository tree.

Implements the node/property interface expected by tree_search:

    node.get_properties() / node.get_nodes()
    prop.is_multiple() / prop.get_type() / prop.required_type
    prop.get_value() / prop.get_values()
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from jcr_lexicon.errors import ValueFormatError
from jcr_lexicon.lib.values import BaseValue, PropertyType


@dataclass
class Property:
    name: str
    value: Optional[BaseValue] = None
    values: Optional[Sequence[BaseValue]] = None
    required_type: PropertyType = PropertyType.UNDEFINED

    def is_multiple(self) -> bool:
        return self.values is not None

    def get_value(self) -> Optional[BaseValue]:
        if self.is_multiple():
            raise ValueFormatError(f"Property '{self.name}' is multi-valued.")
        return self.value

    def get_values(self) -> List[BaseValue]:
        if not self.is_multiple():
            raise ValueFormatError(f"Property '{self.name}' is single-valued.")
        return list(self.values)

    def get_type(self) -> PropertyType:
        """Type of the stored value(s); the required type when there is none."""
        if self.is_multiple():
            if self.values:
                return self.values[0].get_type()
        elif self.value is not None:
            return self.value.get_type()
        return self.required_type


@dataclass
class Node:
    name: str
    properties: List[Property] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)

    def get_properties(self) -> List[Property]:
        return list(self.properties)

    def get_nodes(self) -> List["Node"]:
        return list(self.children)

    def add_property(self, prop: Property) -> Property:
        self.properties.append(prop)
        return prop

    def add_node(self, name: str) -> "Node":
        child = Node(name)
        self.children.append(child)
        return child
