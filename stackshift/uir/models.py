"""Universal Intermediate Representation (UIR) node types.

Each node kind is its own dataclass carrying a class-level ``kind`` tag, so
consumers dispatch on the type rather than on free-form strings. ``to_dict``
renders the JSON shape handed to code-emission stages, with the kind under
``type``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union

from .inference import TypeTag


@dataclass
class UIRMetadata:
    original_file: str
    original_framework: str
    dependencies: List[str] = field(default_factory=list)
    exports: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_file": self.original_file,
            "original_framework": self.original_framework,
            "dependencies": list(self.dependencies),
            "exports": list(self.exports),
        }


@dataclass
class UIRProp:
    name: str
    type: TypeTag
    required: bool
    default_value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "required": self.required,
        }
        if self.default_value is not None:
            payload["default_value"] = self.default_value
        return payload


@dataclass
class UIRState:
    name: str
    type: TypeTag
    initial_value: str
    setter: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "initial_value": self.initial_value,
            "setter": self.setter,
        }


def _props_to_dict(props: Dict[str, UIRProp]) -> Dict[str, Any]:
    return {name: prop.to_dict() for name, prop in props.items()}


@dataclass
class ComponentStructure:
    props: Dict[str, UIRProp] = field(default_factory=dict)
    state: Dict[str, UIRState] = field(default_factory=dict)
    hooks: List[str] = field(default_factory=list)
    children: List["UIRNode"] = field(default_factory=list)
    styles: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "props": _props_to_dict(self.props),
            "state": {name: state.to_dict() for name, state in self.state.items()},
            "hooks": list(self.hooks),
            "children": [child.to_dict() for child in self.children],
        }
        if self.styles is not None:
            payload["styles"] = dict(self.styles)
        return payload


@dataclass
class ElementStructure:
    props: Dict[str, UIRProp] = field(default_factory=dict)
    children: List["UIRNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "props": _props_to_dict(self.props),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class StylesheetStructure:
    styles: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"styles": dict(self.styles)}


@dataclass
class FunctionImplementation:
    code: str
    language: str

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "language": self.language}


@dataclass
class _BaseNode:
    kind: ClassVar[str]

    name: str
    framework: str
    metadata: UIRMetadata

    def _base_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "name": self.name,
            "framework": self.framework,
            "metadata": self.metadata.to_dict(),
        }

    def to_dict(self) -> Dict[str, Any]:
        return self._base_dict()


@dataclass
class ComponentNode(_BaseNode):
    kind: ClassVar[str] = "component"

    structure: ComponentStructure = field(default_factory=ComponentStructure)

    def to_dict(self) -> Dict[str, Any]:
        payload = self._base_dict()
        payload["structure"] = self.structure.to_dict()
        return payload


@dataclass
class FunctionNode(_BaseNode):
    kind: ClassVar[str] = "function"

    implementation: FunctionImplementation = field(
        default_factory=lambda: FunctionImplementation(code="", language="javascript")
    )

    def to_dict(self) -> Dict[str, Any]:
        payload = self._base_dict()
        payload["implementation"] = self.implementation.to_dict()
        return payload


@dataclass
class ElementNode(_BaseNode):
    kind: ClassVar[str] = "element"

    structure: ElementStructure = field(default_factory=ElementStructure)

    def to_dict(self) -> Dict[str, Any]:
        payload = self._base_dict()
        payload["structure"] = self.structure.to_dict()
        return payload


@dataclass
class TextNode(_BaseNode):
    """Literal text; the text itself is carried as ``name``."""

    kind: ClassVar[str] = "text"


@dataclass
class StylesheetNode(_BaseNode):
    kind: ClassVar[str] = "stylesheet"

    structure: StylesheetStructure = field(default_factory=StylesheetStructure)

    def to_dict(self) -> Dict[str, Any]:
        payload = self._base_dict()
        payload["structure"] = self.structure.to_dict()
        return payload


UIRNode = Union[ComponentNode, FunctionNode, ElementNode, TextNode, StylesheetNode]

NODE_KINDS = tuple(
    cls.kind for cls in (ComponentNode, FunctionNode, ElementNode, TextNode, StylesheetNode)
)


__all__ = [
    "ComponentNode",
    "ComponentStructure",
    "ElementNode",
    "ElementStructure",
    "FunctionImplementation",
    "FunctionNode",
    "NODE_KINDS",
    "StylesheetNode",
    "StylesheetStructure",
    "TextNode",
    "UIRMetadata",
    "UIRNode",
    "UIRProp",
    "UIRState",
]
