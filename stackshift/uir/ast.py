"""Typed view of the per-file AST handed over by external language parsers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from ..logging import get_logger

logger = get_logger("uir.ast")

PROGRAM = "Program"
STYLESHEET = "Stylesheet"
PARSE_ERROR = "Error"


class ASTError(ValueError):
    """Raised when a parser payload does not have the expected shape."""


@dataclass
class MarkupElement:
    name: Optional[str] = None
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["MarkupNode"] = field(default_factory=list)


@dataclass
class MarkupText:
    text: str = ""


@dataclass
class MarkupFragment:
    children: List["MarkupNode"] = field(default_factory=list)


MarkupNode = Union[MarkupElement, MarkupText, MarkupFragment]


@dataclass
class ComponentAST:
    name: str
    is_default: bool = False
    props: List[str] = field(default_factory=list)
    state: Dict[str, str] = field(default_factory=dict)
    hooks: List[str] = field(default_factory=list)
    markup: Optional[MarkupNode] = None


@dataclass
class FunctionAST:
    name: str
    body: str = ""
    params: List[str] = field(default_factory=list)
    is_exported: bool = False
    is_async: bool = False


@dataclass
class SourceAST:
    """Root of one parsed source file."""

    type: str = PROGRAM
    name: Optional[str] = None
    components: List[ComponentAST] = field(default_factory=list)
    functions: List[FunctionAST] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    styles: Optional[Dict[str, Any]] = None

    @property
    def is_stylesheet(self) -> bool:
        return self.type == STYLESHEET

    @property
    def is_parse_error(self) -> bool:
        return self.type == PARSE_ERROR


def _pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return default


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ASTError(f"expected a list, got {type(value).__name__}")


def _literal_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _as_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ASTError(f"{what} must be an object, got {type(value).__name__}")
    return value


def load_markup(payload: Any) -> Optional[MarkupNode]:
    """Convert one markup payload; unsupported kinds yield ``None``."""
    if payload is None:
        return None
    data = _as_mapping(payload, "markup node")
    kind = data.get("type")
    if kind == "Element":
        return MarkupElement(
            name=data.get("name") or None,
            props=dict(_as_mapping(data.get("props") or {}, "element props")),
            children=_load_children(data.get("children")),
        )
    if kind == "Text":
        name = data.get("name")
        return MarkupText(text="" if name is None else str(name))
    if kind == "Fragment":
        return MarkupFragment(children=_load_children(data.get("children")))
    logger.debug("Dropping unsupported markup node kind %r", kind)
    return None


def _load_children(value: Any) -> List[MarkupNode]:
    children: List[MarkupNode] = []
    for item in _as_list(value):
        node = load_markup(item)
        if node is not None:
            children.append(node)
    return children


def load_component(payload: Any) -> ComponentAST:
    data = _as_mapping(payload, "component")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ASTError("component requires a non-empty name")
    state = _as_mapping(data.get("state") or {}, "component state")
    return ComponentAST(
        name=name,
        is_default=bool(_pick(data, "isDefault", "is_default", default=False)),
        props=[str(prop) for prop in _as_list(data.get("props"))],
        state={str(key): _literal_text(value) for key, value in state.items()},
        hooks=[str(hook) for hook in _as_list(data.get("hooks"))],
        markup=load_markup(_pick(data, "jsx", "markup")),
    )


def load_function(payload: Any) -> FunctionAST:
    data = _as_mapping(payload, "function")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ASTError("function requires a non-empty name")
    body = data.get("body")
    return FunctionAST(
        name=name,
        body="" if body is None else str(body),
        params=[str(param) for param in _as_list(data.get("params"))],
        is_exported=bool(_pick(data, "isExported", "is_exported", default=False)),
        is_async=bool(_pick(data, "isAsync", "is_async", default=False)),
    )


def load_ast(payload: Any) -> SourceAST:
    """Build a SourceAST from a parser's JSON-like output.

    Accepts the camelCase keys emitted by the JavaScript parsers as well as
    snake_case equivalents. Raises ASTError for structurally invalid input.
    """
    data = _as_mapping(payload, "AST root")
    styles = data.get("styles")
    if styles is not None:
        styles = dict(_as_mapping(styles, "styles"))
    return SourceAST(
        type=str(data.get("type") or PROGRAM),
        name=data.get("name"),
        components=[load_component(item) for item in _as_list(data.get("components"))],
        functions=[load_function(item) for item in _as_list(data.get("functions"))],
        imports=[str(item) for item in _as_list(data.get("imports"))],
        styles=styles,
    )


__all__ = [
    "ASTError",
    "ComponentAST",
    "FunctionAST",
    "MarkupElement",
    "MarkupFragment",
    "MarkupNode",
    "MarkupText",
    "SourceAST",
    "load_ast",
    "load_markup",
]
