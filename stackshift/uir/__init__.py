"""Universal Intermediate Representation: schema, AST input and generator."""

from __future__ import annotations

from .ast import ASTError, SourceAST, load_ast
from .generator import UIRGenerator
from .inference import infer_literal_type
from .models import (
    ComponentNode,
    ElementNode,
    FunctionNode,
    StylesheetNode,
    TextNode,
    UIRMetadata,
    UIRNode,
    UIRProp,
    UIRState,
)

__all__ = [
    "ASTError",
    "ComponentNode",
    "ElementNode",
    "FunctionNode",
    "SourceAST",
    "StylesheetNode",
    "TextNode",
    "UIRGenerator",
    "UIRMetadata",
    "UIRNode",
    "UIRProp",
    "UIRState",
    "infer_literal_type",
    "load_ast",
]
