"""Conversion of parsed source ASTs into UIR nodes."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping

from ..logging import get_logger
from .ast import (
    ComponentAST,
    FunctionAST,
    MarkupElement,
    MarkupFragment,
    MarkupNode,
    MarkupText,
    SourceAST,
    load_ast,
)
from .inference import TypeTag, infer_literal_type
from .models import (
    ComponentNode,
    ComponentStructure,
    ElementNode,
    ElementStructure,
    FunctionImplementation,
    FunctionNode,
    StylesheetNode,
    StylesheetStructure,
    TextNode,
    UIRMetadata,
    UIRNode,
    UIRProp,
    UIRState,
)

MARKUP_FRAMEWORK = "universal"
FUNCTION_LANGUAGE = "javascript"
DEFAULT_ELEMENT_NAME = "div"
DEFAULT_STYLESHEET_NAME = "styles"

_IMPORT_SOURCE = re.compile(r"""(?:\bfrom\s+|^\s*import\s+)(['"])(?P<source>[^'"]+)\1""")


def module_specifiers(imports: Iterable[str]) -> List[str]:
    """Return the de-duplicated module sources named by import entries.

    Entries may be full import statements (``import x from 'react'``) or bare
    specifiers (``react``).
    """
    sources: List[str] = []
    for entry in imports:
        text = entry.strip()
        if not text:
            continue
        match = _IMPORT_SOURCE.search(text)
        source = match.group("source") if match else text
        if source not in sources:
            sources.append(source)
    return sources


def setter_name(state_name: str) -> str:
    return f"set{state_name[:1].upper()}{state_name[1:]}"


def markup_prop_type(value: Any) -> TypeTag:
    if isinstance(value, str) and not (value.startswith("{") and value.endswith("}")):
        return "string"
    return "expression"


class UIRGenerator:
    """Normalizes per-file ASTs from any source framework into UIR nodes."""

    def __init__(self) -> None:
        self.logger = get_logger("uir.generator")

    def generate(self, ast: SourceAST | Mapping[str, Any], original_file: str, framework: str) -> List[UIRNode]:
        """Return components, then functions, then at most one stylesheet node."""
        if not isinstance(ast, SourceAST):
            ast = load_ast(ast)
        if ast.is_parse_error:
            self.logger.warning(
                "Parser reported an error for %s: %s", original_file, ast.name or "unknown error"
            )
            return []

        dependencies = module_specifiers(ast.imports)
        nodes: List[UIRNode] = []
        for component in ast.components:
            nodes.append(self.convert_component(component, original_file, framework, dependencies))
        for function in ast.functions:
            nodes.append(self.convert_function(function, original_file, framework, dependencies))
        if ast.is_stylesheet:
            nodes.append(self.convert_stylesheet(ast, original_file, framework))

        self.logger.debug("Generated %d UIR nodes for %s", len(nodes), original_file)
        return nodes

    def convert_component(
        self,
        component: ComponentAST,
        original_file: str,
        framework: str,
        dependencies: List[str] | None = None,
    ) -> ComponentNode:
        exports = ["default"] if component.is_default else [component.name]
        markup_metadata = UIRMetadata(original_file=original_file, original_framework=framework)
        children = (
            self.convert_markup(component.markup, markup_metadata)
            if component.markup is not None
            else []
        )
        return ComponentNode(
            name=component.name,
            framework=framework,
            metadata=UIRMetadata(
                original_file=original_file,
                original_framework=framework,
                dependencies=list(dependencies or []),
                exports=exports,
            ),
            structure=ComponentStructure(
                props=self._declared_props(component.props),
                state=self._state(component.state),
                hooks=list(component.hooks),
                children=children,
            ),
        )

    def convert_function(
        self,
        function: FunctionAST,
        original_file: str,
        framework: str,
        dependencies: List[str] | None = None,
    ) -> FunctionNode:
        return FunctionNode(
            name=function.name,
            framework=framework,
            metadata=UIRMetadata(
                original_file=original_file,
                original_framework=framework,
                dependencies=list(dependencies or []),
                exports=[function.name] if function.is_exported else [],
            ),
            implementation=FunctionImplementation(code=function.body, language=FUNCTION_LANGUAGE),
        )

    def convert_stylesheet(self, ast: SourceAST, original_file: str, framework: str) -> StylesheetNode:
        return StylesheetNode(
            name=ast.name or DEFAULT_STYLESHEET_NAME,
            framework=framework,
            metadata=UIRMetadata(original_file=original_file, original_framework=framework),
            structure=StylesheetStructure(styles=dict(ast.styles or {})),
        )

    def convert_markup(self, node: MarkupNode, metadata: UIRMetadata) -> List[UIRNode]:
        """Convert a markup subtree, splicing fragment children into the parent."""
        if isinstance(node, MarkupFragment):
            spliced: List[UIRNode] = []
            for child in node.children:
                spliced.extend(self.convert_markup(child, metadata))
            return spliced
        if isinstance(node, MarkupElement):
            children: List[UIRNode] = []
            for child in node.children:
                children.extend(self.convert_markup(child, metadata))
            return [
                ElementNode(
                    name=node.name or DEFAULT_ELEMENT_NAME,
                    framework=MARKUP_FRAMEWORK,
                    metadata=self._copy_metadata(metadata),
                    structure=ElementStructure(
                        props=self._markup_props(node.props),
                        children=children,
                    ),
                )
            ]
        if isinstance(node, MarkupText):
            return [
                TextNode(
                    name=node.text,
                    framework=MARKUP_FRAMEWORK,
                    metadata=self._copy_metadata(metadata),
                )
            ]
        raise TypeError(f"Unsupported markup node: {type(node).__name__}")

    @staticmethod
    def _copy_metadata(metadata: UIRMetadata) -> UIRMetadata:
        return UIRMetadata(
            original_file=metadata.original_file,
            original_framework=metadata.original_framework,
        )

    @staticmethod
    def _declared_props(props: Iterable[str]) -> Dict[str, UIRProp]:
        # Parsers only report names, so every declared prop is untyped and required.
        return {name: UIRProp(name=name, type="any", required=True) for name in props}

    @staticmethod
    def _markup_props(props: Mapping[str, Any]) -> Dict[str, UIRProp]:
        return {
            name: UIRProp(
                name=name,
                type=markup_prop_type(value),
                required=False,
                default_value=value,
            )
            for name, value in props.items()
        }

    @staticmethod
    def _state(state: Mapping[str, str]) -> Dict[str, UIRState]:
        return {
            name: UIRState(
                name=name,
                type=infer_literal_type(initial_value),
                initial_value=initial_value,
                setter=setter_name(name),
            )
            for name, initial_value in state.items()
        }


__all__ = ["UIRGenerator", "markup_prop_type", "module_specifiers", "setter_name"]
