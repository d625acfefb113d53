"""Generate a graphql-ruby object type file from a type name and `name:type` fields.

Writes <directory>/<types_dir>/<type_file_name>.rb under the project root.
Layout is configurable (directory, types_dir, base_class, node_interface, file_extension).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Any

from graphql_scaffold.config import resolve_generator_layout
from graphql_scaffold.fields import NormalizedField, parse_fields
from graphql_scaffold.helpers import demodulize, read_file_or_default, underscore
from graphql_scaffold.normalize import (
    TYPES_NAMESPACE,
    MalformedTypeError,
    TypeNotation,
    normalize_type_expression,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedType:
    file_base_name: str
    ruby_name: str
    graphql_name: str
    field_declarations: list[str]


class TypeGenerator:
    """Derived names for one generator run. Each is computed once per instance."""

    def __init__(
        self,
        type_name: str,
        fields: Sequence[str] = (),
        layout: dict[str, Any] | None = None,
    ) -> None:
        if any(c in type_name for c in "[]!"):
            msg = f"Type name cannot be a list or non-null expression: {type_name!r}"
            raise MalformedTypeError(msg)
        self.type_name = type_name
        self.fields = list(fields)
        self.layout = resolve_generator_layout(layout)

    @cached_property
    def type_ruby_name(self) -> str:
        return normalize_type_expression(self.type_name, mode=TypeNotation.HOST)[0]

    @cached_property
    def type_graphql_name(self) -> str:
        return normalize_type_expression(self.type_name, mode=TypeNotation.SCHEMA)[0]

    @cached_property
    def type_file_name(self) -> str:
        """File name without extension (BlogPost -> blog_post_type)."""
        return underscore(f"{self.type_graphql_name}Type")

    @cached_property
    def normalized_fields(self) -> list[NormalizedField]:
        return parse_fields(self.fields)

    def target_path(self, project_root: Path) -> Path:
        cfg = self.layout
        return (
            project_root
            / cfg["directory"]
            / cfg["types_dir"]
            / f"{self.type_file_name}{cfg['file_extension']}"
        )


class ObjectGenerator(TypeGenerator):
    """graphql-ruby class-based object type (Types::BaseObject subclass)."""

    def __init__(
        self,
        type_name: str,
        fields: Sequence[str] = (),
        layout: dict[str, Any] | None = None,
        node: bool = False,
    ) -> None:
        super().__init__(type_name, fields, layout)
        self.node = node

    def build(self) -> GeneratedType:
        return GeneratedType(
            file_base_name=self.type_file_name,
            ruby_name=self.type_ruby_name,
            graphql_name=self.type_graphql_name,
            field_declarations=[f.to_ruby() for f in self.normalized_fields],
        )

    def render(self) -> str:
        """Nest one `module` per namespace segment so the file matches its path under types/."""
        generated = self.build()
        class_name = demodulize(generated.ruby_name)
        nested = generated.ruby_name[len(TYPES_NAMESPACE) : -len(class_name)]
        modules = ["Types", *(m for m in nested.split("::") if m)]

        lines = [f"{'  ' * depth}module {m}" for depth, m in enumerate(modules)]
        indent = "  " * len(modules)
        lines.append(f"{indent}class {class_name} < {self.layout['base_class']}")
        if self.node:
            lines.append(f"{indent}  implements {self.layout['node_interface']}")
        lines.extend(f"{indent}  {decl}" for decl in generated.field_declarations)
        lines.append(f"{indent}end")
        lines.extend(f"{'  ' * depth}end" for depth in reversed(range(len(modules))))
        lines.append("")
        return "\n".join(lines)

    def run(self, project_root: Path, force: bool = False, pretend: bool = False) -> int:
        """Write the type file. Returns 0 on success, 1 if an existing different file was kept."""
        output_path = self.target_path(project_root)
        content = self.render()
        try:
            rel = output_path.relative_to(project_root)
        except ValueError:
            rel = output_path

        if output_path.exists():
            if read_file_or_default(output_path) == content:
                print(f"✅ Identical: {rel}")
                return 0
            if not force:
                log.warning("Refusing to overwrite %s (pass --force)", output_path)
                print(f"❌ Conflict: {rel} exists (use --force to overwrite)")
                return 1
            action = "Overwrote"
        else:
            action = "Created"

        if pretend:
            print(f"Info:  Would write {rel} (pretend)")
            return 0
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content)
        print(f"✅ {action} {rel}")
        return 0


def run_generate_object(
    type_name: str,
    fields: Sequence[str],
    project_root: Path,
    node: bool = False,
    force: bool = False,
    pretend: bool = False,
    layout: dict[str, Any] | None = None,
) -> int:
    """Generate an object type file. Returns 0 on success, 1 on conflict."""
    generator = ObjectGenerator(type_name, fields, layout=layout, node=node)
    log.debug(
        "Generating %s (graphql %s) with %d field(s)",
        generator.type_ruby_name,
        generator.type_graphql_name,
        len(generator.fields),
    )
    return generator.run(project_root, force=force, pretend=pretend)
