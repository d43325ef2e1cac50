"""
GraphQL document builders.

This module provides the recursive builders that assemble Watson Workspace
query documents. An ObjectDataSenderBuilder is a named object with optional
attributes (arguments that filter the query), scalar fields and nested
children, each child being a builder of its own. Builders can wrap their
fields in ``items { ... }`` and prepend a ``pageInfo`` block for paginated
collections.
"""

from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from pydantic import BaseModel

from ..exceptions import BuilderError
from ..models import PAGE_INFO_LABEL, PageInfo, WWFieldsAttributes

FieldName = Union[str, WWFieldsAttributes]

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.{millis:03d}%z"
INDENT = "  "

_STRING_ESCAPES = str.maketrans(
    {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}
)


def format_datetime(value: datetime) -> str:
    """Format a datetime the way the Workspace API expects it."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.strftime(DATE_FORMAT).format(millis=value.microsecond // 1000)


def format_value(value: Any) -> str:
    """
    Format an attribute value as a GraphQL literal.

    Args:
        value: Python value

    Returns:
        GraphQL literal text
    """
    if isinstance(value, DataSenderBuilder):
        return value.build()
    elif isinstance(value, WWFieldsAttributes):
        return value.label
    elif isinstance(value, Enum):
        return str(value.value)
    elif isinstance(value, str):
        return f'"{value.translate(_STRING_ESCAPES)}"'
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, (int, float)):
        return str(value)
    elif isinstance(value, datetime):
        return f'"{format_datetime(value)}"'
    elif isinstance(value, (list, tuple)):
        items = [format_value(item) for item in value]
        return f"[{', '.join(items)}]"
    elif isinstance(value, dict):
        items = [f"{key}: {format_value(val)}" for key, val in value.items()]
        return f"{{{', '.join(items)}}}"
    elif value is None:
        return "null"
    else:
        return str(value)


def _label(name: FieldName) -> str:
    if isinstance(name, WWFieldsAttributes):
        return name.label
    return name


def _is_scalar(annotation: Any) -> bool:
    """True unless the annotation is, or contains, a pydantic model."""
    args = typing.get_args(annotation)
    if args:
        return all(_is_scalar(arg) for arg in args)
    return not (isinstance(annotation, type) and issubclass(annotation, BaseModel))


class DataSenderBuilder(ABC):
    """Anything that renders to a piece of a GraphQL document."""

    @abstractmethod
    def build(self, pretty: bool = False) -> str:
        """
        Render the builder.

        Args:
            pretty: Emit one entry per line with indentation

        Returns:
            GraphQL text
        """

    def __str__(self) -> str:
        return self.build()


class ObjectDataSenderBuilder(DataSenderBuilder):
    """
    Builder for a GraphQL object selection.

    Examples:
        Spaces with pagination:
        ```python
        spaces = (ObjectDataSenderBuilder("spaces", has_items=True)
            .add_attribute(SpacesAttributes.FIRST, 100)
            .add_page_info()
            .add_field(SpaceFields.ID)
            .add_field(SpaceFields.TITLE)
        )
        spaces.build()
        # spaces (first: 100) {pageInfo {startCursor endCursor hasNextPage
        # hasPreviousPage} items {id title}}
        ```

        Fields from an enum:
        ```python
        creator = ObjectDataSenderBuilder("createdBy", fields=PersonFields)
        ```
    """

    def __init__(
        self,
        object_name: Optional[str] = None,
        has_items: bool = False,
        fields: Optional[Iterable[FieldName]] = None,
        alias: Optional[str] = None,
    ):
        """
        Initialize object builder.

        Args:
            object_name: GraphQL name of the object
            has_items: Whether fields and children are wrapped in ``items {}``
            fields: Field names, field enum members, or a whole field enum
            alias: Optional alias the object is returned under
        """
        self.object_name = object_name
        self.has_items = has_items
        self.alias = alias
        self.attributes: Dict[str, Any] = {}
        self.fields: List[str] = []
        self.children: List[DataSenderBuilder] = []
        self.page_info: Optional[ObjectDataSenderBuilder] = None

        for field in fields or ():
            self.add_field(field)

    @classmethod
    def from_model(
        cls, object_name: str, model: Type[BaseModel], has_items: bool = False
    ) -> ObjectDataSenderBuilder:
        """
        Create a builder selecting every scalar field of a model.

        The field alias is used as the GraphQL name. Fields holding models, or
        collections of models, are skipped; add those as children.

        Args:
            object_name: GraphQL name of the object
            model: pydantic model to read fields from
            has_items: Whether fields are wrapped in ``items {}``

        Returns:
            New builder
        """
        builder = cls(object_name, has_items)
        for name, info in model.model_fields.items():
            if _is_scalar(info.annotation):
                builder.fields.append(info.alias or name)
        return builder

    def set_object_name(self, object_name: str) -> ObjectDataSenderBuilder:
        self.object_name = object_name
        return self

    def set_has_items(self, has_items: bool) -> ObjectDataSenderBuilder:
        self.has_items = has_items
        return self

    def set_alias(self, alias: Optional[str]) -> ObjectDataSenderBuilder:
        self.alias = alias
        return self

    def add_field(self, field: FieldName) -> ObjectDataSenderBuilder:
        self.fields.append(_label(field))
        return self

    def add_fields(self, *fields: FieldName) -> ObjectDataSenderBuilder:
        for field in fields:
            self.add_field(field)
        return self

    def remove_field(self, field: FieldName) -> ObjectDataSenderBuilder:
        label = _label(field)
        if label in self.fields:
            self.fields.remove(label)
        return self

    def add_attribute(self, key: FieldName, value: Any) -> ObjectDataSenderBuilder:
        """
        Add an attribute (query argument).

        Args:
            key: Attribute name or attribute enum member
            value: Attribute value

        Returns:
            Self for chaining

        Raises:
            BuilderError: If an enum key is given a value of the wrong type
        """
        if isinstance(key, WWFieldsAttributes):
            expected = key.object_class_type
            if not isinstance(value, expected) or (
                expected is int and isinstance(value, bool)
            ):
                raise BuilderError(
                    f"Watson Work Services expects a {expected.__name__} for this "
                    f"attribute. Object supplied is {type(value).__name__}",
                    attribute=key.label,
                )
        self.attributes[_label(key)] = value
        return self

    def set_attributes(self, attributes: Dict[str, Any]) -> ObjectDataSenderBuilder:
        self.attributes = dict(attributes)
        return self

    def remove_attribute(self, key: FieldName) -> ObjectDataSenderBuilder:
        self.attributes.pop(_label(key), None)
        return self

    def add_child(self, child: DataSenderBuilder) -> ObjectDataSenderBuilder:
        self.children.append(child)
        return self

    def remove_child(self, child: DataSenderBuilder) -> ObjectDataSenderBuilder:
        if child in self.children:
            self.children.remove(child)
        return self

    def add_page_info(
        self, custom: Optional[ObjectDataSenderBuilder] = None
    ) -> ObjectDataSenderBuilder:
        """
        Attach a pageInfo block.

        Args:
            custom: Builder to use instead of the standard pageInfo selection

        Returns:
            Self for chaining
        """
        if custom is None:
            custom = ObjectDataSenderBuilder.from_model(PAGE_INFO_LABEL, PageInfo)
        self.page_info = custom
        return self

    def remove_page_info(self) -> ObjectDataSenderBuilder:
        self.page_info = None
        return self

    def build(self, pretty: bool = False) -> str:
        if pretty:
            return self.to_string(0)
        return self._build_compact()

    def _header(self) -> str:
        result = ""
        if self.alias:
            result += f"{self.alias}: "
        result += f"{self.object_name} "

        if self.attributes:
            args_str = " ".join(
                f"{key}: {format_value(value)}" for key, value in self.attributes.items()
            )
            result += f"({args_str}) "
        return result

    def _build_compact(self) -> str:
        parts = list(self.fields)
        parts.extend(child.build() for child in self.children)
        body = " ".join(parts)

        if self.has_items:
            body = f"items {{{body}}}"
        if self.page_info is not None:
            body = f"{self.page_info.build()} {body}"

        return f"{self._header()}{{{body}}}"

    def to_string(self, indent: int = 0) -> str:
        """
        Render with one entry per line.

        Args:
            indent: Indentation level

        Returns:
            GraphQL text
        """
        spaces = INDENT * indent
        inner = indent + 1
        if self.has_items:
            inner += 1

        lines = [f"{spaces}{self._header()}{{"]
        if self.page_info is not None:
            lines.append(self.page_info.to_string(indent + 1))
        if self.has_items:
            lines.append(f"{spaces}{INDENT}items {{")

        for field in self.fields:
            lines.append(f"{INDENT * inner}{field}")
        for child in self.children:
            if isinstance(child, ObjectDataSenderBuilder):
                lines.append(child.to_string(inner))
            else:
                lines.append(f"{INDENT * inner}{child.build(pretty=True)}")

        if self.has_items:
            lines.append(f"{spaces}{INDENT}}}")
        lines.append(f"{spaces}}}")
        return "\n".join(lines)


class InputDataSenderBuilder(DataSenderBuilder):
    """
    Builder for a GraphQL input object literal.

    Used as the ``input`` attribute of Workspace mutations, e.g.
    ``{title: "Team", members: ["a", "b"]}``.
    """

    def __init__(self, values: Optional[Dict[FieldName, Any]] = None):
        self.values: Dict[str, Any] = {}
        for key, value in (values or {}).items():
            self.add(key, value)

    def add(self, key: FieldName, value: Any) -> InputDataSenderBuilder:
        self.values[_label(key)] = value
        return self

    def remove(self, key: FieldName) -> InputDataSenderBuilder:
        self.values.pop(_label(key), None)
        return self

    def build(self, pretty: bool = False) -> str:
        return format_value(self.values)
