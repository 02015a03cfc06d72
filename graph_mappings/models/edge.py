"""Edge mapping model for property graph generation.

An edge mapping describes how to derive an edge from one row of tabular
data. Mappings are written as Pig-style maps, e.g.::

    [ 'source' # 'ssn', 'target' # 'mother',
      'label' # 'mother',
      'inverseLabel' # 'child',
      'properties' # ( 'dob' ),
      'inverseProperties' # ( 'dob' ),
      'bidirectional' # 'false' ]

``source`` and ``target`` name the fields holding the vertex IDs, ``label``
labels the generated edge. ``properties`` and ``inverseProperties`` list the
fields copied onto the edge and the inverse edge. When ``bidirectional`` is
not given it defaults to false if an ``inverseLabel`` is present and true
otherwise.
"""
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import (
    InvalidArgumentError,
    NullInputError,
    TypeMismatchError,
)
from ..extraction.notation import (
    format_map,
    format_pair,
    format_tuple_pair,
    parse_map_literal,
)
from ..extraction.reader import MapValueReader

logger = logging.getLogger(__name__)

SOURCE_FIELD = "source"
TARGET_FIELD = "target"
LABEL = "label"
INVERSE_LABEL = "inverseLabel"
BIDIRECTIONAL = "bidirectional"
PROPERTIES = "properties"
INVERSE_PROPERTIES = "inverseProperties"

_ARGUMENT_NAMES = {
    "source_field": "source",
    "target_field": "target",
}

_EXPECTED = {
    "source": "a string",
    "target": "a string",
    "label": "a string",
    "inverse_label": "a string",
    "properties": "a sequence of strings",
    "inverse_properties": "a sequence of strings",
    "bidirectional": "a boolean",
}

KNOWN_KEYS = (
    SOURCE_FIELD,
    TARGET_FIELD,
    LABEL,
    INVERSE_LABEL,
    BIDIRECTIONAL,
    PROPERTIES,
    INVERSE_PROPERTIES,
)


class EdgeMapping(BaseModel):
    """A validated edge mapping."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    source_field: str = Field(description="Field providing the source vertex ID")
    target_field: str = Field(description="Field providing the target vertex ID")
    label: str = Field(description="Label of the generated edge")
    inverse_label: Optional[str] = Field(
        default=None,
        description="Label of the generated inverse edge"
    )
    properties: Tuple[str, ...] = Field(
        default=(),
        description="Fields added as properties of the edge"
    )
    inverse_properties: Tuple[str, ...] = Field(
        default=(),
        description="Fields added as properties of the inverse edge"
    )
    bidirectional: bool = Field(description="Whether the edge is undirected")

    @field_validator("source_field", "target_field", "label")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def create(
        cls,
        source: Optional[str],
        target: Optional[str],
        label: Optional[str],
        inverse_label: Optional[str] = None,
        properties: Optional[Iterable[str]] = None,
        inverse_properties: Optional[Iterable[str]] = None,
        bidirectional: bool = True,
    ) -> "EdgeMapping":
        """Create a new edge mapping.

        Args:
            source: Source field
            target: Target field
            label: Label
            inverse_label: Inverse label
            properties: Properties, copied into the mapping
            inverse_properties: Inverse properties, copied into the mapping
            bidirectional: Whether the edge is bi-directional

        Returns:
            EdgeMapping: The new mapping

        Raises:
            InvalidArgumentError: If source, target or label is missing
            TypeMismatchError: If a value has the wrong type
        """
        for name, value in (("source", source), ("target", target), ("label", label)):
            if value is None or value == "":
                raise InvalidArgumentError(
                    f"{name.capitalize()} for an edge mapping cannot be empty", field=name
                )

        try:
            return cls(
                source_field=source,
                target_field=target,
                label=label,
                inverse_label=inverse_label,
                properties=_copy_names(PROPERTIES, properties),
                inverse_properties=_copy_names(INVERSE_PROPERTIES, inverse_properties),
                bidirectional=bidirectional,
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0])
            field = _ARGUMENT_NAMES.get(field, field)
            raise TypeMismatchError(
                field, _EXPECTED.get(field, "valid"), error.get("input")
            ) from e

    @classmethod
    def directed(
        cls,
        source: Optional[str],
        target: Optional[str],
        label: Optional[str],
        inverse_label: Optional[str] = None,
    ) -> "EdgeMapping":
        """Create a directed edge mapping without properties."""
        return cls.create(source, target, label, inverse_label, bidirectional=False)

    @classmethod
    def undirected(
        cls,
        source: Optional[str],
        target: Optional[str],
        label: Optional[str],
    ) -> "EdgeMapping":
        """Create an undirected edge mapping without properties."""
        return cls.create(source, target, label, bidirectional=True)

    @classmethod
    def from_object(cls, obj: Any) -> "EdgeMapping":
        """Create an edge mapping from a generic map object.

        Args:
            obj: Map as produced by the execution engine

        Returns:
            EdgeMapping: The parsed mapping

        Raises:
            NullInputError: If obj is None
            InvalidArgumentError: If obj is not a map
            MissingRequiredKeyError: If source, target or label is missing
            TypeMismatchError: If a value has the wrong shape
        """
        if obj is None:
            raise NullInputError("Cannot create an edge mapping from a null object")
        if not isinstance(obj, Mapping):
            raise InvalidArgumentError("Cannot create an edge mapping from a non-map object")

        reader = MapValueReader(obj, context="edge mapping")
        source = reader.get_required_string(SOURCE_FIELD)
        target = reader.get_required_string(TARGET_FIELD)
        label = reader.get_required_string(LABEL)
        inverse_label = reader.get_optional_string(INVERSE_LABEL)

        # Without an explicit value an inverse label implies a directed edge
        bidirectional = reader.get_optional_bool(BIDIRECTIONAL, inverse_label is None)
        properties = reader.get_optional_string_list(PROPERTIES)
        inverse_properties = reader.get_optional_string_list(INVERSE_PROPERTIES)

        unknown = reader.unknown_keys(KNOWN_KEYS)
        if unknown:
            logger.warning(f"Ignoring unknown keys in edge mapping: {', '.join(unknown)}")

        mapping = cls.create(
            source,
            target,
            label,
            inverse_label,
            properties,
            inverse_properties,
            bidirectional,
        )
        logger.debug(f"Parsed edge mapping {mapping}")
        return mapping

    @classmethod
    def from_string(cls, text: str) -> "EdgeMapping":
        """Create an edge mapping from map notation text."""
        if text is None:
            raise NullInputError("Cannot create an edge mapping from null text")
        return cls.from_object(parse_map_literal(text))

    def iter_properties(self) -> Iterator[str]:
        """Gets an iterator over the edge property names."""
        return iter(self.properties)

    def iter_inverse_properties(self) -> Iterator[str]:
        """Gets an iterator over the inverse edge property names."""
        return iter(self.inverse_properties)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the mapping to a generic map using the notation keys.

        Returns:
            Dict[str, Any]: Map accepted by :meth:`from_object`
        """
        data: Dict[str, Any] = {
            SOURCE_FIELD: self.source_field,
            TARGET_FIELD: self.target_field,
            LABEL: self.label,
        }
        if self.inverse_label is not None:
            data[INVERSE_LABEL] = self.inverse_label
        data[BIDIRECTIONAL] = self.bidirectional
        if self.properties:
            data[PROPERTIES] = list(self.properties)
        if self.inverse_properties:
            data[INVERSE_PROPERTIES] = list(self.inverse_properties)
        return data

    def to_notation(self) -> str:
        """Render the mapping in canonical map notation.

        Key order is fixed regardless of how the mapping was created; only
        the presence of optional values changes the output.
        """
        entries = [
            format_pair(SOURCE_FIELD, self.source_field),
            format_pair(TARGET_FIELD, self.target_field),
            format_pair(LABEL, self.label),
        ]
        if self.inverse_label is not None:
            entries.append(format_pair(INVERSE_LABEL, self.inverse_label))
        entries.append(format_pair(BIDIRECTIONAL, str(self.bidirectional).lower()))
        if self.properties:
            entries.append(format_tuple_pair(PROPERTIES, self.properties))
        if self.inverse_properties:
            entries.append(format_tuple_pair(INVERSE_PROPERTIES, self.inverse_properties))
        return format_map(entries)

    def __str__(self) -> str:
        return self.to_notation()


def _copy_names(key: str, values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeMismatchError(key, "a sequence of strings", values)
    return tuple(values)
