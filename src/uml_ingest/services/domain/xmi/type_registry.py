"""Scalar types accepted for each target storage family.

Registries are built once at import and never mutated; every parser for the
same database type shares the same instance.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from ....utils.naming import capitalize
from .exceptions import WrongTypeException


class DatabaseType(str, Enum):
    """Storage family targeted by the generated entities."""
    SQL = "sql"
    MONGODB = "mongodb"
    CASSANDRA = "cassandra"


SQL_TYPES = (
    "String", "Integer", "Long", "BigDecimal", "Float", "Double", "Enum",
    "Boolean", "LocalDate", "ZonedDateTime", "Instant", "Duration", "UUID",
    "Blob", "AnyBlob", "ImageBlob", "TextBlob",
)

MONGODB_TYPES = (
    "String", "Integer", "Long", "BigDecimal", "Float", "Double", "Enum",
    "Boolean", "LocalDate", "ZonedDateTime", "Instant", "Duration", "UUID",
    "Blob", "AnyBlob", "ImageBlob", "TextBlob",
)

CASSANDRA_TYPES = (
    "String", "Integer", "Long", "BigDecimal", "Float", "Double", "Boolean",
    "LocalDate", "Instant", "UUID", "Blob", "AnyBlob", "ImageBlob", "TextBlob",
)


@dataclass(frozen=True)
class TypeRegistry:
    """Canonical names of the recognized scalar types.

    Lookups capitalize the queried name and ignore case, so ``string``,
    ``String`` and ``STRING`` all resolve to ``String``.
    """
    database_type: DatabaseType
    types: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_names(cls, database_type: DatabaseType, names: Iterable[str]) -> "TypeRegistry":
        """Build a registry keyed by lower-cased name."""
        mapping = {name.lower(): capitalize(name) for name in names}
        return cls(database_type=DatabaseType(database_type), types=MappingProxyType(mapping))

    @classmethod
    def for_database(cls, database_type) -> "TypeRegistry":
        """Shared registry of a storage family.

        Raises:
            ValueError: If the database type is unknown
        """
        try:
            return _REGISTRIES[DatabaseType(database_type)]
        except ValueError:
            supported = ", ".join(t.value for t in DatabaseType)
            raise ValueError(f"Unknown database type {database_type!r}, expected one of: {supported}")

    def contains(self, name: str) -> bool:
        if not name:
            return False
        return capitalize(name).lower() in self.types

    def canonical_name(self, name: str) -> str:
        """Canonical capitalized name of a recognized type.

        Raises:
            WrongTypeException: If the registry does not know the name
        """
        if not self.contains(name):
            raise WrongTypeException(name)
        return self.types[name.lower()]

    def __len__(self) -> int:
        return len(self.types)


_REGISTRIES = {
    DatabaseType.SQL: TypeRegistry.from_names(DatabaseType.SQL, SQL_TYPES),
    DatabaseType.MONGODB: TypeRegistry.from_names(DatabaseType.MONGODB, MONGODB_TYPES),
    DatabaseType.CASSANDRA: TypeRegistry.from_names(DatabaseType.CASSANDRA, CASSANDRA_TYPES),
}
