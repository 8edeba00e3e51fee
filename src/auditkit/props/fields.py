import re
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict

_UNSIGNED_DECIMAL = re.compile(r"[0-9]+")


class FieldType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"

    @property
    def python_type(self) -> type:
        return {FieldType.STRING: str, FieldType.INTEGER: int, FieldType.BOOLEAN: bool}[self]

    def accepts(self, value: Any) -> bool:
        """Whether `value` is a valid value of this type; bools are not integers here."""
        return type(value) is self.python_type


class FieldOutcome(str, Enum):
    """How a single named field was resolved from a raw properties map."""

    CONFIGURED = "configured"
    DEFAULTED = "defaulted"
    MALFORMED = "malformed"


class FieldSpec(BaseModel):
    """
    Static declaration of one named configuration field.

    A processor declares its schema as a tuple of FieldSpecs at import time.
    Each spec knows the lookup key in the raw properties map, the type the raw
    string is coerced to, and the default used whenever the key is missing,
    null, empty or not coercible.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    key: str
    field_type: FieldType = FieldType.STRING
    default: Any

    def resolve(self, raw_value: Optional[Any]) -> Tuple[Any, FieldOutcome]:
        """
        Resolves a raw value to a typed value, never raising.

        Args:
            raw_value: The value found under `key`, or None if the key is absent.

        Returns:
            A tuple of the resolved value and how it was obtained.
        """
        if raw_value is None or raw_value == "":
            return self.default, FieldOutcome.DEFAULTED

        raw_value = str(raw_value)

        if self.field_type is FieldType.INTEGER:
            if not _UNSIGNED_DECIMAL.fullmatch(raw_value):
                return self.default, FieldOutcome.MALFORMED
            return int(raw_value, 10), FieldOutcome.CONFIGURED

        if self.field_type is FieldType.BOOLEAN:
            return raw_value.lower() == "true", FieldOutcome.CONFIGURED

        return raw_value, FieldOutcome.CONFIGURED
