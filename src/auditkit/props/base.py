from typing import ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from auditkit.props.fields import FieldSpec


class BaseProperties(BaseModel):
    """
    Base class for the typed configuration of a single processor.

    Subclasses declare one model field per FieldSpec in `field_specs`, with the
    spec's default as the field default. Instances are plain mutable value
    holders: attribute assignment is not validated, validation happens only
    when the builder resolves raw input.

    Unrecognized keys from the raw map end up in `additional_properties`,
    which is always a dict owned by this instance.
    """

    model_config = ConfigDict(validate_assignment=False, extra="forbid")

    field_specs: ClassVar[Tuple[FieldSpec, ...]] = ()

    additional_properties: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        super().__pydantic_init_subclass__(**kwargs)
        # Every declared spec must map onto a model field of its type, with the same valid default.
        for spec in cls.field_specs:
            if not spec.field_type.accepts(spec.default):
                raise TypeError(
                    f"FieldSpec '{spec.name}' of {cls.__name__} has default {spec.default!r}, "
                    f"which is not a valid {spec.field_type.value}."
                )
            model_field = cls.model_fields.get(spec.name)
            if model_field is None:
                raise TypeError(f"{cls.__name__} declares '{spec.name}' in field_specs but has no such field.")
            if model_field.annotation is not spec.field_type.python_type:
                raise TypeError(
                    f"{cls.__name__}.{spec.name} is annotated {model_field.annotation!r}, "
                    f"but its FieldSpec is a {spec.field_type.value}."
                )
            if model_field.default != spec.default:
                raise TypeError(
                    f"{cls.__name__}.{spec.name} defaults to {model_field.default!r}, "
                    f"but its FieldSpec defaults to {spec.default!r}."
                )

    @classmethod
    def copy_of(cls, other: "BaseProperties") -> "BaseProperties":
        """
        Copy constructor.

        Returns a new instance whose named fields equal `other`'s and whose
        `additional_properties` is a new dict with the same entries.
        """
        if not isinstance(other, cls):
            raise TypeError(f"Cannot copy {type(other).__name__} as {cls.__name__}")

        return other.model_copy(update={"additional_properties": dict(other.additional_properties)})
