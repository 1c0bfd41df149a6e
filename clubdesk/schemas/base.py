"""Shared schema building blocks.

Field rules are attached as Annotated metadata rather than decorator
validators, so omit_fields / partial_model can rebuild a model's fields and
keep every constraint.

A Checks chain runs only after pydantic accepted the field's primitive type.
Every failing rule in the chain contributes its own message, in declaration
order; a type error suppresses the whole chain for that field.
"""

import math
import re
from collections.abc import Callable, Mapping
from typing import Annotated, Any, TypeVar, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StrictFloat,
    StrictInt,
    Tag,
    create_model,
)
from pydantic.fields import FieldInfo
from pydantic_core import PydanticCustomError

from clubdesk.validation import CHECKS_ERROR, ValidationResult, validate_data, validate_or_throw
from clubdesk.values.dates import is_parseable_date

INVALID_UNION_MESSAGE = "Invalid input"

Rule = tuple[Callable[[Any], bool], str]

ModelT = TypeVar("ModelT", bound="Record")


def field_error(*messages: str) -> PydanticCustomError:
    """Build the error raised by rule chains: one entry per message."""
    return PydanticCustomError(CHECKS_ERROR, "\n".join(messages), {"messages": messages})


class Checks:
    """Ordered rule chain used as an AfterValidator."""

    def __init__(self, *rules: Rule) -> None:
        self.rules = rules

    def __call__(self, value: Any) -> Any:
        failed = tuple(message for predicate, message in self.rules if not predicate(value))
        if failed:
            raise field_error(*failed)
        return value

    def __repr__(self) -> str:
        return f"Checks({', '.join(repr(message) for _, message in self.rules)})"


def min_length(size: int) -> Callable[[Any], bool]:
    return lambda value: len(value) >= size


def matches(pattern: str) -> Callable[[Any], bool]:
    compiled = re.compile(pattern)
    return lambda value: compiled.fullmatch(value) is not None


def positive(value: Any) -> bool:
    return value > 0


def non_negative(value: Any) -> bool:
    return value >= 0


def checked(annotation: Any, *rules: Rule) -> Any:
    """Annotate a type with a rule chain."""
    return Annotated[annotation, AfterValidator(Checks(*rules))]


def required_str(message: str) -> Any:
    """Non-empty string with the given "required" message."""
    return checked(str, (min_length(1), message))


DateString = checked(str, (is_parseable_date, "Invalid date format"))

# Booleans are not numbers here; numeric strings are not coerced either
Number = Union[StrictInt, StrictFloat]

NonNegativeNumber = checked(Number, (non_negative, "Number must be greater than or equal to 0"))


class Record(BaseModel):
    """Base for entity records: immutable once validated, unknown keys dropped."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def check(cls: type[ModelT], data: Any) -> ValidationResult[ModelT]:
        """Validate without raising. See clubdesk.validation.validate_data."""
        return validate_data(cls, data)

    @classmethod
    def parse(cls: type[ModelT], data: Any) -> ModelT:
        """Validate or raise SchemaValidationError."""
        return validate_or_throw(cls, data)


class DurationParts(Record):
    """Structured duration; absent parts count as zero."""

    hours: NonNegativeNumber | None = None
    minutes: NonNegativeNumber | None = None
    seconds: NonNegativeNumber | None = None


class CostParts(Record):
    """Structured cost as some backends report it."""

    amount: NonNegativeNumber | None = None
    value: NonNegativeNumber | None = None
    currency: str | None = None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _duration_tag(value: Any) -> str | None:
    if isinstance(value, str):
        return "text"
    if isinstance(value, (Mapping, DurationParts)):
        return "parts"
    return None


def _cost_tag(value: Any) -> str | None:
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, (Mapping, CostParts)):
        return "parts"
    return None


def _cost_from_text(value: str) -> float:
    text = value.strip()
    if not text:
        raise field_error("Cost is required")
    try:
        number = float(text)
    except ValueError:
        raise field_error("Cost must be a number") from None
    if not math.isfinite(number):
        raise field_error("Cost must be a number")
    if number < 0:
        raise field_error("Cost must be non-negative")
    return number


DurationValue = Annotated[
    Union[
        Annotated[required_str("Duration is required"), Tag("text")],
        Annotated[DurationParts, Tag("parts")],
    ],
    Discriminator(
        _duration_tag,
        custom_error_type="invalid_union",
        custom_error_message=INVALID_UNION_MESSAGE,
    ),
]

CostValue = Annotated[
    Union[
        Annotated[checked(Number, (non_negative, "Cost must be non-negative")), Tag("number")],
        Annotated[str, AfterValidator(_cost_from_text), Tag("text")],
        Annotated[CostParts, Tag("parts")],
    ],
    Discriminator(
        _cost_tag,
        custom_error_type="invalid_union",
        custom_error_message=INVALID_UNION_MESSAGE,
    ),
]

# Read-only summaries keep the backend's cost as sent, display strings included
RawCost = Union[int, float, str, CostParts]


def _annotation_of(info: FieldInfo) -> Any:
    if info.metadata:
        return Annotated[(info.annotation, *info.metadata)]
    return info.annotation


def _rebuild(
    model: type[Record],
    fields: dict[str, tuple[Any, FieldInfo]],
    name: str,
    doc: str | None,
) -> type[Record]:
    return create_model(
        name,
        __base__=Record,
        __module__=model.__module__,
        __doc__=doc,
        **fields,
    )


def omit_fields(model: type[Record], *names: str, name: str | None = None) -> type[Record]:
    """Copy of a model without the given fields.

    Args:
        model: Source record model
        names: Field names to drop
        name: Class name of the new model

    Raises:
        ValueError: If a name is not a field of the model
    """
    unknown = sorted(set(names) - set(model.model_fields))
    if unknown:
        raise ValueError(f"{model.__name__} has no fields {unknown}")

    fields: dict[str, tuple[Any, FieldInfo]] = {}
    for field_name, info in model.model_fields.items():
        if field_name in names:
            continue
        if info.is_required():
            field = Field(description=info.description)
        elif info.default_factory is not None:
            field = Field(default_factory=info.default_factory, description=info.description)
        else:
            field = Field(default=info.default, description=info.description)
        fields[field_name] = (_annotation_of(info), field)

    return _rebuild(model, fields, name or f"{model.__name__}Omit", model.__doc__)


def partial_model(model: type[Record], *, name: str | None = None) -> type[Record]:
    """Copy of a model where every field is optional.

    Absent fields default to None and are left out of
    model_dump(exclude_unset=True). Fields that are present are checked with
    the same rules as before; an explicit null is still a type error.
    """
    fields: dict[str, tuple[Any, FieldInfo]] = {
        field_name: (_annotation_of(info), Field(default=None, description=info.description))
        for field_name, info in model.model_fields.items()
    }
    return _rebuild(model, fields, name or f"{model.__name__}Partial", model.__doc__)
