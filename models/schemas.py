"""Data models and field schemas for user and company records."""
from enum import Enum
from typing import Any, Dict, Tuple, Type
from pydantic import BaseModel, ConfigDict


class FieldType(str, Enum):
    """Enum for the JSON field types a record schema can require."""
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"

    @classmethod
    def for_annotation(cls, annotation: Any) -> "FieldType":
        """Return the field type tag for a model field annotation."""
        tags = {int: cls.INTEGER, str: cls.STRING, bool: cls.BOOLEAN}
        try:
            return tags[annotation]
        except KeyError:
            raise TypeError(f"No field type for annotation {annotation!r}") from None

    def matches(self, value: Any) -> bool:
        """Check a decoded JSON value against this type.

        Integers and strings must match the exact type, so neither a boolean
        nor a numeric string counts as an integer. Booleans must be literally
        True or False; 0 and 1 are rejected.
        """
        if self is FieldType.INTEGER:
            return type(value) is int
        if self is FieldType.STRING:
            return type(value) is str
        if self is FieldType.BOOLEAN:
            return value is True or value is False
        raise ValueError(f"Unhandled field type: {self}")


class RecordModel(BaseModel):
    """Base for immutable, strictly typed records."""
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)


class Company(RecordModel):
    """Company that tops up the token balance of its users."""
    id: int
    name: str
    top_up: int
    email_status: bool


class User(RecordModel):
    """User holding a token balance with a company."""
    id: int
    first_name: str
    last_name: str
    email: str
    company_id: int
    email_status: bool
    active_status: bool
    tokens: int

    def sort_key(self) -> Tuple[str, str, str]:
        return (self.last_name, self.first_name, self.email)


class TopUpRecord(RecordModel):
    """A user after top up, with the balances before and after."""
    user: User
    previous_token_balance: int
    new_token_balance: int


class CompanyReport(RecordModel):
    """Top up results for one company."""
    company: Company
    users_emailed: Tuple[TopUpRecord, ...] = ()
    users_not_emailed: Tuple[TopUpRecord, ...] = ()
    total_top_ups: int


def schema_for(model: Type[BaseModel]) -> Dict[str, FieldType]:
    """Build a field name to field type schema from a record model."""
    return {
        name: FieldType.for_annotation(field.annotation)
        for name, field in model.model_fields.items()
    }


USER_SCHEMA = schema_for(User)
COMPANY_SCHEMA = schema_for(Company)
