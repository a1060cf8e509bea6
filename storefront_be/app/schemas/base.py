from typing import ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes on the Python side, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateModel(CamelModel):
    """Base for POST bodies: an explicit null on a defaulted field (order, isActive) takes the default."""

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data):
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, field in cls.model_fields.items():
            if not field.is_required() and field.default is not None:
                defaulted.update({name, field.alias or name})
        return {k: v for k, v in data.items() if not (v is None and k in defaulted)}


class PartialUpdate(CamelModel):
    """Base for PATCH bodies: every field optional, absent fields untouched.

    Fields listed in ``required_fields`` may be omitted but not sent as null, so a
    PATCH can never blank out a column the create schema insists on.
    """

    required_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_required(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
