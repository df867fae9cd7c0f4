# schemas/base.py
"""
Shared Pydantic configuration.

Attributes are snake_case in Python and camelCase on the wire; both spellings
are accepted on input, responses are emitted in camelCase.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
     """Base with camelCase aliases."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
     )


class CamelUpdate(CamelModel):
     """Partial update request: every field optional."""

     def changes(self) -> dict:
          """Fields the client actually sent, keyed by attribute name."""
          return self.model_dump(exclude_unset=True)


class CamelResponse(CamelModel):
     """Response schema base, readable straight from ORM objects."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )
