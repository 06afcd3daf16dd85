"""
Shared configuration for domain models

Domain models use snake_case attributes in Python and camelCase keys on
the wire, and can be built straight from ORM rows.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for records returned by repositories and procedures"""

    model_config = ConfigDict(
        from_attributes=True,  # Allow creation from ORM objects
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ReferenceModel(DomainModel):
    """Immutable record served by the reference data repository"""

    model_config = ConfigDict(frozen=True)
