"""
Base Pydantic schemas.

This module contains base schemas with common configurations that other
schemas can inherit from.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All other schemas should inherit from this class.
    """

    model_config = ConfigDict(from_attributes=True)


class CamelSchema(BaseSchema):
    """
    Schema exposed to clients with camelCase field names.

    Fields are declared in snake_case and accepted under either name.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
