"""
Shared base model for records exchanged with the dashboard
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model with snake_case attributes and camelCase JSON keys"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
