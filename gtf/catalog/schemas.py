"""Helper definition schemas for catalog introspection.

Definitions describe the helpers; they never hold the callables themselves,
so they can be dumped to JSON or printed by the CLI.
"""

from enum import Enum

from pydantic import BaseModel, Field


class HelperCategory(str, Enum):
    """Helper groups, one per module under gtf.helpers."""

    STRING = "string"           # Casing, padding, truncation
    NUMBER = "number"           # Separators, ordinals, sizes
    COLLECTION = "collection"   # Defaults, lengths, slicing
    TIME = "time"               # Timestamp formatting
    QUERY = "query"             # Request URI rewriting
    SAFE = "safe"               # Pre-escaped output, markdown
    IDENTITY = "identity"       # ObjectID formatting


class HelperDefinition(BaseModel):
    """A catalog entry as seen from the outside."""

    name: str = Field(..., description="Template name, e.g. 'truncatechars'")
    function_name: str = Field(..., description="Python implementation name")
    category: HelperCategory
    description: str = Field(default="", description="First docstring line")
    parameters: list[str] = Field(
        default_factory=list,
        description="Argument names in call-form order (value last)",
    )
    fallback: str = Field(
        default="''", description="repr of the value returned on bad input"
    )


class HelperSummary(BaseModel):
    """Lightweight helper listing."""

    name: str
    category: HelperCategory
    description: str = ""
