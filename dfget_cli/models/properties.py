"""
Pydantic model for the host-wide properties file.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LOCAL_LIMIT = 20 * 1024 * 1024
DEFAULT_MIN_RATE = 64 * 1024


class DfgetProperties(BaseModel):
    """Validated defaults read from the properties file."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    nodes: list[str] = Field(default_factory=list)
    local_limit: int = Field(DEFAULT_LOCAL_LIMIT, ge=0)
    min_rate: int = Field(DEFAULT_MIN_RATE, ge=0)
    total_limit: int = Field(0, ge=0)

    @field_validator("nodes")
    @classmethod
    def validate_nodes(cls, v: list[str]) -> list[str]:
        """Drops blanks and rejects entries that carry a scheme or a path."""
        nodes = [n.strip() for n in v if n.strip()]
        for node in nodes:
            if "/" in node:
                raise ValueError(
                    f"Node address must be 'host' or 'host:port', got: {node}"
                )
        return nodes
