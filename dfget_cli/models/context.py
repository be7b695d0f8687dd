"""
Pydantic model for the per-run context.
Holds the user-supplied settings and the identity derived at startup.
"""

import json
import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Keys rendered by the diagnostic string form, in output order.
# ``url`` and ``output`` are always present, the rest only when set.
DIAGNOSTIC_FIELDS = {
    "url": "url",
    "output": "output",
    "local_limit": "localLimit",
    "min_rate": "minRate",
    "total_limit": "totalLimit",
    "timeout": "timeout",
    "md5": "md5",
    "identifier": "identifier",
    "call_system": "callSystem",
    "pattern": "pattern",
    "header": "header",
    "node": "node",
    "not_back_source": "notbs",
    "version": "version",
    "show_bar": "showBar",
    "console": "console",
    "verbose": "verbose",
}
ALWAYS_RENDERED = {"url", "output"}


class RunContext(BaseModel):
    """The assembled set of parameters for one client invocation."""

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    # Task settings
    url: str = ""
    output: str = ""
    local_limit: int = Field(0, ge=0)
    min_rate: int = Field(0, ge=0)
    total_limit: int = Field(0, ge=0)
    timeout: int = Field(0, ge=0)
    md5: str = ""
    identifier: str = ""
    call_system: str = ""
    pattern: str = ""
    header: list[str] = Field(default_factory=list)
    node: list[str] = Field(default_factory=list)
    not_back_source: bool = False

    # Mode flags
    version: bool = False
    show_bar: bool = False
    console: bool = False
    verbose: bool = False

    # Runtime identity, fixed at construction
    start_time: datetime = Field(default_factory=datetime.now, frozen=True)
    sign: str = Field("", frozen=True)
    user: str = ""
    work_home: str = ""
    meta_path: str = ""
    system_data_dir: str = ""
    data_dir: str = ""

    # Collaborators, attached by the caller
    client_logger: logging.Logger | None = Field(None, exclude=True, repr=False)
    server_logger: logging.Logger | None = Field(None, exclude=True, repr=False)

    def to_diagnostic_dict(self) -> dict[str, Any]:
        """Returns the ordered key/value pairs used for log output."""
        data = {}
        for field_name, key in DIAGNOSTIC_FIELDS.items():
            value = getattr(self, field_name)
            if field_name in ALWAYS_RENDERED or value:
                data[key] = value
        return data

    def __str__(self) -> str:
        return json.dumps(
            self.to_diagnostic_dict(), separators=(",", ":"), ensure_ascii=False
        )
