"""
Manages loading of the INI properties file and applying it to a run context.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from dfget_cli.exceptions import ConfigurationError
from dfget_cli.models.context import RunContext
from dfget_cli.models.properties import DfgetProperties
from dfget_cli.utils.formatting import parse_rate

log = logging.getLogger(__name__)

DEFAULT_PROPERTIES_FILE = Path("/etc/dragonfly.conf")

NODE_SECTION = "node"
DFGET_SECTION = "dfget"


class ConfigManager:
    """Handles all operations related to the host-wide properties file."""

    def __init__(self, properties_file_path: Path = DEFAULT_PROPERTIES_FILE):
        self.properties_file_path = properties_file_path
        self._parser = configparser.ConfigParser()

    def load_properties(self) -> DfgetProperties:
        """
        Loads the properties file and validates it.

        A missing file is not an error; the defaults are returned instead.

        Returns:
            A validated DfgetProperties object.

        Raises:
            ConfigurationError: If the file cannot be parsed or a value is invalid.
        """
        if not self.properties_file_path.is_file():
            log.debug(
                f"Properties file '{self.properties_file_path}' not found, "
                "using defaults."
            )
            return DfgetProperties()

        try:
            self._parser.read(self.properties_file_path, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigurationError(f"Error parsing properties file: {e}") from e

        try:
            return DfgetProperties(**self._get_properties_as_dict())
        except ValidationError as e:
            raise ConfigurationError(f"Properties validation failed:\n{e}") from e

    def _get_properties_as_dict(self) -> dict[str, Any]:
        """Reads the known keys of the 'node' and 'dfget' sections."""
        properties: dict[str, Any] = {}

        if self._parser.has_section(NODE_SECTION):
            address = self._parser.get(NODE_SECTION, "address", fallback="")
            properties["nodes"] = address.split(",")

        if self._parser.has_section(DFGET_SECTION):
            section = self._parser[DFGET_SECTION]
            for ini_key, field in (
                ("locallimit", "local_limit"),
                ("minrate", "min_rate"),
                ("totallimit", "total_limit"),
            ):
                if ini_key in section:
                    properties[field] = parse_rate(section[ini_key])

        return properties


def apply_properties(
    ctx: RunContext, properties: DfgetProperties, cli_options: dict[str, Any]
) -> RunContext:
    """
    Fills the context from properties, letting command-line options win.

    Args:
        ctx: The context to populate.
        properties: Defaults loaded from the properties file.
        cli_options: Options given on the command line; None values are ignored.

    Raises:
        ConfigurationError: If a value is rejected by the context model.
    """
    settings: dict[str, Any] = {
        "node": properties.nodes,
        "local_limit": properties.local_limit,
        "min_rate": properties.min_rate,
        "total_limit": properties.total_limit,
    }
    settings.update({k: v for k, v in cli_options.items() if v is not None})

    try:
        for key, value in settings.items():
            setattr(ctx, key, value)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed:\n{e}") from e
    return ctx
