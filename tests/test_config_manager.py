import pytest

from dfget_cli.core.context import new_context
from dfget_cli.exceptions import ConfigurationError
from dfget_cli.models.properties import (
    DEFAULT_LOCAL_LIMIT,
    DEFAULT_MIN_RATE,
    DfgetProperties,
)
from dfget_cli.storage.config_manager import ConfigManager, apply_properties


@pytest.fixture
def properties_file(tmp_path):
    path = tmp_path / "dragonfly.conf"

    def write(content: str):
        path.write_text(content, encoding="utf-8")
        return path

    return write


class TestConfigManager:
    def test_missing_file_yields_defaults(self, tmp_path):
        properties = ConfigManager(tmp_path / "absent.conf").load_properties()
        assert properties.nodes == []
        assert properties.local_limit == DEFAULT_LOCAL_LIMIT
        assert properties.min_rate == DEFAULT_MIN_RATE
        assert properties.total_limit == 0

    def test_reads_nodes_and_rates(self, properties_file):
        path = properties_file(
            "[node]\n"
            "address = 10.0.0.1, 10.0.0.2:8002,\n"
            "\n"
            "[dfget]\n"
            "locallimit = 10M\n"
            "minrate = 32K\n"
            "totallimit = 100M\n"
        )
        properties = ConfigManager(path).load_properties()
        assert properties.nodes == ["10.0.0.1", "10.0.0.2:8002"]
        assert properties.local_limit == 10 * 1024 * 1024
        assert properties.min_rate == 32 * 1024
        assert properties.total_limit == 100 * 1024 * 1024

    def test_partial_file_keeps_other_defaults(self, properties_file):
        path = properties_file("[node]\naddress = 10.0.0.1\n")
        properties = ConfigManager(path).load_properties()
        assert properties.nodes == ["10.0.0.1"]
        assert properties.local_limit == DEFAULT_LOCAL_LIMIT

    def test_malformed_file(self, properties_file):
        path = properties_file("address = 10.0.0.1\n")
        with pytest.raises(ConfigurationError, match="parsing"):
            ConfigManager(path).load_properties()

    def test_invalid_rate(self, properties_file):
        path = properties_file("[dfget]\nlocallimit = fast\n")
        with pytest.raises(ConfigurationError):
            ConfigManager(path).load_properties()

    def test_node_with_scheme_is_rejected(self, properties_file):
        path = properties_file("[node]\naddress = http://10.0.0.1/\n")
        with pytest.raises(ConfigurationError, match="validation"):
            ConfigManager(path).load_properties()


class TestApplyProperties:
    def test_properties_fill_context(self):
        ctx = new_context()
        properties = DfgetProperties(nodes=["10.0.0.1"], local_limit=1024)
        apply_properties(ctx, properties, {})
        assert ctx.node == ["10.0.0.1"]
        assert ctx.local_limit == 1024
        assert ctx.min_rate == DEFAULT_MIN_RATE

    def test_cli_options_win(self):
        ctx = new_context()
        properties = DfgetProperties(nodes=["10.0.0.1"], local_limit=1024)
        apply_properties(
            ctx,
            properties,
            {"local_limit": 2048, "node": ["10.0.0.9"], "pattern": None},
        )
        assert ctx.local_limit == 2048
        assert ctx.node == ["10.0.0.9"]
        assert ctx.pattern == ""

    def test_invalid_value_raises_configuration_error(self):
        ctx = new_context()
        with pytest.raises(ConfigurationError):
            apply_properties(ctx, DfgetProperties(), {"timeout": -3})
