import pytest

from dfget_cli.exceptions import ConfigurationError
from dfget_cli.utils.formatting import format_rate, format_size, parse_rate


class TestParseRate:
    @pytest.mark.parametrize(
        "rate, expected",
        [
            ("0", 0),
            ("1048576", 1048576),
            ("20M", 20971520),
            ("20m", 20971520),
            ("512K", 524288),
            ("512kb", 524288),
            ("1G", 1073741824),
            (" 10 M ", 10485760),
            (4096, 4096),
        ],
    )
    def test_valid_rates(self, rate, expected):
        assert parse_rate(rate) == expected

    @pytest.mark.parametrize("rate", ["", "M", "20X", "-1", "1.5M", -5])
    def test_invalid_rates(self, rate):
        with pytest.raises(ConfigurationError):
            parse_rate(rate)


class TestFormatRate:
    def test_zero_means_unlimited(self):
        assert format_rate(0) == "unlimited"

    def test_formats_bytes_per_second(self):
        assert format_rate(20971520) == "20.0 MB/s"

    def test_format_size(self):
        assert format_size(0) == "0 B"
        assert format_size(1536) == "1.5 KB"
