import os

from dfget_cli.core.sign import generate_sign


class TestGenerateSign:
    def test_format(self):
        assert generate_sign(1234, 1500000000.1239) == "1234-1500000000.123"

    def test_fraction_is_zero_padded(self):
        assert generate_sign(7, 1500000000.0051) == "7-1500000000.005"
        assert generate_sign(7, 1500000000.0) == "7-1500000000.000"

    def test_truncates_instead_of_rounding(self):
        assert generate_sign(1, 1500000000.9999) == "1-1500000000.999"

    def test_defaults_to_current_process(self):
        assert generate_sign().startswith(f"{os.getpid()}-")

    def test_later_sign_sorts_after_earlier_one(self):
        pid = 4242
        t1 = 1600000000.250
        for delta in (0.002, 0.75, 1.0, 59.0, 86400.0):
            assert generate_sign(pid, t1) < generate_sign(pid, t1 + delta)
