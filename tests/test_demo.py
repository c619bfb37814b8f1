"""
test_demo.py
~~~~~~~~~~~~

Tests for the command-line XOR demo.
"""

import re

import pytest

from xornet import demo
from xornet.config import Settings


@pytest.mark.unit
class TestFormatting:

    def test_format_prediction(self):
        assert demo.format_prediction([0.0, 1.0], 0.98765) == (
            "Input: [0.0, 1.0] => Output: 0.9877"
        )


@pytest.mark.integration
class TestDemo:
    """Test the end-to-end demo run."""

    def test_main_prints_reference_outputs(self, capsys, reference_xor_outputs):
        """Test the printed lines of the default seed-42 2-2-1 run."""
        exit_code = demo.main(Settings(epochs=10000, learning_rate=0.5))
        lines = capsys.readouterr().out.strip().splitlines()

        assert exit_code == 0
        assert lines == ["Testing the trained network:"] + [
            f"Input: {x} => Output: {output}"
            for x, output in zip(demo.XOR_INPUTS, reference_xor_outputs)
        ]

    def test_main_line_format(self, capsys):
        demo.main(Settings(epochs=1, learning_rate=0.5))
        lines = capsys.readouterr().out.strip().splitlines()

        pattern = re.compile(r"^Input: \[(.+)\] => Output: (\d\.\d{4})$")
        assert len(lines) == 5
        for line, x in zip(lines[1:], demo.XOR_INPUTS):
            match = pattern.match(line)
            assert match is not None
            assert match.group(1) == f"{x[0]}, {x[1]}"
            assert 0.0 < float(match.group(2)) < 1.0

    def test_run_uses_settings(self):
        net = demo.run(Settings(epochs=0, learning_rate=0.25))
        assert net.learning_rate == 0.25
        assert net.hidden_size == 2
        assert net.input_size == 2

    def test_main_reads_environment(self, monkeypatch, capsys):
        monkeypatch.setenv('XORNET_EPOCHS', '1')
        monkeypatch.setenv('LOG_LEVEL', 'WARNING')
        assert demo.main() == 0
        assert "Testing the trained network:" in capsys.readouterr().out
