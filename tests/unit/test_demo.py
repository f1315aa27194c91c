"""
Тесты для demo CLI

Проверяет:
1. Код возврата 0 и ключевые строки вывода
2. Выбор секции (--section)
3. Ошибку argparse для неизвестной секции
"""

import pytest

from fractionlib.demo import build_parser, main


class TestDemo:
    """Тесты fractionlib-demo"""

    def test_full_demo(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.startswith("=== fractionlib Demo ===")
        assert "1/2 + 1/3 = 5/6" in out
        assert "2/3 - 1/2 = 1/6" in out
        assert "1/2 * 2/3 = 1/3" in out
        assert "2/3 / 1/2 = 4/3" in out
        assert "6/8 simplifies to 3/4" in out
        assert "1/2 == 2/4? True" in out
        assert "2/3 as decimal: 0.6667" in out
        assert "2 1/2 + 1 1/4 = 3 3/4" in out
        assert "2 1/2 / 1 1/4 = 2" in out
        assert "5/2 as mixed number: 2 1/2" in out
        assert "Parsed '7/4': 1 3/4" in out
        assert "2 1/2 * 1 1/2 = 3 3/4 cups flour needed" in out
        assert out.rstrip().endswith("=== Demo Complete ===")

    def test_sorted_measurements(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--section", "mixed"])

        out = capsys.readouterr().out
        sorted_block = out.split("Sorted measurements:")[1]
        lines = [line.strip() for line in sorted_block.splitlines() if line.startswith("  ")]
        assert lines == ["1 1/4", "1 3/4", "2", "2 1/2"]

    def test_fraction_section_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-s", "fraction"]) == 0

        out = capsys.readouterr().out
        assert "--- Fraction Examples ---" in out
        assert "--- Mixed Number Examples ---" not in out

    def test_unknown_section_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--section", "decimal"])
        assert exc_info.value.code == 2
