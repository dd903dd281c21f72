"""Tests for the console demo."""

from __future__ import annotations

from ocp_catalog.demo import main, run_demo
from ocp_catalog.domain import Color, Product, Size

EXPECTED_LINES = [
    "Result of Bad Code: Not open-closed compliant:",
    "Red item: apple",
    "Red item: ferrari",
    "Small item: apple",
    "Small item: iris",
    "Small and Red item: apple",
    "Result of Better Code: open-closed compliant",
    "Better Red Items: apple",
    "Better Red Items: ferrari",
    "Better Small Items: apple",
    "Better Small Items: iris",
    "Better Small and Red Items: apple",
]


def test_run_demo_on_sample_catalog(catalog) -> None:
    assert run_demo(catalog) == EXPECTED_LINES


def test_naive_and_better_sections_agree(catalog) -> None:
    lines = run_demo(catalog)
    split = lines.index("Result of Better Code: open-closed compliant")
    naive = [line.split(": ", 1)[1] for line in lines[1:split]]
    better = [line.split(": ", 1)[1] for line in lines[split + 1 :]]
    assert naive == better


def test_run_demo_on_custom_catalog() -> None:
    products = [Product(name="whale", color=Color.BLUE, size=Size.HUGE)]
    assert run_demo(products) == [
        "Result of Bad Code: Not open-closed compliant:",
        "Result of Better Code: open-closed compliant",
    ]


def test_main_echoes_lines() -> None:
    out: list[str] = []
    assert main(echo=out.append) == 0
    assert out[0] == "\n\nResult of Bad Code: Not open-closed compliant:\n"
    assert out[1] == "Red item: apple"
    assert out[-1] == "Better Small and Red Items: apple"
    assert len(out) == len(EXPECTED_LINES)


def test_main_prints_to_stdout(capsys) -> None:
    main()
    captured = capsys.readouterr()
    assert "Better Small and Red Items: apple\n" in captured.out
    assert captured.out.startswith("\n\nResult of Bad Code")
