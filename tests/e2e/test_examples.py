"""Tests that verify example layouts match .expect.json golden files."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from diagram_layout import layout_dict
from diagram_layout.__main__ import main

EXAMPLES_DIR = Path(__file__).parent.parent.parent / "examples"


def find_example_pairs() -> list[tuple[str, Path, Path]]:
    """Find all spec .json files that have a matching .expect.json file."""
    pairs = []
    for spec_file in sorted(EXAMPLES_DIR.glob("*.json")):
        if spec_file.name.endswith(".expect.json"):
            continue
        expect_file = EXAMPLES_DIR / f"{spec_file.stem}.expect.json"
        if expect_file.exists():
            pairs.append((spec_file.stem, spec_file, expect_file))
    return pairs


EXAMPLE_PAIRS = find_example_pairs()


def test_examples_found():
    assert EXAMPLE_PAIRS, f"no examples under {EXAMPLES_DIR}"


@pytest.mark.parametrize("name,spec_file,expect_file", EXAMPLE_PAIRS, ids=[p[0] for p in EXAMPLE_PAIRS])
def test_example_matches_expect(name: str, spec_file: Path, expect_file: Path) -> None:
    """Lay out a spec file and compare the document against its golden file."""
    actual = layout_dict(json.loads(spec_file.read_text()))
    expected = json.loads(expect_file.read_text())
    assert actual == expected, f"Layout for {name} differs from .expect.json"


@pytest.mark.parametrize("name,spec_file,expect_file", EXAMPLE_PAIRS, ids=[p[0] for p in EXAMPLE_PAIRS])
def test_cli_output_matches_expect(name: str, spec_file: Path, expect_file: Path) -> None:
    result = CliRunner().invoke(main, [str(spec_file)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == json.loads(expect_file.read_text())
