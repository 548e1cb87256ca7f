# tests/test_demo.py
import json

import pytest

from swatch_palette.demo import main
from swatch_palette.general.utils.load_config import clear_config_cache

PALETTE = [
    {"id": "red", "hex": "#ff0000", "title": "Red"},
    {"id": "green", "hex": "#00ff00", "title": "Green"},
    {"id": "white", "hex": "#ffffff", "title": "White"},
]


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "tiny.json").write_text(json.dumps({"swatches": PALETTE}), encoding="utf-8")
    clear_config_cache()
    return tmp_path


def _run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr()


def test_demo_by_id(data_dir, capsys):
    code, out = _run(capsys, "tiny", "--data-dir", str(data_dir), "--id", "green")
    assert code == 0
    result = json.loads(out.out)
    assert result["id"] == "green"
    assert result["rgba"] == [0, 255, 0, 1.0]
    assert result["luminance"] == pytest.approx(0.7152)


def test_demo_random_many_with_exclude(data_dir, capsys):
    code, out = _run(
        capsys, "tiny", "--data-dir", str(data_dir), "-n", "2", "--exclude", "red", "--seed", "3"
    )
    assert code == 0
    assert sorted(s["id"] for s in json.loads(out.out)) == ["green", "white"]


def test_demo_failed_query_prints_sentinel(data_dir, capsys):
    code, out = _run(
        capsys, "tiny", "--data-dir", str(data_dir), "--luminance", "2", "3", "--quiet"
    )
    assert code == 0
    assert json.loads(out.out)["id"] == "invalid"


def test_demo_missing_palette_exits_nonzero(data_dir, capsys):
    code, out = _run(capsys, "nope", "--data-dir", str(data_dir))
    assert code == 1
    assert "Error" in out.err


def test_demo_bad_hex_exits_nonzero(tmp_path, capsys):
    (tmp_path / "bad.json").write_text(json.dumps([{"id": "x", "hex": "#zzzzzz"}]), encoding="utf-8")
    clear_config_cache()
    code, out = _run(capsys, "bad", "--data-dir", str(tmp_path))
    assert code == 1
    assert "Error" in out.err and out.out == ""


@pytest.mark.parametrize(
    "option,expect",
    [
        (["--hue", "120", "10"], ["green"]),
        (["--saturation", "0", "0.1"], ["white"]),
        (["--lightness", "0.4", "0.6", "-n", "2"], ["green", "red"]),
        (["--hsl", "120", "10", "0.9", "1", "0.4", "0.6"], ["green"]),
    ],
)
def test_demo_filter_options(data_dir, capsys, option, expect):
    code, out = _run(capsys, "tiny", "--data-dir", str(data_dir), *option)
    assert code == 0
    result = json.loads(out.out)
    ids = [result["id"]] if isinstance(result, dict) else [s["id"] for s in result]
    assert sorted(ids) == expect
