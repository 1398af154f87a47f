import json
import logging

import pytest

import curved_tiling.__main__ as cli
from curved_tiling.logging_utils import debug_log_call
from curved_tiling.triangle import build_hyperbolic_triangle


def test_main_writes_hyperbolic_summary(tmp_path):
    output = tmp_path / "out" / "tiling.json"
    output.parent.mkdir()

    cli.main(["hyperbolic", "2", "3", "7", "--depth", "1", "--output", str(output)])

    summary = json.loads(output.read_text(encoding="utf-8"))
    assert summary["geometry"] == "hyperbolic"
    assert summary["params"] == {"p": 2.0, "q": 3.0, "r": 7.0}
    assert [mirror["kind"] for mirror in summary["mirrors"]] == ["diameter", "diameter", "circle"]
    assert summary["stats"] == {"depth": 1, "total": 4, "duplicates": 0}
    assert [face["word"] for face in summary["faces"]] == ["", "1", "2", "3"]
    assert summary["warnings"] == []


def test_main_snaps_to_a_hyperbolic_triple(capsys):
    cli.main(["hyperbolic", "3", "3", "3", "--snap", "--depth", "0"])

    summary = json.loads(capsys.readouterr().out)
    assert summary["params"] == {"p": 3, "q": 3, "r": 4}
    assert summary["warnings"] == []


def test_main_euclidean_with_face_cap(capsys):
    cli.main(["euclidean", "3", "3", "3", "--depth", "4", "--max-faces", "6"])

    summary = json.loads(capsys.readouterr().out)
    assert summary["stats"]["total"] == 6
    assert all(set(mirror) == {"anchor", "normal"} for mirror in summary["mirrors"])


def test_main_exits_on_invalid_triangle():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["euclidean", "2", "3", "7"])
    assert excinfo.value.code == 2


def test_debug_logging_wraps_public_builders(caplog):
    assert getattr(build_hyperbolic_triangle, "_debug_logging_wrapped", False)
    with caplog.at_level(logging.DEBUG, logger="curved_tiling.triangle.hyperbolic"):
        build_hyperbolic_triangle(2, 3, 7)
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering build_hyperbolic_triangle") for message in messages)
    assert any(message.startswith("Exiting build_hyperbolic_triangle") for message in messages)


def test_debug_log_call_records_exceptions(caplog):
    logger = logging.getLogger("curved_tiling.tests")

    @debug_log_call(logger)
    def explode(value):
        raise ValueError(value)

    with caplog.at_level(logging.DEBUG, logger="curved_tiling.tests"):
        with pytest.raises(ValueError):
            explode(1.5)
    assert any("Exception in" in record.getMessage() for record in caplog.records)
