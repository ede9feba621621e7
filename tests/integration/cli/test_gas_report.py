import json

import pytest
from click.testing import CliRunner

from gasreport_cli import cli

TOKEN_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
CHEATCODE_ADDRESS = "0x7109709ECfa91a80626fF3989D68f67F5b1DD12D"


def _trace(idx, children, contract, data, gas_cost, address=TOKEN_ADDRESS):
    return {
        "idx": idx,
        "children": children,
        "trace": {"address": address, "contract": contract, "gas_cost": gas_cost, "data": data},
    }


def _decoded(function, signature):
    return {"type": "decoded", "function": function, "signature": signature}


TOKEN_ID = "src/Token.sol:Token"
TEST_ID = "test/Token.t.sol:TokenTest"
CREATE_DATA = {"type": "raw", "data": "0x" + "60" * 32, "created": True}
TRACE = {
    "arena": [
        _trace(0, [1, 2, 3, 4], TEST_ID, _decoded("testMint", "testMint()"), 1),
        _trace(1, [], TOKEN_ID, CREATE_DATA, 80000),
        _trace(2, [], "Vm", _decoded("prank", "prank(address)"), 0, address=CHEATCODE_ADDRESS),
        _trace(3, [], TOKEN_ID, _decoded("mint", "mint(uint256)"), 46000),
        _trace(4, [], TOKEN_ID, _decoded("mint", "mint(uint256)"), 24000),
    ]
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def trace_file(tmp_path):
    path = tmp_path / "trace.json"
    path.write_text(json.dumps(TRACE))
    return path


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "gas-report.yaml"


def _invoke(runner, *args):
    return runner.invoke(cli, [str(a) for a in args], catch_exceptions=False)


def test_table(runner, trace_file, config_path):
    result = _invoke(runner, trace_file, "--config", config_path)
    assert result.exit_code == 0, result.output
    assert f"{TOKEN_ID} contract" in result.output
    assert "TokenTest" not in result.output
    assert "Vm" not in result.output

    row = next(x for x in result.output.splitlines() if "mint" in x)
    cells = [c.strip() for c in row.strip("│ ").split("│")]
    assert cells == ["mint", "24000", "35000", "24000", "46000", "2"]


def test_json(runner, trace_file, config_path):
    result = _invoke(runner, trace_file, "--json", "--config", config_path)
    assert result.exit_code == 0, result.output

    report = json.loads(result.output)
    assert report["report_for"] == []
    token = report["contracts"][TOKEN_ID]
    assert token["gas"] == 80000
    assert token["size"] == 32
    assert token["functions"]["mint"]["mint(uint256)"]["calls"] == [24000, 46000]
    assert "Vm" not in report["contracts"]


def test_report_for(runner, trace_file, config_path):
    result = _invoke(
        runner, trace_file, "--json", "--config", config_path, "--report-for", "TokenTest"
    )
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["report_for"] == ["TokenTest"]
    assert list(report["contracts"]) == [TEST_ID]


def test_no_data(runner, trace_file, config_path):
    result = _invoke(runner, trace_file, "--config", config_path, "-r", "Other")
    assert result.exit_code == 0
    assert "No gas usage data found." in result.output


def test_config_file(runner, trace_file, config_path):
    config_path.write_text("report_for: [Other]\noutput: json\n")
    result = _invoke(runner, trace_file, "--config", config_path)
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["contracts"] == {}


def test_invalid_trace(runner, tmp_path, config_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"arena": []}))
    result = _invoke(runner, path, "--config", config_path)
    assert result.exit_code != 0
    assert "Invalid trace file" in result.output


def test_shared_child_trace(runner, tmp_path, config_path):
    shared = {
        "arena": [
            _trace(0, [1, 2], TOKEN_ID, _decoded("a", "a()"), 1),
            _trace(1, [2], TOKEN_ID, _decoded("b", "b()"), 2),
            _trace(2, [], TOKEN_ID, _decoded("c", "c()"), 3),
        ]
    }
    path = tmp_path / "shared.json"
    path.write_text(json.dumps(shared))
    result = _invoke(runner, path, "--config", config_path)
    assert result.exit_code == 1
    assert "Invalid trace file" in result.output
    assert "more than one parent" in result.output


def test_invalid_filter(runner, trace_file, config_path):
    result = _invoke(runner, trace_file, "--config", config_path, "-r", " ")
    assert result.exit_code != 0
    assert "Invalid contract filter" in result.output


def test_missing_trace_file(runner, tmp_path):
    result = _invoke(runner, tmp_path / "missing.json")
    assert result.exit_code != 0
