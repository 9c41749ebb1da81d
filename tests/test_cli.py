import json

import pytest

from clrsKit.core.errors import ConfigError
from clrsKit.main import DEFAULT_CONFIG, load_app_config, main


def run_cmd(argv, capsys):
    code = main(argv)
    return code, capsys.readouterr().out


def test_list(capsys):
    code, out = run_cmd(["list", "--family", "subarray"], capsys)
    assert code == 0
    assert "kadane" in out
    assert "divide_conquer" in out
    assert "merge" not in out


def test_sort_explicit_values(capsys):
    code, out = run_cmd(["sort", "merge", "5", "3", "-1", "8"], capsys)
    assert code == 0
    assert "Sorted: [-1, 3, 5, 8]" in out
    assert "stable: yes, in place: no" in out


def test_sort_json_output(capsys):
    code, out = run_cmd(["sort", "quick_hoare", "2", "1.5", "-4", "--json"], capsys)
    assert code == 0
    assert json.loads(out) == {"algorithm": "quick_hoare", "input": [2, 1.5, -4], "sorted": [-4, 1.5, 2]}


def test_sort_random_values_are_seeded(capsys):
    _, first = run_cmd(["sort", "radix", "--random", "12", "--seed", "5", "--json"], capsys)
    _, second = run_cmd(["sort", "radix", "--random", "12", "--seed", "5", "--json"], capsys)
    data = json.loads(first)
    assert data == json.loads(second)
    assert len(data["input"]) == 12
    assert data["sorted"] == sorted(data["input"])
    assert all(-100 <= v <= 100 for v in data["input"])


@pytest.mark.parametrize(
    "argv",
    [
        ["sort", "bogo", "1", "2"],
        ["sort", "count", "1", "2.5", "3"],
        ["sort", "merge", "1", "--random", "3"],
        ["sort", "merge", "--random", "-1"],
    ],
)
def test_sort_errors_exit_2(argv, capsys):
    code, out = run_cmd(argv, capsys)
    assert code == 2
    assert out.strip()


def test_non_numeric_value_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["sort", "merge", "abc"])
    assert exc_info.value.code == 2


def test_subarray_both_methods(capsys):
    code, out = run_cmd(["subarray", "1", "2", "3", "-2", "5", "--json"], capsys)
    assert code == 0
    data = json.loads(out)
    assert data["results"]["kadane"] == {"subarray": [1, 2, 3, -2, 5], "sum": 9}
    assert data["results"]["divide_conquer"]["sum"] == 9


def test_subarray_table(capsys):
    code, out = run_cmd(["subarray", "-3", "-1", "--method", "kadane"], capsys)
    assert code == 0
    assert "Maximum subarray" in out
    assert "divide_conquer" not in out


def test_bench_and_export(tmp_path, capsys):
    export = tmp_path / "report.json"
    code, out = run_cmd(
        ["bench", "--algorithms", "insertion", "merge", "--sizes", "20", "40",
         "--repeats", "1", "--export", str(export)],
        capsys,
    )
    assert code == 0
    assert "Report exported" in out
    report = json.loads(export.read_text())
    assert report["params"]["algorithms"] == ["insertion", "merge"]
    assert len(report["growth"]) == 2


def test_bench_needs_two_sizes(capsys):
    code, out = run_cmd(["bench", "--sizes", "20"], capsys)
    assert code == 2
    assert "distinct" in out


def test_init_config_writes_defaults(tmp_path, capsys):
    code, _ = run_cmd(["init-config"], capsys)
    assert code == 0
    written = json.loads((tmp_path / "clrsKit_config.json").read_text())
    assert written == DEFAULT_CONFIG

    code, out = run_cmd(["init-config"], capsys)
    assert code == 0
    assert "already exists" in out


def test_config_layers(tmp_path, monkeypatch):
    (tmp_path / "clrsKit_config.json").write_text(json.dumps({"bench_repeats": 5, "dashboard_port": 9000}))
    # registered first so teardown removes what .env loading adds
    monkeypatch.setenv("CLRSKIT_BENCH_SEED", "")
    monkeypatch.delenv("CLRSKIT_BENCH_SEED")
    (tmp_path / ".env").write_text("CLRSKIT_BENCH_SEED=11\n")
    monkeypatch.setenv("FLASK_PORT", "9100")

    config = load_app_config()
    assert config["bench_repeats"] == 5
    assert config["dashboard_port"] == 9100
    assert config["bench_seed"] == 11
    assert config["bench_sizes"] == DEFAULT_CONFIG["bench_sizes"]


def test_config_rejects_bad_values(tmp_path, monkeypatch):
    (tmp_path / "clrsKit_config.json").write_text(json.dumps({"random_range": [5]}))
    with pytest.raises(ConfigError):
        load_app_config()

    (tmp_path / "clrsKit_config.json").write_text("{broken")
    with pytest.raises(ConfigError):
        load_app_config()


def test_bad_config_exits_2(tmp_path, capsys):
    (tmp_path / "clrsKit_config.json").write_text("[]")
    code, out = run_cmd(["list"], capsys)
    assert code == 2
    assert "ConfigError" in out
