# FILE: tests/test_cli.py
import json
import pytest
from gift_exchange.cli import main
from gift_exchange.config import DEFAULT_EXCHANGE_YAML, DEFAULT_SAMPLE_PARTICIPANTS_CSV

@pytest.fixture
def exchange_file(tmp_path):
    p = tmp_path / "exchange.yaml"
    p.write_text(DEFAULT_EXCHANGE_YAML, encoding="utf-8")
    return p

def test_draw_json(exchange_file, capsys):
    main(["draw", str(exchange_file), "--seed", "3", "--json"])
    draw = json.loads(capsys.readouterr().out)
    assert len(draw) == 7
    assert draw["tyler"] in ("sophie", "emma")

def test_draw_csv_to_file(tmp_path, capsys):
    src = tmp_path / "people.csv"
    src.write_text(DEFAULT_SAMPLE_PARTICIPANTS_CSV, encoding="utf-8")
    out = tmp_path / "draw.csv"
    main(["draw", str(src), "--seed", "1", "--out", str(out)])
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Giver,Receiver"
    assert len(lines) == 8
    assert len([l for l in capsys.readouterr().out.splitlines() if " -> " in l]) == 7

def test_draw_failure_exits(tmp_path):
    src = tmp_path / "couple.csv"
    src.write_text("Name,Partner\na,b\nb,a\n", encoding="utf-8")
    with pytest.raises(SystemExit) as e:
        main(["draw", str(src), "--max-restarts", "3"])
    assert "Max total restarts reached" in str(e.value.code)

def test_check(exchange_file, capsys):
    main(["check", str(exchange_file)])
    assert "[ok] 7 participant(s), 2 couple(s), 2 rule(s)" in capsys.readouterr().out

def test_check_reports_problems(tmp_path, capsys):
    src = tmp_path / "bad.csv"
    src.write_text("Name,Partner\na,ghost\nb,\n", encoding="utf-8")
    with pytest.raises(SystemExit) as e:
        main(["check", str(src)])
    assert e.value.code == 1
    assert "ghost" in capsys.readouterr().err

def test_unsupported_file(tmp_path):
    src = tmp_path / "people.txt"
    src.write_text("a\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["draw", str(src)])

def test_init(tmp_path, capsys):
    main(["init", "--assets_dir", str(tmp_path / "assets")])
    assert (tmp_path / "assets" / "exchange.yaml").exists()
    assert (tmp_path / "assets" / "sample_participants.csv").exists()

def test_draw_malformed_yaml_exits(tmp_path):
    src = tmp_path / "bad.yaml"
    src.write_text("participants: [a, b\n", encoding="utf-8")
    with pytest.raises(SystemExit) as e:
        main(["draw", str(src)])
    assert str(e.value.code).startswith("[error] bad.yaml")

@pytest.mark.parametrize("flag", ["--max-attempts", "--max-restarts"])
def test_draw_rejects_zero_limits(tmp_path, flag):
    src = tmp_path / "people.csv"
    src.write_text(DEFAULT_SAMPLE_PARTICIPANTS_CSV, encoding="utf-8")
    with pytest.raises(SystemExit) as e:
        main(["draw", str(src), flag, "0"])
    assert str(e.value.code).startswith("[error]")

def test_check_reports_unknown_rule_names(tmp_path, capsys):
    src = tmp_path / "typo.yaml"
    src.write_text(DEFAULT_EXCHANGE_YAML.replace("[sophie, emma]", "[sophy, emma]"), encoding="utf-8")
    with pytest.raises(SystemExit) as e:
        main(["check", str(src)])
    assert e.value.code == 1
    assert "names unknown participant(s): sophy" in capsys.readouterr().err
