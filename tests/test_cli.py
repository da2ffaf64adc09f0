import json

from click.testing import CliRunner

from game_sync.cli import cli
from game_sync.config import settings
from game_sync.utils.logging import BOLD


def test_normalize_command():
    result = CliRunner().invoke(cli, ["normalize", "Mario Kart™ 8 Deluxe", "Super Mario Bros."])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["mario kart 8 deluxe", "super mario bros"]


def test_compare_lists_every_partition(collection_yaml, collection_json):
    result = CliRunner().invoke(cli, ["compare", str(collection_yaml), str(collection_json)])

    assert result.exit_code == 0, result.output
    assert "In both libraries" in result.output
    assert "Only in Alice" in result.output
    assert "Only in bob" in result.output
    assert "Metroid Prime" in result.output
    assert "Pikmin 4" in result.output
    assert "Total Games" in result.output


def test_compare_single_tab_with_search(collection_yaml, collection_json):
    result = CliRunner().invoke(
        cli, ["compare", str(collection_yaml), str(collection_json), "--tab", "unique-left", "--search", "prime"],
    )

    assert result.exit_code == 0, result.output
    assert "Metroid Prime" in result.output
    assert "In both libraries" not in result.output
    assert "Total Games" not in result.output


def test_compare_writes_output(tmp_path, collection_yaml, collection_json):
    out = tmp_path / "out.json"

    result = CliRunner().invoke(cli, ["compare", str(collection_yaml), str(collection_json), "--tab", "stats", "--output", str(out)])

    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [g["title"] for g in data["common"]] == ["Metroid Dread"]
    assert [g["title"] for g in data["unique_to_a"]] == ["Metroid Prime"]


def test_compare_rejects_unknown_sort(collection_yaml, collection_json):
    result = CliRunner().invoke(cli, ["compare", str(collection_yaml), str(collection_json), "--sort", "rating"])

    assert result.exit_code == 2


def test_compare_bad_file(tmp_path, collection_yaml):
    bad = tmp_path / "bad.yaml"
    bad.write_text("games:\n  - platform: Nintendo Switch\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["compare", str(collection_yaml), str(bad)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_stats_command(collection_json):
    result = CliRunner().invoke(cli, ["stats", str(collection_json)])

    assert result.exit_code == 0, result.output
    assert "2 games, 1 completed" in result.output
    assert "Nintendo Switch 2" in result.output


def test_compare_file_not_utf8(tmp_path, collection_yaml):
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'[{"title": "\xff"}]')

    result = CliRunner().invoke(cli, ["compare", str(collection_yaml), str(bad)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "not valid UTF-8" in result.output


def test_color_setting_controls_table_styling(monkeypatch, collection_json):
    monkeypatch.setattr(settings, "color", False)
    plain = CliRunner().invoke(cli, ["stats", str(collection_json)], color=True)

    monkeypatch.setattr(settings, "color", True)
    colored = CliRunner().invoke(cli, ["stats", str(collection_json)], color=True)

    assert plain.exit_code == 0 and colored.exit_code == 0
    assert "\x1b[" not in plain.output
    assert BOLD in colored.output
