import pytest

from game_sync.models import GameRecord


@pytest.fixture
def alice_games():
    return [
        GameRecord(title="Metroid Prime", external_id=1001, platform="Nintendo Switch", format="Physical", completed=True),
        GameRecord(title="Metroid Dread", external_id=84511, platform="Nintendo Switch", format="Digital"),
        GameRecord(title="Mario Kart™ 8 Deluxe", platform="Nintendo Switch", format="Physical", completed=True),
        GameRecord(title="Captain Toad: Treasure Tracker", external_id=123, platform="Nintendo Switch 2", format="Digital"),
    ]


@pytest.fixture
def bob_games():
    return [
        GameRecord(title="Mario Kart 8 Deluxe", external_id=555, platform="Nintendo Switch", format="Digital"),
        GameRecord(title="Captain Toad - Treasure Tracker", external_id=456, platform="Nintendo Switch", format="Physical"),
        GameRecord(title="Metroid: Dread", external_id=84511, platform="Nintendo Switch", format="Physical", completed=True),
        GameRecord(title="Pikmin 4", platform="Nintendo Switch", format="Physical"),
    ]


@pytest.fixture
def collection_yaml(tmp_path):
    path = tmp_path / "alice.yaml"
    path.write_text(
        "name: Alice\n"
        "games:\n"
        "  - title: Metroid Prime\n"
        "    platform: Nintendo Switch\n"
        "    format: Physical\n"
        "    completed: true\n"
        "  - title: Metroid Dread\n"
        "    thegamesdbId: 84511\n"
        "    platform: Nintendo Switch\n"
        "    format: Digital\n"
        "    purchaseDate: 2024-05-01\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def collection_json(tmp_path):
    path = tmp_path / "bob.json"
    path.write_text(
        '[{"title": "Metroid: Dread", "thegamesdbId": 84511, "platform": "Nintendo Switch", "format": "Physical"},'
        ' {"title": "Pikmin 4", "platform": "Nintendo Switch 2", "format": "Digital", "completed": true}]',
        encoding="utf-8",
    )
    return path
