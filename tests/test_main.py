"""
Tests for the console workflow in xvsnap.main.
"""

import pytest

from xvsnap import main as main_module
from xvsnap.utils.config import ConfigManager

THUMBNAIL = b"\xFF\xD8thumb\xFF\xD9"


@pytest.fixture
def steam_root(tmp_path):
    snapshot_dir = tmp_path / "Steam" / "76561198012345678" / "savestorage" / "snapshot"
    snapshot_dir.mkdir(parents=True)
    (snapshot_dir / "game0.ss").write_bytes(b"hdr" + THUMBNAIL + b"tail")
    (snapshot_dir / "game1.ss").write_bytes(b"broken")
    (snapshot_dir / "notes.txt").write_bytes(THUMBNAIL)
    return tmp_path / "Steam"


@pytest.fixture
def config(tmp_path, steam_root):
    manager = ConfigManager(tmp_path / "cfg")
    manager.config.update({
        "steam_directory": str(steam_root),
        "open_output_folder": False,
        "wait_for_enter": False,
        "show_progress": False,
    })
    return manager


def no_input(prompt=""):
    raise AssertionError(f"unexpected prompt: {prompt}")


class TestMain:
    """Test the end-to-end run."""

    def test_converts_found_snapshots(self, config, steam_root):
        assert main_module.main(config, input_func=no_input) == 0

        converted = steam_root / "76561198012345678" / "savestorage" / "snapshot" / "converted"
        assert sorted(p.name for p in converted.iterdir()) == ["game0.jpeg"]
        assert (converted / "game0.jpeg").read_bytes() == THUMBNAIL

    def test_prompts_when_folder_not_found(self, tmp_path, config):
        manual = tmp_path / "manual"
        manual.mkdir()
        (manual / "x.ss").write_bytes(THUMBNAIL)
        config.config["steam_directory"] = str(tmp_path / "elsewhere")
        answers = iter([str(manual)])

        assert main_module.main(config, input_func=lambda prompt: next(answers)) == 0

        assert (manual / "converted" / "x.jpeg").read_bytes() == THUMBNAIL

    def test_blank_prompt_exits_cleanly(self, tmp_path, config):
        config.config["steam_directory"] = str(tmp_path / "elsewhere")
        assert main_module.main(config, input_func=lambda prompt: "") == 0

    def test_prompted_folder_missing(self, tmp_path, config):
        config.config["steam_directory"] = str(tmp_path / "elsewhere")
        missing = tmp_path / "missing"

        assert main_module.main(config, input_func=lambda prompt: str(missing)) == 0
        assert not missing.exists()

    def test_opens_output_folder(self, config, steam_root, monkeypatch):
        opened = []
        monkeypatch.setattr(main_module, "open_folder", opened.append)
        config.config["open_output_folder"] = True

        main_module.main(config, input_func=no_input)

        assert opened == [steam_root / "76561198012345678" / "savestorage" / "snapshot" / "converted"]

    def test_waits_for_enter(self, config):
        prompts = []
        config.config["wait_for_enter"] = True

        main_module.main(config, input_func=prompts.append)

        assert prompts == ["Press ENTER/RETURN to exit."]

    def test_wait_tolerates_closed_stdin(self, config):
        config.config["wait_for_enter"] = True

        def eof(prompt):
            raise EOFError

        assert main_module.main(config, input_func=eof) == 0

    def test_prompt_tolerates_closed_stdin(self, tmp_path, config):
        config.config["steam_directory"] = str(tmp_path / "elsewhere")

        def eof(prompt):
            raise EOFError

        assert main_module.main(config, input_func=eof) == 0

    def test_output_folder_blocked_by_file(self, config, steam_root):
        snapshot_dir = steam_root / "76561198012345678" / "savestorage" / "snapshot"
        (snapshot_dir / "converted").write_bytes(b"")

        assert main_module.main(config, input_func=no_input) == 0
        assert (snapshot_dir / "converted").is_file()

    def test_unlistable_snapshot_folder(self, config, monkeypatch):
        def denied(directory, extension):
            raise PermissionError(13, "Permission denied", str(directory))

        monkeypatch.setattr(main_module, "enumerate_snapshot_files", denied)

        assert main_module.main(config, input_func=no_input) == 0
