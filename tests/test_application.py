import pytest

from negentropy.application import DEFAULT_FILE, Application, main
from negentropy.block import BlockType
from negentropy.diagram_data import DiagramLoadError
from negentropy.vectors import Vec2


@pytest.fixture
def workspace(tmp_path):
    path = tmp_path / "Workspace"
    path.mkdir()
    return path


def test_refresh_lists_only_xml_files(workspace):
    (workspace / "b.xml").write_text("<diagram/>")
    (workspace / "a.xml").write_text("<diagram/>")
    (workspace / "notes.txt").write_text("x")
    (workspace / "sub.xml").mkdir()
    app = Application(workspace)
    assert app.workspace_files == ["a.xml", "b.xml"]


def test_refresh_picks_up_new_files(workspace):
    app = Application(workspace)
    assert app.workspace_files == []
    (workspace / "new.xml").write_text("<diagram/>")
    app.refresh_workspace_files()
    assert app.workspace_files == ["new.xml"]


def test_missing_workspace_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Application(tmp_path / "absent")


def test_add_block_labels_and_positions(workspace):
    app = Application(workspace)
    first = app.add_block()
    second = app.add_block()
    assert [b.data.label for b in app.blocks] == ["Block 1", "Block 2"]
    assert first.data.position == Vec2(250.0, 100.0)
    assert second.data.position == Vec2(400.0, 100.0)
    assert first.data.type is BlockType.PROCESS


def test_delete_block(workspace):
    app = Application(workspace)
    app.add_block()
    app.add_block()
    app.delete_block(0)
    assert [b.data.label for b in app.blocks] == ["Block 2"]
    with pytest.raises(IndexError):
        app.delete_block(5)


def test_save_then_reload_round_trip(workspace):
    app = Application(workspace)
    block = app.add_block()
    block.data.type = BlockType.DECISION
    app.diagram.camera.data.position = Vec2(12.5, -3.0)
    path = app.save()
    assert path == workspace / DEFAULT_FILE
    assert path.is_file()

    reopened = Application(workspace)
    assert len(reopened.blocks) == 1
    assert reopened.blocks[0].data == block.data
    assert reopened.diagram.camera.data.position == Vec2(12.5, -3.0)
    assert reopened.workspace_files == [DEFAULT_FILE]


def test_load_named_file(workspace):
    source = Application(workspace)
    source.add_block()
    source.add_block()
    source.save()
    (workspace / DEFAULT_FILE).rename(workspace / "other.xml")

    app = Application(workspace)
    assert app.blocks == []
    app.load("other.xml")
    assert [b.data.label for b in app.blocks] == ["Block 1", "Block 2"]


def test_load_missing_file_raises_and_keeps_blocks(workspace):
    app = Application(workspace)
    app.add_block()
    with pytest.raises(DiagramLoadError):
        app.load("missing.xml")
    assert len(app.blocks) == 1


def test_main_reports_missing_workspace(tmp_path, capsys):
    status = main([str(tmp_path / "absent")])
    assert status == -1
    assert capsys.readouterr().err.startswith("Error:")