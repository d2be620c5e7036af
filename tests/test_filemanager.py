import pytest

from pairedit.filemanager import (
    PROJECT_FILE_EXTENSION,
    FileManager,
    FileOpeningFailure,
    IncorrectUserInput,
)


@pytest.fixture
def manager():
    return FileManager()


def test_write_then_read_round_trip(manager, tmp_path):
    target = str(tmp_path / "a.cpp")
    content = "int main()\r\n{\n    return 0;\n}\n"
    manager.write_to_file(target, content)
    assert manager.read_from_file(target) == content


def test_write_replaces_content(manager, tmp_path):
    target = str(tmp_path / "a.txt")
    manager.write_to_file(target, "long old content")
    manager.write_to_file(target, "new")
    assert manager.read_from_file(target) == "new"


def test_create_file_empties(manager, tmp_path):
    target = str(tmp_path / "b.h")
    manager.write_to_file(target, "data")
    manager.create_file(target)
    assert manager.read_from_file(target) == ""


def test_read_without_name_is_incorrect_input(manager):
    with pytest.raises(IncorrectUserInput):
        manager.read_from_file("")


def test_read_missing_file_fails(manager, tmp_path):
    with pytest.raises(FileOpeningFailure):
        manager.read_from_file(str(tmp_path / "missing.cpp"))


def test_write_into_missing_directory_fails(manager, tmp_path):
    with pytest.raises(FileOpeningFailure):
        manager.write_to_file(str(tmp_path / "nodir" / "x.cpp"), "x")


def test_project_file_created_and_found(manager, tmp_path):
    project = tmp_path / "proj"
    project.mkdir()
    assert not manager.project_exists(str(project))
    manager.create_project_file(str(project))
    assert (project / ("proj" + PROJECT_FILE_EXTENSION)).is_file()
    assert manager.project_exists(str(project))


def test_project_file_is_named_after_directory(manager, tmp_path):
    project = tmp_path / "proj"
    project.mkdir()
    manager.create_project_file(str(project))
    assert sorted(entry.name for entry in project.iterdir()) == ["proj.psproj"]


def test_create_project_in_missing_directory_fails(manager, tmp_path):
    with pytest.raises(FileOpeningFailure):
        manager.create_project_file(str(tmp_path / "absent"))


def test_source_beside_header(manager, tmp_path):
    header = tmp_path / "widget.h"
    header.write_text("")
    assert not manager.source_file_by_the_same_name_exists(str(header))
    (tmp_path / "widget.cpp").write_text("")
    assert manager.source_file_by_the_same_name_exists(str(header))