import pytest
import os
import shutil

from libloader.models import ArtifactCoordinate, DependencyScope
from libloader.repositories import LibraryRepository

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def libraries_file(tmp_path):
    source_file = os.path.join(ASSETS_DIR, "libraries.yaml")
    dest_file = tmp_path / "libraries.yaml"
    shutil.copy(source_file, dest_file)
    return dest_file


def test_library_repository_find_all_file_not_exists():
    repo = LibraryRepository("notexistingfile")
    assert repo.find_all() == []


def test_library_repository_find_all(libraries_file):
    repo = LibraryRepository(str(libraries_file))
    libraries = repo.find_all()

    assert len(libraries) == 3
    assert libraries[0].coordinate == ArtifactCoordinate(group="org.jetbrains.kotlin", name="kotlin-stdlib", version="2.2.10")
    assert libraries[0].scope is DependencyScope.PROVIDED
    assert libraries[1].coordinate.name == "ktor-server-core-jvm"
    assert libraries[1].scope is DependencyScope.PROVIDED
    assert libraries[2].coordinate.classifier == "linux-x86_64"
    assert libraries[2].scope is DependencyScope.RUNTIME


def test_library_repository_keeps_declaration_order(libraries_file):
    repo = LibraryRepository(str(libraries_file))
    names = [library.coordinate.name for library in repo.find_all()]
    assert names == ["kotlin-stdlib", "ktor-server-core-jvm", "native-bits"]


def test_empty_libraries_file(tmp_path):
    empty_file = tmp_path / "libraries.yaml"
    empty_file.write_text("libraries: []\n")
    assert LibraryRepository(str(empty_file)).find_all() == []


@pytest.mark.parametrize("content", [
    "libraries:\n  - coordinate: not-a-coordinate\n",
    "libraries:\n  - coordinate: g:a:1.0\n    scope: bundled\n",
    "something_else: []\n",
])
def test_invalid_libraries_file_schema(tmp_path, content):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(content)

    repo = LibraryRepository(str(bad_file))
    with pytest.raises(ValueError, match="Invalid libraries.yaml structure"):
        repo.find_all()


@pytest.mark.parametrize("content", ["", "\n", "# nothing declared yet\n"])
def test_blank_libraries_file(tmp_path, content):
    blank_file = tmp_path / "libraries.yaml"
    blank_file.write_text(content)
    assert LibraryRepository(str(blank_file)).find_all() == []


def test_libraries_file_not_a_mapping(tmp_path):
    bad_file = tmp_path / "libraries.yaml"
    bad_file.write_text("- g:a:1.0\n")
    with pytest.raises(ValueError, match="expected a mapping, got list"):
        LibraryRepository(str(bad_file)).find_all()
