import pytest
from libloader.models import ArtifactCoordinate, DependencyScope, Library


def test_parse_plain_coordinate():
    coordinate = ArtifactCoordinate.parse("org.jetbrains.kotlin:kotlin-stdlib:2.2.10")
    assert coordinate.group == "org.jetbrains.kotlin"
    assert coordinate.name == "kotlin-stdlib"
    assert coordinate.version == "2.2.10"
    assert coordinate.extension == "jar"
    assert coordinate.classifier is None


def test_parse_extension_and_classifier():
    coordinate = ArtifactCoordinate.parse("org.example:native-bits:zip:linux-x86_64:1.0.0")
    assert coordinate.extension == "zip"
    assert coordinate.classifier == "linux-x86_64"
    assert coordinate.version == "1.0.0"
    assert str(coordinate) == "org.example:native-bits:zip:linux-x86_64:1.0.0"


@pytest.mark.parametrize("text", ["g:a", "g::1.0", "a:b:c:d:e:f", ""])
def test_parse_invalid(text):
    with pytest.raises(ValueError, match="Bad artifact coordinate"):
        ArtifactCoordinate.parse(text)


def test_default_layout_path():
    coordinate = ArtifactCoordinate.parse("org.bstats:bstats-bukkit:3.1.0")
    assert coordinate.path() == "org/bstats/bstats-bukkit/3.1.0/bstats-bukkit-3.1.0.jar"
    assert str(coordinate) == "org.bstats:bstats-bukkit:3.1.0"


def test_classifier_in_file_name():
    coordinate = ArtifactCoordinate(group="g", name="a", version="1.0", classifier="sources")
    assert coordinate.file_name() == "a-1.0-sources.jar"


def test_library_accepts_coordinate_string():
    library = Library(coordinate="g:a:1.0", scope="runtime")
    assert library.coordinate == ArtifactCoordinate(group="g", name="a", version="1.0")
    assert library.scope is DependencyScope.RUNTIME


def test_library_defaults_to_provided_scope():
    assert Library(coordinate="g:a:1.0").scope is DependencyScope.PROVIDED
