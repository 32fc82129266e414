"""Shared pytest fixtures for plantuml-switcher tests."""

from pathlib import Path

import pytest

from plantuml_switcher.core import LineDocument

CLASS_DIAGRAM = """\
@startuml
A::B "label1" --> "label2" C::D : relation
ClassA "name" --|> ClassB::Type : extends
X::Y "foo" --> "bar" Z::W : dependency
@enduml
"""


@pytest.fixture
def class_diagram() -> str:
    """Return a small class diagram with three relation lines (lines 1-3)."""
    return CLASS_DIAGRAM


@pytest.fixture
def class_document(class_diagram: str) -> LineDocument:
    """Return the class diagram as an in-memory document."""
    return LineDocument(class_diagram)


@pytest.fixture
def diagram_file(tmp_path: Path, class_diagram: str) -> Path:
    """Write the class diagram to a temporary .puml file."""
    path = tmp_path / "classes.puml"
    path.write_text(class_diagram, encoding="utf-8")
    return path
