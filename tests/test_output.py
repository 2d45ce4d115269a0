import logging
from pathlib import Path

from dotgraph.output import DEFAULT_STEM, write_dot


def test_write_dot_creates_directory_and_writes_verbatim(tmp_path: Path, caplog):
    target = tmp_path / "nested" / "dir"
    source = 'graph "g" {\n  "A" [label="x"];\n}\n'

    with caplog.at_level(logging.INFO, logger="dotgraph.output"):
        path = write_dot(source, stem="example", directory=target)

    assert path == target / "example.dot"
    assert path.read_text(encoding="utf-8") == source
    assert "Dot file saved to" in caplog.text


def test_write_dot_default_stem(tmp_path: Path):
    path = write_dot("digraph \"\" {\n}\n", directory=tmp_path)

    assert DEFAULT_STEM == "out"
    assert path == tmp_path / "out.dot"
