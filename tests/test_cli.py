import io

import pytest

from lengthtree.cli import base_name, main
from lengthtree.traversals import level_order, post_order, pre_order
from lengthtree.tree import build_tree

TEXT = "hello world a bb ccc Hi!\nmore words here\n"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("dir/sub/file.txt", "file"),
        ("noext", "noext"),
        ("a.b.c", "a.b"),
        ("folder.d/plain", "plain"),
    ],
)
def test_base_name(path, expected):
    assert base_name(path) == expected


def test_main_writes_three_files(tmp_path, monkeypatch, capsys):
    source = tmp_path / "input.txt"
    source.write_text(TEXT, encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    monkeypatch.chdir(out_dir)
    assert main([str(source)]) == 0
    assert "Tree Built & Traversals Done!" in capsys.readouterr().out
    root = build_tree(io.StringIO(TEXT))
    for suffix, walk in (("levelorder", level_order), ("preorder", pre_order), ("postorder", post_order)):
        content = (out_dir / f"input.{suffix}").read_text(encoding="utf-8")
        assert content.splitlines() == list(walk(root))


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "FATAL" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_main_invalid_character(tmp_path, monkeypatch, capsys):
    source = tmp_path / "bad.txt"
    source.write_text("fine bad-word", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([str(source)]) == 1
    assert "Invalid character: -" in capsys.readouterr().err
    assert not (tmp_path / "bad.preorder").exists()


def test_main_empty_file(tmp_path, monkeypatch, capsys):
    source = tmp_path / "empty.txt"
    source.write_text("\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([str(source)]) == 1
    assert "FATAL: Failed to build tree!" in capsys.readouterr().err


def test_main_too_many_arguments(capsys):
    assert main(["one", "two"]) == 1
    assert "FATAL: Improper usage" in capsys.readouterr().err


def test_main_reads_standard_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    assert main([]) == 0
    assert "Tree Built & Traversals Done!" in capsys.readouterr().out
    root = build_tree(io.StringIO(TEXT))
    content = (tmp_path / "output.preorder").read_text(encoding="utf-8")
    assert content.splitlines() == list(pre_order(root))