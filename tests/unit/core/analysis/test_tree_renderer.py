from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Drives the renderer from in-memory trees so the enumeration order is
fixed and the exact output can be asserted line by line.
"""

import os

import pytest

from foldertree.core.analysis.tree_renderer import draw_directory, draw_tree, format_connector
from foldertree.domain.tree_models import (
    SPACER_ENTRY,
    DirectoryEntry,
    DrawKind,
    IndentationContext,
    RenderConfig,
)


def render(scanner, config=None):
    root = scanner.root
    lines = []
    draw_directory(root, IndentationContext(), config or RenderConfig(), scanner, lines.append)
    return lines


def to_ascii(lines):
    table = str.maketrans({"├": "+", "─": "-", "└": "\\", "│": "|"})
    return [line.translate(table) for line in lines]


def test_two_sibling_folders(memory_scanner):
    scanner = memory_scanner({"a": {"x": {}}, "b": {"y": {}}})

    assert render(scanner) == [
        "├───a",
        "│   └───x",
        "└───b",
        "    └───y",
    ]


def test_continuation_bars_follow_open_ancestors(memory_scanner):
    scanner = memory_scanner({
        "a": {"b": {"c": {}}, "d": {}},
        "e": {"f": {"g": {}}},
    })

    assert render(scanner) == [
        "├───a",
        "│   ├───b",
        "│   │   └───c",
        "│   └───d",
        "└───e",
        "    └───f",
        "        └───g",
    ]


def test_files_precede_folders_with_spacer(memory_scanner):
    scanner = memory_scanner({"f.txt": None, "sub": {}})

    assert render(scanner, RenderConfig(show_files=True)) == [
        "│   f.txt",
        "│    ",
        "└───sub",
    ]


def test_files_without_subfolders_use_blank_columns(memory_scanner):
    scanner = memory_scanner({"only.txt": None, "other.txt": None})

    assert render(scanner, RenderConfig(show_files=True)) == [
        "     only.txt",
        "     other.txt",
        "      ",
    ]


def test_nested_files_inherit_indentation(memory_scanner):
    scanner = memory_scanner({
        "README": None,
        "docs": {"guide.md": None, "img": {"logo.png": None}},
        "src": {"main.py": None},
    })

    assert render(scanner, RenderConfig(show_files=True)) == [
        "│   README",
        "│    ",
        "├───docs",
        "│   │   guide.md",
        "│   │    ",
        "│   └───img",
        "│            logo.png",
        "│             ",
        "└───src",
        "         main.py",
        "          ",
    ]


def test_files_hidden_when_disabled(memory_scanner):
    scanner = memory_scanner({"f.txt": None, "sub": {"g.txt": None}})

    assert render(scanner) == ["└───sub"]


def test_ascii_output_only_swaps_glyphs(memory_scanner):
    tree = {
        "README": None,
        "a": {"b": {"c": {}}, "n.txt": None},
        "z": {},
    }
    unicode_lines = render(memory_scanner(tree), RenderConfig(show_files=True))
    ascii_lines = render(memory_scanner(tree), RenderConfig(show_files=True, use_ascii=True))

    assert ascii_lines == to_ascii(unicode_lines)
    assert ascii_lines[2] == "+---a"
    assert ascii_lines[-1] == "\\---z"


def test_empty_directory_renders_nothing(memory_scanner):
    assert render(memory_scanner({}), RenderConfig(show_files=True)) == []


def test_unreadable_folder_renders_as_leaf(memory_scanner, unreadable):
    scanner = memory_scanner({
        "a": {"locked": unreadable, "open": {"x": {}}},
        "b": {},
    })

    assert render(scanner) == [
        "├───a",
        "│   ├───locked",
        "│   └───open",
        "│       └───x",
        "└───b",
    ]


def test_spacer_is_never_recursed(memory_scanner, virtual_root):
    scanner = memory_scanner({"f.txt": None})
    lines = []

    draw_tree(
        virtual_root,
        [DirectoryEntry("f.txt"), SPACER_ENTRY],
        DrawKind.FILES,
        IndentationContext(),
        RenderConfig(show_files=True),
        scanner,
        lines.append,
    )

    assert lines == ["     f.txt", "      "]
    assert scanner.listed == []


def test_recursion_visits_each_folder_once(memory_scanner, virtual_root):
    scanner = memory_scanner({"a": {"b": {}}, "c": {}})

    render(scanner)

    assert scanner.listed == [
        virtual_root,
        os.path.join(virtual_root, "a"),
        os.path.join(virtual_root, "a", "b"),
        os.path.join(virtual_root, "c"),
    ]


@pytest.mark.parametrize("kind, is_last, bar, expected", [
    (DrawKind.FOLDERS, False, False, "├───"),
    (DrawKind.FOLDERS, True, False, "└───"),
    (DrawKind.FILES, False, True, "│   "),
    (DrawKind.FILES, True, True, "│   "),
    (DrawKind.FILES, True, False, "     "),
])
def test_format_connector(kind, is_last, bar, expected):
    assert format_connector(kind, is_last, bar, RenderConfig()) == expected
