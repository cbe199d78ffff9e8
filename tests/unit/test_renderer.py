"""
Unit tests for the display tree renderer.
"""

import io

import pytest

from ascii_parse_tree.errors import FormatError
from ascii_parse_tree.formatting.renderer import render, write_tree
from ascii_parse_tree.models import Leaf, Node


class FullSink:
    """Text sink that accepts a limited number of characters."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.written = ""

    def write(self, text: str) -> int:
        if len(self.written) + len(text) > self.capacity:
            raise OSError("No space left on device")
        self.written += text
        return len(text)


def test_render_leaf():
    """A lone leaf is one line with a leading space."""
    assert render(Leaf(line='val "m"')) == ' val "m"\n'


def test_render_flat_node():
    """Children of a node use branch connectors, the last one a corner."""
    tree = Node(label="expr", children=[
        Leaf(line='val "a"'),
        Leaf(line='op "+"'),
        Leaf(line='val "b"'),
    ])

    assert render(tree) == (
        ' expr\n'
        ' ├─ val "a"\n'
        ' ├─ op "+"\n'
        ' └─ val "b"\n'
    )


def test_render_single_child():
    """A single child is also the last child."""
    tree = Node(label="wrap", children=[Leaf(line='val "x"')])

    assert render(tree) == ' wrap\n └─ val "x"\n'


def test_render_nested_prefixes_compose():
    """Descendants of a non-last child get a pipe, of a last child blanks."""
    tree = Node(label="root", children=[
        Node(label="left", children=[
            Leaf(line='a "1"'),
            Node(label="deep", children=[Leaf(line='b "2"')]),
        ]),
        Node(label="right", children=[
            Leaf(line='c "3"'),
            Leaf(line='d "4"'),
        ]),
    ])

    assert render(tree) == (
        ' root\n'
        ' ├─ left\n'
        ' │  ├─ a "1"\n'
        ' │  └─ deep\n'
        ' │     └─ b "2"\n'
        ' └─ right\n'
        '    ├─ c "3"\n'
        '    └─ d "4"\n'
    )


def test_render_anonymous_root():
    """Anonymous root mode draws only the children, at depth zero."""
    tree = Node(label="", children=[
        Leaf(line='val "x"'),
        Node(label="expr", children=[Leaf(line='val "y"')]),
    ])

    assert render(tree, anonymous_root=True) == (
        ' ├─ val "x"\n'
        ' └─ expr\n'
        '    └─ val "y"\n'
    )


def test_render_anonymous_root_on_leaf():
    """A leaf has no children to lift, so it is drawn as usual."""
    assert render(Leaf(line='val "m"'), anonymous_root=True) == ' val "m"\n'


def test_render_is_deterministic():
    """Rendering the same tree twice yields identical text."""
    tree = Node(label="expr", children=[Leaf(line='val "a"'), Leaf(line='val "b"')])

    assert render(tree) == render(tree)


def test_every_line_ends_with_newline():
    """Each logical line is terminated by a newline."""
    tree = Node(label="expr", children=[Leaf(line='val "a"'), Leaf(line='val "b"')])

    output = render(tree)

    assert output.endswith("\n")
    assert output.count("\n") == 3


def test_write_tree_to_stream():
    """write_tree writes the same text render returns."""
    tree = Node(label="expr", children=[Leaf(line='val "a"')])
    stream = io.StringIO()

    write_tree(stream, tree)

    assert stream.getvalue() == render(tree)


def test_write_tree_closed_sink_raises_format_error():
    """A sink that refuses writes surfaces as FormatError."""
    stream = io.StringIO()
    stream.close()

    with pytest.raises(FormatError):
        write_tree(stream, Leaf(line='val "m"'))


def test_write_tree_full_sink_aborts():
    """Rendering stops at the first refused write."""
    tree = Node(label="expr", children=[Leaf(line='val "a"'), Leaf(line='val "b"')])
    sink = FullSink(capacity=len(" expr\n") + 2)

    with pytest.raises(FormatError) as exc_info:
        write_tree(sink, tree)

    assert isinstance(exc_info.value.__cause__, OSError)
    assert sink.written == " expr\n"


def test_render_deep_chain_without_recursion_limit():
    """A chain far deeper than the interpreter's recursion limit renders."""
    depth = 5000
    tree = Leaf(line='val "x"')
    for _ in range(depth):
        tree = Node(label="wrap", children=[tree])

    lines = render(tree).splitlines()

    assert len(lines) == depth + 1
    assert lines[0] == " wrap"
    assert lines[1] == " └─ wrap"
    assert lines[-1] == " " + "   " * (depth - 1) + '└─ val "x"'
