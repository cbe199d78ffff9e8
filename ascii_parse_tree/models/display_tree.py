"""Display tree data models.

A display tree is a tagged union of two variants, discriminated by ``kind``:

- ``Leaf``: a single preformatted line, never has children.
- ``Node``: a label plus at least one child.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Leaf(BaseModel):
    """One line of text: rule name followed by the quoted, escaped match."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = "leaf"
    line: str


class Node(BaseModel):
    """A labelled branch. An empty label marks a synthetic root."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["node"] = "node"
    label: str
    children: List["DisplayTree"] = Field(min_length=1)


DisplayTree = Annotated[Union[Leaf, Node], Field(discriminator="kind")]


def label_of(tree: DisplayTree) -> str:
    """Return the text shown on the tree's own line."""
    if tree.kind == "leaf":
        return tree.line
    return tree.label


Node.model_rebuild()
