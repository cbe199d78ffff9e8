"""Parse node data models."""

from typing import List

from pydantic import BaseModel, model_validator


class ParseNode(BaseModel):
    """A single matched rule occurrence produced by a grammar engine.

    ``start`` and ``end`` are offsets into the parsed source as the engine
    reports them. ``text`` is the matched span, untrimmed. Children are in
    left-to-right source order and lie inside the parent's span.
    """

    rule: str
    start: int = 0
    end: int = 0
    text: str = ""
    children: List['ParseNode'] = []

    @model_validator(mode="after")
    def _check_span(self) -> "ParseNode":
        if self.end < self.start:
            raise ValueError(
                f"Span of rule '{self.rule}' ends before it starts ({self.start}..{self.end})"
            )
        return self


# Enable forward references for recursive model
ParseNode.model_rebuild()
