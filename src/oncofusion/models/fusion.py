"""Fusion event models.

A fusion event read from a knowledge-base entry is either a fully resolved
pair of partner genes or a single "promiscuous" gene whose partner could not
be determined. Both are immutable value objects: equality is field-wise so
events can be looked up in filter and flip sets.
"""

from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class FusionPair(BaseModel):
    """A fusion with both partners known, oriented 5' -> 3'."""

    model_config = ConfigDict(frozen=True)

    rank: ClassVar[int] = 0
    header: ClassVar[list[str]] = ["five_gene", "three_gene"]

    event_type: Literal["fusion_pair"] = "fusion_pair"
    five_gene: str = Field(description="Upstream (5') partner gene")
    three_gene: str = Field(description="Downstream (3') partner gene")

    @classmethod
    def from_string(cls, value: str, separator: str = "-") -> "FusionPair":
        """Build a pair from "FIVE<sep>THREE" text (split on the first separator).

        Raises:
            ValueError: If either side is missing
        """
        five, found, three = value.strip().partition(separator)
        if not found or not five.strip() or not three.strip():
            raise ValueError(f"Expected FIVE{separator}THREE, got: {value!r}")
        return cls(five_gene=five.strip(), three_gene=three.strip())

    def flipped(self) -> "FusionPair":
        """Return the same pair with five and three partners swapped."""
        return FusionPair(five_gene=self.three_gene, three_gene=self.five_gene)

    @property
    def record(self) -> list[str]:
        return [self.five_gene, self.three_gene]

    def __str__(self) -> str:
        return f"{self.five_gene}-{self.three_gene}"


class PromiscuousGene(BaseModel):
    """A fusion where only one partner gene is known."""

    model_config = ConfigDict(frozen=True)

    rank: ClassVar[int] = 1
    header: ClassVar[list[str]] = ["promiscuous_gene"]

    event_type: Literal["promiscuous_gene"] = "promiscuous_gene"
    gene: str = Field(description="The known partner gene")

    @property
    def record(self) -> list[str]:
        return [self.gene]

    def __str__(self) -> str:
        return self.gene


FusionEvent = Annotated[
    Union[FusionPair, PromiscuousGene],
    Field(discriminator="event_type"),
]


def event_rank(event: FusionPair | PromiscuousGene) -> int:
    """Priority used to pick between candidate events (lower wins)."""
    return event.rank
