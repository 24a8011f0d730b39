"""Knowledge-base output rows for fusion events."""

from pydantic import BaseModel, ConfigDict, Field

from oncofusion.config.constants import OUTPUT_BASE_HEADER
from oncofusion.models.fusion import FusionEvent, FusionPair, PromiscuousGene


class KnownFusionOutput(BaseModel):
    """One output row: source gene/transcript/info followed by the event columns.

    Example:
        >>> row = KnownFusionOutput(gene="ALK", transcript="", info="",
        ...                         event=FusionPair(five_gene="EML4", three_gene="ALK"))
        >>> row.record
        ['ALK', '', '', 'EML4', 'ALK']
    """

    model_config = ConfigDict(frozen=True)

    gene: str
    transcript: str = ""
    info: str = Field(default="", description="Additional info from the knowledge-base entry")
    event: FusionEvent

    @staticmethod
    def header(event_type: type[FusionPair] | type[PromiscuousGene]) -> list[str]:
        """Column names for rows carrying events of the given type."""
        return OUTPUT_BASE_HEADER + event_type.header

    @property
    def record(self) -> list[str]:
        return [self.gene, self.transcript, self.info] + self.event.record
