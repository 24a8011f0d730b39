"""Reader turning knowledge-base (gene, fusion description) fields into fusion events.

The reader owns an immutable configuration:
- separators: candidate delimiters tried in the description, in priority order
- filter_set: events to suppress (read() returns None for them)
- flip_set: pairs stored in reversed orientation by the source, swapped on output

Example usage:
    >>> reader = FusionReader(separators=["-", "_"],
    ...                       flip_set={FusionPair(five_gene="EML4", three_gene="ALK")})
    >>> reader.read("ALK", "EML4-ALK")
    FusionPair(event_type='fusion_pair', five_gene='ALK', three_gene='EML4')
"""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from oncofusion.config.constants import DEFAULT_SEPARATORS, READER_CONFIG_ENV
from oncofusion.config.debug import get_logger
from oncofusion.models.fusion import FusionEvent, FusionPair
from oncofusion.normalization.fusion_extractor import extract_fusion_multi

logger = get_logger(__name__)


class ReaderConfigError(ValueError):
    """Exception raised when a reader configuration file cannot be loaded."""
    pass


class ReaderConfig(BaseModel):
    """Configuration for the fusion reader.

    Separators keep the order they are given in; that order decides ties
    between equally good extractions.
    """

    model_config = ConfigDict(frozen=True)

    separators: tuple[str, ...] = Field(
        default=DEFAULT_SEPARATORS,
        description="Candidate delimiters between the two gene names",
    )
    filter_set: frozenset[FusionEvent] = Field(
        default_factory=frozenset,
        description="Events that are dropped from the output",
    )
    flip_set: frozenset[FusionPair] = Field(
        default_factory=frozenset,
        description="Pairs whose five/three orientation is swapped",
    )

    @field_validator("separators")
    @classmethod
    def _check_separators(cls, separators: tuple[str, ...]) -> tuple[str, ...]:
        if not separators:
            raise ValueError("at least one separator must be configured")
        if any(separator == "" for separator in separators):
            raise ValueError("separators must not be empty strings")
        # Drop duplicates, keep first occurrence
        return tuple(dict.fromkeys(separators))

    @classmethod
    def from_file(cls, path: str | Path) -> "ReaderConfig":
        """Load a configuration from a JSON file.

        Example file:
            {
                "separators": ["-", "_"],
                "filter_set": [{"event_type": "promiscuous_gene", "gene": "IGH"}],
                "flip_set": [{"five_gene": "ABL1", "three_gene": "BCR"}]
            }

        Raises:
            ReaderConfigError: If the file is missing, is not JSON or is invalid
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text())
            config = cls.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise ReaderConfigError(f"Invalid reader config {path}: {e}") from e

        logger.debug(f"Loaded reader config from {path}: {config}")
        return config

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        """Load the file named by ONCOFUSION_READER_CONFIG, or fall back to defaults."""
        path = os.environ.get(READER_CONFIG_ENV)
        if path:
            return cls.from_file(path)
        return cls()


class FusionReader:
    """Reads fusion events from knowledge-base gene/description pairs.

    Stateless beyond its configuration: the same inputs always give the same
    event, and read() may be called concurrently.
    """

    def __init__(self, config: ReaderConfig | None = None, **kwargs):
        if config is not None and kwargs:
            raise TypeError("Pass either a ReaderConfig or keyword options, not both")
        self.config = config or ReaderConfig(**kwargs)

    @property
    def separators(self) -> tuple[str, ...]:
        return self.config.separators

    def read(self, gene: str, fusion_string: str) -> FusionEvent | None:
        """Resolve a fusion event, applying the filter and flip sets.

        Args:
            gene: Known gene symbol of the knowledge-base entry
            fusion_string: Free-text fusion description

        Returns:
            The resolved event, or None if it is in the filter set

        Raises:
            ValueError: If the gene symbol is empty
        """
        gene = gene.strip()
        fusion_string = fusion_string.strip()
        if not gene:
            raise ValueError(f"Gene symbol is required to read fusion: {fusion_string!r}")

        fusion = extract_fusion_multi(gene, fusion_string, self.config.separators)

        if fusion in self.config.filter_set:
            logger.debug(f"Filtered {fusion!r} read from {gene} / {fusion_string!r}")
            return None

        if isinstance(fusion, FusionPair) and fusion in self.config.flip_set:
            flipped = fusion.flipped()
            logger.debug(f"Flipped {fusion} to {flipped}")
            return flipped

        return fusion


__all__ = [
    "FusionReader",
    "ReaderConfig",
    "ReaderConfigError",
]
