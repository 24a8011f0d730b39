"""Constants shared by the fusion extractor, reader and CLI."""

# =============================================================================
# GENE MATCHING
# =============================================================================
# Characters allowed in a gene name captured from free text. The hyphen is
# included so read-through names such as NKX2-1 survive extraction.

GENE_PATTERN: str = r"[A-Za-z0-9-]"
GENE_GROUP: str = f"({GENE_PATTERN}+)"

# Number of leading characters of a gene symbol used to locate it in text
GENE_PREFIX_LENGTH: int = 3


# =============================================================================
# READER DEFAULTS
# =============================================================================

DEFAULT_SEPARATORS: tuple[str, ...] = ("-",)

# Separator used when parsing "FIVE:THREE" pairs given on the command line
PAIR_ARGUMENT_SEPARATOR: str = ":"

# Environment variable naming a JSON reader configuration
READER_CONFIG_ENV: str = "ONCOFUSION_READER_CONFIG"


# =============================================================================
# OUTPUT
# =============================================================================
# Leading columns of every knowledge-base output row

OUTPUT_BASE_HEADER: list[str] = ["gene", "transcript", "info"]
