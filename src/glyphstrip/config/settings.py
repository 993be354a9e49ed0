"""Configuration settings for Glyphstrip."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TEXT = " ".join(
    [
        "’Twas brillig, and the slithy toves",
        "Did gyre and gimble in the wabe;",
        "All mimsy were the borogoves,",
        "And the mome raths outgrabe.",
        "“Beware the Jabberwock, my son!",
        "The jaws that bite, the claws that catch!",
        "Beware the Jubjub bird, and shun",
        "The frumious Bandersnatch!”",
        "He took his vorpal sword in hand:",
        "Long time the manxome foe he sought—",
        "So rested he by the Tumtum tree,",
        "And stood awhile in thought.",
        "And as in uffish thought he stood,",
        "The Jabberwock, with eyes of flame,",
        "Came whiffling through the tulgey wood,",
        "And burbled as it came!",
        "One, two! One, two! and through and through",
        "The vorpal blade went snicker-snack!",
        "He left it dead, and with its head",
        "He went galumphing back.",
        "“And hast thou slain the Jabberwock?",
        "Come to my arms, my beamish boy!",
        "O frabjous day! Callooh! Callay!”",
        "He chortled in his joy.",
        "’Twas brillig, and the slithy toves",
        "Did gyre and gimble in the wabe;",
        "All mimsy were the borogoves,",
        "And the mome raths outgrabe.",
    ]
)


class HintingMode(str, Enum):
    """Glyph outline hinting applied by the font engine."""

    NONE = "none"
    FULL = "full"


class SplitPolicy(str, Enum):
    """How text is cut into units."""

    WORD = "word"
    CHARACTER = "char"


class RenderConfig(BaseModel):
    """Configuration for glyph rasterization and strip pacing.

    Width and height of zero mean "derive from font metrics".
    """

    model_config = ConfigDict(frozen=True)

    dpi: float = Field(
        default=72.0,
        gt=0,
        description="Screen resolution in dots per inch",
    )
    point_size: float = Field(
        default=20.0,
        gt=0,
        description="Font size in points",
    )
    width: int = Field(
        default=0,
        ge=0,
        description="Glyph cell width in pixels (0 = advance of reference glyph)",
    )
    height: int = Field(
        default=0,
        ge=0,
        description="Glyph cell height in pixels (0 = ascent + descent)",
    )
    light: bool = Field(
        default=False,
        description="Black on white instead of white on black",
    )
    pacing_interval: float = Field(
        default=0.2,
        ge=0.0,
        description="Delay in seconds between successive strips",
    )
    hinting: HintingMode = Field(
        default=HintingMode.FULL,
        description="Font engine hinting mode",
    )
    split_policy: SplitPolicy = Field(
        default=SplitPolicy.WORD,
        description="Split text into words or single characters",
    )
    delimiter: str = Field(
        default=" ",
        min_length=1,
        description="Word delimiter for the word split policy",
    )
    reference_glyph: str = Field(
        default="$",
        min_length=1,
        max_length=1,
        description="Character whose advance sets the default cell width",
    )


class OutputConfig(BaseModel):
    """Configuration for the image sink."""

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(
        default="out.png",
        description="Output file name; may use {index} and {unit} placeholders",
    )
    directory: Path = Field(
        default=Path("."),
        description="Directory the strips are written to",
    )

    @field_validator("pattern")
    @classmethod
    def _pattern_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("output pattern must not be empty")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphStripSettings(BaseModel):
    """Main application settings."""

    model_config = ConfigDict(frozen=True)

    font_path: Path = Field(
        default=Path("./sample.ttf"),
        description="TrueType/OpenType font file",
    )
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
