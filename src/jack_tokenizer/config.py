"""
Jack Tokenizer - Configuration
==============================

Settings for the tokenizer driver and the ``jacktok`` command. Configuration
can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

Environment variables (all optional):
    JACKTOK_OUTPUT_SUFFIX: Suffix replacing ".jack" for the XML output file
    JACKTOK_ENCODING: Text encoding for reading source and writing output
    JACKTOK_STRICT_EOF: Treat end of file inside a comment or string as an
                        error ("1", "true", "yes" or "on")
    JACKTOK_LOG_LEVEL: Logging level name (DEBUG, INFO, WARNING, ...)
"""

from dataclasses import dataclass
from pathlib import Path
import logging
import os


TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class TokenizerConfig:
    """
    Configuration for tokenizing a Jack source file.

    Attributes:
        output_suffix: Appended to the source stem to name the XML output
                       (default: "T.xml", so Main.jack -> MainT.xml)
        encoding: Encoding of source and output files (default: "utf-8")
        strict_eof: Raise UnterminatedError when the file ends inside a block
                    comment or string literal instead of logging a warning
        log_level: Logging level name used by the CLI (default: "WARNING")
    """
    output_suffix: str = "T.xml"
    encoding: str = "utf-8"
    strict_eof: bool = False
    log_level: str = "WARNING"

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_env(cls) -> "TokenizerConfig":
        """
        Create TokenizerConfig from environment variables.

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if suffix := os.environ.get("JACKTOK_OUTPUT_SUFFIX"):
            config.output_suffix = suffix

        if encoding := os.environ.get("JACKTOK_ENCODING"):
            config.encoding = encoding

        if strict := os.environ.get("JACKTOK_STRICT_EOF"):
            config.strict_eof = strict.strip().lower() in TRUE_VALUES

        if level := os.environ.get("JACKTOK_LOG_LEVEL"):
            level = level.strip().upper()
            if isinstance(logging.getLevelName(level), int):
                config.log_level = level

        return config

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def output_path_for(self, input_path: Path) -> Path:
        """
        Derive the default XML output path for a source file.

        Example:
            >>> TokenizerConfig().output_path_for(Path("src/Main.jack"))
            PosixPath('src/MainT.xml')
        """
        input_path = Path(input_path)
        return input_path.with_name(f"{input_path.stem}{self.output_suffix}")

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
