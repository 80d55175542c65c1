import codecs
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class XMLTVSettings(BaseSettings):
    """Serialization settings loaded from environment variables.

    Values act as defaults; keyword arguments to dumps()/dump() win.
    """

    log_level: str = "INFO"
    encoding: str = "UTF-8"
    xml_declaration: bool = False
    pretty_print: bool = False
    doctype: str | None = None  # e.g. '<!DOCTYPE tv SYSTEM "xmltv.dtd">'
    huge_tree: bool = False  # lift libxml2 size limits when parsing
    gzip_compresslevel: int = 9

    model_config = SettingsConfigDict(
        env_prefix="XMLTV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate logging level name."""
        normalized = value.upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if normalized not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return normalized

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Validate output encoding is known to Python."""
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{value}'") from exc
        return value

    @field_validator("doctype")
    @classmethod
    def validate_doctype(cls, value: str | None) -> str | None:
        """Validate doctype is a DOCTYPE declaration."""
        if value is None or not value.strip():
            return None
        if not value.lstrip().startswith("<!DOCTYPE"):
            raise ValueError("doctype must start with '<!DOCTYPE'")
        return value.strip()

    @field_validator("gzip_compresslevel")
    @classmethod
    def validate_compresslevel(cls, value: int) -> int:
        """Ensure gzip compression level is within 0-9."""
        if not 0 <= value <= 9:
            raise ValueError("gzip_compresslevel must be between 0 and 9")
        return value

    def __init__(self, **data):
        """Initialize settings and log configuration."""
        super().__init__(**data)

        logger.debug("Configuration loaded:")
        logger.debug("  Encoding: %s", self.encoding)
        logger.debug("  XML Declaration: %s", self.xml_declaration)
        logger.debug("  Pretty Print: %s", self.pretty_print)
        logger.debug("  Doctype: %s", self.doctype or "none")
        logger.debug("  Huge Tree: %s", self.huge_tree)
        logger.debug("  Gzip Compress Level: %s", self.gzip_compresslevel)


settings = XMLTVSettings()


def setup_logging(level: str | None = None) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
