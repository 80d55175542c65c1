"""
Log lines shared by the parser and serializer services.
"""
import logging


def log_section_start(logger: logging.Logger, section_name: str) -> None:
    """Log entry into a tree walk, e.g. 'decoding <tv>'."""
    logger.debug(f"Walking {section_name}")


def log_section_end(logger: logging.Logger, section_name: str) -> None:
    logger.debug(f"Finished {section_name}")


def log_document_summary(logger: logging.Logger, action: str, node) -> None:
    """
    Log a one-line summary of a document that was read or written.

    Args:
        logger: Logger instance
        action: What happened to the document (e.g. 'Loaded', 'Wrote')
        node: Root node; channel/programme counts are reported when present
    """
    channels = getattr(node, "channels", None)
    programmes = getattr(node, "programmes", None)
    if channels is None or programmes is None:
        logger.info(f"{action} <{type(node).TAG}> document")
        return
    logger.info(f"{action} document - Channels: {len(channels)}, Programmes: {len(programmes)}")
