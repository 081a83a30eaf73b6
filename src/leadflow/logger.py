import logging
import re
from rich.logging import RichHandler

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_PATTERN = re.compile(r"(?<![\w-])\+?\d{1,3}[\s.-]?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?![\w-])")
REDACTED = "***REDACTED***"


class PHIRedactionFilter(logging.Filter):
    """Mask patient emails and phone numbers before a record is emitted."""

    def filter(self, record):
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Leave bad format args for the handler to report.
            return True
        masked = PHONE_PATTERN.sub(REDACTED, EMAIL_PATTERN.sub(REDACTED, message))
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        handler = RichHandler(rich_tracebacks=True)
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(formatter)
        handler.addFilter(PHIRedactionFilter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger
