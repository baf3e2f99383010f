import logging
import sys
from typing import Optional

from modelgen.core.config import settings

# Fields generators attach through ``extra=``; missing ones print as '-'
CONTEXT_FIELDS = ("schema", "relation", "target")


class ContextFormatter(logging.Formatter):
    """Formatter that prints the schema, relation and target file of a generation."""
    def format(self, record):
        for name in CONTEXT_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, '-')
        return super().format(record)


def configure_logging(level: Optional[str] = None) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s "
        "[schema=%(schema)s relation=%(relation)s target=%(target)s] - %(message)s"
    ))
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        handlers=[handler],
    )
