"""Human-readable rendering of the operation log."""
from typing import Iterable, List
from modelgen.generators.types import FileOperation, OutputRecord


def render_record(record: OutputRecord) -> str:
    if record.status != "ok":
        return f" ✗  Could not generate file '{record.file}': {record.message}"
    if record.operation == FileOperation.OVERWRITING:
        return f" ✓  Overwriting file '{record.file}'."
    return f" ✓  Creating file '{record.file}'."


def render_output(records: Iterable[OutputRecord]) -> List[str]:
    return [render_record(record) for record in records]
