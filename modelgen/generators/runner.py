from __future__ import annotations
import logging
from typing import Iterable, List, Optional
from modelgen.core.errors import GeneratorFailure
from modelgen.generators.base import BaseGenerator
from modelgen.generators.types import OutputRecord
from modelgen.schemas.generation import GenerationParameters

log = logging.getLogger(__name__)


def run_generators(
    generators: Iterable[BaseGenerator],
    parameters: Optional[GenerationParameters] = None,
    output: Optional[List[OutputRecord]] = None,
) -> List[OutputRecord]:
    """Run each generator in turn; a failing file does not stop the others."""
    if parameters is None:
        parameters = GenerationParameters()
    if output is None:
        output = []

    for generator in generators:
        extra = generator.context.log_extra
        log.info("Generating file", extra=extra)
        try:
            output = generator.generate(parameters, output)
        except GeneratorFailure as e:
            log.error("Generation failed: %s", e, extra=extra)
            output.append(OutputRecord(
                status="failed",
                operation=None,
                file=generator.filename,
                message=str(e),
            ))

    return output
