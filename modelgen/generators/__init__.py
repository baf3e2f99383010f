from modelgen.generators.base import BaseGenerator
from modelgen.generators.runner import run_generators
from modelgen.generators.types import FileOperation, GenerationContext, OutputRecord

__all__ = ["BaseGenerator", "FileOperation", "GenerationContext", "OutputRecord", "run_generators"]
