"""
Abstract base class for model file generators.

A generator produces exactly one file described by its GenerationContext.
Subclasses implement ``generate()`` and ``get_code_template()`` and use the
helpers below to merge the template, guard against overwrites and save the
result.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from modelgen.core.errors import GeneratorFailure
from modelgen.db.session import GeneratorSession
from modelgen.generators import writer
from modelgen.generators.template import merge_template
from modelgen.generators.types import GenerationContext, OutputRecord
from modelgen.schemas.generation import GenerationParameters


class BaseGenerator(ABC):
    """Base class for all generators."""

    def __init__(self, context: GenerationContext, session: Optional[GeneratorSession] = None):
        self.context = context
        self._session = session

    @property
    def filename(self) -> Path:
        return self.context.filename

    def get_session(self) -> GeneratorSession:
        """Return the session, raising GeneratorFailure if none was given."""
        if self._session is None:
            raise GeneratorFailure("Session is not set.")
        return self._session

    def get_inspector(self) -> Any:
        """Shortcut to the session's inspector client."""
        return self.get_session().get_client_using_pooler("inspector", None)

    @abstractmethod
    def generate(
        self,
        parameters: GenerationParameters,
        output: Optional[List[OutputRecord]] = None,
    ) -> List[OutputRecord]:
        """
        Generate the file.

        Args:
            parameters: Named generation parameters (``force`` at least)
            output: Operation log to append to

        Returns:
            The output log
        """

    @abstractmethod
    def get_code_template(self) -> str:
        """Return the raw code template for the generated file."""

    def merge_template(self, variables: Mapping[str, Any]) -> str:
        return merge_template(self.get_code_template(), variables)

    def record_file_operation(self, output: Optional[List[OutputRecord]] = None) -> List[OutputRecord]:
        return writer.record_file_operation(self.filename, output)

    def save_file(self, filename: Union[str, Path], content: str) -> "BaseGenerator":
        writer.save_file(filename, content)
        return self

    def check_overwrite(self, force: Union[bool, GenerationParameters]) -> "BaseGenerator":
        if isinstance(force, GenerationParameters):
            force = force.force
        writer.check_overwrite(self.filename, force)
        return self

    def write_file(
        self,
        content: str,
        parameters: GenerationParameters,
        output: Optional[List[OutputRecord]] = None,
    ) -> List[OutputRecord]:
        """Check for overwrite, save the file, then record the operation."""
        if output is None:
            output = []
        self.check_overwrite(parameters)
        # Existence is sampled before the save; the record is only kept on success
        record = writer.file_operation_record(self.filename)
        self.save_file(self.filename, content)
        output.append(record)
        return output
