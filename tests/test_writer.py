"""Tests for the generated file writer."""
import tempfile
from pathlib import Path
import pytest
from modelgen.core.errors import GeneratorFailure
from modelgen.generators.types import FileOperation
from modelgen.generators.writer import check_overwrite, record_file_operation, save_file


def test_save_file_creates_file():
    """Test that save_file writes the given content."""
    with tempfile.TemporaryDirectory() as temp_dir:
        target = Path(temp_dir) / "Model.py"
        save_file(target, "content\n")
        assert target.read_text(encoding="utf-8") == "content\n"


def test_save_file_creates_nested_directories():
    """Test that missing parent directories are created."""
    with tempfile.TemporaryDirectory() as temp_dir:
        target = Path(temp_dir) / "new" / "nested" / "dir" / "file.txt"
        save_file(str(target), "nested")
        assert target.is_file()
        assert target.read_text(encoding="utf-8") == "nested"


def test_save_file_overwrites_unconditionally():
    """Test that save_file replaces existing content."""
    with tempfile.TemporaryDirectory() as temp_dir:
        target = Path(temp_dir) / "file.txt"
        target.write_text("old", encoding="utf-8")
        save_file(target, "new")
        assert target.read_text(encoding="utf-8") == "new"


def test_save_file_directory_creation_failure():
    """Test the failure raised when the parent directory cannot be created."""
    with tempfile.TemporaryDirectory() as temp_dir:
        blocker = Path(temp_dir) / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(GeneratorFailure, match="Could not create directory"):
            save_file(blocker / "sub" / "file.txt", "x")


def test_save_file_write_failure():
    """Test the failure raised when the file cannot be written."""
    with tempfile.TemporaryDirectory() as temp_dir:
        target = Path(temp_dir) / "is_a_dir"
        target.mkdir()
        with pytest.raises(GeneratorFailure, match="Could not open") as exc_info:
            save_file(target, "x")
        assert isinstance(exc_info.value.__cause__, OSError)


def test_record_file_operation_creating():
    """Test that a missing file is recorded as a creation."""
    with tempfile.TemporaryDirectory() as temp_dir:
        target = Path(temp_dir) / "missing.py"
        output = record_file_operation(target)
        assert len(output) == 1
        assert output[0].status == "ok"
        assert output[0].operation == FileOperation.CREATING
        assert output[0].file == target
        assert not target.exists()


def test_record_file_operation_overwriting_appends():
    """Test that an existing file is recorded as an overwrite on the given log."""
    with tempfile.TemporaryDirectory() as temp_dir:
        target = Path(temp_dir) / "present.py"
        target.write_text("x", encoding="utf-8")
        output = [object()]
        result = record_file_operation(target, output)
        assert result is output
        assert len(output) == 2
        assert output[1].operation == FileOperation.OVERWRITING
        assert output[1].as_dict() == {"status": "ok", "operation": "overwriting", "file": str(target)}


def test_check_overwrite():
    """Test the overwrite guard with and without force."""
    with tempfile.TemporaryDirectory() as temp_dir:
        target = Path(temp_dir) / "file.py"
        check_overwrite(target, force=False)

        target.write_text("x", encoding="utf-8")
        check_overwrite(target, force=True)
        with pytest.raises(GeneratorFailure, match="without --force option"):
            check_overwrite(target, force=False)
