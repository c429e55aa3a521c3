"""Export utilities for load results."""

from pathlib import Path

from pydantic import TypeAdapter

from gitcard.models.result import LoadResult

_load_result_adapter: TypeAdapter[LoadResult] = TypeAdapter(LoadResult)


def to_json(result: LoadResult, indent: int = 2) -> str:
    """
    Convert a LoadResult to a JSON string.

    Args:
        result: ProfileLoaded or ProfileFailed to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return result.model_dump_json(indent=indent)


def to_dict(result: LoadResult) -> dict:
    """Convert a LoadResult to a JSON-compatible dictionary."""
    return result.model_dump(mode="json")


def save_json(
    result: LoadResult,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save a LoadResult to a JSON file.

    Args:
        result: LoadResult to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.model_dump_json(indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> LoadResult:
    """
    Load a LoadResult from a JSON file.

    The ``status`` field decides whether a ProfileLoaded or a
    ProfileFailed comes back.
    """
    path = Path(filepath)
    return _load_result_adapter.validate_json(path.read_text(encoding="utf-8"))
