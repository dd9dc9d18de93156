from typing import Any, Dict, List, Sequence

from pydantic import ValidationError as PydanticValidationError

from filmes_api.applications.interfaces.dtos.filme import UpdateFilmeDto
from filmes_api.applications.interfaces.dtos.patch import (
    AddOperation,
    PatchOperation,
    RemoveOperation,
    ReplaceOperation,
)
from filmes_api.domain.exceptions import ValidationError


class FilmePatchService:
    """Applies an ordered list of patch operations to an UpdateFilmeDto"""

    @staticmethod
    def field_name(path: str) -> str:
        return path.lstrip("/")

    @staticmethod
    def apply(target: UpdateFilmeDto, operations: Sequence[PatchOperation]) -> UpdateFilmeDto:
        fields: Dict[str, Any] = target.model_dump()

        for operation in operations:
            name = FilmePatchService.field_name(operation.path)
            if isinstance(operation, (AddOperation, ReplaceOperation)):
                fields[name] = operation.value
            elif isinstance(operation, RemoveOperation):
                fields[name] = None
            else:
                raise TypeError(f"Unsupported patch operation: {operation!r}")

        return FilmePatchService.validate(fields)

    @staticmethod
    def validate(fields: Dict[str, Any]) -> UpdateFilmeDto:
        try:
            return UpdateFilmeDto.model_validate(fields)
        except PydanticValidationError as e:
            raise ValidationError(errors_from_pydantic(e)) from e


def errors_from_pydantic(error: PydanticValidationError, prefix: str = "") -> Dict[str, List[str]]:
    """Group pydantic error messages by dotted field location"""
    errors: Dict[str, List[str]] = {}
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        key = f"{prefix}.{location}" if prefix and location else (prefix or location)
        errors.setdefault(key, []).append(item["msg"])
    return errors
