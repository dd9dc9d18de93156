from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, Field

FilmePath = Literal["/titulo", "/genero", "/duracao"]


class AddOperation(BaseModel):
    op: Literal["add"]
    path: FilmePath
    value: Any


class ReplaceOperation(BaseModel):
    op: Literal["replace"]
    path: FilmePath
    value: Any


class RemoveOperation(BaseModel):
    op: Literal["remove"]
    path: FilmePath


PatchOperation = Annotated[Union[AddOperation, ReplaceOperation, RemoveOperation], Field(discriminator="op")]

PatchDocument = List[PatchOperation]
