from http import HTTPStatus
from typing import Annotated, Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request, Response
from fastapi.responses import JSONResponse

from filmes_api.applications.interfaces.dtos.filme import CreateFilmeDto, ReadFilmeDto, UpdateFilmeDto
from filmes_api.applications.interfaces.dtos.patch import PatchDocument
from filmes_api.applications.interfaces.dtos.problem import ValidationProblem
from filmes_api.applications.use_cases.filme.create_filme import CreateFilmeUseCase
from filmes_api.applications.use_cases.filme.create_filmes_em_lote import CreateFilmesEmLoteUseCase
from filmes_api.applications.use_cases.filme.delete_filme import DeleteFilmeUseCase
from filmes_api.applications.use_cases.filme.get_filme import GetFilmeUseCase
from filmes_api.applications.use_cases.filme.get_filmes import GetFilmesPaginadosUseCase, GetFilmesUseCase
from filmes_api.applications.use_cases.filme.patch_filme import PatchFilmeUseCase
from filmes_api.applications.use_cases.filme.update_filme import UpdateFilmeUseCase
from filmes_api.domain.exceptions import NotFoundError, ValidationError
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository
from filmes_api.domain.ports.services.logger import LoggerPort
from filmes_api.infrastructure.config.dependencies import get_filme_repository, get_logger

router = APIRouter(prefix="/filme", tags=["filme"])

FilmeRepositoryDep = Annotated[FilmeRepository, Depends(get_filme_repository)]
LoggerDep = Annotated[LoggerPort, Depends(get_logger)]

NOT_FOUND = {HTTPStatus.NOT_FOUND.value: {"description": "Filme não encontrado"}}
VALIDATION_PROBLEM = {
    HTTPStatus.UNPROCESSABLE_ENTITY.value: {
        "model": ValidationProblem,
        "description": "Dados inválidos",
        "content": {"application/problem+json": {}},
    }
}


def validation_problem(error: ValidationError) -> JSONResponse:
    problem = ValidationProblem(errors=error.errors)
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(),
        media_type="application/problem+json",
    )


@router.post(
    "/adicionar",
    status_code=HTTPStatus.CREATED,
    response_model=ReadFilmeDto,
    summary="Adiciona um filme ao banco de dados",
    response_description="Filme criado",
)
async def adicionar(
    filme: CreateFilmeDto, request: Request, response: Response, filme_repository: FilmeRepositoryDep
):
    use_case = CreateFilmeUseCase(filme_repository)
    created = await use_case.execute(filme)
    response.headers["Location"] = str(request.url_for("recuperar_por_id", filme_id=created.id))
    return created


@router.post(
    "/adicionarEmLote",
    status_code=HTTPStatus.CREATED,
    response_model=List[CreateFilmeDto],
    summary="Adiciona filmes em lote",
    description=(
        "Cada filme é validado e gravado individualmente, na ordem recebida. "
        "Itens inválidos são ignorados e listados no 422 final; os válidos permanecem gravados."
    ),
    responses=VALIDATION_PROBLEM,
)
async def adicionar_em_lote(
    request: Request,
    response: Response,
    filme_repository: FilmeRepositoryDep,
    logger: LoggerDep,
    filmes: Annotated[List[Dict[str, Any]], Body(description="Coleção de filmes a serem adicionados")],
):
    try:
        use_case = CreateFilmesEmLoteUseCase(filme_repository, logger)
        accepted = await use_case.execute(filmes)
    except ValidationError as e:
        return validation_problem(e)

    response.headers["Location"] = str(request.url_for("recuperar_todos"))
    return accepted


@router.get(
    "/recuperarTodos",
    response_model=List[ReadFilmeDto],
    summary="Obtém todos os filmes cadastrados",
)
async def recuperar_todos(filme_repository: FilmeRepositoryDep):
    use_case = GetFilmesUseCase(filme_repository)
    return await use_case.execute()


@router.get(
    "/paginacao/skip/{skip}/take/{take}",
    response_model=List[ReadFilmeDto],
    summary="Obtém filmes com paginação",
    description="`skip` é a posição inicial e `take` quantos filmes retornar a partir dela.",
)
async def recuperar_paginacao(skip: int, take: int, filme_repository: FilmeRepositoryDep):
    use_case = GetFilmesPaginadosUseCase(filme_repository)
    return await use_case.execute(skip=skip, take=take)


@router.get(
    "/{filme_id}",
    response_model=ReadFilmeDto,
    summary="Obtém um filme por id",
    responses=NOT_FOUND,
)
async def recuperar_por_id(filme_id: int, filme_repository: FilmeRepositoryDep):
    try:
        use_case = GetFilmeUseCase(filme_repository)
        return await use_case.execute(filme_id)
    except NotFoundError:
        return Response(status_code=HTTPStatus.NOT_FOUND)


@router.put(
    "/atualizarFilme/{filme_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    summary="Atualiza um filme informando o id",
    responses=NOT_FOUND,
)
async def atualizar_filme(filme_id: int, filme: UpdateFilmeDto, filme_repository: FilmeRepositoryDep):
    try:
        use_case = UpdateFilmeUseCase(filme_repository)
        await use_case.execute(filme_id, filme)
    except NotFoundError:
        return Response(status_code=HTTPStatus.NOT_FOUND)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.patch(
    "/atualizarFilmeParcial/{filme_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    summary="Atualiza parcialmente um filme",
    description="Recebe uma lista ordenada de operações `add`, `replace` ou `remove` sobre `/titulo`, "
    "`/genero` ou `/duracao`.",
    responses={**NOT_FOUND, **VALIDATION_PROBLEM},
)
async def atualizar_filme_parcial(
    filme_id: int,
    patch: Annotated[PatchDocument, Body()],
    filme_repository: FilmeRepositoryDep,
):
    try:
        use_case = PatchFilmeUseCase(filme_repository)
        await use_case.execute(filme_id, patch)
    except NotFoundError:
        return Response(status_code=HTTPStatus.NOT_FOUND)
    except ValidationError as e:
        return validation_problem(e)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.delete(
    "/deletarFilme/{filme_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    summary="Remove um filme informando o id",
    responses=NOT_FOUND,
)
async def deletar_filme(filme_id: int, filme_repository: FilmeRepositoryDep):
    try:
        use_case = DeleteFilmeUseCase(filme_repository)
        await use_case.execute(filme_id)
    except NotFoundError:
        return Response(status_code=HTTPStatus.NOT_FOUND)
    return Response(status_code=HTTPStatus.NO_CONTENT)
