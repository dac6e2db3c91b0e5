"""
Colaboradores API routes
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Request

from models.colaborador import (
    ColaboradorCreateRequest,
    ColaboradorUpdateRequest,
    ColaboradorResponse,
    MessageResponse,
)
from services.base_service import ServiceResult, CONNECTION_ERROR, STORE_ERROR
from services.colaboradores_service import ColaboradoresService
from utils.error_handling import set_endpoint_context

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Colaborador não encontrado"


def get_colaboradores_service(request: Request) -> ColaboradoresService:
    """Service instance injected by the application factory"""
    return request.app.state.colaboradores_service


def raise_for_result(result: ServiceResult) -> None:
    """Translate a failed service result into an HTTP error"""
    if result.success:
        return
    if result.error_type == CONNECTION_ERROR:
        raise HTTPException(status_code=503, detail="Database unavailable")
    elif result.error_type == STORE_ERROR:
        raise HTTPException(status_code=500, detail=result.error)
    else:
        raise HTTPException(status_code=500, detail=f"Service error: {result.error}")


@router.get("", response_model=List[ColaboradorResponse])
async def list_colaboradores(
    service: ColaboradoresService = Depends(get_colaboradores_service)
):
    """List all colaboradores"""
    set_endpoint_context("list_colaboradores")
    result = await service.list_all()
    raise_for_result(result)
    return [ColaboradorResponse(**row) for row in result.data]


@router.post("", status_code=201, response_model=MessageResponse, response_model_exclude_none=True)
async def create_colaborador(
    request: ColaboradorCreateRequest,
    service: ColaboradoresService = Depends(get_colaboradores_service)
):
    """Create a colaborador"""
    set_endpoint_context("create_colaborador")
    result = await service.create(request.model_dump())
    raise_for_result(result)

    created = result.data[0]
    return MessageResponse(message="Colaborador criado com sucesso!", id=created["id"])


@router.put("/{colaborador_id}", response_model=MessageResponse, response_model_exclude_none=True)
async def update_colaborador(
    colaborador_id: int,
    request: ColaboradorUpdateRequest,
    service: ColaboradoresService = Depends(get_colaboradores_service)
):
    """Overwrite every field of a colaborador"""
    set_endpoint_context("update_colaborador")
    result = await service.update(colaborador_id, request.model_dump())
    raise_for_result(result)

    if result.count == 0:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return MessageResponse(message="Colaborador atualizado com sucesso!")


@router.delete("/{colaborador_id}", response_model=MessageResponse, response_model_exclude_none=True)
async def delete_colaborador(
    colaborador_id: int,
    service: ColaboradoresService = Depends(get_colaboradores_service)
):
    """Delete a colaborador"""
    set_endpoint_context("delete_colaborador")
    result = await service.delete(colaborador_id)
    raise_for_result(result)

    if result.count == 0:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return MessageResponse(message="Colaborador deletado com sucesso!")
