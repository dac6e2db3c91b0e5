"""
Colaborador Pydantic models
"""

from typing import Optional
from datetime import date
from pydantic import BaseModel


class ColaboradorBase(BaseModel):
    nome: str
    cargo: str
    salario: float
    data_admissao: date


class ColaboradorCreateRequest(ColaboradorBase):
    """Body of POST /colaboradores; an id in the payload is ignored"""


class ColaboradorUpdateRequest(ColaboradorBase):
    """Body of PUT /colaboradores/{id}; every field is overwritten"""


class ColaboradorResponse(ColaboradorBase):
    id: int


class MessageResponse(BaseModel):
    message: str
    id: Optional[int] = None
