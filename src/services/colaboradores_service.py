"""
Colaboradores service - one SQL statement per CRUD operation
"""

import logging
from decimal import Decimal
from typing import Dict, Any, List

from database.connection import ConnectionPool
from services.base_service import BaseService, ServiceResult, affected_rows

logger = logging.getLogger(__name__)

COLUMNS = "id, nome, cargo, salario, data_admissao"

LIST_SQL = f"SELECT {COLUMNS} FROM colaboradores"
INSERT_SQL = (
    "INSERT INTO colaboradores (nome, cargo, salario, data_admissao) "
    f"VALUES ($1, $2, $3, $4) RETURNING {COLUMNS}"
)
UPDATE_SQL = (
    "UPDATE colaboradores SET nome = $1, cargo = $2, salario = $3, data_admissao = $4 "
    "WHERE id = $5"
)
DELETE_SQL = "DELETE FROM colaboradores WHERE id = $1"

# Range of the SERIAL (int4) id column
MIN_ID = -2**31
MAX_ID = 2**31 - 1


def _row_params(data: Dict[str, Any]) -> List[Any]:
    # NUMERIC columns are encoded from Decimal
    salario = data.get("salario")
    if salario is not None and not isinstance(salario, Decimal):
        salario = Decimal(str(salario))
    return [data.get("nome"), data.get("cargo"), salario, data.get("data_admissao")]


class ColaboradoresService(BaseService):
    """Service for colaborador records"""

    def __init__(self, pool: ConnectionPool):
        super().__init__("colaboradores", pool)

    async def list_all(self) -> ServiceResult:
        """
        List every colaborador in store order

        Returns:
            ServiceResult with all rows; an empty store gives an empty list
        """
        try:
            async with self.pool.connection() as conn:
                rows = await conn.fetch(LIST_SQL)
        except Exception as e:
            return self.failure("list_all", e)

        data = [dict(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a new colaborador; the id is assigned by the store

        Args:
            data: nome, cargo, salario and data_admissao (an id is ignored)

        Returns:
            ServiceResult with the created row
        """
        try:
            async with self.pool.connection() as conn:
                row = await conn.fetchrow(INSERT_SQL, *_row_params(data))
        except Exception as e:
            return self.failure("create", e)

        created = dict(row)
        logger.info(f"Created colaborador {created['id']}")
        return ServiceResult(success=True, data=[created], count=1)

    async def update(self, colaborador_id: int, data: Dict[str, Any]) -> ServiceResult:
        """
        Overwrite all fields of the colaborador with the given id

        A missing id affects zero rows and is still a success.
        """
        if not MIN_ID <= colaborador_id <= MAX_ID:
            return ServiceResult(success=True, data=[], count=0)

        try:
            async with self.pool.connection() as conn:
                status = await conn.execute(UPDATE_SQL, *_row_params(data), colaborador_id)
        except Exception as e:
            return self.failure("update", e)

        count = affected_rows(status)
        logger.info(f"Updated colaborador {colaborador_id} ({count} row(s))")
        return ServiceResult(success=True, data=[], count=count)

    async def delete(self, colaborador_id: int) -> ServiceResult:
        """Remove the colaborador with the given id; a missing id is a no-op"""
        if not MIN_ID <= colaborador_id <= MAX_ID:
            return ServiceResult(success=True, data=[], count=0)

        try:
            async with self.pool.connection() as conn:
                status = await conn.execute(DELETE_SQL, colaborador_id)
        except Exception as e:
            return self.failure("delete", e)

        count = affected_rows(status)
        logger.info(f"Deleted colaborador {colaborador_id} ({count} row(s))")
        return ServiceResult(success=True, data=[], count=count)
