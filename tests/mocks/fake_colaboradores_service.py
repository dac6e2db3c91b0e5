from typing import Any, Dict, List

from services.base_service import ServiceResult


class InMemoryColaboradoresService:
    """In-memory replacement for ColaboradoresService with the same result semantics"""

    def __init__(self):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1

    async def list_all(self) -> ServiceResult:
        data: List[Dict[str, Any]] = [dict(row) for row in self.rows.values()]
        return ServiceResult(success=True, data=data, count=len(data))

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        row = {
            "id": self._next_id,
            "nome": data.get("nome"),
            "cargo": data.get("cargo"),
            "salario": data.get("salario"),
            "data_admissao": data.get("data_admissao"),
        }
        self.rows[row["id"]] = row
        self._next_id += 1
        return ServiceResult(success=True, data=[dict(row)], count=1)

    async def update(self, colaborador_id: int, data: Dict[str, Any]) -> ServiceResult:
        row = self.rows.get(colaborador_id)
        if row is None:
            return ServiceResult(success=True, data=[], count=0)
        for field in ("nome", "cargo", "salario", "data_admissao"):
            row[field] = data.get(field)
        return ServiceResult(success=True, data=[], count=1)

    async def delete(self, colaborador_id: int) -> ServiceResult:
        removed = self.rows.pop(colaborador_id, None)
        return ServiceResult(success=True, data=[], count=0 if removed is None else 1)
