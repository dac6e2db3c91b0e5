"""
List, form and container views for colaboradores

Views talk to the backend only through ColaboradoresClient and signal each
other through plain callback lists (sync or async callables).
"""

import inspect
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Union

from ui.api_client import ColaboradoresClient
from ui.state import Editing, Listing, ViewState

logger = logging.getLogger(__name__)

FIELDS = ("nome", "cargo", "salario", "data_admissao")


def blank_colaborador() -> Dict[str, Any]:
    """Template for a new colaborador, admitted today unless edited"""
    return {"nome": "", "cargo": "", "salario": 0, "data_admissao": date.today().isoformat()}


Handler = Callable[..., Any]


async def _emit(handlers: List[Handler], *args: Any) -> None:
    for handler in handlers:
        result = handler(*args)
        if inspect.isawaitable(result):
            await result


class ListView:
    """Shows every colaborador; emits add/edit upward and refetches after a delete"""

    def __init__(self, client: ColaboradoresClient):
        self.client = client
        self.colaboradores: List[Dict[str, Any]] = []
        self.on_add: List[Handler] = []
        self.on_edit: List[Handler] = []

    async def mount(self) -> None:
        self.colaboradores = await self.client.list_all()
        logger.debug(f"Loaded {len(self.colaboradores)} colaboradores")

    async def remove(self, colaborador_id: int) -> None:
        await self.client.delete(colaborador_id)
        await self.mount()

    async def request_add(self) -> None:
        await _emit(self.on_add)

    async def request_edit(self, colaborador: Dict[str, Any]) -> None:
        await _emit(self.on_edit, colaborador)

    def rows(self) -> List[str]:
        """One text row per colaborador, in the order received"""
        return [
            f"{c['id']} | {c['nome']} | {c['cargo']} | {c['salario']} | {c['data_admissao']}"
            for c in self.colaboradores
        ]


class FormView:
    """Edits a local copy of one colaborador and saves it on submit"""

    def __init__(self, client: ColaboradoresClient, colaborador: Optional[Dict[str, Any]] = None):
        self.client = client
        self.colaborador: Dict[str, Any] = blank_colaborador()
        if colaborador:
            self.colaborador.update(colaborador)
        self.on_saved: List[Handler] = []

    @property
    def is_new(self) -> bool:
        return self.colaborador.get("id") is None

    def bind(self, field: str, value: Any) -> None:
        if field not in FIELDS:
            raise KeyError(f"Unknown colaborador field: {field}")
        self.colaborador[field] = value

    async def submit(self) -> None:
        """Update when the colaborador has an id, create otherwise; then emit saved"""
        if self.is_new:
            await self.client.create(self.colaborador)
        else:
            await self.client.update(self.colaborador["id"], self.colaborador)
        await _emit(self.on_saved)


class ColaboradoresContainer:
    """Switches between the list and the form"""

    def __init__(self, client: ColaboradoresClient):
        self.client = client
        self.state: ViewState = Listing()
        self.list_view = self._build_list_view()
        self.form_view: Optional[FormView] = None

    def _build_list_view(self) -> ListView:
        list_view = ListView(self.client)
        list_view.on_add.append(self.open_form)
        list_view.on_edit.append(self.open_form)
        return list_view

    @property
    def current_view(self) -> Union[ListView, FormView]:
        if isinstance(self.state, Editing):
            return self.form_view
        return self.list_view

    async def start(self) -> None:
        await self.list_view.mount()

    def open_form(self, colaborador: Optional[Dict[str, Any]] = None) -> None:
        self.state = Editing(colaborador)
        self.form_view = FormView(self.client, colaborador)
        self.form_view.on_saved.append(self.handle_saved)

    def close_form(self) -> None:
        self.state = Listing()
        self.form_view = None

    async def handle_saved(self) -> None:
        # A fresh list view is mounted, which reloads the records
        self.close_form()
        self.list_view = self._build_list_view()
        await self.list_view.mount()
