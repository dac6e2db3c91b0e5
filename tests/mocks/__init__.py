from .fake_colaboradores_service import InMemoryColaboradoresService
from .fake_pool import FakePool, make_connection

__all__ = ["FakePool", "InMemoryColaboradoresService", "make_connection"]
