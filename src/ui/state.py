"""
Display state of the colaboradores screen
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Listing:
    """The list of colaboradores is shown"""


@dataclass(frozen=True)
class Editing:
    """The form is shown; record is None when creating a new colaborador"""
    record: Optional[Dict[str, Any]] = None

    @property
    def is_new(self) -> bool:
        return self.record is None or self.record.get("id") is None


ViewState = Union[Listing, Editing]
