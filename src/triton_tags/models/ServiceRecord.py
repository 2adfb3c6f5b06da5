from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ServiceRecord:
    """
    Um serviço anunciado na tag triton.cns.services.

    Só existe durante a validação; o que é persistido é a string original.
    A porta fica como o texto digitado (ex.: "0080").
    """

    name: str
    port: Optional[str] = None
    priority: Optional[int] = None
    weight: Optional[int] = None

    @property
    def port_number(self) -> Optional[int]:
        return None if self.port is None else int(self.port)
