"""Representa uma pessoa (ator ou diretor)."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Person:
    name: str  # chave de identidade, única no grafo
    birth_year: Optional[int] = None
    nationality: Optional[str] = None
