"""Representa um filme no domínio do grafo."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Movie:
    title: str  # chave de identidade, única no grafo
    year: Optional[int] = None
    genre: Optional[str] = None
    description: Optional[str] = None
