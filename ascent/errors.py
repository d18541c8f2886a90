"""
errors.py

Ієрархія винятків ядра градієнтного підйому.

    AscentError
        ├── InvalidArgumentError   (також ValueError)
        └── DimensionMismatchError (також ValueError)
"""

from __future__ import annotations


class AscentError(Exception):
    """Базовий виняток для всіх помилок ядра."""


class InvalidArgumentError(AscentError, ValueError):
    """
    Некоректний аргумент: недодатний або нескінченний крок,
    від'ємний індекс ітерації, порожній вектор, невідома функція тощо.
    """


class DimensionMismatchError(AscentError, ValueError):
    """Операція над векторами різної розмірності."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(
            f"Розмірності векторів не збігаються: {left} != {right}"
        )
        self.left = left
        self.right = right


__all__ = [
    "AscentError",
    "InvalidArgumentError",
    "DimensionMismatchError",
]
