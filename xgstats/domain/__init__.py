"""
Domain Module
Validierte Wertobjekte für Fixtures und Schüsse
"""

from .models import Fixture, Shot, ShotType

__all__ = ["Fixture", "Shot", "ShotType"]
