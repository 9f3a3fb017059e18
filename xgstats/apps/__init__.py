"""
Applications Package für die xG Stats Pipeline

Enthält die Kommandozeile (click) zum Scrapen, Anzeigen und Servieren.
"""

__all__: list[str] = []
