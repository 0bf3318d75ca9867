# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios que expone el núcleo a las rutas y la UI.
# --------------------------------------------------------------
"""Inicializa el paquete `passapi`."""

__all__ = ["schemas", "services"]
