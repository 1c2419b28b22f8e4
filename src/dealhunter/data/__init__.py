"""Datos estáticos distribuidos con el paquete."""
