"""Ports: interfaces the domain depends on, implemented in infrastructure."""

from typing import Protocol


class Port(Protocol):
    """Marker base for all ports."""
