"""pajeknet.core: in-memory network model."""

from .graph import Directedness, Network

__all__ = ["Directedness", "Network"]
