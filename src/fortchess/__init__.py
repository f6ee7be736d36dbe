"""Fort Chess - rules engine for a three-armed, fort-centred chess variant."""

__version__ = "0.1.0"
