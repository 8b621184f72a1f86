"""Game rules for a firefighting management simulation: tags, events, attributes, vehicles, saves, callouts, hiring and player resources."""

__version__ = "0.1.0"