"""
GoodBuy Valuation Reports

Tier-styled (Professional / Enterprise) business valuation report assembly:
CSS generation, chart rendering and HTML fragment building.
"""

__version__ = "1.0.0"
