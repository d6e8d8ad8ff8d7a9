"""
Golden Tiger - Core Package

Offline investment learning core: static scenario reference data,
compound-interest projections, and locally persisted personal records
(portfolio holdings, savings goals, sector challenges, simulations).

DESIGN PRINCIPLES:
1. Validate before touching storage
2. Every mutation persists the whole collection
3. Storage failures degrade, they never crash a screen
4. Every mutation is traceable in the diagnostic log
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Golden Tiger Team"
