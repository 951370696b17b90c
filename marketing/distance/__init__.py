"""
City distance layer.

Responsibilities:
- Compute Manhattan distances between cities in the static table.
- Memoise them under a canonical, order-independent pair key.
"""
