# backend/invplan/__init__.py
"""
Inventory planning backend.

Pure planning logic for the inventory admin app, exposed over FastAPI:

- capacity: proportional split of class capacity across sizes
- stock_levels: monthly min/max stock targets per size
- material_planning: threshold resolution and stock status

The HTTP app lives in invplan.main; the logic lives in
invplan/apps/*/services.py.
"""
