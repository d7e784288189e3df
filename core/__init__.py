"""Core (UI-agnostic) partnerships dashboard logic.

This package contains:
- sheet fetching and CSV parsing (requests -> Record)
- filter criteria normalization
- filtering / summary derivation and the page payload
- chart helpers (Altair -> Vega-Lite spec dict)
"""

