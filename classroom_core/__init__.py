"""
Codetrio classroom front end.

Streamlit pages live at the repository root (``Home.py`` and ``pages/``);
this package holds the session, routing, data and presentation layers
they share.
"""

__version__ = "0.1.0"
