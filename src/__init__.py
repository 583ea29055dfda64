"""
Main application package for BetTrack Ledger.

This is the core of the dashboard providing:
- The in-memory player ledger and its derived views
- Chart helpers built on pandas and matplotlib
- Session logging

Consumed by the Streamlit dashboard (streamlit_app/) and the
scripts/ helpers.
"""

__version__ = "0.1.0"
