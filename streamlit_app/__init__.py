"""
Streamlit Dashboard Application.

A single page UI for:
- Adding players
- Recording wins and losses
- Cumulative earnings charts

Run with:
    streamlit run streamlit_app/app.py
"""

__version__ = "0.1.0"
