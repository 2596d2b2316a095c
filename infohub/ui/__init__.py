"""Streamlit UI for InfoHub."""
