"""Rendering and export of computed results (display strings, CSV table, PDF summary)."""
