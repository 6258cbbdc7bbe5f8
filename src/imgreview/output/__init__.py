"""Renderers: Rich terminal tables and JSON."""
