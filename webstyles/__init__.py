"""
Style guide scraper.

This package fetches the style guide's color and typographic scale pages,
extracts the definitions held in their HTML tables, and renders them as CSS
custom properties.
"""
