"""
FOLIO - a terminal-styled portfolio page

Renders a fixed résumé (summary, work experience, side projects) as nested
bordered panels in a terminal-emulator look, and serves it to the browser.

Architecture:
- Content Context: Immutable portfolio content and its data structures
- Rendering Context: Widgets, layout, paint backend and browser host
"""

__version__ = "0.1.0"
