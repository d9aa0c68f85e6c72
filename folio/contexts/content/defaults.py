"""
Default layout and color values for the portfolio page.

Shared by:
- portfolio_data_structures.py (content counts must match the split weights)
- rendering/widgets.py and rendering/app.py (region splits and colors)
"""

# Fixed-height band at the top of the viewport. Allocated but left empty.
HEADER_HEIGHT = 3

# Percent splits, top to bottom
SECTION_SPLIT = {
    "summary": 10,
    "fun_stuffs": 20,
    "experience": 70,
}
EXPERIENCE_SPLIT = (50, 25, 25)
FUN_STUFF_SPLIT = (50, 50)

# Color scheme (rich color names)
DEFAULT_COLORS = {
    "foreground": "white",
    "background": "black",
    "accent": "bright_green",  # achievement lead-ins, project titles
    "highlight": "bright_magenta",  # "Fun Stuffs" panel title
}
