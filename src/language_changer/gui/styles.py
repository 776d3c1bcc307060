"""Theme and style constants for the GUI.

All GUI components should reference these constants to maintain consistent styling.

Constants:
    COLORS: Color palette for buttons, text, and UI elements
    FONTS: Font family, size, and weight configurations
    PADDING: Spacing values for margins and padding
    WINDOW_SIZES: Default window dimensions
"""

COLORS = {
    "primary": "#1f538d",        # Save button (blue)
    "primary_hover": "#14375e",  # Save button hover state
    "success": "#2d8a4e",        # Known current language (green)
    "warning": "#ffc107",        # Unknown current language (yellow)
    "muted": "#6c757d",          # Secondary text (gray)
}

# Font configurations - tuple format: (family, size, weight)
FONTS = {
    "title": ("Segoe UI", 18, "bold"),
    "heading": ("Segoe UI", 14, "bold"),
    "body": ("Segoe UI", 12),
    "small": ("Segoe UI", 10),
}

# Padding and spacing values in pixels
PADDING = {
    "small": 10,
    "medium": 18,
    "large": 30,
}

# Window sizes - tuple format: (width, height)
WINDOW_SIZES = {
    "main": (420, 260),
    "config_dialog": (460, 340),
}
