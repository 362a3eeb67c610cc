from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a theme."""
    # Background colors
    bg_primary: str
    bg_secondary: str
    bg_tertiary: str
    
    # Text colors
    text_primary: str
    text_secondary: str
    text_muted: str
    
    # Accent colors
    accent_primary: str
    accent_hover: str
    
    # Border colors
    border_primary: str
    border_secondary: str
    
    # Search highlight colors
    search_match: str
    search_active: str
    
    error: str
