"""
Theme management and styling for the application.
"""
from dataclasses import replace
from typing import Optional

from PyQt5.QtWidgets import QWidget

from .models import ThemeColors


class ThemeManager:
    """Manages application themes and styling."""
    
    DARK_THEME = ThemeColors(
        # Backgrounds
        bg_primary="#2e2e2e",
        bg_secondary="#3e3e3e",
        bg_tertiary="#4e4e4e",
        
        # Text
        text_primary="#f0f0f0",
        text_secondary="#B5B5C5",
        text_muted="#8899AA",
        
        # Accent
        accent_primary="#4a9eff",
        accent_hover="#3a8eef",
        
        # Borders
        border_primary="#555555",
        border_secondary="#3e3e3e",
        
        # Search
        search_match="#6b6b1f",
        search_active="#c77700",
        
        error="#ff6b6b",
    )
    
    LIGHT_THEME = ThemeColors(
        # Backgrounds
        bg_primary="#f0f0f0",
        bg_secondary="#ffffff",
        bg_tertiary="#e0e0e0",
        
        # Text
        text_primary="#2e2e2e",
        text_secondary="#7A899C",
        text_muted="#8899AA",
        
        # Accent
        accent_primary="#4a9eff",
        accent_hover="#3a8eef",
        
        # Borders
        border_primary="#cccccc",
        border_secondary="#e0e0e0",
        
        # Search
        search_match="#ffff66",
        search_active="#ffa500",
        
        error="#ff6b6b",
    )
    
    @classmethod
    def get_theme_colors(cls, dark_mode: bool, match_color: Optional[str] = None,
                         active_color: Optional[str] = None) -> ThemeColors:
        """
        Get theme colors for the current mode.
        
        Args:
            dark_mode: Whether to get dark theme colors
            match_color: Override for the search match color
            active_color: Override for the current search match color
            
        Returns:
            ThemeColors object
        """
        theme = cls.DARK_THEME if dark_mode else cls.LIGHT_THEME
        if match_color:
            theme = replace(theme, search_match=match_color)
        if active_color:
            theme = replace(theme, search_active=active_color)
        return theme
    
    @classmethod
    def apply_theme(cls, widget: QWidget, theme: ThemeColors) -> None:
        """
        Apply theme to a widget and its children.
        
        Args:
            widget: Widget to style
            theme: Colors to use
        """
        widget.setStyleSheet(cls._generate_stylesheet(theme))
    
    @classmethod
    def _generate_stylesheet(cls, theme: ThemeColors) -> str:
        """
        Generate a complete stylesheet from theme colors.
        
        Args:
            theme: Theme colors to use
            
        Returns:
            Complete CSS stylesheet string
        """
        return f"""
            /* --- GENERAL STYLES --- */
            QMainWindow, QWidget, QLineEdit, QLabel, QFrame {{
                background-color: {theme.bg_primary};
                color: {theme.text_primary};
                border: none;
            }}
            
            /* --- TOOL BUTTONS --- */
            QToolButton {{
                background-color: transparent;
                color: {theme.text_secondary};
                border: none;
                border-radius: 4px;
                padding: 4px;
            }}
            QToolButton:hover {{
                background-color: {theme.bg_secondary};
            }}
            QToolButton:pressed {{
                background-color: {theme.bg_primary};
            }}
            QToolButton:disabled {{
                color: {theme.text_muted};
            }}
            
            /* --- INPUTS --- */
            QLineEdit {{
                background-color: {theme.bg_secondary};
                border: 1px solid {theme.border_primary};
                border-radius: 6px;
                padding: 6px 10px;
                color: {theme.text_primary};
            }}
            QLineEdit:focus {{
                border: 1px solid {theme.accent_primary};
            }}
            
            /* --- LABELS --- */
            QLabel {{
                background-color: transparent;
            }}
            QLabel[objectName="statusLabel"], QLabel[objectName="positionLabel"] {{
                color: {theme.text_muted};
            }}
            
            /* --- DOCUMENT LIST --- */
            QListWidget {{
                background-color: {theme.bg_primary};
                color: {theme.text_primary};
                border: 1px solid {theme.border_secondary};
                outline: none;
            }}
            QListWidget::item {{
                padding: 6px;
            }}
            QListWidget::item:hover {{
                background-color: {theme.bg_secondary};
            }}
            QListWidget::item:selected {{
                background-color: {theme.accent_primary};
                color: white;
            }}
            
            /* --- PAGE TEXT --- */
            QTextBrowser {{
                background-color: {theme.bg_secondary};
                color: {theme.text_primary};
                border: none;
            }}
            
            QScrollBar:vertical {{
                background-color: {theme.bg_primary};
                width: 12px;
                border: none;
            }}
            QScrollBar::handle:vertical {{
                background-color: {theme.bg_tertiary};
                border-radius: 6px;
                min-height: 20px;
            }}
            QScrollBar::add-line:vertical, 
            QScrollBar::sub-line:vertical {{
                background: none;
                height: 0px;
            }}
            
            /* --- FLOATING TOOLBARS --- */
            #SearchBar {{
                background-color: {theme.bg_primary};
                border: 1px solid {theme.border_secondary};
                border-radius: 8px;
            }}
            
            /* --- MESSAGE BOX --- */
            QMessageBox {{
                background-color: {theme.bg_primary};
            }}
            QMessageBox QLabel {{
                color: {theme.text_primary};
            }}
        """
