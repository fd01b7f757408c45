"""
Global styles and CSS for the records admin UI.
"""

COLORS = {
    "bg_card": "#f8f9fa",
    "border": "#dee2e6",
    "text_primary": "#212529",
    "text_secondary": "#6c757d",
    "accent_green": "#2e7d32",
    "accent_red": "#c62828",
    "accent_blue": "#1565c0",
}

# Server status -> indicator color
STATUS_COLORS = {
    "Online": COLORS["accent_green"],
    "Error": COLORS["accent_red"],
    "Offline": COLORS["accent_red"],
    "Checking...": COLORS["text_secondary"],
}


def get_global_css() -> str:
    """Return global CSS."""
    return f"""
    <style>
        .status-indicator {{
            display: inline-block;
            padding: 2px 10px;
            border-radius: 12px;
            font-size: 13px;
            font-weight: 600;
            color: white;
        }}

        .access-url-item {{
            background: {COLORS['bg_card']};
            border: 1px solid {COLORS['border']};
            border-radius: 8px;
            padding: 6px 10px;
            margin-bottom: 4px;
            color: {COLORS['text_primary']};
        }}

        .page-info {{
            color: {COLORS['text_secondary']};
            text-align: center;
            padding-top: 6px;
        }}
    </style>
    """


def status_badge(label: str) -> str:
    """HTML badge for the server status indicator."""
    color = STATUS_COLORS.get(label, COLORS["text_secondary"])
    return f'<span class="status-indicator" style="background:{color}">{label}</span>'


def inject_styles():
    """Inject global CSS into the page."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
