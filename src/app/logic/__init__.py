"""App logic package.

Selection and view-state logic for Streamlit application.
Pure Python/Polars - no Streamlit UI calls.
"""

__all__ = ["dashboard", "session", "view_state"]
