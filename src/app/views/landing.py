from typing import Callable

import streamlit as st

from src.config.landing_page import LandingPageConfig


def render_landing_page(config: LandingPageConfig, on_enter: Callable[[], None]) -> None:
    """Render the landing page with its highlight cards and the entry button."""
    st.title(config.title)
    st.markdown(config.subtitle)
    st.divider()

    if config.highlights:
        cols = st.columns(len(config.highlights))
        for col, card in zip(cols, config.highlights):
            with col:
                with st.container(border=True):
                    st.subheader(f"{card.icon} {card.title}")
                    st.write(card.description)

    st.button("Enter Dashboard", key="enter_dashboard", on_click=on_enter, type="primary")

    if config.footer:
        st.caption(config.footer)
