# panels/load_css.py
import logging
from pathlib import Path

import streamlit as st

logger = logging.getLogger(__name__)

STYLE_PATH = Path(__file__).resolve().parent.parent / "assets" / "style.css"


def load_css(path: Path = STYLE_PATH):
    try:
        with open(path) as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        logger.warning("Stylesheet not found at %s", path)
        st.warning("⚠️ style.css not found in assets/")
