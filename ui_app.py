"""Streamlit UI for counting references of selected planning rows."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd
import plotly.express as px
import streamlit as st

from refcounter import (
    CounterSession,
    MalformedFile,
    PLAN_SHEET_NAME,
    SheetNotFound,
    load_config,
    tally_frame,
    tally_to_bytes,
)
from refcounter.cli import LOG_FORMAT
from refcounter.reporting import EXPORT_MIME_TYPE

CONFIG_PATH = Path("config/config.yaml")
CONFIG = load_config(CONFIG_PATH if CONFIG_PATH.exists() else None)

logging.basicConfig(
    level=getattr(logging, CONFIG.logging.level.upper(), logging.INFO),
    format=LOG_FORMAT,
)
logger = logging.getLogger("refcounter.ui")

st.set_page_config(page_title=CONFIG.ui.page_title, layout=CONFIG.ui.layout)

SESSION_KEY = "counter_session"
UPLOAD_KEY = "loaded_upload"
GENERATION_KEY = "load_generation"

COLUMN_LABELS = {
    "selected": "Sélection",
    "primary": "Support N°",
    "secondary": "Type",
    "key": "Symbole",
}


def _get_session() -> CounterSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = CounterSession()
        st.session_state[GENERATION_KEY] = 0
    return st.session_state[SESSION_KEY]


def _upload_signature(uploaded) -> str:
    file_id = getattr(uploaded, "file_id", None)
    if file_id:
        return str(file_id)
    return f"{uploaded.name}:{uploaded.size}"


def _load_upload(session: CounterSession, uploaded) -> None:
    signature = _upload_signature(uploaded)
    if st.session_state.get(UPLOAD_KEY) == signature:
        return
    # Remember the attempt so a failing file is not re-parsed on every rerun.
    st.session_state[UPLOAD_KEY] = signature
    try:
        session.parse_file(uploaded.getvalue(), name=uploaded.name)
    except SheetNotFound:
        st.error(f'Aucune feuille "{PLAN_SHEET_NAME}" trouvée dans le fichier Excel')
        logger.warning("Upload %s has no '%s' sheet", uploaded.name, PLAN_SHEET_NAME)
        return
    except MalformedFile as exc:
        st.error(f"Impossible de lire le fichier Excel : {exc}")
        logger.warning("Upload %s could not be parsed: %s", uploaded.name, exc)
        return
    st.session_state[GENERATION_KEY] += 1
    st.session_state["base_frame"] = session.store.to_frame()


def _apply_selection(session: CounterSession, edited: pd.DataFrame) -> None:
    """Toggle every row whose checkbox differs from the store."""

    current: Dict[int, bool] = {row.index: row.selected for row in session.store.snapshot()}
    changed: List[int] = []
    for index, flag in zip(edited["index"].tolist(), edited["selected"].fillna(False).tolist()):
        if current.get(int(index)) != bool(flag):
            changed.append(int(index))
    for index in changed:
        session.toggle_row(index)


def _render_rows(session: CounterSession) -> None:
    header_cols = st.columns([8, 1])
    header_cols[0].subheader("Données des Supports")
    header_cols[1].markdown(
        "ℹ️", help="Sélectionnez les lignes pour compter leurs références"
    )

    base_frame = st.session_state.get("base_frame")
    if base_frame is None or base_frame.empty:
        st.info("Glissez-déposez un fichier Excel pour afficher ses lignes.")
        return

    column_config = {
        "selected": st.column_config.CheckboxColumn(COLUMN_LABELS["selected"], default=False),
        "primary": st.column_config.TextColumn(COLUMN_LABELS["primary"], disabled=True),
        "secondary": st.column_config.TextColumn(COLUMN_LABELS["secondary"], disabled=True),
        "key": st.column_config.TextColumn(COLUMN_LABELS["key"], disabled=True),
    }
    edited = st.data_editor(
        base_frame,
        hide_index=True,
        column_config=column_config,
        column_order=["selected", "primary", "secondary", "key"],
        key=f"rows_editor_{st.session_state[GENERATION_KEY]}",
        use_container_width=True,
    )
    if isinstance(edited, pd.DataFrame):
        _apply_selection(session, edited)


def _render_tally(session: CounterSession) -> None:
    st.subheader("Comptage des Références")
    tally = session.store.tally
    if not tally:
        st.info("Sélectionnez des lignes pour voir le comptage des références")
    else:
        for reference, count in tally.items():
            cols = st.columns([3, 1])
            cols[0].write(reference)
            cols[1].markdown(f"**{count}**")
        chart_data = tally_frame(tally)
        fig = px.bar(chart_data, x="reference", y="count", text="count")
        fig.update_layout(xaxis_title="Référence", yaxis_title="Nombre", showlegend=False)
        st.plotly_chart(fig, use_container_width=True)

    st.download_button(
        "Télécharger les Comptages",
        data=tally_to_bytes(tally),
        file_name=CONFIG.export.filename,
        mime=EXPORT_MIME_TYPE,
        disabled=not tally,
    )


session = _get_session()

st.title(CONFIG.ui.page_title)
uploaded = st.file_uploader(
    "Glissez-déposez votre fichier Excel ici, ou cliquez pour sélectionner un fichier",
    type=["xlsx", "xls"],
    accept_multiple_files=False,
)
if uploaded is not None:
    _load_upload(session, uploaded)

rows_col, tally_col = st.columns([2, 1])
with rows_col:
    _render_rows(session)
with tally_col:
    _render_tally(session)
