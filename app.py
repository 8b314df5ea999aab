# app.py
import pandas as pd
import streamlit as st

from gift_exchange.config import DEFAULT_CONFIG, ensure_assets_exist
from gift_exchange.io import (
    load_participants_csv,
    generate_template_csv_bytes,
    load_exchange_yaml,
    assignment_to_df,
    save_assignment_csv_bytes,
)
from gift_exchange.models import ExchangeConfig, ExchangeSpec
from gift_exchange.exchange import run_exchange


# ---------- Page ----------
st.set_page_config(page_title="Gift Exchange Draw", layout="centered")

exchange_path, sample_path = ensure_assets_exist()

# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("participants_df", None)          # Name, Partner
    ss.setdefault("exchange_spec", None)            # ExchangeSpec loaded from YAML (carries rules)
    ss.setdefault("exchange_config", ExchangeConfig(**DEFAULT_CONFIG))
    ss.setdefault("last_result", None)
    ss.setdefault("reveal", False)
    ss.setdefault("upload_id", None)              # last applied uploader file_id

_init_state()


def _participants_df(people, couples) -> pd.DataFrame:
    partner = {}
    for a, b in couples:
        partner.setdefault(a, b)
        partner.setdefault(b, a)
    return pd.DataFrame([{"Name": p, "Partner": partner.get(p, "")} for p in people])


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Draw Config")
    cfg = st.session_state.exchange_config
    max_attempts = st.number_input("Rejections before restart", min_value=1, max_value=1000,
                                   value=cfg.max_assignment_attempts, step=1)
    max_restarts = st.number_input("Max restarts", min_value=1, max_value=100_000,
                                   value=cfg.max_total_restarts, step=100)
    use_seed = st.checkbox("Reproducible (seeded) draw", value=cfg.random_seed is not None)
    seed = st.number_input("Random seed", min_value=0, max_value=1_000_000,
                           value=cfg.random_seed or 0, step=1, disabled=not use_seed)
    st.session_state.exchange_config = ExchangeConfig(
        max_assignment_attempts=int(max_attempts),
        max_total_restarts=int(max_restarts),
        random_seed=int(seed) if use_seed else None,
    )

    st.divider()
    st.subheader("📄 Files")
    st.download_button(
        "template.csv",
        data=generate_template_csv_bytes(),
        file_name="template.csv",
        mime="text/csv",
        use_container_width=True,
    )
    if st.button("Load exchange.yaml", use_container_width=True):
        try:
            spec = load_exchange_yaml(exchange_path)
        except ValueError as e:
            st.error(f"exchange.yaml is invalid: {e}")
        else:
            st.session_state.exchange_spec = spec
            st.session_state.participants_df = _participants_df(spec.participants, spec.significant_others)
            st.success(f"Loaded {len(spec.participants)} participants, {len(spec.rules)} rule(s).")


st.title("🎁 Gift Exchange Draw")
st.caption("Everyone gives one gift and gets one gift. Nobody draws themselves or their partner.")

# ---------- 1) Participants ----------
st.subheader("1) Participants")
up_col1, up_col2 = st.columns([2, 1])
with up_col1:
    file = st.file_uploader("Upload participants CSV (Name, Partner)", type=["csv"])
with up_col2:
    if st.button("Load sample participants"):
        st.session_state.participants_df = _participants_df(*load_participants_csv(sample_path))
        st.session_state.exchange_spec = None

# apply an upload once; later reruns keep edits and other loads
if file is not None and file.file_id != st.session_state.upload_id:
    st.session_state.upload_id = file.file_id
    try:
        people, couples = load_participants_csv(file.getvalue())
    except ValueError as e:
        st.error(f"Error loading CSV: {e}")
    else:
        st.session_state.participants_df = _participants_df(people, couples)
        st.session_state.exchange_spec = None

if st.session_state.participants_df is None:
    st.info("No participants loaded yet.")
    st.stop()

edited = st.data_editor(st.session_state.participants_df, num_rows="dynamic", use_container_width=True)
st.session_state.participants_df = edited

# ---------- 2) Draw ----------
st.subheader("2) Draw")
if st.button("Draw names", type="primary"):
    try:
        people, couples = load_participants_csv(edited.to_csv(index=False).encode("utf-8"))
        rules = st.session_state.exchange_spec.rules if st.session_state.exchange_spec else []
        spec = ExchangeSpec(participants=people, significant_others=couples, rules=rules)
    except ValueError as e:
        st.error(f"Participants are not valid: {e}")
    else:
        st.session_state.last_result = run_exchange(spec, st.session_state.exchange_config)
        st.session_state.reveal = False

result = st.session_state.last_result
if result is not None:
    if result.error:
        st.error(result.error)
        for p in result.problems:
            st.write("•", p)
    else:
        st.success(f"Drew {len(result.assignment)} pairs.")
        st.session_state.reveal = st.toggle("Reveal draw", value=st.session_state.reveal)
        if st.session_state.reveal:
            st.dataframe(assignment_to_df(result.assignment), use_container_width=True, hide_index=True)
        st.download_button(
            "Download draw.csv",
            data=save_assignment_csv_bytes(result.assignment),
            file_name="draw.csv",
            mime="text/csv",
        )
