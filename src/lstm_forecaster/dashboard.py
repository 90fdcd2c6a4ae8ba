"""Streamlit UI for the LSTM forecaster.

Provides:
- Home page with a "Get Started" entry point
- Data input (CSV upload or manual text) with live validation and preview
- Results chart comparing original and predicted values

Run with:
    streamlit run src/lstm_forecaster/dashboard.py

The forecasting service URL comes from FORECASTER_API_URL (env or .env).
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.lstm_forecaster.charts import create_prediction_plot, summarize_result
from src.lstm_forecaster.client import PredictionClient
from src.lstm_forecaster.config import load_config
from src.lstm_forecaster.controller import ForecasterController, ViewState
from src.lstm_forecaster.ingest import preview_frame

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")

# Page config
st.set_page_config(
    page_title="LSTM Forecaster",
    page_icon="🧠",
    layout="wide",
)

TEXT_PLACEHOLDER = (
    "Enter your data in one of these formats:\n\n"
    "1. One value per line:\n100\n105\n102\n\n"
    "2. Timestamp,value pairs:\n2023-01-01,100\n2023-01-02,105\n2023-01-03,102"
)


def get_controller() -> ForecasterController:
    """One controller per browser session."""
    if "controller" not in st.session_state:
        config = load_config()
        st.session_state["controller"] = ForecasterController(PredictionClient(config))
        st.session_state["uploader_version"] = 0
        st.session_state["csv_signature"] = None
    return st.session_state["controller"]


def render_header(ctrl: ForecasterController):
    """Back button plus input/results progress dots."""
    col1, col2, col3 = st.columns([2, 6, 1])

    with col1:
        st.button(f"← {ctrl.header_label}", on_click=ctrl.back, key="header_back")

    with col2:
        st.markdown("### LSTM Forecaster")

    with col3:
        input_dot = "🔵" if ctrl.state == ViewState.INPUT else "⚪"
        results_dot = "🟢" if ctrl.state == ViewState.RESULTS else "⚪"
        st.markdown(f"{input_dot} {results_dot}")

    st.divider()


def render_home(ctrl: ForecasterController):
    st.title("🧠 LSTM Forecaster")
    st.markdown(
        "Harness Long Short-Term Memory neural networks to predict future values "
        "in your time series data: stock prices, temperatures, sales and more."
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        st.subheader("📈 Smart Predictions")
        st.write("LSTM networks learn patterns in your history to project future values.")
    with col2:
        st.subheader("📊 Visual Insights")
        st.write("Interactive charts show your original data next to the predicted values.")
    with col3:
        st.subheader("🧠 Easy to Use")
        st.write("Upload a CSV or type values by hand. No technical expertise required.")

    st.button("Get Started", type="primary", on_click=ctrl.get_started, key="get_started")

    st.divider()
    st.subheader("How It Works")
    steps = [
        ("1. Upload Data", "Upload a CSV file or enter time series data manually"),
        ("2. Process", "The LSTM model analyzes patterns in your data"),
        ("3. Predict", "Generate predictions for future values"),
        ("4. Visualize", "Compare actual and predicted values on a chart"),
    ]
    for col, (heading, text) in zip(st.columns(4), steps):
        with col:
            st.markdown(f"**{heading}**")
            st.caption(text)


def _on_text_change():
    get_controller().change_text(st.session_state.get("text_data", ""))


def _on_text_clear():
    st.session_state["text_data"] = ""
    get_controller().clear_text()


def _on_file_clear():
    st.session_state["uploader_version"] += 1
    st.session_state["csv_signature"] = None
    get_controller().clear_file()


def render_upload(ctrl: ForecasterController):
    uploaded = st.file_uploader(
        "Upload CSV File",
        type=["csv"],
        key=f"csv_upload_{st.session_state['uploader_version']}",
        help="Expected format: timestamp,value or just values",
    )

    # Parse once per new file; reruns must not overwrite a later clear
    if uploaded is not None:
        signature = (uploaded.name, uploaded.size)
        if st.session_state["csv_signature"] != signature:
            st.session_state["csv_signature"] = signature
            ctrl.load_csv(uploaded.name, uploaded.getvalue().decode("utf-8-sig", errors="replace"))

    if ctrl.csv_file_name:
        col1, col2 = st.columns([6, 1])
        with col1:
            mark = " ✅" if ctrl.is_data_valid else ""
            st.write(f"📄 {ctrl.csv_file_name}{mark}")
            if ctrl.is_data_valid:
                st.success(f"✓ Parsed {len(ctrl.parsed)} data points successfully")
        with col2:
            st.button("✖", on_click=_on_file_clear, key="clear_file", help="Remove file")


def render_text(ctrl: ForecasterController):
    st.session_state.setdefault("text_data", ctrl.text_data)
    st.text_area(
        "Enter Time Series Data",
        key="text_data",
        placeholder=TEXT_PLACEHOLDER,
        height=200,
        on_change=_on_text_change,
    )

    if ctrl.text_data:
        col1, col2 = st.columns([6, 1])
        with col1:
            if ctrl.is_data_valid:
                st.success(f"✓ Parsed {len(ctrl.parsed)} data points successfully")
            else:
                st.caption("Enter data to validate")
        with col2:
            st.button("Clear", on_click=_on_text_clear, key="clear_text")


def render_preview(ctrl: ForecasterController):
    st.subheader("Data Preview")
    table, hidden = preview_frame(ctrl.parsed, ctrl.config.preview_rows)
    st.dataframe(table, hide_index=True, width="stretch")
    if hidden:
        st.caption(f"... and {hidden} more rows")


def render_input(ctrl: ForecasterController):
    st.header("Input Your Time Series Data")

    # Widget state is dropped when the input view unmounts; reseed from the controller
    st.session_state.setdefault("input_method", ctrl.input_method)
    st.session_state.setdefault("steps", ctrl.steps)

    method = st.radio(
        "Input method",
        options=["upload", "text"],
        format_func=lambda m: "📤 Upload CSV" if m == "upload" else "📝 Manual Input",
        horizontal=True,
        key="input_method",
    )
    ctrl.set_input_method(method)

    if ctrl.input_method == "upload":
        render_upload(ctrl)
    else:
        render_text(ctrl)

    steps = st.number_input(
        "Number of Future Steps to Predict",
        min_value=ctrl.config.min_steps,
        max_value=ctrl.config.max_steps,
        step=1,
        key="steps",
    )
    ctrl.set_steps(steps)

    if ctrl.input_error:
        st.error(ctrl.input_error)

    label = "Generating Predictions..." if ctrl.loading else "Generate Predictions"
    if st.button(label, type="primary", disabled=not ctrl.can_submit, key="submit"):
        with st.spinner("Processing your data and generating predictions..."):
            succeeded = ctrl.submit()
        if succeeded:
            st.rerun()

    if ctrl.error:
        st.error(ctrl.error)
        st.button("Try Again", on_click=ctrl.retry, key="retry")

    if ctrl.is_data_valid:
        render_preview(ctrl)


def render_results(ctrl: ForecasterController):
    result = ctrl.result
    if result is None:
        st.info("No prediction available yet.")
        return

    st.header("Prediction Results")
    st.caption("Blue line shows original data, red dashed line shows predicted values")
    st.plotly_chart(create_prediction_plot(result), width="stretch")

    summary = summarize_result(result)
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Original Points", summary["original_points"])
    with col2:
        st.metric("Predicted Points", summary["predicted_points"])
    with col3:
        st.metric("Avg Original", f"{summary['avg_original']:.2f}")
    with col4:
        st.metric("Avg Predicted", f"{summary['avg_predicted']:.2f}")

    if result.message:
        st.info(result.message)


def main():
    """Main dashboard application."""
    ctrl = get_controller()

    if ctrl.state != ViewState.HOME:
        render_header(ctrl)

    if ctrl.state == ViewState.HOME:
        render_home(ctrl)
    elif ctrl.state == ViewState.INPUT:
        render_input(ctrl)
    elif ctrl.state == ViewState.RESULTS:
        render_results(ctrl)


if __name__ == "__main__":
    main()
