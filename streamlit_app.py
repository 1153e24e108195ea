"""
Streamlit front-end for the complaint analytics dashboard and the Digital
Saathi assistant.
Run:
    streamlit run streamlit_app.py
"""

import tempfile
from pathlib import Path

import streamlit as st

from saathi.analysis.classifier import get_classifier
from saathi.analysis.trend import predict_all
from saathi.assistant.state import TYPING_ID
from saathi.assistant.voices import LANGUAGE_OPTIONS
from saathi.assistant.widget import QUICK_ACTIONS, build_widget, immediate_schedule
from saathi.config import CONFIG
from saathi.dashboard.charts import (
    districts_frame, plot_category_bar, plot_monthly_trends, plot_priority_pie,
    plot_sentiment_pie, prediction_color, priority_hotspot, stat_cards,
)
from saathi.data.fixtures import MOCK_ANALYTICS, MOCK_COMPLAINTS
from saathi.reporting.report import generate_smart_report

# ---------- Page config & CSS ----------
st.set_page_config(page_title="Digital Saathi", layout="wide")
st.markdown(
    """
    <style>
    .alert-box {
        background: #0b1221;
        color: #f8f9fa;
        padding: 16px;
        border-radius: 8px;
        min-height: 140px;
    }
    .small-muted { color: #7a7f87; font-size: 0.9rem; }
    .bubble-user { background:#2563eb; color:#fff; margin:6px 0; padding:8px 12px; border-radius:12px; text-align:right; }
    .bubble-ai { background:#f1f5f9; color:#111827; margin:6px 0; padding:8px 12px; border-radius:12px; }
    .bubble-typing { background:#e5e7eb; color:#6b7280; margin:6px 0; padding:8px 12px; border-radius:12px; font-style:italic; }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------- Helpers ----------
def get_widget():
    if "widget" not in st.session_state:
        widget = build_widget(CONFIG, schedule=immediate_schedule)
        widget.open()
        st.session_state["widget"] = widget
    return st.session_state["widget"]

def message_html(message):
    if message.id == TYPING_ID:
        css = "bubble-typing"
    elif message.type == "user":
        css = "bubble-user"
    else:
        css = "bubble-ai"
    voice = " 🎤" if message.is_voice else ""
    who = "आप" if message.type == "user" else "🤖 डिजिटल साथी"
    stamp = message.timestamp.strftime("%H:%M")
    return f'<div class="{css}"><strong>{who}{voice}</strong><br>{message.content}<br><span class="small-muted">{stamp}</span></div>'

def render_dashboard():
    st.header("📊 Analytics Dashboard")
    st.markdown("Real-time insights powered by AI analysis")

    cols = st.columns(4)
    for card, col in zip(stat_cards(MOCK_ANALYTICS), cols):
        with col:
            delta = f"{'+' if card['is_positive'] else '-'}{card['trend']}%"
            st.metric(card["title"], card["value"], delta=delta,
                      delta_color="normal" if card["is_positive"] else "inverse")

    st.markdown("---")
    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Complaints by Category")
        st.plotly_chart(plot_category_bar(MOCK_ANALYTICS), use_container_width=True)
    with c2:
        st.subheader("Sentiment Analysis")
        st.plotly_chart(plot_sentiment_pie(MOCK_ANALYTICS), use_container_width=True)

    c3, c4 = st.columns(2)
    with c3:
        st.subheader("Priority Distribution")
        st.plotly_chart(plot_priority_pie(MOCK_ANALYTICS), use_container_width=True)
    with c4:
        st.subheader("Monthly Trends (Complaints vs. Resolution)")
        st.plotly_chart(plot_monthly_trends(MOCK_ANALYTICS), use_container_width=True)

    st.markdown("---")
    st.subheader("⚠️ AI Predictive Alerts & Insights")
    predictions = predict_all()
    a1, a2, a3 = st.columns(3)
    for col, key, title in ((a1, "water", "💧 Water Supply Alert"), (a2, "electricity", "⚡ Electricity Demand Alert")):
        p = predictions[key]
        with col:
            st.markdown(
                f'<div class="alert-box"><h4 style="color:{prediction_color(p.alert)}">{title}</h4>{p.message}</div>',
                unsafe_allow_html=True,
            )
    with a3:
        st.markdown(
            f'<div class="alert-box"><h4 style="color:#fbbf24">🚨 Priority Hotspot</h4>{priority_hotspot()}</div>',
            unsafe_allow_html=True,
        )

    st.markdown("---")
    st.subheader("Districts")
    df = districts_frame()
    st.map(df, latitude="lat", longitude="lon")
    st.dataframe(df)

def render_report():
    st.header("📝 Smart Report")
    st.text(generate_smart_report(MOCK_COMPLAINTS))

    st.subheader("Try the classifier")
    text = st.text_area("Complaint text", "The road is damaged and dangerous")
    if st.button("Classify"):
        st.json(get_classifier().classify(text))

def render_assistant():
    widget = get_widget()
    st.header("🤖 डिजिटल साथी AI")
    st.caption("वॉयस रेडी 🎤" if widget.state.voice_supported else "केवल टेक्स्ट 📝")

    tags = [tag for tag, _ in LANGUAGE_OPTIONS]
    names = dict(LANGUAGE_OPTIONS)
    current = widget.state.language_tag
    lang = st.selectbox("Language", tags, index=tags.index(current) if current in tags else 0,
                        format_func=lambda t: names[t])
    if lang != current:
        widget.set_language(lang)

    for message in widget.state.messages:
        bubble, action = st.columns([12, 1])
        with bubble:
            st.markdown(message_html(message), unsafe_allow_html=True)
        if message.id != TYPING_ID:
            with action:
                if st.button("🔊", key=f"speak-{message.id}", help="Read aloud"):
                    widget.speak_text(message.content)

    if widget.state.live_transcription:
        st.info(widget.state.live_transcription)

    with st.expander("Quick actions"):
        for i, action in enumerate(QUICK_ACTIONS):
            if st.button(action, key=f"quick-{i}"):
                widget.send_message(action)
                st.rerun()

    with st.form("chat", clear_on_submit=True):
        text = st.text_input("संदेश लिखें...")
        if st.form_submit_button("Send") and text.strip():
            widget.send_message(text)
            st.rerun()

    if widget.state.voice_supported:
        audio = st.file_uploader("Voice message (wav/mp3/m4a/ogg)", type=["wav", "mp3", "m4a", "ogg"])
        if audio and st.button("🎤 Transcribe & send"):
            tmp = tempfile.NamedTemporaryFile(delete=False, suffix=Path(audio.name).suffix)
            tmp.write(audio.read())
            tmp.close()
            if hasattr(widget.recognizer, "set_audio"):
                widget.recognizer.set_audio(tmp.name)
            widget.toggle_voice_input()
            st.rerun()

    # playback is synchronous, so is_speaking is always False by the next rerun
    if widget.synthesizer is not None and st.button("🔇 बोलना रोकें"):
        widget.stop_speaking()

# ---------- UI ----------
tab_dashboard, tab_report, tab_assistant = st.tabs(["Dashboard", "Report", "Assistant"])
with tab_dashboard:
    render_dashboard()
with tab_report:
    render_report()
with tab_assistant:
    render_assistant()

st.markdown("---")
st.caption(f"Chat backend: {CONFIG.chat_api_url}")
