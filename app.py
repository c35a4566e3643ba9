import logging
import time

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from components.work_loads import WorkLoad
from wordfilter.matcher import Matcher

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

SAMPLE_WORDS = ["sb", "TMD", "他妈的", "傻"]
SAMPLE_TEXTS = [
    "sb",
    "你好，傻！！sb2~~TMD， 他妈的~~~~",
    "sb2~~TMD， 他妈的",
    "傻！！sb2~~TMD， 他妈的~~~~",
    "干净!",
]

# Configure page
st.set_page_config(
    page_title="Sensitive Word Filter",
    page_icon="🚫",
    layout="wide",
    initial_sidebar_state="expanded"
)


def build_matcher(words, replace_char):
    return Matcher(words, replace_char=replace_char).publish()


if 'matcher' not in st.session_state:
    st.session_state['matcher'] = build_matcher(SAMPLE_WORDS, "*")
    st.session_state['words'] = list(SAMPLE_WORDS)

# Main title
st.title("🚫 Sensitive Word Filter")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Word List", "Filter Text", "Benchmark"]
    )

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🔄 Reset to sample words"):
        st.session_state['matcher'] = build_matcher(SAMPLE_WORDS, "*")
        st.session_state['words'] = list(SAMPLE_WORDS)
        st.rerun()

matcher = st.session_state['matcher']

if page == "Home":
    st.header("Current Filter")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Words", len(matcher))
    with col2:
        st.metric("Trie Nodes", matcher.trie.count_nodes())
    with col3:
        st.metric("Avg Branching", f"{matcher.trie.count_nodes(get_avg_branch_factor=True):.2f}")

    st.subheader("Sample Texts")
    rows = [{
        "Original": text,
        "Censored": matcher.censor(text),
        "Has Sensitive": matcher.contains(text),
    } for text in SAMPLE_TEXTS]
    st.dataframe(pd.DataFrame(rows), use_container_width=True)

elif page == "Word List":
    st.header("📁 Word List")

    uploaded_file = st.file_uploader(
        "Choose a word list (one word per line)",
        type=['txt'],
        help="Blank lines are ignored; surrounding whitespace is stripped"
    )
    pasted = st.text_area("...or paste words here", value="\n".join(st.session_state['words']))
    replace_char = st.text_input("Replacement character", value=matcher.replace_char, max_chars=1)

    if st.button("Load"):
        if uploaded_file is not None:
            raw = uploaded_file.getvalue().decode("utf-8")
        else:
            raw = pasted
        words = [line.strip() for line in raw.splitlines() if line.strip()]
        try:
            st.session_state['matcher'] = build_matcher(words, replace_char)
            st.session_state['words'] = words
            st.success(f"✅ Loaded {len(st.session_state['matcher'])} distinct words")
        except ValueError as e:
            st.error(f"❌ {e}")

    st.write("**Registered words:**")
    st.dataframe(pd.DataFrame({"Word": sorted(matcher.trie.words())}))

elif page == "Filter Text":
    st.header("🔍 Filter Text")

    text = st.text_area("Text to check", value=SAMPLE_TEXTS[1])
    if text:
        col1, col2 = st.columns(2)
        with col1:
            st.write("**Censored:**")
            st.code(matcher.censor(text), language=None)
        with col2:
            st.write("**Matches:**")
            matches = list(matcher.iter_matches(text))
            if matches:
                st.dataframe(pd.DataFrame([m._asdict() for m in matches]))
            else:
                st.success("✅ No sensitive words found")

elif page == "Benchmark":
    st.header("📊 Scan Benchmark")

    col1, col2, col3 = st.columns(3)
    with col1:
        num_texts = st.number_input("Texts per size", min_value=10, max_value=5000, value=200)
    with col2:
        planted_share = st.slider("Planted share", min_value=0.0, max_value=1.0, value=0.2)
    with col3:
        seed = st.number_input("Seed", min_value=0, value=42)

    sizes = [1, 2, 4, 8, 16]

    if st.button("Run"):
        workload = WorkLoad(seed=int(seed))
        records = []
        progress = st.progress(0)
        for idx, sentences in enumerate(sizes):
            texts = workload.texts(int(num_texts), words=list(matcher.trie.words()) or ["x"],
                                   planted_share=planted_share, sentences=sentences)
            timings = []
            for text in texts:
                t0 = time.perf_counter()
                matcher.censor(text)
                timings.append((time.perf_counter() - t0) * 1e6)
            timings = np.array(timings)
            records.append({
                "sentences": sentences,
                "avg_chars": float(np.mean([len(t) for t in texts])),
                "mean_us": float(np.mean(timings)),
                "p50_us": float(np.percentile(timings, 50)),
                "p95_us": float(np.percentile(timings, 95)),
                "hit_rate": float(np.mean([matcher.contains(t) for t in texts])),
            })
            progress.progress((idx + 1) / len(sizes))

        df = pd.DataFrame(records)
        st.dataframe(df, use_container_width=True)

        fig = px.line(df, x="avg_chars", y=["mean_us", "p50_us", "p95_us"], markers=True,
                      title="Censor time vs text length")
        fig.update_layout(xaxis_title="Average text length (code points)", yaxis_title="Time (µs)")
        st.plotly_chart(fig, use_container_width=True)

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Sensitive Word Filter
    </div>
    """,
    unsafe_allow_html=True
)
