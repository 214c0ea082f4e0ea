"""
naive-sentiment web demo
Type a sentence and see how the Naive Bayes model scores it.
"""

import streamlit as st

from naive_sentiment import SentimentClassifier, Settings, load_corpus_with_stats
from naive_sentiment.models import Sentiment

# Page configuration
st.set_page_config(
    page_title="Sentiment Classifier",
    page_icon="💬",
    layout="centered",
)


@st.cache_resource
def get_classifier(corpus_paths: tuple):
    """Train once per corpus selection and reuse across reruns."""
    corpus, stats = load_corpus_with_stats(*corpus_paths)
    classifier = SentimentClassifier()
    classifier.train(corpus)
    return classifier, stats


def render_sidebar(classifier: SentimentClassifier, corpus_stats):
    """Render training statistics in the sidebar."""
    with st.sidebar:
        st.markdown("### 📊 Training Data")
        st.markdown("\n".join(f"- `{f}`" for f in corpus_stats.files))
        stats = classifier.stats
        col1, col2 = st.columns(2)
        col1.metric("Positive", stats.sentence_counts[Sentiment.POSITIVE])
        col2.metric("Negative", stats.sentence_counts[Sentiment.NEGATIVE])
        st.metric("Vocabulary", stats.vocabulary_size)
        if corpus_stats.skipped:
            st.caption(f"{corpus_stats.skipped} malformed line(s) skipped")


def main():
    settings = Settings.from_env()

    st.title("💬 Sentiment Classifier")
    st.caption("Bag-of-words Naive Bayes with add-one smoothing")

    try:
        classifier, corpus_stats = get_classifier(tuple(str(p) for p in settings.corpus_paths))
    except FileNotFoundError as e:
        st.error(f"Could not load corpus: {e}")
        return

    if not classifier.is_trained:
        st.error("The corpus contains no usable sentences.")
        return

    render_sidebar(classifier, corpus_stats)

    text = st.text_area("Your text", placeholder="The food was wonderful")
    if st.button("Classify", type="primary", width="stretch") and text.strip():
        result = classifier.predict(text)

        if result.label is Sentiment.POSITIVE:
            st.success("✅ Your text is **positive**")
        else:
            st.error("❌ Your text is **negative**")

        col1, col2 = st.columns(2)
        col1.metric("Positive score", f"{result.positive:.4g}")
        col2.metric("Negative score", f"{result.negative:.4g}")
        st.caption("Scores are relative likelihoods, not probabilities; the larger one wins.")

        with st.expander("Tokens"):
            st.write(result.tokens or "No content words after stop-word removal.")


if __name__ == "__main__":
    main()
