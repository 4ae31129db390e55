from app.models.podcast_models import Podcast
from app.services.relevance_services import (
    NO_CONTEXT_TEXT,
    build_context_text,
    extract_keywords,
    find_relevant_podcasts,
)

CORPUS = [
    Podcast(title="Work stress", text="Burnout at work and how to rest."),
    Podcast(title="Sleep", text="Anxiety keeps the brain awake at night."),
    Podcast(title="Anxiety at work", text="Stress, anxiety and deadlines."),
    Podcast(title="Cooking", text="Recipes for pasta."),
]


def test_short_tokens_only_returns_nothing():
    assert extract_keywords("is it ok to go") == []
    assert find_relevant_podcasts("is it ok to go", CORPUS) == []


def test_empty_query_or_corpus():
    assert find_relevant_podcasts("", CORPUS) == []
    assert find_relevant_podcasts("anxiety", []) == []


def test_ranks_by_keyword_hits_and_drops_misses():
    results = find_relevant_podcasts("Anxiety at WORK", CORPUS)

    assert [p.title for p in results] == ["Anxiety at work", "Work stress", "Sleep"]
    assert [p.score for p in results] == [2, 1, 1]


def test_ties_keep_corpus_order():
    results = find_relevant_podcasts("night pasta", CORPUS)
    assert [p.title for p in results] == ["Sleep", "Cooking"]


def test_repeated_tokens_count_per_occurrence():
    results = find_relevant_podcasts("anxiety anxiety stress", CORPUS)
    by_title = {p.title: p.score for p in results}

    assert by_title["Anxiety at work"] == 3
    assert by_title["Sleep"] == 2


def test_substring_presence_counts_once_per_token():
    corpus = [Podcast(title="rest", text="rest rest rest interest")]
    assert find_relevant_podcasts("rest", corpus)[0].score == 1


def test_result_is_capped_at_five_and_sorted():
    corpus = [Podcast(title=f"episode {i}", text="habit " * (i % 3)) for i in range(12)]
    results = find_relevant_podcasts("episode habit", corpus)

    assert len(results) == 5
    scores = [p.score for p in results]
    assert scores == sorted(scores, reverse=True)


def test_context_text():
    assert build_context_text([]) == NO_CONTEXT_TEXT

    text = build_context_text(CORPUS[:2])
    assert text == (
        "عنوان: Work stress\nمتن: Burnout at work and how to rest."
        "\n\n---\n\n"
        "عنوان: Sleep\nمتن: Anxiety keeps the brain awake at night."
    )
