from tweetindex.normalizer import (
    collect_types,
    extract_types,
    lowercase,
    normalize,
    preprocess,
    stem,
    markup_to_text,
    tokenize,
)


def test_preprocess_replaces_markers_and_punctuation():
    assert preprocess("hi[NEWLINE]there[TAB]you!") == "hi there you "
    assert preprocess("#covid-19, ok?") == "#covid 19  ok "


def test_preprocess_keeps_empty_input():
    assert preprocess("") == ""
    assert preprocess(None) is None


def test_tokenize_drops_empty_tokens():
    assert tokenize("  side  effects ") == ["side", "effects"]
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_normalize_lowercases_by_default():
    assert normalize(["Side", "EFFECTS", "#Covid"]) == ["side", "effects", "#covid"]


def test_normalize_applies_rules_in_order():
    rules = [lowercase, lambda t: t.rstrip("s")]
    assert normalize(["Effects", "Vaccines"], rules) == ["effect", "vaccine"]


def test_stem_keeps_hashtag():
    assert stem("running") == "run"
    assert stem("#running") == "#run"


def test_collect_types_dedupes_in_first_seen_order():
    assert collect_types(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_hashtag_expands_to_bare_word():
    assert collect_types(["#covid"]) == ["#covid", "covid"]


def test_hashtag_after_bare_word_adds_only_hashtag():
    assert collect_types(["covid", "#covid"]) == ["covid", "#covid"]


def test_bare_word_after_hashtag_is_not_repeated():
    assert collect_types(["#covid", "covid"]) == ["#covid", "covid"]


def test_hashtag_strips_only_first_marker():
    assert collect_types(["##tag"]) == ["##tag", "#tag"]


def test_extract_types_full_pipeline():
    text = "Side effects of the #Vaccine?[NEWLINE]The vaccine works."
    assert extract_types(text) == [
        "side",
        "effects",
        "of",
        "the",
        "#vaccine",
        "vaccine",
        "works",
    ]


def test_extract_types_empty():
    assert extract_types("") == []
    assert extract_types(None) == []
    assert extract_types("?!...") == []


def test_strip_markup_decodes_entities():
    assert "&" in markup_to_text("salt &amp; pepper")
    assert extract_types("<b>salt</b> &amp; pepper", strip_markup=True) == ["salt", "pepper"]
