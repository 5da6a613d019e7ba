from lemmastream.filters import DEFAULT_UNWANTED_TAGS, is_unwanted_pos, make_tag_filter


def test_default_filter_is_exact_match():
    for tag in DEFAULT_UNWANTED_TAGS:
        assert is_unwanted_pos(tag)
    # near misses of listed tags are kept
    for tag in ("PRP$", "NN", "VBD", "DTX", "D", "", "LRB-", "WP$$"):
        assert not is_unwanted_pos(tag)


def test_make_tag_filter_uses_given_tags():
    only_nouns_out = make_tag_filter(["NN", "NNS"])
    assert only_nouns_out("NN")
    assert not only_nouns_out("DT")


def test_make_tag_filter_reuses_default_predicate():
    assert make_tag_filter(DEFAULT_UNWANTED_TAGS) is is_unwanted_pos


def test_brackets_filtered_in_nltk_and_spacy_spellings():
    for tag in ("(", ")", "-LRB-", "-RRB-"):
        assert is_unwanted_pos(tag)
