from __future__ import annotations

from fishertype.engine.candidates import candidate_count, generate_candidates, tokenize
from fishertype.engine.variants import STANDARD_TABLE, VariantTable
from fishertype.paths import get_paths
from fishertype.services.content import ContentService


def _load_words():
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    return content.load_word_bank()


def test_literal_romanization_is_its_own_only_candidate() -> None:
    table = VariantTable.from_mapping({"ka": ["ka", "ca"]})
    assert generate_candidates("ZZT", table) == ("zzt",)
    assert generate_candidates("qqq") == ("qqq",)


def test_longest_key_wins() -> None:
    tokens = tokenize("shi")
    assert [t.text for t in tokens] == ["shi"]
    assert tokens[0].variants == ("shi", "si", "ci")

    assert [t.text for t in tokenize("kitte")] == ["ki", "tte"]
    assert [t.text for t in tokenize("kanji")] == ["ka", "n", "ji"]


def test_double_n_splits_into_moraic_n_and_next_mora() -> None:
    assert [t.text for t in tokenize("konnichiha")] == ["ko", "n", "ni", "chi", "ha"]
    cands = generate_candidates("konnichiha")
    assert "koxnnichiha" in cands
    assert "koxnichiha" not in cands


def test_word_ending_in_n_has_no_doubled_spelling() -> None:
    cands = generate_candidates("fujisan")
    assert "fujisan" in cands
    assert "fujisaxn" in cands
    assert "fujisann" not in cands


def test_expansion_order_is_token_outer_variant_inner() -> None:
    assert generate_candidates("shichi") == (
        "shichi",
        "shiti",
        "sichi",
        "siti",
        "cichi",
        "citi",
    )


def test_custom_table_expansion() -> None:
    table = VariantTable.from_mapping({"ne": ["ne"], "ko": ["ko", "co"]})
    assert generate_candidates("neko", table) == ("neko", "neco")


def test_count_is_product_of_token_variants() -> None:
    for word in ("sushi", "shinkansen", "hokkaidou", "jagaimo"):
        expected = 1
        for t in tokenize(word):
            expected *= len(t.variants)
        assert candidate_count(word) == expected
        assert len(generate_candidates(word)) == expected


def test_every_shipped_word_contains_its_own_spelling_first() -> None:
    bank = _load_words()
    assert len(bank) > 0
    for level in bank.levels():
        for entry in bank.entries(level):
            cands = generate_candidates(entry.romanization, STANDARD_TABLE)
            assert cands[0] == entry.romanization.lower()
            assert len(set(cands)) == len(cands)


def test_generation_is_deterministic() -> None:
    assert generate_candidates("chawanmushi") == generate_candidates("chawanmushi")
