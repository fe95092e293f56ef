from translation_overlay.filtering import jaro_winkler
from translation_overlay.matching import find_best_match, find_best_region


def exact(a: str, b: str) -> float:
    return 1.0 if a == b else 0.0


def test_empty_regions_return_none():
    assert find_best_region("こんにちは", []) is None
    assert find_best_match([], lambda item: 1.0) is None


def test_best_region_is_global_maximum(make_region):
    regions = [
        make_region("セーブ", 0, 0, 10, 10),
        make_region("こんにちは。", 0, 20, 10, 30),
        make_region("ロード", 0, 40, 10, 50),
    ]
    target = "こんにちは"

    match = find_best_region(target, regions)

    assert match is regions[1]
    best = jaro_winkler(target, match.text)
    assert all(best >= jaro_winkler(target, r.text) for r in regions)


def test_ties_keep_first(make_region):
    regions = [make_region("a", 0, 0, 1, 1), make_region("b", 0, 0, 1, 1)]

    assert find_best_region("x", regions, lambda a, b: 0.5) is regions[0]


def test_low_scores_still_match_without_floor(make_region):
    regions = [make_region("zzz", 0, 0, 1, 1)]

    assert find_best_region("abc", regions, exact) is regions[0]


def test_floor_rejects_weak_match(make_region):
    regions = [make_region("zzz", 0, 0, 1, 1), make_region("abc", 0, 0, 1, 1)]

    assert find_best_region("abd", regions, exact, min_score=0.5) is None
    assert find_best_region("abc", regions, exact, min_score=0.5) is regions[1]


def test_region_can_match_repeatedly(make_region):
    regions = [make_region("abc", 0, 0, 1, 1)]

    assert find_best_region("abc", regions) is find_best_region("abd", regions)
