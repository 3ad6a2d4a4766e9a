import pytest

from disjoint_sets.proximity import ProximityClusterer, ProximityConfig, candidate_pairs


LINE = [[0], [1], [3], [10], [11]]

CONSTELLATIONS = [
    [0, 0, 0, 0],
    [3, 0, 0, 0],
    [0, 3, 0, 0],
    [0, 0, 3, 0],
    [0, 0, 0, 3],
    [0, 0, 0, 6],
    [9, 0, 0, 0],
    [12, 0, 0, 0],
]


def _cluster(points, **kwargs):
    config = ProximityConfig(verbose=False, use_tqdm=False, **kwargs)
    return ProximityClusterer(config).cluster(points)


def test_candidate_pairs_sorted_by_distance_then_index():
    pairs = candidate_pairs(LINE, metric="manhattan")
    assert len(pairs) == 10
    assert [(i, j) for i, j, _ in pairs[:4]] == [(0, 1), (3, 4), (1, 2), (0, 2)]
    distances = [distance for _, _, distance in pairs]
    assert distances == sorted(distances)


def test_candidate_pairs_rejects_flat_input():
    with pytest.raises(ValueError):
        candidate_pairs([1, 2, 3])


def test_candidate_pairs_single_point():
    assert candidate_pairs([[4, 2]]) == []


def test_threshold_links_constellations():
    result = _cluster(CONSTELLATIONS, metric="manhattan", threshold=3)
    assert result.stats.cluster_count == 2
    assert sorted(len(members) for members in result.cluster_map.values()) == [2, 6]
    assert result.sets.connected(0, 5)
    assert not result.sets.connected(0, 6)


def test_max_links_counts_visited_pairs():
    result = _cluster(LINE, metric="manhattan", max_links=1)
    assert result.stats.links_applied == 1
    assert result.stats.cluster_count == 4
    assert result.stats.last_merge == (0, 1)


def test_unbounded_links_until_single_cluster():
    result = _cluster(LINE, metric="manhattan")
    assert result.stats.cluster_count == 1
    assert result.stats.merges == 4
    assert result.stats.links_applied == 5
    assert result.stats.last_merge == (2, 3)
    assert result.stats.candidate_pairs == 10


def test_first_limit_reached_wins():
    result = _cluster(LINE, metric="manhattan", threshold=2, max_links=10)
    assert result.stats.links_applied == 3
    assert result.stats.cluster_count == 2


def test_config_rejects_negative_limits():
    with pytest.raises(ValueError):
        ProximityConfig(threshold=-1)
    with pytest.raises(ValueError):
        ProximityConfig(max_links=-1)


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("DISJOINT_SETS_METRIC", "manhattan")
    monkeypatch.setenv("DISJOINT_SETS_THRESHOLD", "2.5")
    config = ProximityConfig()
    assert config.metric == "manhattan"
    assert config.threshold == 2.5


def test_no_points_gives_empty_result():
    assert candidate_pairs([]) == []
    result = _cluster([])
    assert result.stats.total_points == 0
    assert result.stats.cluster_count == 0
    assert result.cluster_map == {}
    assert result.stats.last_merge is None
