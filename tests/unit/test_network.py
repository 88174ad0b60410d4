"""Tests for the social network facade."""

import json
from pathlib import Path

import pytest

from socialgraph.audit.logger import AuditLogger
from socialgraph.config import NetworkConfig
from socialgraph.errors import SelfFriendshipError
from socialgraph.network import SocialNetwork


def _community_sets(network: SocialNetwork) -> list[set]:
    return [set(members) for members in network.communities().values()]


def _read_events(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


# ---------------------------------------------------------------------------
# Lockstep mutation
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_add_user_reaches_both_structures() -> None:
    network = SocialNetwork()
    network.add_user(1)

    assert network.has_user(1)
    assert 1 in network
    assert network.communities() == {1: [1]}


@pytest.mark.unit
def test_add_friendship_reaches_both_structures() -> None:
    network = SocialNetwork()
    network.add_friendship(1, 2)

    assert network.neighbors(1) == {2}
    assert network.same_community(1, 2)
    assert _community_sets(network) == [{1, 2}]


@pytest.mark.unit
def test_mutations_idempotent(sample_network: SocialNetwork) -> None:
    """Test repeating mutations leaves the observable state unchanged."""
    users_before = sorted(sample_network.list_users())
    neighbors_before = {u: sample_network.neighbors(u) for u in users_before}
    communities_before = sorted(sorted(m) for m in sample_network.communities().values())

    sample_network.add_user(1)
    sample_network.add_friendship(1, 2)
    sample_network.add_friendship(7, 6)

    assert sorted(sample_network.list_users()) == users_before
    assert {u: sample_network.neighbors(u) for u in users_before} == neighbors_before
    assert sorted(sorted(m) for m in sample_network.communities().values()) == communities_before


@pytest.mark.unit
def test_add_friendships_bulk() -> None:
    network = SocialNetwork()
    network.add_friendships([(1, 2), (2, 3), (4, 5)])

    assert network.friendship_count() == 3
    assert network.community_count() == 2


# ---------------------------------------------------------------------------
# Reference scenario
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_reference_shortest_path(sample_network: SocialNetwork) -> None:
    assert sample_network.shortest_path(1, 5) == [1, 3, 5]


@pytest.mark.unit
def test_reference_recommendations(sample_network: SocialNetwork) -> None:
    assert sample_network.recommend_friends(4, 5) == [(1, 1), (3, 1)]
    assert sample_network.recommend_friends(6, 5) == [(8, 1)]


@pytest.mark.unit
def test_reference_communities(sample_network: SocialNetwork) -> None:
    groups = _community_sets(sample_network)

    assert len(groups) == 2
    assert {1, 2, 3, 4, 5} in groups
    assert {6, 7, 8} in groups


@pytest.mark.unit
def test_same_community_iff_path_exists(sample_network: SocialNetwork) -> None:
    """Test community membership agrees with path reachability."""
    users = sample_network.list_users()
    for a in users:
        for b in users:
            reachable = bool(sample_network.shortest_path(a, b))
            assert sample_network.same_community(a, b) == reachable


@pytest.mark.unit
def test_communities_merge_when_bridged(sample_network: SocialNetwork) -> None:
    sample_network.add_friendship(5, 6)

    assert _community_sets(sample_network) == [set(range(1, 9))]
    assert sample_network.shortest_path(1, 8) == [1, 3, 5, 6, 7, 8]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_recommend_uses_configured_limit(sample_network: SocialNetwork) -> None:
    network = SocialNetwork(config=NetworkConfig(recommendation_limit=1))
    network.add_friendships([(1, 2), (1, 3), (2, 3), (2, 4), (3, 5)])

    assert network.recommend_friends(4) == [(1, 1)]
    assert network.recommend_friends(4, 3) == [(1, 1), (3, 1)]
    assert sample_network.recommend_friends(4) == [(1, 1), (3, 1)]


@pytest.mark.unit
def test_self_friendship_ignored_by_default() -> None:
    network = SocialNetwork()
    network.add_friendship(1, 1)

    assert network.has_user(1)
    assert network.neighbors(1) == set()
    assert network.recommend_friends(1) == []


@pytest.mark.unit
def test_self_friendship_rejected_in_strict_mode() -> None:
    network = SocialNetwork(config=NetworkConfig(reject_self_friendship=True))

    with pytest.raises(SelfFriendshipError):
        network.add_friendship(1, 1)

    assert not network.has_user(1)


@pytest.mark.unit
def test_config_rejects_negative_limit() -> None:
    with pytest.raises(ValueError, match="recommendation_limit"):
        NetworkConfig(recommendation_limit=-1)


@pytest.mark.unit
def test_config_to_dict() -> None:
    assert NetworkConfig().to_dict() == {
        "recommendation_limit": 5,
        "reject_self_friendship": False,
    }


# ---------------------------------------------------------------------------
# Audit events
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_mutations_emit_events_once(tmp_path: Path) -> None:
    """Test only state-changing mutations are logged."""
    log_path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="run", log_path=log_path) as logger:
        network = SocialNetwork(audit_logger=logger)
        network.add_user(1)
        network.add_user(1)
        network.add_friendship(1, 2)
        network.add_friendship(2, 1)
        network.add_friendship(2, 3)
        network.add_friendship(1, 3)

    events = _read_events(log_path)
    names = [event["event"] for event in events]

    assert names == [
        "user_added",
        "user_added",
        "friendship_added",
        "user_added",
        "friendship_added",
        "friendship_added",
    ]
    merges = [e["data"]["communities_merged"] for e in events if e["event"] == "friendship_added"]
    assert merges == [True, True, False]
    assert events[0]["user"] == 1
