import random

import pytest

from spieltheorie.engine import Payoffs, play_match
from spieltheorie.errors import InvalidRoundsError, UnknownStrategyError
from spieltheorie.strategies import (
    Downing,
    Friedman,
    Grofman,
    Shubik,
    StrategyCatalogue,
    TitForTat,
    default_catalogue,
)
from spieltheorie.tournament import (
    Standing,
    list_available_strategies,
    parse_rounds,
    resolve_strategies,
    run_all_vs_all,
    run_single_match,
    run_tournament,
)

from .conftest import Scripted


@pytest.fixture
def trio():
    return StrategyCatalogue([TitForTat, Grofman, Friedman])


class TestRunAllVsAll:
    def test_hand_computed_totals(self, trio):
        # Per match over 10 rounds (A, B):
        #   TFT-TFT 70/70, TFT-Grofman 62/62, TFT-Friedman 70/70,
        #   Grofman-Grofman 58/58, Grofman-Friedman 11/81, Friedman-Friedman 70/70
        standings = run_all_vs_all(trio, 10)
        assert standings == [
            Standing("Friedman", 442),
            Standing("Tit-for-Tat", 404),
            Standing("Grofman", 262),
        ]

    def test_totals_equal_sum_of_both_sides(self, trio):
        names = trio.names()
        expected = dict.fromkeys(names, 0)
        for a in names:
            for b in names:
                result = play_match(trio.create(a), trio.create(b), 10)
                expected[a] += result.score_a
                expected[b] += result.score_b
        assert {s.name: s.total_score for s in run_all_vs_all(trio, 10)} == expected

    def test_sorted_strictly_descending(self, trio):
        scores = [s.total_score for s in run_all_vs_all(trio, 10)]
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == len(scores)

    def test_ties_keep_catalogue_order(self):
        forward = run_all_vs_all(StrategyCatalogue([TitForTat, Friedman]), 12)
        backward = run_all_vs_all(StrategyCatalogue([Friedman, TitForTat]), 12)
        assert [s.name for s in forward] == ["Tit-for-Tat", "Friedman"]
        assert [s.name for s in backward] == ["Friedman", "Tit-for-Tat"]
        assert {s.total_score for s in forward} == {4 * 7 * 12}

    def test_one_record_per_name(self, catalogue):
        standings = run_all_vs_all(catalogue, 5)
        assert len(standings) == 15
        assert {s.name for s in standings} == set(catalogue.names())

    def test_every_ordered_pair_is_played(self, trio):
        seen = []
        run_all_vs_all(trio, 3, on_match_done=lambda done, total, r: seen.append((done, total, r.player_a, r.player_b)))
        assert len(seen) == 9
        assert seen[-1][:2] == (9, 9)
        assert ("Friedman", "Friedman") in {(a, b) for _, _, a, b in seen}
        assert ("Grofman", "Tit-for-Tat") in {(a, b) for _, _, a, b in seen}

    def test_stateful_strategies_never_share_state(self):
        # Shubik self-play needs two instances; a shared one would be rejected.
        catalogue = StrategyCatalogue([Shubik, Downing, Grofman])
        first = run_all_vs_all(catalogue, 20)
        second = run_all_vs_all(catalogue, 20)
        assert first == second

    def test_accepts_plain_factories(self, always_defect, always_cooperate):
        standings = run_all_vs_all([always_cooperate, always_defect], 4)
        # Defector: 4 + 4 from self-play plus 40 + 40; cooperator: 28 + 28 plus 0 + 0
        assert standings == [Standing("Always Defect", 88), Standing("Always Cooperate", 56)]

    def test_custom_payoffs(self, trio):
        standings = run_all_vs_all(trio, 1, payoffs=Payoffs(T=5, R=3, P=1, S=0))
        # Round 0 only: Grofman defects, everyone else cooperates.
        assert {s.name: s.total_score for s in standings} == {
            "Tit-for-Tat": 3 * 4 + 0 * 2,
            "Grofman": 5 * 4 + 1 * 2,
            "Friedman": 3 * 4 + 0 * 2,
        }

    def test_seeded_catalogues_replay(self):
        first = run_all_vs_all(default_catalogue(rng=random.Random(11)), 30)
        second = run_all_vs_all(default_catalogue(rng=random.Random(11)), 30)
        assert first == second

    def test_rejects_bad_input(self, trio):
        with pytest.raises(InvalidRoundsError):
            run_all_vs_all(trio, 0)
        with pytest.raises(ValueError):
            run_all_vs_all([], 10)


class TestRunSingleMatch:
    def test_resolves_names(self):
        result = run_single_match("tit for tat", "grofman", 5)
        assert (result.player_a, result.player_b) == ("Tit-for-Tat", "Grofman")
        assert (result.score_a, result.score_b) == (31, 31)

    def test_stateful_self_pairing(self):
        result = run_single_match("Shubik", "Shubik", 10)
        assert result.score_a == result.score_b == 70

    def test_seed_makes_random_matches_repeatable(self):
        first = run_single_match("Random", "Joss", 40, seed=3)
        second = run_single_match("Random", "Joss", 40, seed=3)
        assert first.to_dict() == second.to_dict()

    def test_unknown_strategy(self):
        with pytest.raises(UnknownStrategyError):
            run_single_match("Tit-for-Tat", "Nobody", 5)

    def test_bad_rounds(self):
        with pytest.raises(InvalidRoundsError):
            run_single_match("Tit-for-Tat", "Davis", -3)


class TestRunTournament:
    def test_serialized_result(self):
        result = run_tournament(rounds=10, only=["Tit-for-Tat", "Grofman", "Friedman"])
        assert result["strategies"] == ["Tit-for-Tat", "Grofman", "Friedman"]
        assert result["params"] == {
            "rounds": 10,
            "seed": None,
            "payoffs": {"T": 10, "R": 7, "P": 1, "S": 0},
        }
        assert len(result["matches"]) == 9
        assert result["standings"][0] == {"strategy": "Friedman", "total_score": 442}
        row = next(m for m in result["matches"] if m["A"] == "Grofman" and m["B"] == "Friedman")
        assert (row["score_A"], row["score_B"]) == (11, 81)
        assert row["history_B"] == "CDDDDDDDDD"

    def test_exclude(self):
        result = run_tournament(rounds=3, exclude=["Random", "feld"])
        assert len(result["strategies"]) == 13
        assert "Random" not in result["strategies"]
        assert len(result["matches"]) == 13 * 13

    def test_seed(self):
        assert run_tournament(rounds=25, seed=8) == run_tournament(rounds=25, seed=8)

    def test_empty_selection(self):
        with pytest.raises(ValueError):
            run_tournament(rounds=3, only=["Grofman"], exclude=["Grofman"])

    def test_unknown_filter(self):
        with pytest.raises(UnknownStrategyError):
            run_tournament(rounds=3, only=["Nobody"])


def test_resolve_strategies(catalogue):
    sub = resolve_strategies(catalogue, only=["Davis", "Joss", "Tullock"], exclude=["joss"])
    assert sub.names() == ["Davis", "Tullock"]


def test_list_available_strategies():
    items = list_available_strategies()
    assert len(items) == 15
    assert items[0]["name"] == "Tit-for-Tat"
    assert all(item["description"] for item in items)


class TestParseRounds:
    @pytest.mark.parametrize("text, expected", [("10", 10), (" 200 ", 200), (7, 7)])
    def test_valid(self, text, expected):
        assert parse_rounds(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "0", "-4", 0, True, None])
    def test_invalid(self, text):
        with pytest.raises(InvalidRoundsError):
            parse_rounds(text)
