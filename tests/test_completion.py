"""
Tests for the hand completion evaluator
"""

import pytest
import numpy as np

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mahjong_sim.tiles import (
    char, bam, dot, to_count_array, parse_tiles,
    EAST, SOUTH, WEST, NORTH, RED_DRAGON, GREEN_DRAGON, WHITE_DRAGON
)
from mahjong_sim.stock import Stock
from mahjong_sim.completion import (
    MeldType, is_complete, forms_melds, find_decomposition
)


def all_triplets_hand():
    """55万 + 111万 + 999条 + 东东东 + 中中中"""
    return (
        [char(5)] * 2 + [char(1)] * 3 + [bam(9)] * 3
        + [EAST] * 3 + [RED_DRAGON] * 3
    )


def all_runs_hand():
    """白白 + 123万 + 456万 + 789条 + 123筒"""
    return (
        [WHITE_DRAGON] * 2
        + [char(1), char(2), char(3)]
        + [char(4), char(5), char(6)]
        + [bam(7), bam(8), bam(9)]
        + [dot(1), dot(2), dot(3)]
    )


class TestCompleteHands:
    """Hands that split into a pair and four melds"""

    def test_all_triplets(self):
        assert is_complete(all_triplets_hand())

    def test_all_runs(self):
        assert is_complete(all_runs_hand())

    def test_mixed_runs_and_triplets(self):
        hand = parse_tiles("1万 1万 1万 2万 2万 2万 3万 3万 3万 4万 4万 东风 东风 东风")
        assert is_complete(hand)

    def test_same_tile_in_overlapping_runs(self):
        """223344万 reads as two 234 runs"""
        hand = parse_tiles("2万 2万 3万 3万 4万 4万 7条 7条 7条 5筒 6筒 7筒 北风 北风")
        assert is_complete(hand)

    def test_four_copies_pair_and_two_runs(self):
        """1111万 feeds the pair and two 123万 runs"""
        hand = [char(1)] * 4 + [char(2)] * 2 + [char(3)] * 2 + [bam(5)] * 3 + [EAST] * 3
        assert is_complete(hand)

        decomposition = find_decomposition(hand)
        assert decomposition.pair == char(1)
        runs = [m for m in decomposition.melds if m.meld_type == MeldType.RUN]
        assert len(runs) == 2

    def test_four_copies_triplet_and_run(self):
        """1111万 feeds a 111万 triplet and a 123万 run"""
        hand = [char(1)] * 4 + [char(2), char(3)] + [bam(5)] * 2 + [dot(7), dot(8), dot(9)] + [EAST] * 3
        assert is_complete(hand)

        decomposition = find_decomposition(hand)
        assert decomposition.pair == bam(5)
        types = sorted(m.meld_type for m in decomposition.melds)
        assert types == [MeldType.RUN, MeldType.RUN, MeldType.TRIPLET, MeldType.TRIPLET]

    def test_four_copies_split_across_two_runs(self):
        """3333万 feeds the pair, a 123万 run and a 345万 run"""
        hand = parse_tiles("1万 2万 3万 3万 3万 3万 4万 5万 6条 6条 6条 9筒 9筒 9筒")
        assert is_complete(hand)

    def test_pure_one_suit(self):
        """1112345678999万 + 5万"""
        hand = [char(1)] * 3 + [char(v) for v in range(2, 9)] + [char(9)] * 3 + [char(5)]
        assert is_complete(hand)


class TestIncompleteHands:
    """Hands that must be rejected"""

    def test_no_pair(self):
        """14 distinct tiles can never hold a pair"""
        hand = [char(v) for v in range(1, 10)] + [EAST, SOUTH, WEST, NORTH, RED_DRAGON]
        assert len(set(hand)) == 14
        assert not is_complete(hand)

    def test_winds_never_form_runs(self):
        hand = [EAST, SOUTH, WEST] + [char(1)] * 2 + [char(2), char(3), char(4)] \
            + [bam(5), bam(6), bam(7)] + [dot(7), dot(8), dot(9)]
        assert not is_complete(hand)

    def test_dragons_never_form_runs(self):
        hand = [RED_DRAGON, GREEN_DRAGON, WHITE_DRAGON] + [char(1)] * 2 \
            + [char(2), char(3), char(4)] + [bam(5), bam(6), bam(7)] + [dot(7), dot(8), dot(9)]
        assert not is_complete(hand)

    def test_runs_do_not_cross_suits(self):
        hand = [char(8), char(9), bam(1)] + [EAST] * 2 + [char(2), char(3), char(4)] \
            + [bam(5), bam(6), bam(7)] + [dot(7), dot(8), dot(9)]
        assert not is_complete(hand)

    def test_runs_do_not_wrap(self):
        hand = [dot(8), dot(9), dot(1)] + [EAST] * 2 + [char(2), char(3), char(4)] \
            + [bam(5), bam(6), bam(7)] + [char(7), char(8), char(9)]
        assert not is_complete(hand)

    def test_two_pairs_left_over(self):
        hand = [char(1)] * 2 + [char(5)] * 2 + [bam(2), bam(3), bam(4)] * 2 + [dot(9)] * 3 + [EAST]
        assert len(hand) == 14
        assert not is_complete(hand)


class TestTotality:
    """The evaluator always returns a bool, whatever it is given"""

    @pytest.mark.parametrize("size", [0, 1, 2, 11, 13, 15, 17])
    def test_wrong_size_is_not_complete(self, size):
        stock = Stock.build(seed=size)
        assert is_complete(stock.draw_many(size)) is False

    def test_complete_shape_with_extra_meld_is_rejected(self):
        """Pair + five melds is 17 tiles, not a winning hand"""
        hand = all_runs_hand() + [dot(7), dot(8), dot(9)]
        assert not is_complete(hand)
        assert find_decomposition(hand) is None

    def test_empty_hand(self):
        assert is_complete([]) is False

    def test_random_hands_return_bool(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            stock = Stock.build(rng=rng)
            result = is_complete(stock.draw_many(14))
            assert isinstance(result, bool)

    def test_accepts_generators(self):
        assert is_complete(t for t in all_runs_hand())


class TestPermutationInvariance:
    """Tile order never changes the answer"""

    @pytest.mark.parametrize("hand_factory,expected", [
        (all_triplets_hand, True),
        (all_runs_hand, True),
        (lambda: [char(v) for v in range(1, 10)] + [EAST, SOUTH, WEST, NORTH, RED_DRAGON], False),
    ])
    def test_shuffled_input(self, hand_factory, expected):
        rng = np.random.default_rng(1)
        hand = hand_factory()
        for _ in range(50):
            order = rng.permutation(len(hand))
            assert is_complete([hand[i] for i in order]) is expected

    def test_reversed_input(self):
        hand = all_runs_hand()
        assert is_complete(reversed(hand)) == is_complete(hand)


class TestFormsMelds:
    """Meld search on count vectors"""

    def test_empty_counts(self):
        assert forms_melds(np.zeros(34, dtype=np.int8))

    def test_triplets_and_runs(self):
        counts = to_count_array(parse_tiles("1万 1万 1万 2万 3万 4万 东风 东风 东风"))
        assert forms_melds(counts)

    def test_leftover_tile_fails(self):
        counts = to_count_array(parse_tiles("1万 2万 3万 3万 4万 6万"))
        assert not forms_melds(counts)

    def test_count_not_multiple_of_three(self):
        counts = to_count_array([char(1), char(2)])
        assert not forms_melds(counts)

    def test_honor_run_fails(self):
        counts = to_count_array([EAST, SOUTH, WEST])
        assert not forms_melds(counts)

    def test_ninth_rank_does_not_start_a_run(self):
        counts = to_count_array([char(9), bam(1), bam(2)])
        assert not forms_melds(counts)


class TestDecomposition:
    """Winning shapes reported for complete hands"""

    def test_triplet_shape(self):
        decomposition = find_decomposition(all_triplets_hand())
        assert decomposition is not None
        assert decomposition.pair == char(5)
        assert [m.meld_type for m in decomposition.melds] == [MeldType.TRIPLET] * 4
        assert [m.tiles[0] for m in decomposition.melds] == [char(1), bam(9), EAST, RED_DRAGON]

    def test_run_shape(self):
        decomposition = find_decomposition(all_runs_hand())
        assert decomposition.pair == WHITE_DRAGON
        assert all(m.meld_type == MeldType.RUN for m in decomposition.melds)
        assert decomposition.melds[0].tiles == (char(1), char(2), char(3))

    def test_shape_covers_hand(self):
        hand = all_runs_hand()
        decomposition = find_decomposition(hand)
        used = [decomposition.pair] * 2 + [t for m in decomposition.melds for t in m.tiles]
        assert sorted(used) == sorted(hand)

    def test_incomplete_has_no_shape(self):
        hand = [char(v) for v in range(1, 10)] + [EAST, SOUTH, WEST, NORTH, RED_DRAGON]
        assert find_decomposition(hand) is None

    def test_shape_label(self):
        decomposition = find_decomposition(all_runs_hand())
        assert str(decomposition).startswith("白箭白箭 | 1万2万3万")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
