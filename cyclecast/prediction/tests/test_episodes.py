"""Tests for grouping logged period days into episodes."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from cyclecast.prediction.episodes import group_episodes
from cyclecast.prediction.tests.conftest import period_days


class TestGroupEpisodes:
    def test_empty_input_has_no_episodes(self) -> None:
        assert group_episodes([]) == []

    def test_single_date_is_singleton_episode(self) -> None:
        episodes = group_episodes([date(2024, 1, 1)])
        assert len(episodes) == 1
        assert episodes[0].dates == (date(2024, 1, 1),)
        assert episodes[0].start == episodes[0].end == date(2024, 1, 1)
        assert episodes[0].length == 1

    def test_consecutive_days_form_one_episode(self) -> None:
        episodes = group_episodes(period_days(date(2024, 1, 1), 5))
        assert len(episodes) == 1
        assert episodes[0].start == date(2024, 1, 1)
        assert episodes[0].end == date(2024, 1, 5)
        assert episodes[0].length == 5

    def test_episodes_ordered_most_recent_first(self, regular_dates: list[date]) -> None:
        episodes = group_episodes(regular_dates)
        assert len(episodes) == 6
        starts = [e.start for e in episodes]
        assert starts == sorted(starts, reverse=True)
        assert starts[0] == date(2024, 5, 20)
        assert starts[-1] == date(2024, 1, 1)

    def test_member_dates_ascending(self, irregular_dates: list[date]) -> None:
        for episode in group_episodes(list(reversed(irregular_dates))):
            assert list(episode.dates) == sorted(episode.dates)

    def test_gap_of_seven_days_stays_in_episode(self) -> None:
        episodes = group_episodes([date(2024, 1, 1), date(2024, 1, 8)])
        assert len(episodes) == 1

    def test_gap_of_eight_days_splits(self) -> None:
        episodes = group_episodes([date(2024, 1, 1), date(2024, 1, 9)])
        assert [e.start for e in episodes] == [date(2024, 1, 9), date(2024, 1, 1)]

    def test_duplicates_collapse(self) -> None:
        episodes = group_episodes([date(2024, 1, 1), date(2024, 1, 1), date(2024, 1, 2)])
        assert len(episodes) == 1
        assert episodes[0].length == 2

    def test_input_order_irrelevant(self, irregular_dates: list[date]) -> None:
        shuffled = irregular_dates[1::2] + irregular_dates[::2]
        assert group_episodes(shuffled) == group_episodes(irregular_dates)

    def test_datetimes_truncated_to_dates(self) -> None:
        episodes = group_episodes([datetime(2024, 1, 1, 23, 30), date(2024, 1, 2)])
        assert episodes[0].dates == (date(2024, 1, 1), date(2024, 1, 2))

    def test_custom_gap(self) -> None:
        dates = [date(2024, 1, 1), date(2024, 1, 4)]
        assert len(group_episodes(dates, gap_days=2)) == 2
        assert len(group_episodes(dates, gap_days=3)) == 1

    def test_regrouping_is_idempotent(self, irregular_dates: list[date]) -> None:
        episodes = group_episodes(irregular_dates)
        flattened = [d for e in episodes for d in e.dates]
        assert group_episodes(flattened) == episodes

    def test_episodes_are_maximal(self, irregular_dates: list[date]) -> None:
        episodes = group_episodes(irregular_dates)
        for newer, older in zip(episodes, episodes[1:]):
            assert (newer.start - older.end).days > 7
            for a, b in zip(newer.dates, newer.dates[1:]):
                assert (b - a).days <= 7

    def test_chained_small_gaps_stay_together(self) -> None:
        # Each step is 6 days, so the whole chain is one episode.
        dates = [date(2024, 1, 1) + timedelta(days=6 * i) for i in range(5)]
        assert len(group_episodes(dates)) == 1

