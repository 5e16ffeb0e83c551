"""Tests for song performance ranking."""

from setlistsearch.models import RankingEntry
from setlistsearch.ranking import RankingView, count_songs, rank_songs, total_performances
from setlistsearch.report import print_ranking
from tests.conftest import make_live


class TestRankSongs:

    def test_case_variants_aggregate(self):
        lives = [make_live("A", "A", "B"), make_live("a")]
        assert rank_songs(lives) == [
            RankingEntry(display_title="A", count=3),
            RankingEntry(display_title="B", count=1),
        ]

    def test_width_variants_aggregate(self):
        ranking = rank_songs([make_live("Song", "ＳＯＮＧ", " song ")])
        assert ranking == [RankingEntry(display_title="Song", count=3)]

    def test_greek_capital_accent_variants_aggregate(self):
        """Capital iota with dialytika + acute folds into the precomposed lower case."""
        ranking = rank_songs([make_live("\u03aa\u0301", "\u0390")])
        assert ranking == [RankingEntry(display_title="\u03aa\u0301", count=2)]

    def test_first_spelling_displayed(self):
        ranking = rank_songs([make_live("blue MOON"), make_live("Blue Moon")])
        assert ranking[0].display_title == "blue MOON"

    def test_display_title_trimmed(self):
        assert rank_songs([make_live("  Intro  ")])[0].display_title == "Intro"

    def test_blank_titles_skipped(self):
        lives = [make_live("", "   ", "X")]
        assert rank_songs(lives) == [RankingEntry(display_title="X", count=1)]

    def test_ties_keep_first_occurrence(self):
        lives = [make_live("C", "B", "A"), make_live("A", "B", "C", "D", "D")]
        assert [e.display_title for e in rank_songs(lives)] == ["C", "B", "A", "D"]

    def test_sorted_non_increasing(self):
        lives = [make_live("x", "y", "y", "z", "z", "z"), make_live("y", "w")]
        counts = [e.count for e in rank_songs(lives)]
        assert counts == sorted(counts, reverse=True)

    def test_total_equals_non_empty_entries(self, lives_2025):
        entries = rank_songs(lives_2025)
        non_empty = sum(1 for live in lives_2025 for s in live.setlist if s.title.strip())
        assert total_performances(entries) == non_empty == 3

    def test_empty(self):
        assert rank_songs([]) == []

    def test_count_songs_keys(self):
        counts = count_songs([make_live("Ｘ", "x")])
        assert counts == {"x": ["Ｘ", 2]}


class TestRankingView:

    def _entries(self, n):
        return [RankingEntry(display_title=f"S{i}", count=n - i) for i in range(n)]

    def test_initial_cap(self):
        view = RankingView(self._entries(50))
        assert len(view.visible) == 10
        assert view.can_expand

    def test_toggle_expands_and_collapses(self):
        entries = self._entries(50)
        view = RankingView(entries)
        assert view.toggle() == entries[:40]
        assert view.expanded
        assert view.toggle() == entries[:10]

    def test_toggle_does_not_recompute(self):
        view = RankingView(self._entries(50))
        before = view.entries
        view.toggle()
        assert view.entries is before

    def test_short_ranking(self):
        view = RankingView(self._entries(3))
        assert len(view.visible) == 3
        assert not view.can_expand
        assert len(view) == 3

    def test_from_lives(self):
        view = RankingView.from_lives([make_live("A", "a", "B")], initial_limit=1)
        assert view.visible == [RankingEntry(display_title="A", count=2)]

    def test_report_footer(self, capsys):
        view = RankingView(self._entries(50))
        print_ranking(view)
        out = capsys.readouterr().out
        assert "Performances: 1275 across 50 songs" in out
        assert "Showing 10 of 50 songs" in out
        assert "(--all shows up to 40)" in out
        view.toggle()
        print_ranking(view)
        out = capsys.readouterr().out
        assert "Showing 40 of 50 songs" in out
        assert "--all shows" not in out
