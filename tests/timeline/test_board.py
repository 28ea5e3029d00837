"""
tests/timeline/test_board.py

Covers:
  - End-to-end board for a week: rows, order, lanes, bars, day status
  - Rejected entities reported without breaking the board
  - Availability wiring and the Unassigned row
  - Status counts from load payloads
  - Strict / non-strict handling of out-of-window bars
  - Invalid week specs surfacing immediately
  - Fresh results per call
"""

import logging
from datetime import date

import pytest

from planner.calendar import InvalidWeekSpec
from planner.loads import Load, to_entities
from planner.timeline import (
    UNASSIGNED,
    OutOfWindowEntity,
    ResourceAvailability,
    ScheduledEntity,
    build_board,
)
from planner.timeline import board as board_module


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def entities():
    return [
        ScheduledEntity("A", "T1", "2024-01-01", "2024-01-03"),
        ScheduledEntity("B", "T1", "2024-01-03", "2024-01-05"),
        ScheduledEntity("C", "T1", "2024-01-04", "2024-01-05"),
        ScheduledEntity("D", "T0", "2023-12-30", "2024-01-02"),
        ScheduledEntity("U", None, "2024-01-06", "2024-01-09"),
        ScheduledEntity("old", "T1", "2023-12-01", "2023-12-02"),
        ScheduledEntity("bad", "T1", "tbd", "2024-01-02"),
    ]


@pytest.fixture
def board(entities):
    return build_board(
        entities, 2024, 1,
        availability=[ResourceAvailability("T0", False), ResourceAvailability("T1", True)],
    )


# ── Structure ─────────────────────────────────────────────────────────────────

class TestBoard:

    def test_window(self, board):
        assert board.window.start == date(2024, 1, 1)
        assert board.window.end == date(2024, 1, 7)

    def test_order(self, board):
        assert board.order == ["T0", "T1", UNASSIGNED]

    def test_only_visible_entities(self, board):
        assert [e.id for e in board.row("T1").entities] == ["A", "B", "C"]
        assert board.entity_count == 5

    def test_lanes(self, board):
        row = board.row("T1")
        assert row.lanes.lane_of == {"A": 0, "B": 1, "C": 0}
        assert row.lanes.max_lane == 1
        assert row.row_count == 2

    def test_bars(self, board):
        bars = {b.entity_id: b for b in board.row("T1").bars}
        assert (bars["B"].column_start, bars["B"].column_span, bars["B"].row) == (3, 3, 2)
        assert (bars["C"].column_start, bars["C"].column_span, bars["C"].row) == (4, 2, 1)
        d = board.row("T0").bars[0]
        assert (d.column_start, d.column_span) == (1, 2)
        assert d.starts_before_week
        u = board.row(UNASSIGNED).bars[0]
        assert (u.column_start, u.column_span) == (6, 2)
        assert u.ends_after_week

    def test_day_status(self, board):
        t1 = board.row("T1").days
        assert [d.idle for d in t1] == [False, False, False, False, False, True, True]
        # T0 is marked unavailable
        assert all(d.idle for d in board.row("T0").days)
        assert board.row("T0").days[0].busy

    def test_unassigned_row(self, board):
        row = board.row(UNASSIGNED)
        assert row.is_unassigned
        assert not any(d.idle for d in row.days)
        assert [d.busy for d in row.days][-2:] == [True, True]

    def test_rejected(self, board):
        assert [r.entity_id for r in board.rejected] == ["bad"]

    def test_unknown_row(self, board):
        with pytest.raises(KeyError):
            board.row("T9")

    def test_missing_availability_defaults_to_available(self, entities):
        b = build_board(entities, 2024, 1)
        assert not any(d.idle for d in b.row("T0").days[:2])


class TestEmptyBoard:

    def test_no_entities(self):
        b = build_board([], 2024, 1)
        assert b.rows == []
        assert b.order == []
        assert b.rejected == []
        assert b.status_counts["scheduled"] == 0

    def test_nothing_visible(self, entities):
        b = build_board(entities, 2024, 30)
        assert b.rows == []
        assert [r.entity_id for r in b.rejected] == ["bad"]


# ── Loads ─────────────────────────────────────────────────────────────────────

class TestLoads:

    @pytest.fixture
    def loads(self):
        return [
            Load("1", "LD-1", "2024-01-01", "2024-01-02", "T1", "scheduled"),
            Load("2", "LD-2", "2024-01-02", "2024-01-04", "T1", "in-transit"),
            Load("3", "LD-3", "2024-01-05", "2024-01-05", None, "pending"),
            Load("4", "LD-4", "2024-02-05", "2024-02-05", "T1", "delivered"),
        ]

    def test_status_counts_cover_visible_loads(self, loads):
        b = build_board(to_entities(loads), 2024, 1)
        assert b.status_counts == {
            "scheduled": 1, "in-transit": 1, "pending": 1, "delivered": 0,
        }

    def test_payload_carried(self, loads):
        b = build_board(to_entities(loads), 2024, 1)
        assert b.row(UNASSIGNED).entities[0].payload is loads[2]

    def test_non_load_payloads_not_counted(self):
        b = build_board([ScheduledEntity("x", "T1", "2024-01-01", "2024-01-01", {"status": "scheduled"})], 2024, 1)
        assert sum(b.status_counts.values()) == 0


# ── Errors ────────────────────────────────────────────────────────────────────

class TestErrors:

    def test_invalid_week_raises(self, entities):
        with pytest.raises(InvalidWeekSpec):
            build_board(entities, 2024, 53)

    def test_out_of_window_strict(self, monkeypatch, entities):
        monkeypatch.setattr(board_module, "filter_visible", lambda es, w: (list(es), []))
        with pytest.raises(OutOfWindowEntity):
            build_board(
                [ScheduledEntity("old", "T1", "2023-12-01", "2023-12-02")], 2024, 1, strict=True,
            )

    def test_out_of_window_lenient(self, monkeypatch, caplog):
        monkeypatch.setattr(board_module, "filter_visible", lambda es, w: (list(es), []))
        es = [
            ScheduledEntity("old", "T1", "2023-12-01", "2023-12-02"),
            ScheduledEntity("ok", "T1", "2024-01-02", "2024-01-02"),
        ]
        with caplog.at_level(logging.ERROR, logger="planner.timeline.board"):
            b = build_board(es, 2024, 1, strict=False)
        assert [bar.entity_id for bar in b.row("T1").bars] == ["ok"]
        assert "old" in caplog.text


# ── Purity ────────────────────────────────────────────────────────────────────

class TestRecompute:

    def test_same_input_same_board(self, entities):
        assert build_board(entities, 2024, 1) == build_board(entities, 2024, 1)

    def test_same_rejects_compare_equal(self, entities):
        a = build_board(entities, 2024, 1)
        b = build_board(entities, 2024, 1)
        assert a.rejected == b.rejected
        assert a.rejected[0] is not b.rejected[0]

    def test_fresh_objects(self, entities):
        a = build_board(entities, 2024, 1)
        b = build_board(entities, 2024, 1)
        assert a.rows is not b.rows
        assert a.row("T1").lanes.lane_of is not b.row("T1").lanes.lane_of

    def test_inputs_untouched(self, entities):
        before = list(entities)
        build_board(entities, 2024, 1)
        assert entities == before

    def test_generator_input(self, entities):
        b = build_board((e for e in entities), 2024, 1)
        assert b.order == ["T0", "T1", UNASSIGNED]
