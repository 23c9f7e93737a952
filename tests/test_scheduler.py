"""Tests for tile spawning, advancing, and miss detection."""

from taptiles.lanes import LaneState
from taptiles.models import EndReason, PendingHit

from helpers import make_session


def test_first_tick_spawns_into_next_lane():
    session = make_session([2])
    session.restart()
    session.on_tick()

    assert list(session.pending) == [PendingHit(target=2, tile_lane=1)]
    assert session.state.active_lane == 1
    assert session.lanes[1].column == 2
    # Spawned lane starts moving on the same tick
    assert session.lanes[1].offset == -150 + 2


def test_only_occupied_and_active_lanes_move():
    session = make_session([0])
    session.restart()
    for _ in range(10):
        session.on_tick()

    assert session.lanes[1].offset == -150 + 10 * 2
    assert session.lanes[0].offset == -150
    assert session.lanes[2].offset == -150
    assert session.lanes[3].offset == -150


def test_next_tile_spawns_once_active_tile_is_fully_visible():
    session = make_session([3, 1])
    session.restart()
    session.on_tick()
    session.lanes[1].offset = 0

    session.on_tick()

    assert [hit.target for hit in session.pending] == [3, 1]
    assert session.state.active_lane == 2
    # The lane that triggered the spawn holds still for that tick
    assert session.lanes[1].offset == 0
    assert session.lanes[2].offset == -148


def test_spawn_lanes_round_robin():
    session = make_session([0, 0, 0, 0])
    session.restart()
    seen = []
    for _ in range(4):
        session.on_tick()
        seen.append(session.state.active_lane)
        session.lanes[session.state.active_lane].offset = 0
    assert seen == [1, 2, 3, 0]


def test_spawn_waits_for_occupied_lane():
    session = make_session([0])
    session.restart()
    session.on_tick()
    session.lanes[1].offset = 0
    session.lanes[2].offset = 10

    assert session.scheduler.spawn_next() is False
    session.on_tick()

    assert len(session.pending) == 1
    assert session.state.active_lane == 1


def test_spawn_recomputes_speed_level():
    session = make_session([0, 0])
    session.restart()
    session.on_tick()
    session.state.score = 25
    session.lanes[1].offset = 0

    session.on_tick()

    assert session.state.speed_level == 2
    assert session.scheduler.speed == 5


def test_tile_past_viewport_ends_run_without_moving():
    session = make_session([0])
    session.restart()
    session.on_tick()
    session.lanes[1].offset = 450

    assert session.on_tick() is False
    assert not session.running
    assert session.state.end_reason == EndReason.MISSED_TILE
    assert session.lanes[1].offset == 450


def test_unresolved_tile_eventually_ends_run():
    session = make_session([0] * 10)
    session.restart()
    ticks = 0
    while session.on_tick():
        ticks += 1
        assert ticks < 1000
    assert session.state.end_reason == EndReason.MISSED_TILE
    assert not session.ticker.active


def test_ticking_after_end_changes_nothing():
    session = make_session([0])
    session.restart()
    session.on_tick()
    session.end()
    offsets = [lane.offset for lane in session.lanes]

    assert session.on_tick() is False
    assert [lane.offset for lane in session.lanes] == offsets


def test_lane_states():
    session = make_session([])
    lane = session.lanes[0]
    assert lane.state(450) == LaneState.IDLE
    lane.offset = -20
    assert lane.state(450) == LaneState.DESCENDING
    lane.offset = 450
    assert lane.state(450) == LaneState.PAST
    lane.park()
    assert lane.offset == -150
    assert not lane.occupied
