"""Tests for press/release judgement."""

from taptiles.models import EndReason, GuideState

from helpers import RecordingAudio, make_session, tap


def _armed(targets, audio=None):
    session = make_session(targets, audio=audio)
    session.restart()
    session.on_tick()
    return session


def test_correct_key_scores_and_parks_tile():
    session = _armed([2])
    session.key_down("J")

    assert session.score == 1
    assert session.running
    assert not session.pending
    assert session.lanes[1].offset == -150


def test_wrong_key_ends_run_and_consumes_hit():
    session = _armed([2])
    session.key_down("D")

    assert not session.running
    assert session.state.end_reason == EndReason.WRONG_KEY
    assert not session.pending


def test_wrong_key_after_a_point_records_high_score():
    session = _armed([2, 1])
    tap(session, "J")
    session.on_tick()
    session.key_down("D")

    assert not session.running
    assert session.high_score == 1


def test_oldest_pending_hit_must_be_resolved_first():
    session = _armed([0, 3])
    session.lanes[1].offset = 0
    session.on_tick()
    assert [hit.target for hit in session.pending] == [0, 3]

    session.key_down("K")
    assert not session.running


def test_hits_resolve_in_queue_order():
    session = _armed([0, 3])
    session.lanes[1].offset = 0
    session.on_tick()

    tap(session, "D")
    tap(session, "K")

    assert session.score == 2
    assert session.running
    assert session.lanes[1].offset == -150
    assert session.lanes[2].offset == -150


def test_held_key_fires_once():
    session = _armed([2, 2])
    session.key_down("J")
    session.on_tick()
    pending = len(session.pending)

    session.key_down("J")
    session.key_down("J")
    assert session.score == 1
    assert len(session.pending) == pending

    session.key_up("J")
    session.key_down("J")
    assert session.score == 2


def test_unmapped_key_is_ignored():
    session = _armed([2])
    tap(session, "Q")
    tap(session, "KEY_13")

    assert session.running
    assert len(session.pending) == 1


def test_press_with_nothing_pending_has_no_effect():
    session = make_session([])
    session.restart()
    session.key_down("D")

    assert session.running
    assert session.score == 0


def test_press_while_not_running_has_no_effect():
    session = make_session([])
    session.key_down("J")

    assert session.score == 0
    assert "J" in session.judge.held


def test_guide_shows_press_and_release():
    session = _armed([2])
    session.key_down("J")
    assert session.judge.guides[2] == GuideState.PRESSED
    session.key_up("J")
    assert session.judge.guides[2] == GuideState.IDLE


def test_release_after_failure_marks_lane_once():
    session = _armed([2])
    session.key_down("D")
    session.key_down("F")

    session.key_up("D")
    session.key_up("F")

    assert session.judge.guides[0] == GuideState.FAILED
    assert session.judge.guides[1] != GuideState.FAILED


def test_releases_before_first_run_do_nothing():
    audio = RecordingAudio()
    session = make_session([], audio=audio)
    session.load_sheet(b"1 2", "s.txt")
    tap(session, "D")

    assert session.judge.guides[0] == GuideState.IDLE
    assert audio.played == []


def test_release_plays_sheet_note_for_score():
    audio = RecordingAudio()
    session = _armed([2], audio=audio)
    session.load_sheet(b"5 3 8", "s.txt")

    tap(session, "J")

    assert session.score == 1
    assert audio.played == [5]


def test_release_at_score_zero_plays_last_sheet_note():
    # Documented quirk: (0 - 1) % len wraps to the last entry.
    audio = RecordingAudio()
    session = _armed([2], audio=audio)
    session.load_sheet(b"5 3 8", "s.txt")

    session.key_up("F")

    assert audio.played == [8]


def test_failing_release_still_plays_note():
    audio = RecordingAudio()
    session = _armed([2, 1], audio=audio)
    session.load_sheet(b"5 3 8", "s.txt")
    tap(session, "J")
    session.on_tick()

    tap(session, "J")

    assert not session.running
    assert audio.played == [5, 5]


def test_no_audio_without_sheet():
    audio = RecordingAudio()
    session = _armed([2], audio=audio)
    tap(session, "J")
    assert audio.played == []
