from core.idle_timer import IdleTimer


def test_not_due_while_hand_present(clock):
    idle = IdleTimer(2500, clock=clock)
    idle.hand_seen()
    clock.advance(10_000)
    assert not idle.due()


def test_due_at_timeout_after_hand_lost(clock):
    idle = IdleTimer(2500, clock=clock)
    idle.hand_seen()
    idle.hand_lost()

    clock.advance(2499)
    assert not idle.due()
    clock.advance(1)
    assert idle.due()


def test_fires_once_per_episode(clock):
    idle = IdleTimer(100, clock=clock)
    idle.hand_lost()
    clock.advance(100)
    assert idle.due()
    idle.mark_triggered()
    clock.advance(1000)
    assert not idle.due()
    assert idle.triggered

    idle.hand_seen()
    assert not idle.triggered
    idle.hand_lost()
    clock.advance(100)
    assert idle.due()


def test_elapsed_counts_from_construction_when_no_hand_seen(clock):
    clock.now = 500
    idle = IdleTimer(2500, clock=clock)
    clock.advance(300)
    assert idle.elapsed() == 300
    assert not idle.hand_present
