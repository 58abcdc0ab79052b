from brickbreaker.geometry import Vec2
from brickbreaker.mouse import BUFFER_SIZE, Mouse, MouseEvent, MouseEventType


def test_read_on_empty_buffer_returns_invalid_event():
    mouse = Mouse()
    event = mouse.read()
    assert event.is_valid is False
    assert event.type is MouseEventType.INVALID
    assert mouse.is_empty


def test_move_updates_position_and_records_event():
    mouse = Mouse()
    mouse.on_move(10, 20)
    assert mouse.pos == Vec2(10, 20)
    event = mouse.read()
    assert event.type is MouseEventType.MOVE
    assert event.pos == Vec2(10, 20)
    assert event.is_valid


def test_button_events_use_last_moved_position():
    mouse = Mouse()
    mouse.on_move(10, 20)
    mouse.read()
    mouse.on_left_pressed(50, 60)
    event = mouse.read()
    assert event.type is MouseEventType.L_PRESS
    assert (event.x, event.y) == (10, 20)
    assert event.left_is_pressed is True


def test_pressed_state_follows_buttons():
    mouse = Mouse()
    mouse.on_left_pressed(0, 0)
    mouse.on_right_pressed(0, 0)
    assert mouse.left_is_pressed and mouse.right_is_pressed
    mouse.on_left_released(0, 0)
    assert mouse.left_is_pressed is False
    assert mouse.right_is_pressed is True
    mouse.on_right_released(0, 0)
    assert mouse.right_is_pressed is False
    types = [mouse.read().type for _ in range(4)]
    assert types == [
        MouseEventType.L_PRESS,
        MouseEventType.R_PRESS,
        MouseEventType.L_RELEASE,
        MouseEventType.R_RELEASE,
    ]


def test_event_snapshot_is_not_changed_by_later_state():
    mouse = Mouse()
    mouse.on_right_pressed(0, 0)
    mouse.on_right_released(0, 0)
    first = mouse.read()
    second = mouse.read()
    assert first.right_is_pressed is True
    assert second.right_is_pressed is False


def test_buffer_keeps_only_newest_events():
    mouse = Mouse()
    for i in range(BUFFER_SIZE + 3):
        mouse.on_move(i, i)
    read = []
    while not mouse.is_empty:
        read.append(mouse.read().x)
    assert read == list(range(3, BUFFER_SIZE + 3))


def test_wheel_events():
    mouse = Mouse()
    mouse.on_wheel_up(0, 0)
    mouse.on_wheel_down(0, 0)
    assert mouse.read().type is MouseEventType.WHEEL_UP
    assert mouse.read().type is MouseEventType.WHEEL_DOWN


def test_flush_empties_buffer():
    mouse = Mouse()
    mouse.on_move(1, 2)
    mouse.on_wheel_up(1, 2)
    mouse.flush()
    assert mouse.is_empty
    assert mouse.read() == MouseEvent()


def test_enter_and_leave():
    mouse = Mouse()
    assert mouse.is_in_window is False
    mouse.on_enter()
    assert mouse.is_in_window is True
    mouse.on_leave()
    assert mouse.is_in_window is False
    assert mouse.is_empty