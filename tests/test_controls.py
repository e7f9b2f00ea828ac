from types import SimpleNamespace

import pytest

from comlayout.controls import Control
from comlayout.fonts import FontManager
from comlayout.geometry import Rect, Size


def bound_control(control_id=7):
    manager = FontManager()
    handle = SimpleNamespace()
    manager.dialog_items[control_id] = handle
    control = Control()
    control.id = control_id
    control.set_manager(manager)
    return control, manager, handle


def test_defaults():
    control = Control()
    assert control.visible is True
    assert control.max_width == 9999
    assert control.estimate_size(Size(100, 100)) == Size(0, 0)


def test_set_pos_clamps_inverted_rect():
    control = Control()
    control.set_pos(Rect(10, 20, 5, 8))
    assert control.pos.right == control.pos.left
    assert control.pos.bottom == control.pos.top
    assert control.post_size == Size(0, 0)


def test_set_pos_records_post_size():
    control = Control()
    control.set_pos(Rect(0, 0, 40, 30))
    assert control.post_size == Size(control.width, control.height)
    assert (control.x, control.y) == (0, 0)


def test_set_pos_moves_window_inside_inset():
    control, _, handle = bound_control()
    control.inset = Rect(1, 2, 3, 4)
    control.set_pos(Rect(10, 10, 50, 60))
    assert handle.rect == Rect(10 + 1, 10 + 2, 50 - 3, 60 - 4)


def test_set_pos_does_not_copy_callers_rect():
    control = Control()
    rect = Rect(0, 0, 10, 10)
    control.set_pos(rect)
    rect.right = 99
    assert control.pos.right == 10


def test_negative_sizes_are_ignored():
    control = Control()
    control.set_attribute("width", "30")
    control.set_attribute("width", "-5")
    control.min_height = -1
    assert control.fixed_width == 30
    assert control.min_height == 0


def test_estimate_size_returns_fixed_size():
    control = Control()
    control.set_attribute("width", "30")
    control.set_attribute("height", "12")
    assert control.estimate_size(Size(500, 500)) == Size(30, 12)


def test_set_attribute_inset_and_name():
    control = Control()
    control.set_attribute("inset", "1,2,3,4")
    control.set_attribute("name", "recv_btns")
    assert control.inset == Rect(1, 2, 3, 4)
    assert control.find_control("recv_btns") is control
    assert control.find_control("other") is None


def test_set_attribute_id_parses_leading_number():
    control = Control()
    control.set_attribute("id", " 42abc")
    assert control.id == 42


def test_set_attribute_visible_and_display():
    control = Control()
    control.set_attribute("visible", "false")
    control.set_attribute("display", "yes")
    assert control.visible is False
    assert control.displayed is False


def test_unknown_attribute_changes_nothing():
    control = Control()
    control.set_attribute("colour", "red")
    assert control.name == ""
    assert control.inset == Rect()


def test_visibility_reaches_window():
    control, _, handle = bound_control()
    control.set_visible(False)
    assert handle.visible is False
    control.set_visible(True)
    assert handle.visible is True
    control.set_visible_by_parent(False)
    assert handle.visible is False
    assert control.visible is False


def test_do_init_without_manager_raises():
    with pytest.raises(RuntimeError):
        Control().do_init()


def test_set_manager_missing_item_raises():
    control = Control()
    control.id = 3
    with pytest.raises(LookupError):
        control.set_manager(FontManager())


def test_set_manager_without_id_has_no_window():
    control = Control()
    control.set_manager(FontManager())
    assert control.handle is None


def test_set_font_uses_manager_fonts():
    control, manager, handle = bound_control()
    font = manager.add_font("Arial", 12)
    control.set_font(0)
    assert handle.font is font
    control.set_font(-2)
    assert control.font_id == 0
    control.set_font(-1)
    assert handle.font is manager.default_font


def test_need_parent_update_before_init_does_nothing():
    calls = []
    control = Control()
    control.parent = SimpleNamespace(need_update=lambda: calls.append(1))
    control.set_visible(False)
    assert calls == []


def test_need_parent_update_calls_parent_after_init():
    calls = []
    control, _, _ = bound_control()
    control.parent = SimpleNamespace(need_update=lambda: calls.append(1))
    control.do_init()
    control.set_visible(False)
    assert calls == [1]


def test_need_update_reapplies_position():
    control, _, handle = bound_control()
    control.do_init()
    control.set_pos(Rect(0, 0, 20, 20))
    control.inset = Rect(2, 2, 2, 2)
    control.need_update()
    assert handle.rect == Rect(2, 2, 18, 18)