from core.study import Key, KeyboardSurface
from core.study.keyboard import KeyBinding, KeyboardScope, normalize_key


def test_space_aliases_normalize():
    assert normalize_key("Space") == " "
    assert normalize_key("Spacebar") == " "
    assert normalize_key("ArrowUp") == "ArrowUp"


def test_attached_scope_handles_bound_keys():
    calls = []
    surface = KeyboardSurface()
    scope = KeyboardScope({Key.ARROW_RIGHT.value: KeyBinding(lambda: calls.append("right"))})
    scope.attach(surface)

    event = surface.press("ArrowRight")
    assert calls == ["right"]
    assert event.default_prevented

    surface.press("ArrowLeft")
    assert calls == ["right"]


def test_detach_removes_listener():
    calls = []
    surface = KeyboardSurface()
    scope = KeyboardScope({Key.SPACE.value: KeyBinding(lambda: calls.append("space"))})
    scope.attach(surface)
    scope.attach(surface)
    assert surface.listener_count == 1

    scope.detach()
    surface.press("Space")
    assert calls == []
    assert surface.listener_count == 0
    assert not scope.attached


def test_targeted_binding_needs_focus_and_keeps_default():
    calls = []
    surface = KeyboardSurface()
    scope = KeyboardScope({
        Key.ENTER.value: KeyBinding(lambda: calls.append("enter"), prevent_default=False, target="answer"),
    })
    scope.attach(surface)

    surface.press("Enter")
    assert calls == []

    event = surface.press("Enter", target="answer")
    assert calls == ["enter"]
    assert not event.default_prevented
