import pytest

from nbodysim.visu import NoSpheresVisu, SpheresVisu


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        SpheresVisu()


def test_incomplete_subclass_cannot_be_built():
    class Partial(SpheresVisu):
        def refresh_display(self):
            return None

    with pytest.raises(TypeError):
        Partial()
    visu = NoSpheresVisu()
    assert isinstance(visu, SpheresVisu)
    assert visu.pressed_space_bar() is False


def test_no_visu_never_closes():
    visu = NoSpheresVisu()
    visu.refresh_display()
    assert visu.window_should_close() is False


@pytest.mark.parametrize(
    "method", ["pressed_space_bar", "pressed_page_up", "pressed_page_down"]
)
def test_no_visu_reports_no_keys(method):
    visu = NoSpheresVisu()
    assert getattr(visu, method)() is False


def test_refresh_display_returns_nothing():
    assert NoSpheresVisu().refresh_display() is None