import pytest

from profilelite.widgets import FOOTER_WIDGETS, Widget, WidgetAreas, text_widget


# ##################################################################
# test empty area inactive
# registered areas without widgets and unknown areas are inactive
def test_empty_area_inactive():
    areas = WidgetAreas()
    areas.register(FOOTER_WIDGETS, "Footer Widgets")
    assert areas.is_active(FOOTER_WIDGETS) is False
    assert areas.is_active("unknown") is False
    assert areas.render(FOOTER_WIDGETS) == ""
    assert areas.render("unknown") == ""


# ##################################################################
# test add widget to unknown area
# writing to an unregistered area raises KeyError
def test_add_widget_to_unknown_area():
    areas = WidgetAreas()
    with pytest.raises(KeyError):
        areas.add_widget("sidebar-1", text_widget("text-1", "", "hi"))


# ##################################################################
# test render wraps widgets
# each widget is wrapped with the area's markup in insertion order
def test_render_wraps_widgets():
    areas = WidgetAreas()
    areas.register(FOOTER_WIDGETS, "Footer Widgets")
    areas.add_widget(FOOTER_WIDGETS, text_widget("text-2", "About", "Dogs & cats"))
    areas.add_widget(FOOTER_WIDGETS, Widget("custom-1", "", lambda: "<em>custom</em>", "widget_custom"))

    assert areas.is_active(FOOTER_WIDGETS) is True
    output = areas.render(FOOTER_WIDGETS)
    assert '<div id="text-2" class="widget widget_text">' in output
    assert '<h6 class="widget-title">About</h6>' in output
    assert "Dogs &amp; cats" in output
    assert '<div id="custom-1" class="widget widget_custom"><em>custom</em></div>' in output
    assert output.index("text-2") < output.index("custom-1")


# ##################################################################
# test custom wrappers
# areas can override the widget and title wrappers
def test_custom_wrappers():
    areas = WidgetAreas()
    areas.register("footer-widgets", "Footer", before_widget='<aside id="%1$s">', after_widget="</aside>")
    areas.add_widget("footer-widgets", Widget("w", "", lambda: "x"))
    assert areas.render("footer-widgets") == '<aside id="w">x</aside>'


# ##################################################################
# test widget attributes escaped
# quotes in widget ids and classes cannot break out of the attributes
def test_widget_attributes_escaped():
    areas = WidgetAreas()
    areas.register(FOOTER_WIDGETS, "Footer Widgets")
    areas.add_widget(FOOTER_WIDGETS, Widget('text-"2', "", lambda: "x", 'a" onclick="b'))
    output = areas.render(FOOTER_WIDGETS)
    assert '<div id="text-&quot;2" class="widget a&quot; onclick=&quot;b">x</div>' == output
