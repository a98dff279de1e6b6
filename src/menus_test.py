import pytest

from profilelite.menus import SOCIAL_MENU, Menu, MenuItem, NavMenus


def _menus_with_social():
    menus = NavMenus()
    menus.register_locations({SOCIAL_MENU: "Social Menu"})
    items = (
        MenuItem(
            title="Facebook",
            url="https://facebook.com/x",
            children=(MenuItem(title="Page", url="https://facebook.com/x/page"),),
        ),
        MenuItem(title="Instagram", url="https://instagram.com/x", classes=("menu-item-instagram",)),
    )
    menus.assign(SOCIAL_MENU, Menu(name="Social", items=items))
    return menus


# ##################################################################
# test has menu
# only assigned locations report a menu
def test_has_menu():
    menus = NavMenus()
    menus.register_locations({SOCIAL_MENU: "Social Menu"})
    assert menus.has_menu(SOCIAL_MENU) is False
    assert menus.render(SOCIAL_MENU) == ""
    menus.assign(SOCIAL_MENU, Menu(name="Social"))
    assert menus.has_menu(SOCIAL_MENU) is True


# ##################################################################
# test assign unknown location
# assigning to an unregistered location raises KeyError
def test_assign_unknown_location():
    menus = NavMenus()
    with pytest.raises(KeyError):
        menus.assign("primary", Menu(name="Main"))


# ##################################################################
# test flat render with screen reader text
# depth 1 drops sub menus and wraps link text for screen readers
def test_flat_render_with_screen_reader_text():
    output = _menus_with_social().render(
        SOCIAL_MENU,
        depth=1,
        container_class="social-menu",
        menu_class="social-icons",
        link_before='<span class="screen-reader-text">',
        link_after="</span>",
    )
    assert output.startswith('<div class="social-menu"><ul id="menu-social" class="social-icons">')
    assert '<a href="https://facebook.com/x"><span class="screen-reader-text">Facebook</span></a>' in output
    assert '<li class="menu-item menu-item-instagram">' in output
    assert "sub-menu" not in output
    assert "Page" not in output
    assert output.endswith("</ul></div>")


# ##################################################################
# test nested render
# unlimited depth keeps children in a sub menu
def test_nested_render():
    output = _menus_with_social().render(SOCIAL_MENU, container="")
    assert output.startswith('<ul id="menu-social" class="menu">')
    assert '<li class="menu-item menu-item-has-children">' in output
    assert '<ul class="sub-menu"><li class="menu-item"><a href="https://facebook.com/x/page">Page</a></li></ul>' in output
