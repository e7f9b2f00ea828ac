import pytest

from comlayout.builder import BuildError, DialogBuilder
from comlayout.containers import Container, HorizontalLayout, VerticalLayout
from comlayout.fonts import FontManager
from comlayout.geometry import Size
from comlayout.widgets import Check, Option, Static, StyleError

SKIN = """
<Window size="430,330">
    <Font name="Arial" size="16" default="true" />
    <Font name="Arial" size="12"/>
    <Vertical>
        <Vertical inset="5,5,5,5">
            <Container minheight="180" minwidth="180">
                <Group text="choose" />
                <Vertical inset="5,20,5,5">
                    <Option name="text" text="plain text"/>
                    <Static text="ascii file" font="1" inset="20,0,0,0"/>
                    <Option name="any" text="any file"/>
                    <Option name="nothing" text="cancel" />
                </Vertical>
            </Container>
        </Vertical>
    </Vertical>
</Window>
"""


def test_skin_builds_tree():
    manager = FontManager()
    root = DialogBuilder().create(SKIN, manager)
    assert isinstance(root, VerticalLayout)
    assert manager.init_size == Size(430, 330)
    option = root.find_control("text")
    assert isinstance(option, Option)
    assert option.text == "plain text"
    assert root.find_control("nothing").text == "cancel"
    assert root.find_control("missing") is None


def test_fonts_registered_and_default_set():
    manager = FontManager()
    DialogBuilder().create(SKIN, manager)
    assert [f.size for f in manager.fonts] == [16, 12]
    assert manager.default_font.face == "Arial"
    assert manager.default_font.size == 16


def test_font_size_defaults():
    manager = FontManager()
    DialogBuilder().create('<Window><Font name="Tahoma"/><Vertical/></Window>', manager)
    assert manager.fonts[0].face == "Tahoma"
    assert manager.fonts[0].size == 12


def test_attributes_applied_after_children():
    root = DialogBuilder().create(
        '<Window><Horizontal name="row" inset="1,2,3,4">'
        '<Static name="a" width="40"/><Check name="c" checked="true"/>'
        "</Horizontal></Window>",
        FontManager(),
    )
    assert isinstance(root, HorizontalLayout)
    assert root.name == "row"
    assert (root.inset.left, root.inset.top, root.inset.right, root.inset.bottom) == (1, 2, 3, 4)
    assert [c.name for c in root] == ["a", "c"]
    assert root[0].fixed_width == 40
    assert isinstance(root[1], Check) and root[1].checked is True
    assert root[0].parent is root


def test_unknown_elements_inside_container_dropped():
    root = DialogBuilder().create(
        '<Window><Vertical><Spacer/><Static name="s"/></Vertical></Window>', FontManager()
    )
    assert len(root) == 1
    assert isinstance(root[0], Static)


def test_symbolic_id_resolved():
    calls = []

    def resolve(name):
        calls.append(name)
        return {"btn_ok": 1001}[name]

    root = DialogBuilder(resolve).create(
        '<Window><Vertical><Button id="btn_ok" name="ok"/><Static id="5" name="n"/>'
        "</Vertical></Window>",
        FontManager(),
    )
    assert root.find_control("ok").id == 1001
    assert root.find_control("n").id == 5
    assert calls == ["btn_ok"]


def test_symbolic_id_without_resolver_is_zero():
    root = DialogBuilder().create(
        '<Window><Vertical><Static id="label" name="s"/></Vertical></Window>', FontManager()
    )
    assert root.find_control("s").id == 0


def test_root_must_be_window():
    with pytest.raises(BuildError):
        DialogBuilder().create("<Dialog><Vertical/></Dialog>", FontManager())


def test_malformed_xml():
    with pytest.raises(BuildError):
        DialogBuilder().create("<Window><Vertical></Window>", FontManager())


def test_no_controls():
    with pytest.raises(BuildError):
        DialogBuilder().create('<Window><Font name="Arial"/></Window>', FontManager())


def test_top_element_must_be_container():
    with pytest.raises(BuildError):
        DialogBuilder().create("<Window><Control/></Window>", FontManager())


def test_leaf_with_children_rejected():
    with pytest.raises(BuildError):
        DialogBuilder().create(
            "<Window><Vertical><Button><Control/></Button></Vertical></Window>", FontManager()
        )


def test_unknown_style_propagates():
    with pytest.raises(StyleError):
        DialogBuilder().create(
            '<Window><Vertical><Static style="sparkly"/></Vertical></Window>', FontManager()
        )


def test_container_children_unbound():
    root = DialogBuilder().create("<Window><Container><Static/></Container></Window>", FontManager())
    assert isinstance(root, Container)
    assert root[0].manager is None
    assert root[0].handle is None