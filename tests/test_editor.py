import pytest

from mlearnkit.bundle import BundleError, parse_bundle
from mlearnkit.editor import CollectionEditor
from mlearnkit.status import FieldStatus, Status


@pytest.fixture
def editor():
    return CollectionEditor("InfoTemplate")


def test_initial_statuses(editor):
    assert editor.author_status() == FieldStatus(Status.ERROR, "No author is specified.")
    assert editor.name_status() == FieldStatus(
        Status.ERROR, "No collection title is specified."
    )
    assert editor.count_status().status is Status.ERROR
    assert editor.editors_enabled is False


def test_statuses_after_filling(editor):
    editor.set_author("Ann")
    editor.set_name("Cities")
    editor.add_item({"a": "b"})
    assert editor.author_status() == FieldStatus(Status.OK, "Author is specified.")
    assert editor.name_status().status is Status.OK
    assert editor.count_status() == FieldStatus(
        Status.OK, "Collection contains at least one item."
    )
    assert editor.editors_enabled is True


def test_can_generate_requires_all_parts(editor):
    assert editor.can_generate_applications() is False
    editor.set_author("Ann")
    editor.set_name("   ")
    editor.add_item({"a": "b"})
    assert editor.can_generate_applications() is False
    editor.set_name("Cities")
    assert editor.can_generate_applications() is True


def test_add_inserts_after_selection(editor):
    editor.add_item({"n": "1"})
    editor.add_item({"n": "2"})
    editor.select(0)
    row = editor.add_item({"n": "3"})
    assert row == 1
    assert [i["n"] for i in editor.active_items()] == ["1", "3", "2"]
    assert editor.selected_index == 1


def test_remove_selected(editor):
    assert editor.remove_selected() is None
    editor.add_item({"n": "1"})
    editor.add_item({"n": "2"})
    assert editor.remove_selected() == {"n": "2"}
    assert editor.active_items() == [{"n": "1"}]


def test_move_up_and_down(editor):
    editor.add_item({"n": "1"})
    editor.add_item({"n": "2"})
    assert editor.can_move_selected_up is True
    assert editor.can_move_selected_down is False
    editor.move_up()
    assert [i["n"] for i in editor.active_items()] == ["2", "1"]
    assert editor.selected_index == 0
    with pytest.raises(IndexError):
        editor.move_up()
    editor.move_down()
    assert [i["n"] for i in editor.active_items()] == ["1", "2"]


def test_select_returns_item(editor):
    editor.add_item({"n": "1"})
    assert editor.select(0) == {"n": "1"}
    assert editor.select(-1) is None
    with pytest.raises(IndexError):
        editor.select(5)


def test_length_limits(editor):
    with pytest.raises(ValueError):
        editor.set_author("x" * 51)
    with pytest.raises(ValueError):
        editor.set_name("x" * 101)
    editor.set_author("x" * 50)
    assert editor.author_name() == "x" * 50


def test_listeners_are_notified(editor):
    calls = []
    editor.listeners.append(lambda: calls.append(1))
    editor.set_author("Ann")
    editor.add_item({"n": "1"})
    editor.remove_selected()
    assert len(calls) == 3


def test_generate_bundle_header(editor):
    editor.set_author("Ann")
    editor.set_name("Cities")
    editor.add_item({"item_title": "Prague", "item_description": "A city."})
    bundle = parse_bundle(editor.generate_bundle_data())
    assert bundle.header.type_identifier == "InfoTemplate"
    assert bundle.header.author_name == "Ann"
    assert bundle.header.title == "Cities"
    assert bundle.header.version == "1"
    assert bundle.items == [{"item_title": "Prague", "item_description": "A city."}]


def test_bundle_round_trip(editor):
    editor.set_author("Ann")
    editor.set_name("Cities")
    editor.add_item({"t": "one"})
    editor.add_item({"t": "two"})
    other = CollectionEditor("InfoTemplate")
    other.load_bundle_data(editor.generate_bundle_data())
    assert other.active_items() == editor.active_items()
    assert other.author_name() == "Ann"
    assert other.project_name() == "Cities"


def test_load_skips_empty_items(editor):
    data = (
        "<application type='x'><author><name>A</name></author><title>T</title>"
        "<data><item/><item><t>v</t></item></data></application>"
    )
    editor.load_bundle_data(data)
    assert editor.active_items() == [{"t": "v"}]


def test_load_malformed_raises(editor):
    with pytest.raises(BundleError):
        editor.load_bundle_data("<application>")