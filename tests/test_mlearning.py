import pytest

from mlearnkit.bundle import BundleError, BundleHeader, parse_bundle, render_bundle
from mlearnkit.mlearning import (
    BasicmLearningEditor,
    BasicmLearningEntryPoint,
    BasicmLearningItem,
    BasicmLearningSimulator,
)
from mlearnkit.status import Status


def _complete_editor():
    editor = BasicmLearningEditor()
    editor.set_author("Ann")
    editor.set_name("Cities")
    editor.add_new_item("Prague", "Capital of Czechia")
    editor.add_new_item("Brno", "Second city")
    return editor


def test_sample_item():
    editor = BasicmLearningEditor()
    editor.add_sample_item()
    assert editor.active_items() == [
        BasicmLearningItem(
            "Prague", "Prague is the city which lies in the heart of Europe."
        )
    ]


def test_type_identifier():
    assert BasicmLearningEditor().type_identifier == "InfoTemplate"


def test_items_insert_after_selected():
    editor = BasicmLearningEditor()
    editor.add_new_item("a", "1")
    editor.add_new_item("c", "3")
    editor.select(0)
    row = editor.add_new_item("b", "2")
    assert row == 1
    assert [item.title for item in editor.active_items()] == ["a", "b", "c"]


def test_save_item_replaces_selected():
    editor = BasicmLearningEditor()
    editor.add_new_item("a", "1")
    calls = []
    editor.listeners.append(lambda: calls.append(True))
    editor.save_item("x", "y")
    assert editor.active_items() == [BasicmLearningItem("x", "y")]
    assert calls == [True]


def test_save_item_without_selection_keeps_items():
    editor = BasicmLearningEditor()
    calls = []
    editor.listeners.append(lambda: calls.append(True))
    editor.save_item("x", "y")
    assert editor.active_items() == []
    assert calls == [True]


def test_title_status():
    editor = BasicmLearningEditor()
    assert editor.title_status().status is Status.ERROR
    assert editor.title_status().message == "Please, enter some title."
    editor.add_new_item("  ", "d")
    assert editor.title_status().status is Status.ERROR
    editor.save_item("Title", "d")
    assert editor.title_status().status is Status.OK
    assert editor.title_status().message == "Title seems to be okay."


def test_count_status_messages():
    editor = BasicmLearningEditor()
    assert editor.count_status().message == "Collection does not contain any items."
    editor.add_sample_item()
    assert editor.count_status().message == "Collection contains at least one item."


def test_bundle_round_trip():
    editor = _complete_editor()
    data = editor.generate_bundle_data()
    bundle = parse_bundle(data)
    assert bundle.header.type_identifier == "InfoTemplate"
    assert bundle.items[0] == {
        "item_title": "Prague",
        "item_description": "Capital of Czechia",
    }

    other = BasicmLearningEditor()
    other.load_bundle_data(data)
    assert other.active_items() == editor.active_items()
    assert other.author_name() == "Ann"
    assert other.project_name() == "Cities"


def test_load_skips_incomplete_items():
    header = BundleHeader("InfoTemplate", author_name="Ann", title="T")
    data = render_bundle(
        header,
        [
            {"item_title": "ok", "item_description": "fine"},
            {"item_title": "no description", "item_description": ""},
            {"item_title": "", "item_description": "no title"},
        ],
    )
    editor = BasicmLearningEditor()
    editor.load_bundle_data(data)
    assert editor.active_items() == [BasicmLearningItem("ok", "fine")]


def test_simulator_refuses_incomplete_collection():
    editor = BasicmLearningEditor()
    editor.add_sample_item()
    simulator = BasicmLearningSimulator(editor)
    assert simulator.start_simulation() is False
    assert simulator.page == 0


def test_simulator_flow():
    editor = _complete_editor()
    simulator = BasicmLearningSimulator(editor)
    back_events = []
    simulator.can_go_back_listeners.append(back_events.append)

    assert simulator.start_simulation() is True
    assert simulator.page == 1
    assert simulator.titles == [item.title for item in editor.active_items()]
    assert simulator.go_back() is False

    description = simulator.display_description(1)
    assert description == editor.active_items()[1].description
    assert simulator.page == 2
    assert simulator.can_go_back is True

    assert simulator.go_back() is True
    assert simulator.page == 1
    assert simulator.selected_row == -1
    assert back_events == [True, False]

    assert simulator.stop_simulation() is True
    assert simulator.page == 0


def test_display_description_out_of_range():
    simulator = BasicmLearningSimulator(_complete_editor())
    simulator.start_simulation()
    with pytest.raises(IndexError):
        simulator.display_description(5)
    with pytest.raises(IndexError):
        simulator.display_description(-1)


def test_entry_point_description():
    entry = BasicmLearningEntryPoint()
    assert entry.name == "mlearning"
    assert entry.human_name == "Basic mLearning"
    assert entry.base_folder == "mlearning"
    assert entry.mobile_application_apk_file == "BasicmLearningApp.apk"


def test_entry_point_creates_core():
    entry = BasicmLearningEntryPoint()
    core = entry.create_new_core()
    assert isinstance(core.editor, BasicmLearningEditor)
    assert isinstance(core.simulator, BasicmLearningSimulator)
    assert core.simulator.editor is core.editor
    assert core.entry_point is entry


def test_entry_point_loads_bundle():
    data = _complete_editor().generate_bundle_data()
    core = BasicmLearningEntryPoint().load_core_from_bundle_data(data)
    assert [item.title for item in core.editor.active_items()] == ["Prague", "Brno"]
    assert core.simulator.start_simulation() is True


def test_entry_point_rejects_malformed_bundle():
    with pytest.raises(BundleError):
        BasicmLearningEntryPoint().load_core_from_bundle_data("<application>")