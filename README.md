# mlearnkit

A library for building and trying out small learning collections in Python.
It supports three kinds of collection:

- **Flash cards** (`mlearnkit.flashcard`). Each card has a question, an
  answer, a hint and a picture.
- **Learn Spellings** (`mlearnkit.learnspellings`). Each entry is a word and
  its meaning. The learner hears the word and then types how it is spelled.
- **Basic mLearning** (`mlearnkit.mlearning`). A list of titled items, each
  with a description.

Each collection has an author and a name. Its items are kept in order, and
one item can be selected. You can add items after the selected one, remove
the selected item, and move it up or down. A collection can be written to an
XML bundle document and loaded back from one. Each kind of collection has a
simulator that steps through the collection one page at a time, as a phone
screen would show it.

## Installation

```
pip install .
```

The package uses only the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Basic mLearning

```python
from mlearnkit.mlearning import BasicmLearningEntryPoint

entry = BasicmLearningEntryPoint()
core = entry.create_new_core()

editor = core.editor
editor.set_author("Jane Doe")
editor.set_name("European capitals")
editor.add_new_item("Prague", "Prague lies in the heart of Europe.")

xml_text = editor.generate_bundle_data()

restored = entry.load_core_from_bundle_data(xml_text)
print(restored.editor.project_name())   # European capitals

simulator = core.simulator
simulator.start_simulation()            # True: author, name and one item are set
print(simulator.titles)                 # ['Prague']
simulator.display_description(0)        # shows the details page
simulator.go_back()                     # back to the list
```

## Flash cards

`FlashCardEntryPoint(image_directory)` creates cores whose editor is a
`FlashCardEditor`. Use `add_question(question, answer, hint, picture_path)` to
add a card and `save_question(...)` to replace the selected card.

When a bundle is generated, each card's picture is embedded as base64. If a
picture file is missing or empty, `BundleError` is raised. When a bundle is
loaded, each picture is written to `image_directory` as `image_<n>.png`.

In the `FlashCardSimulator`:

- Page 1 is the start page.
- Each card then has its own page.
- The page after the last card is the end page.

A `FlashCardItem` shows either its `CardSide.QUESTION` or its
`CardSide.ANSWER` and can be turned over with `flip()`.

## Learn Spellings

`LearnSpellingsEntryPoint(audio_fetcher, player, sound_directory)` needs three
things from you:

- `audio_fetcher`: takes a word (spaces replaced by `+`) and returns the bytes
  of a wave file.
- `player`: takes the path of a wave file and plays it.
- `sound_directory`: an existing directory where fetched sounds are stored.

```python
entry = LearnSpellingsEntryPoint(fetch_wave, play_wave, "/tmp/sounds")
core = entry.create_new_core()
core.editor.set_author("Jane Doe")
core.editor.set_name("Animals")
core.editor.add_word("cat", "A small furry animal.")

sim = core.simulator
sim.start_simulation()
sim.start()                  # first word, listening page
sim.play_word()              # fetches once, then plays
sim.spell_this_word("Cat")   # True: case and extra spaces are ignored
sim.load_next_word()         # past the last word: summary page
print(sim.summary().lines())
```

Calling `spell_this_word` with an empty guess raises `ValueError`. Errors
raised by the fetcher are passed on to the caller.

## Field checks

The editors report the state of their fields through `mlearnkit.status`.
Each report is a `FieldStatus`, which holds a `Status` (`OK`, `WARNING` or
`ERROR`) and a message. The module also provides:

- `check_required`
- `check_not_blank`
- `fits_length`

The editors enforce these length limits and raise `ValueError` when one is
exceeded:

| Field          | Maximum characters |
|----------------|--------------------|
| Author         | 50                 |
| Collection name| 100                |
| Card question  | 100                |
| Card hint      | 30                 |

## Bundles

The `mlearnkit.bundle` module provides:

- `render_bundle` and `parse_bundle`, which convert between a `BundleHeader`
  with a list of items and an XML document.
- `file_to_base64` and `base64_to_file`, for embedded data.

Malformed input raises `BundleError`.

## What the package does not do

- It does not build or sign mobile application packages from a collection.
- It has no graphical editor and no command line.
- It does not include a text-to-speech service or an audio player. For
  spelling collections, you supply both as callables.